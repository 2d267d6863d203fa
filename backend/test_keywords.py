import pytest

from scoring.keywords import (CoverageReport, CoverageScorer, DEFAULT_SYNONYMS,
                              KeywordMatcher, matches, score_keywords)

KEYWORDS = ["api", "database", "cache", "async"]


# ─── matcher ─────────────────────────────────────────────────────────────────

def test_case_insensitive():
    assert matches("Function", "I wrote a FUNCTION")


def test_plural_variant():
    assert matches("class", "I defined several classes")


def test_singular_variant():
    assert matches("apis", "the api is public")


@pytest.mark.parametrize("keyword,text", [
    ("decorator", "I used a wrapper around it"),
    ("wrapper", "I used a decorator"),
    ("async", "the call is asynchronous"),
    ("dictionary", "store it in an object"),
])
def test_synonyms_both_directions(keyword, text):
    assert matches(keyword, text)


def test_no_match_inside_another_word():
    assert not matches("test", "this is the latest version")


def test_prefix_of_longer_word():
    assert matches("test", "I wrote a testing suite")


def test_multi_word_keyword():
    assert matches("root cause", "we found the root cause quickly")


def test_missing_keyword():
    assert not matches("kubernetes", "we deployed on bare metal")


@pytest.mark.parametrize("keyword", ["", "   ", None])
def test_blank_keyword_never_matches(keyword):
    assert not matches(keyword, "any answer at all")


def test_empty_answer():
    assert not matches("api", "")


def test_regex_characters_are_literal():
    assert matches("c++", "I mostly write C++ code")
    assert not matches("a.b", "axb")


def test_keyword_starting_with_punctuation():
    assert matches(".net", "we run ASP.NET Core in production")
    assert matches("c#", "services written in C# and F#")


def test_non_string_answer_does_not_raise():
    assert not matches("api", 123)
    assert matches("42", 42)


def test_non_string_keyword_is_matched_as_text():
    assert matches(404, "the handler returns 404 when missing")
    assert not matches(3.5, "python three")


def test_injected_synonym_table():
    matcher = KeywordMatcher(synonyms={"Queue": ["Kafka"]})
    assert matcher.matches("queue", "we used kafka")
    assert matcher.matches("kafka", "a durable queue")
    assert not matcher.matches("decorator", "a wrapper")


def test_default_table_is_immutable():
    with pytest.raises(TypeError):
        DEFAULT_SYNONYMS["new"] = ("x",)
    with pytest.raises(TypeError):
        KeywordMatcher().synonyms["function"] = ()


# ─── scorer ──────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("keywords", [None, []])
def test_no_keywords_short_circuit(keywords):
    report = score_keywords(keywords, "anything")
    assert report == CoverageReport(score=10, covered=(), missed=(), passed=True)


def test_threshold_pass():
    report = score_keywords(KEYWORDS, "I built an API backed by a database")
    assert report.covered == ("api", "database")
    assert report.missed == ("cache", "async")
    assert report.score == 5
    assert report.passed


def test_threshold_fail_rounds_half_up():
    report = score_keywords(KEYWORDS, "I built an API")
    assert report.covered == ("api",)
    assert report.score == 3
    assert not report.passed


def test_exactly_at_threshold_passes():
    report = score_keywords(["api", "cache", "queue", "shard", "index"],
                            "api and cache")
    assert report.ratio == pytest.approx(0.4)
    assert report.passed


def test_non_string_keywords_are_scored_without_raising():
    report = score_keywords(["api", 42, None], "api design")
    assert report.covered == ("api",)
    assert report.missed == (42, None)
    assert report.score == 3


def test_non_string_answer_scores_zero():
    report = score_keywords(["api", "cache"], 123)
    assert report.missed == ("api", "cache")
    assert report.score == 0
    assert not report.passed


def test_partition_keeps_order_and_duplicates():
    keywords = ["cache", "api", "cache", "", "queue"]
    report = score_keywords(keywords, "the api uses a cache")
    assert report.covered == ("cache", "api", "cache")
    assert report.missed == ("", "queue")
    assert report.total == len(keywords)


@pytest.mark.parametrize("answer", ["", "api", "api database cache async", "nothing relevant"])
def test_score_range(answer):
    report = score_keywords(KEYWORDS, answer)
    assert isinstance(report.score, int)
    assert 0 <= report.score <= 10


def test_monotonicity():
    answer = "api database"
    base = score_keywords(["api", "cache"], answer).score
    assert score_keywords(["api", "cache", "database"], answer).score >= base
    assert score_keywords(["api", "cache", "queue"], answer).score <= base


def test_idempotent():
    scorer = CoverageScorer()
    assert scorer.score(KEYWORDS, "api cache") == scorer.score(KEYWORDS, "api cache")


def test_custom_threshold():
    scorer = CoverageScorer(threshold=0.75)
    assert not scorer.score(KEYWORDS, "api database").passed


def test_report_to_dict():
    report = score_keywords(["api", "cache"], "api")
    assert report.to_dict() == {
        "keywordScore": 5,
        "keywordsCovered": ["api"],
        "keywordsMissed": ["cache"],
        "keywordValidationPassed": True,
    }
