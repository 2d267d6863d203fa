import pytest

from scoring import (EvaluationFormatError, analyze_speech, apply_keyword_coverage,
                     detect_filler_words, fallback_evaluation, normalize_ai_evaluation,
                     overall_score, score_answer_keywords, score_keywords,
                     unanswered_evaluation)


def ai_reply(**overrides):
    reply = {
        "technicalScore": 8,
        "communicationScore": 7,
        "depthScore": 6,
        "overallScore": 9,
        "strengths": ["Clear structure"],
        "weaknesses": ["No examples"],
        "idealAnswer": "Mention indexes.",
        "followUpTip": "Add metrics.",
        "encouragement": "Nice work!",
    }
    reply.update(overrides)
    return reply


def test_overall_score_weights():
    assert overall_score(10, 10, 10) == 100
    assert overall_score(5, 5, 5) == 50
    assert overall_score(8, 7, 6) == 71


def test_normalize_recomputes_overall_on_percent_scale():
    evaluation = normalize_ai_evaluation(ai_reply())
    assert evaluation["overallScore"] == 71
    assert evaluation["strengths"] == ["Clear structure"]


def test_normalize_clamps_and_rounds():
    evaluation = normalize_ai_evaluation(ai_reply(technicalScore=14, depthScore=-2,
                                                  communicationScore=6.5))
    assert evaluation["technicalScore"] == 10
    assert evaluation["depthScore"] == 0
    assert evaluation["communicationScore"] == 7


@pytest.mark.parametrize("bad", [None, "7", True, [7]])
def test_normalize_rejects_non_numeric_scores(bad):
    with pytest.raises(EvaluationFormatError):
        normalize_ai_evaluation(ai_reply(depthScore=bad))


def test_normalize_rejects_non_object():
    with pytest.raises(EvaluationFormatError):
        normalize_ai_evaluation(["not", "a", "dict"])


def test_normalize_drops_bad_list_items():
    evaluation = normalize_ai_evaluation(ai_reply(strengths="great", weaknesses=["", 3, "Vague"]))
    assert evaluation["strengths"] == []
    assert evaluation["weaknesses"] == ["Vague"]


def test_fallback_evaluation():
    evaluation = fallback_evaluation()
    assert (evaluation["technicalScore"], evaluation["communicationScore"],
            evaluation["depthScore"], evaluation["overallScore"]) == (5, 5, 5, 50)


def test_unanswered_evaluation_lists_required_concepts():
    evaluation = unanswered_evaluation(["indexing", "", "joins"])
    assert evaluation["overallScore"] == 0
    assert evaluation["weaknesses"][-1] == "Required concepts: indexing, joins"


def test_keyword_blend_changes_technical_and_overall():
    evaluation = normalize_ai_evaluation(ai_reply())
    report = score_keywords(["index", "join"], "use an index")
    apply_keyword_coverage(evaluation, report, has_keywords=True)

    assert evaluation["aiTechnicalScore"] == 8
    assert evaluation["technicalScore"] == 7  # 0.7 * 8 + 0.3 * 5 = 7.1
    assert evaluation["overallScore"] == overall_score(7, 7, 6)
    assert evaluation["keywordScore"] == 5
    assert evaluation["keywordsCovered"] == ["index"]
    assert evaluation["keywordValidationPassed"] is True


def test_failed_coverage_adds_weakness():
    evaluation = score_answer_keywords(normalize_ai_evaluation(ai_reply()),
                                       ["cache", "queue", "shard"], "nothing useful")
    assert evaluation["keywordValidationPassed"] is False
    assert evaluation["weaknesses"][-1] == "Missed key concepts: cache, queue, shard"


def test_no_keywords_keeps_ai_scores():
    evaluation = score_answer_keywords(normalize_ai_evaluation(ai_reply()), None, "anything")
    assert evaluation["technicalScore"] == 8
    assert "aiTechnicalScore" not in evaluation
    assert evaluation["keywordScore"] == 10


def test_filler_words():
    fillers = detect_filler_words("Um, so I basically, you know, used um caching")
    assert fillers["breakdown"] == {"um": 2, "you know": 1, "basically": 1, "so": 1}
    assert fillers["total"] == 5


def test_filler_words_are_whole_words():
    assert detect_filler_words("the summary was unlike others")["total"] == 0


def test_speech_metrics_with_speaking_time():
    metrics = analyze_speech("one two three four five six", speaking_time=3)
    assert metrics["wordCount"] == 6
    assert metrics["wordsPerMinute"] == 120


def test_speech_metrics_without_speaking_time():
    metrics = analyze_speech("one two three")
    assert metrics["wordsPerMinute"] == 0
    assert metrics["speakingTime"] == 0
