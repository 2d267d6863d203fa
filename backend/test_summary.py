import pytest

from scoring import fallback_summary, finalize_summary, interview_score, rating_for_score


@pytest.mark.parametrize("score,rating", [
    (100, "Excellent"), (90, "Excellent"), (89, "Very Good"), (80, "Very Good"),
    (75, "Good"), (60, "Above Average"), (50, "Average"), (40, "Below Average"),
    (39, "Needs Improvement"), (0, "Needs Improvement"),
])
def test_rating_bands(score, rating):
    assert rating_for_score(score) == rating


def test_interview_score_counts_unanswered_as_zero():
    # two answered at weighted 10 and 5, out of four questions
    assert interview_score([(10, 10, 10), (5, 5, 5)], 4) == 38


def test_interview_score_all_answered():
    assert interview_score([(8, 7, 6)], 1) == 71


def test_interview_score_handles_missing_values():
    assert interview_score([(None, None, None)], 1) == 0


def test_interview_score_without_questions():
    assert interview_score([], 0) == 0


def test_fallback_summary_mentions_unanswered():
    summary = fallback_summary(45, answered=3, total_questions=5)
    assert summary["rating"] == "Below Average"
    assert "2 unanswered" in summary["performanceSummary"]
    assert summary["weaknesses"][0] == "2 question(s) left unanswered"


def test_fallback_summary_all_answered():
    summary = fallback_summary(75, answered=5, total_questions=5)
    assert summary["readinessLevel"] == "Almost Ready"
    assert not any("unanswered" in w for w in summary["weaknesses"])


def test_finalize_overrides_ai_score_and_rating():
    summary = finalize_summary({"overallScore": 99, "rating": "Excellent",
                                "strengths": "oops", "readinessLevel": "Maybe"}, 55)
    assert summary["overallScore"] == 55
    assert summary["rating"] == "Average"
    assert summary["strengths"] == []
    assert summary["readinessLevel"] == "Not Ready"
