# backend/scoring/summary.py

from typing import Dict, Iterable, Tuple

from utils import round_half_up
from .evaluation import weighted_score

RATING_BANDS = [
    (90, "Excellent"),
    (80, "Very Good"),
    (70, "Good"),
    (60, "Above Average"),
    (50, "Average"),
    (40, "Below Average"),
]
LOWEST_RATING = "Needs Improvement"

READINESS_LEVELS = ("Not Ready", "Almost Ready", "Ready", "Well Prepared")


def rating_for_score(score: int) -> str:
    for floor, rating in RATING_BANDS:
        if score >= floor:
            return rating
    return LOWEST_RATING


def interview_score(answer_scores: Iterable[Tuple[int, int, int]], total_questions: int) -> int:
    """
    Overall 0-100 score of an interview. Unanswered questions count as 0, so
    the weighted sum of answered questions is divided by the total question count.
    """
    if total_questions <= 0:
        return 0
    total = sum(weighted_score(t or 0, c or 0, d or 0) for t, c, d in answer_scores)
    return round_half_up(total / total_questions * 10)


def fallback_summary(score: int, answered: int, total_questions: int) -> Dict:
    unanswered = max(0, total_questions - answered)
    if unanswered:
        performance = (f"You answered {answered} out of {total_questions} questions. "
                       f"{unanswered} unanswered question(s) were scored as 0.")
        weaknesses = [f"{unanswered} question(s) left unanswered"]
    else:
        performance = "You completed the interview. Review your answers to identify areas for improvement."
        weaknesses = []
    weaknesses += ["Review technical concepts", "Practice providing more detailed answers"]

    return {
        "overallScore": score,
        "rating": rating_for_score(score),
        "performanceSummary": performance,
        "strengths": ["Completed the interview", "Showed willingness to answer"],
        "weaknesses": weaknesses,
        "recommendedTopics": ["Interview preparation", "Technical fundamentals", "Communication skills"],
        "actionPlan": "Practice more mock interviews and review common questions for your target role.",
        "encouragement": "Every interview is a learning opportunity. Keep practicing!",
        "readinessLevel": "Almost Ready" if score >= 70 else "Not Ready",
    }


def finalize_summary(data: Dict, score: int) -> Dict:
    """Overrides the AI's score and rating with the computed ones."""
    summary = dict(data)
    summary["overallScore"] = score
    summary["rating"] = rating_for_score(score)
    for key in ("strengths", "weaknesses", "recommendedTopics"):
        if not isinstance(summary.get(key), list):
            summary[key] = []
    if summary.get("readinessLevel") not in READINESS_LEVELS:
        summary["readinessLevel"] = "Almost Ready" if score >= 70 else "Not Ready"
    return summary
