"""
analytics.py - Interview history statistics and progress analytics
"""

from typing import Dict, List, Optional

from catalog import interview_type_display_name, role_display_name
from utils import round_half_up

TREND_THRESHOLD = 5
HISTORY_POINTS = 10
IMPROVEMENT_WINDOW = 3
SKILL_WINDOW = 5


def _average(values) -> int:
    values = list(values)
    return round_half_up(sum(values) / len(values)) if values else 0


def _completed_with_scores(interviews):
    return [i for i in interviews if i.status == "completed" and i.total_score is not None]


def short_date(dt) -> str:
    """'Mar 7' style label."""
    return f"{dt:%b} {dt.day}" if dt else ""


def history_stats(interviews) -> Dict:
    """Totals over every interview of a user, regardless of list filters."""
    scored = [i.total_score for i in _completed_with_scores(interviews)]
    return {
        "totalInterviews": len(interviews),
        "completedInterviews": sum(1 for i in interviews if i.status == "completed"),
        "averageScore": _average(scored),
        "bestScore": max(scored) if scored else 0,
    }


def improvement_rate(scores_newest_first: List[int]) -> int:
    """Average of the newest three scores minus the average of the oldest three."""
    if len(scores_newest_first) < IMPROVEMENT_WINDOW:
        return 0
    recent = scores_newest_first[:IMPROVEMENT_WINDOW]
    older = scores_newest_first[-IMPROVEMENT_WINDOW:]
    return round_half_up(sum(recent) / len(recent) - sum(older) / len(older))


def trend_for(rate: int) -> str:
    if rate > TREND_THRESHOLD:
        return "improving"
    if rate < -TREND_THRESHOLD:
        return "declining"
    return "stable"


def _grouped_scores(completed, label) -> List[Dict]:
    groups = {}
    for interview in completed:
        groups.setdefault(label(interview), []).append(interview.total_score)
    return [
        {"name": name, "avgScore": _average(scores), "count": len(scores)}
        for name, scores in groups.items()
    ]


def skill_breakdown(answers) -> Dict:
    """Per-answer averages of the three dimensions; missing scores count as 0."""
    answers = list(answers)
    if not answers:
        return {"technical": 0, "communication": 0, "depth": 0}
    return {
        "technical": _average(a.technical_score or 0 for a in answers),
        "communication": _average(a.communication_score or 0 for a in answers),
        "depth": _average(a.depth_score or 0 for a in answers),
    }


def build_analytics(interviews) -> Optional[Dict]:
    """
    Analytics for one user. `interviews` must be ordered newest first.
    Returns None while the user has no completed, scored interview.
    """
    completed = _completed_with_scores(interviews)
    if not completed:
        return None

    scores = [i.total_score for i in completed]
    rate = improvement_rate(scores)

    score_by_role = [
        {"role": g["name"], "avgScore": g["avgScore"], "count": g["count"]}
        for g in _grouped_scores(completed, lambda i: role_display_name(i.role))
    ]
    score_by_type = [
        {"type": g["name"], "avgScore": g["avgScore"], "count": g["count"]}
        for g in _grouped_scores(completed, lambda i: interview_type_display_name(i.interview_type))
    ]

    recent_answers = [a for i in completed[:SKILL_WINDOW] for a in i.answers]

    return {
        "overview": {
            "totalInterviews": len(interviews),
            "completedInterviews": len(completed),
            "averageScore": _average(scores),
            "bestScore": max(scores),
            "worstScore": min(scores),
            "improvementRate": rate,
        },
        "scoreHistory": [
            {
                "date": short_date(i.created_at),
                "score": i.total_score,
                "role": role_display_name(i.role),
            }
            for i in reversed(completed[:HISTORY_POINTS])
        ],
        "scoreByRole": score_by_role,
        "scoreByType": score_by_type,
        "skillBreakdown": skill_breakdown(recent_answers),
        "recentTrend": trend_for(rate),
    }
