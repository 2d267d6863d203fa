# backend/scoring/evaluation.py
"""
Per-answer evaluation: validates the AI's three-dimension rating, blends in
keyword coverage, and provides the fallbacks used when the AI is unavailable.
All scores are 0-10 per dimension; overallScore is 0-100.
"""

from numbers import Real
from typing import Dict, Optional, Sequence

from utils import clamp, round_half_up
from .keywords import CoverageReport, score_keywords

WEIGHTS = {"technical": 0.4, "communication": 0.3, "depth": 0.3}
KEYWORD_WEIGHT = 0.3

DIMENSION_KEYS = ("technicalScore", "communicationScore", "depthScore")


class EvaluationFormatError(ValueError):
    """The AI reply does not have the expected evaluation shape."""


def weighted_score(technical: float, communication: float, depth: float) -> float:
    """Weighted 0-10 score of one answer."""
    return (technical * WEIGHTS["technical"]
            + communication * WEIGHTS["communication"]
            + depth * WEIGHTS["depth"])


def overall_score(technical: float, communication: float, depth: float) -> int:
    return round_half_up(weighted_score(technical, communication, depth) * 10)


def _string_list(value) -> list:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value if isinstance(v, str) and v.strip()]


def normalize_ai_evaluation(raw) -> Dict:
    """
    Validate an AI evaluation reply. The three dimension scores must be
    numbers; they are clamped to 0-10 and the overall score is always derived
    from them so every stored answer uses the same 0-100 scale.
    """
    if not isinstance(raw, dict):
        raise EvaluationFormatError("Evaluation is not an object")

    scores = {}
    for key in DIMENSION_KEYS:
        value = raw.get(key)
        if isinstance(value, bool) or not isinstance(value, Real):
            raise EvaluationFormatError(f"Invalid evaluation format: {key}")
        scores[key] = round_half_up(clamp(float(value), 0, 10))

    return {
        **scores,
        "overallScore": overall_score(*(scores[k] for k in DIMENSION_KEYS)),
        "strengths": _string_list(raw.get("strengths")),
        "weaknesses": _string_list(raw.get("weaknesses")),
        "idealAnswer": str(raw.get("idealAnswer") or ""),
        "followUpTip": str(raw.get("followUpTip") or ""),
        "encouragement": str(raw.get("encouragement") or ""),
    }


def fallback_evaluation() -> Dict:
    return {
        "technicalScore": 5,
        "communicationScore": 5,
        "depthScore": 5,
        "overallScore": 50,
        "strengths": ["Attempted to answer the question"],
        "weaknesses": ["Could provide more detailed response"],
        "idealAnswer": ("A comprehensive answer would include specific examples and "
                        "technical details relevant to the question."),
        "followUpTip": "Try to provide concrete examples from your experience.",
        "encouragement": "Good effort! Keep practicing to improve.",
    }


def unanswered_evaluation(keywords: Optional[Sequence[str]] = None) -> Dict:
    missing = [k for k in (keywords or []) if k]
    weaknesses = ["This question was not answered."]
    if missing:
        weaknesses.append(f"Required concepts: {', '.join(missing[:4])}")
    return {
        "technicalScore": 0,
        "communicationScore": 0,
        "depthScore": 0,
        "overallScore": 0,
        "strengths": [],
        "weaknesses": weaknesses,
        "idealAnswer": "",
        "followUpTip": "Always attempt every question; a partial structured answer scores better than silence.",
        "encouragement": "Skipping happens. Review the topic and try again.",
    }


def apply_keyword_coverage(evaluation: Dict, report: CoverageReport,
                           has_keywords: bool) -> Dict:
    """
    Merge a keyword coverage report into an evaluation. When the question
    defines keywords the technical score becomes 70% AI rating and 30%
    keyword score, and the overall score is recomputed from it.
    """
    evaluation.update(report.to_dict())
    if not has_keywords:
        return evaluation

    ai_technical = evaluation["technicalScore"]
    evaluation["aiTechnicalScore"] = ai_technical
    evaluation["technicalScore"] = round_half_up(
        ai_technical * (1 - KEYWORD_WEIGHT) + report.score * KEYWORD_WEIGHT
    )
    evaluation["overallScore"] = overall_score(
        evaluation["technicalScore"], evaluation["communicationScore"], evaluation["depthScore"]
    )
    if not report.passed and report.missed:
        evaluation["weaknesses"] = list(evaluation.get("weaknesses", [])) + [
            f"Missed key concepts: {', '.join(report.missed[:5])}"
        ]
    return evaluation


def score_answer_keywords(evaluation: Dict, keywords: Optional[Sequence[str]],
                          answer_text: str) -> Dict:
    report = score_keywords(keywords, answer_text)
    return apply_keyword_coverage(evaluation, report, has_keywords=bool(keywords))
