# backend/scoring/__init__.py
from .keywords import (
    CoverageReport,
    CoverageScorer,
    DEFAULT_SYNONYMS,
    KeywordMatcher,
    PASS_THRESHOLD,
    matches,
    score_keywords,
)
from .evaluation import (
    EvaluationFormatError,
    apply_keyword_coverage,
    fallback_evaluation,
    normalize_ai_evaluation,
    overall_score,
    score_answer_keywords,
    unanswered_evaluation,
    weighted_score,
)
from .speech import analyze_speech, detect_filler_words
from .summary import fallback_summary, finalize_summary, interview_score, rating_for_score

__all__ = [
    'CoverageReport',
    'CoverageScorer',
    'DEFAULT_SYNONYMS',
    'KeywordMatcher',
    'PASS_THRESHOLD',
    'matches',
    'score_keywords',
    'EvaluationFormatError',
    'apply_keyword_coverage',
    'fallback_evaluation',
    'normalize_ai_evaluation',
    'overall_score',
    'score_answer_keywords',
    'unanswered_evaluation',
    'weighted_score',
    'analyze_speech',
    'detect_filler_words',
    'fallback_summary',
    'finalize_summary',
    'interview_score',
    'rating_for_score',
]
