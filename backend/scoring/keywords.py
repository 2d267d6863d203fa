# backend/scoring/keywords.py
"""
Keyword-coverage scoring for free-text interview answers.

A question carries a list of expected keywords. `KeywordMatcher` decides
whether one keyword is present in an answer (exact term, plural/singular
variants, a small table of technical synonyms, then a word-prefix fallback),
and `CoverageScorer` turns the matches into a 0-10 score and a pass flag.
"""

import logging
import re
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from utils import round_half_up

logger = logging.getLogger("mock_interview.scoring")

# At least 40% of the expected keywords must be present for an answer to pass.
PASS_THRESHOLD = 0.4
MAX_KEYWORD_SCORE = 10

DEFAULT_SYNONYMS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "function": ("func", "method", "procedure"),
    "variable": ("var", "identifier"),
    "class": ("object", "instance"),
    "array": ("list", "collection"),
    "object": ("dict", "dictionary", "map"),
    "async": ("asynchronous", "await"),
    "sync": ("synchronous",),
    "decorator": ("wrapper", "annotation"),
    "inheritance": ("extends", "subclass"),
    "polymorphism": ("override", "overload"),
    "immutable": ("unchangeable", "constant"),
    "mutable": ("changeable", "modifiable"),
})


_WORD_CHAR = re.compile(r"\w")


@lru_cache(maxsize=1024)
def _term_pattern(term: str, allow_suffix: bool):
    # Anchored at a word start so "test" never matches inside "latest".
    # Terms that start or end with punctuation (".net", "c++") are not anchored on that side.
    head = r"(?<!\w)" if _WORD_CHAR.match(term[0]) else ""
    tail = r"(?!\w)" if not allow_suffix and _WORD_CHAR.match(term[-1]) else ""
    return re.compile(head + re.escape(term) + tail)


def _as_text(value) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _has_term(term: str, text: str, allow_suffix: bool = False) -> bool:
    return bool(term) and _term_pattern(term, allow_suffix).search(text) is not None


class KeywordMatcher:
    """Decides whether a keyword is present in an answer, case-insensitively."""

    def __init__(self, synonyms: Optional[Mapping[str, Sequence[str]]] = None):
        table = DEFAULT_SYNONYMS if synonyms is None else synonyms
        self.synonyms: Mapping[str, Tuple[str, ...]] = MappingProxyType({
            key.lower(): tuple(s.lower() for s in values)
            for key, values in table.items()
        })
        reverse: Dict[str, List[str]] = {}
        for key, values in self.synonyms.items():
            for synonym in values:
                reverse.setdefault(synonym, []).append(key)
        self._canonical: Mapping[str, Tuple[str, ...]] = MappingProxyType(
            {synonym: tuple(keys) for synonym, keys in reverse.items()}
        )

    @staticmethod
    def variants(keyword: str) -> List[str]:
        candidates = [keyword, keyword + "s", keyword + "es",
                      keyword[:-1] if keyword.endswith("s") else ""]
        return [c for c in candidates if c]

    def matches(self, keyword: str, answer_text: str) -> bool:
        kw = _as_text(keyword).strip().lower()
        if not kw:
            return False
        text = _as_text(answer_text).lower()
        if not text:
            return False

        # 1. exact term
        if _has_term(kw, text):
            return True

        # 2. plural / singular
        if any(_has_term(v, text) for v in self.variants(kw)):
            return True

        # 3. technical synonyms, both directions
        if any(_has_term(s, text, allow_suffix=True) for s in self.synonyms.get(kw, ())):
            return True
        if any(_has_term(k, text, allow_suffix=True) for k in self._canonical.get(kw, ())):
            return True

        # 4. keyword as the start of a longer word ("test" -> "testing")
        return _has_term(kw, text, allow_suffix=True)


@dataclass(frozen=True)
class CoverageReport:
    score: int
    covered: Tuple[str, ...] = field(default_factory=tuple)
    missed: Tuple[str, ...] = field(default_factory=tuple)
    passed: bool = True

    @property
    def total(self) -> int:
        return len(self.covered) + len(self.missed)

    @property
    def ratio(self) -> float:
        return len(self.covered) / self.total if self.total else 1.0

    def to_dict(self) -> Dict:
        return {
            "keywordScore": self.score,
            "keywordsCovered": list(self.covered),
            "keywordsMissed": list(self.missed),
            "keywordValidationPassed": self.passed,
        }


class CoverageScorer:
    """Scores an answer by the share of expected keywords it covers."""

    def __init__(self, matcher: Optional[KeywordMatcher] = None,
                 threshold: float = PASS_THRESHOLD):
        self.matcher = matcher or KeywordMatcher()
        self.threshold = threshold

    def score(self, keywords: Optional[Sequence[str]], answer_text: str) -> CoverageReport:
        # Questions without expected keywords are not penalized.
        if not keywords:
            return CoverageReport(score=MAX_KEYWORD_SCORE, passed=True)

        covered: List[str] = []
        missed: List[str] = []
        for keyword in keywords:
            if not _as_text(keyword).strip():
                logger.warning("⚠️ Blank keyword in expected keywords; counted as missed")
            if self.matcher.matches(keyword, answer_text):
                covered.append(keyword)
            else:
                missed.append(keyword)

        ratio = len(covered) / len(keywords)
        return CoverageReport(
            score=round_half_up(ratio * MAX_KEYWORD_SCORE),
            covered=tuple(covered),
            missed=tuple(missed),
            passed=ratio >= self.threshold,
        )


default_scorer = CoverageScorer()


def matches(keyword: str, answer_text: str) -> bool:
    return default_scorer.matcher.matches(keyword, answer_text)


def score_keywords(keywords: Optional[Sequence[str]], answer_text: str) -> CoverageReport:
    return default_scorer.score(keywords, answer_text)
