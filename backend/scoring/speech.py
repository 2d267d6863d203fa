# backend/scoring/speech.py

import re
from typing import Dict, Optional

from utils import round_half_up

FILLER_WORDS = [
    "um", "uh", "umm", "uhh", "like", "you know", "actually", "basically",
    "literally", "so", "right", "okay", "well", "kind of", "sort of",
]


def detect_filler_words(text: str) -> Dict:
    """Count whole-word filler words and phrases in a transcript."""
    lower = (text or "").lower()
    breakdown = {}
    for filler in FILLER_WORDS:
        count = len(re.findall(r"\b" + re.escape(filler) + r"\b", lower))
        if count:
            breakdown[filler] = count
    return {"total": sum(breakdown.values()), "breakdown": breakdown}


def count_words(text: str) -> int:
    return len((text or "").split())


def analyze_speech(text: str, speaking_time: Optional[float] = None) -> Dict:
    """
    Speech metrics stored alongside an answer evaluation.
    Words per minute is only reported when the client measured speaking time.
    """
    fillers = detect_filler_words(text)
    total_words = count_words(text)
    wpm = 0
    if speaking_time and speaking_time > 0:
        wpm = round_half_up(total_words / speaking_time * 60)
    return {
        "fillerWordCount": fillers["total"],
        "fillerWords": fillers["breakdown"],
        "wordCount": total_words,
        "wordsPerMinute": wpm,
        "speakingTime": speaking_time or 0,
    }
