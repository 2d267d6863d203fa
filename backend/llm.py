"""
llm.py - Gemini gateway returning parsed JSON replies
"""

import json
import os
import re

import google.generativeai as genai
from flask import current_app

from config import Config
from logger import get_logger

logger = get_logger("llm")


class AIServiceError(Exception):
    """Raised when the model is unavailable or replies with something other than JSON."""


def get_gemini_api_key():
    """Get Gemini API key from environment."""
    for name in ("GEMINI_API_KEY", "GOOGLE_API_KEY"):
        v = os.getenv(name)
        if v:
            return v
    return None


def parse_json_response(text: str):
    """Strip markdown fences and any preamble, then parse JSON."""
    text = re.sub(r"^```(?:json)?\s*", "", text or "", flags=re.MULTILINE)
    text = re.sub(r"\s*```$", "", text, flags=re.MULTILINE)
    # Find first '[' or '{' in case there's preamble
    start = min(
        (text.find(c) for c in ["[", "{"] if c in text),
        default=0
    )
    return json.loads(text[start:])


def _setting(name):
    try:
        return current_app.config[name]
    except (RuntimeError, KeyError):
        return getattr(Config, name)


def generate_json(prompt: str, system: str = None):
    """Send `prompt` to Gemini and return the decoded JSON reply."""
    api_key = get_gemini_api_key()
    if not api_key:
        raise AIServiceError("Gemini API key not configured")

    genai.configure(api_key=api_key)
    model_name = _setting("GEMINI_MODEL")
    try:
        model = genai.GenerativeModel(
            model_name=model_name,
            system_instruction=system,
            generation_config={
                "response_mime_type": "application/json",
                "temperature": _setting("GEMINI_TEMPERATURE"),
                "max_output_tokens": _setting("GEMINI_MAX_OUTPUT_TOKENS"),
            },
        )
        resp = model.generate_content(prompt)
        text = getattr(resp, "text", None)
    except Exception as e:
        logger.error("❌ Gemini call failed (%s): %s", model_name, e)
        raise AIServiceError(str(e)) from e

    if not text:
        raise AIServiceError("Empty response from model")
    try:
        return parse_json_response(text)
    except (json.JSONDecodeError, ValueError) as e:
        logger.warning("⚠️ Model reply was not valid JSON: %.200s", text)
        raise AIServiceError("Model reply was not valid JSON") from e
