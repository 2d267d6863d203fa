import json

import pytest

import llm


def test_parse_plain_json():
    assert llm.parse_json_response('{"a": 1}') == {"a": 1}


def test_parse_fenced_json_with_preamble():
    text = 'Here you go:\n```json\n{"questions": [{"text": "Q"}]}\n```'
    assert llm.parse_json_response(text) == {"questions": [{"text": "Q"}]}


def test_parse_array():
    assert llm.parse_json_response("Sure! [1, 2]") == [1, 2]


def test_parse_invalid():
    with pytest.raises(json.JSONDecodeError):
        llm.parse_json_response("no json here")


def test_generate_json_without_key(monkeypatch):
    for name in ("GEMINI_API_KEY", "GOOGLE_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    with pytest.raises(llm.AIServiceError):
        llm.generate_json("prompt")


class FakeModel:
    reply = '```json\n{"ok": true}\n```'
    calls = []

    def __init__(self, **kwargs):
        FakeModel.calls.append(kwargs)

    def generate_content(self, prompt):
        return type("Response", (), {"text": FakeModel.reply})()


def test_generate_json_requests_json_output(app, monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    monkeypatch.setattr(llm.genai, "configure", lambda **kwargs: None)
    monkeypatch.setattr(llm.genai, "GenerativeModel", FakeModel)
    FakeModel.calls.clear()

    assert llm.generate_json("prompt", system="be strict") == {"ok": True}
    call = FakeModel.calls[0]
    assert call["model_name"] == app.config["GEMINI_MODEL"]
    assert call["system_instruction"] == "be strict"
    assert call["generation_config"]["response_mime_type"] == "application/json"


def test_generate_json_wraps_model_errors(app, monkeypatch):
    class Broken(FakeModel):
        def generate_content(self, prompt):
            raise RuntimeError("quota exceeded")

    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    monkeypatch.setattr(llm.genai, "configure", lambda **kwargs: None)
    monkeypatch.setattr(llm.genai, "GenerativeModel", Broken)

    with pytest.raises(llm.AIServiceError, match="quota exceeded"):
        llm.generate_json("prompt")


def test_generate_json_rejects_non_json_reply(app, monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    monkeypatch.setattr(llm.genai, "configure", lambda **kwargs: None)
    monkeypatch.setattr(llm.genai, "GenerativeModel", FakeModel)
    monkeypatch.setattr(FakeModel, "reply", "I cannot help with that")

    with pytest.raises(llm.AIServiceError):
        llm.generate_json("prompt")
