import pytest

import interview_engine as engine
from catalog import fallback_questions
from prompts import difficulty_split, question_classifier_prompt, question_generator_prompt


def test_normalize_requires_list():
    with pytest.raises(engine.QuestionFormatError):
        engine.normalize_questions({"text": "Q"})


def test_normalize_skips_non_objects_and_short_text():
    questions = engine.normalize_questions(
        ["nope", {"text": "  "}, {"text": "Is this long enough?"}], min_text_length=11
    )
    assert [q["text"] for q in questions] == ["Is this long enough?"]
    assert questions[0]["topic"] == "general"


def test_normalize_rejects_boolean_expected_time():
    assert engine.normalize_questions([{"text": "Q", "expectedTime": True}])[0]["expectedTime"] == 90


@pytest.mark.parametrize("topics,role", [
    (["react", "css", "databases"], "frontend"),
    (["docker", "kubernetes"], "devops"),
    (["leadership", "teamwork"], "hr"),
    (["quantum physics"], "backend"),
])
def test_detect_role(topics, role):
    questions = [{"topic": t} for t in topics]
    assert engine.detect_role_from_questions(questions) == role


def test_generate_questions_slices_to_count(fake_llm):
    fake_llm.queue({"questions": [{"text": f"Question {i}"} for i in range(15)]})
    questions = engine.generate_questions("backend", "1-3", "technical", 10)
    assert len(questions) == 10


def test_generate_questions_empty_list_is_invalid(fake_llm):
    fake_llm.queue({"questions": []})
    with pytest.raises(engine.QuestionFormatError):
        engine.generate_questions("backend", "1-3", "technical", 10)


def test_fallback_questions_cycle():
    questions = fallback_questions("Backend Developer", 12)
    assert len(questions) == 12
    assert questions[10]["text"] == questions[0]["text"]
    assert questions[11]["id"] == 12


@pytest.mark.parametrize("count,split", [
    (10, {"easy": 2, "medium": 5, "hard": 3}),
    (20, {"easy": 4, "medium": 10, "hard": 6}),
])
def test_difficulty_split(count, split):
    assert difficulty_split(count) == split


def test_question_prompt_mentions_stack_and_topics():
    prompt = question_generator_prompt("Backend Developer", "3-5", "technical", 10,
                                       tech_stack=["Python"], topics=["caching"])
    assert "Tech Stack: Python" in prompt
    assert "Focus Topics: caching" in prompt
    assert "GIL" in prompt
    assert prompt.count('"difficulty": "hard"') == 3


def test_classifier_prompt_truncates_long_text():
    prompt = question_classifier_prompt("x" * 9000)
    assert "...[truncated]" in prompt
    assert "x" * 8001 not in prompt
