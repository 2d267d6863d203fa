"""
interview_engine.py - AI-powered mock interview engine
Uses Gemini (via llm.py) for:
  - Question generation for a role / experience level / interview type
  - Per-answer evaluation blended with keyword coverage and speech metrics
  - Session-level summaries with a deterministic overall score
  - Extracting questions from imported PDF text
"""

from datetime import datetime

import llm
import prompts
from catalog import (DEFAULT_SUGGESTED_ROLE, DIFFICULTIES, EXPECTED_TIMES,
                     ROLE_TOPIC_KEYWORDS, fallback_questions, role_display_name)
from logger import get_logger
from models import db, Answer, InterviewSummary
from scoring import (EvaluationFormatError, analyze_speech, fallback_evaluation,
                     fallback_summary, finalize_summary, interview_score,
                     normalize_ai_evaluation, score_answer_keywords, unanswered_evaluation)
from utils import to_json

logger = get_logger("engine")

PDF_MIN_QUESTION_LENGTH = 11


class QuestionFormatError(ValueError):
    """Raised when the model's question list is missing or malformed."""


# ─── Question normalization ──────────────────────────────────────────────────

def _clean_keywords(value):
    if not isinstance(value, list):
        return []
    cleaned = (str(k).strip().lower() for k in value if k is not None)
    return [k for k in cleaned if k]


def normalize_questions(items, min_text_length: int = 1) -> list:
    """
    Coerce a question list into the stored shape: ids renumbered from 1,
    difficulty in easy/medium/hard (default medium), expectedTime in 60/90/120
    (default 90), keywords lowercased with blanks dropped. Items whose text is
    shorter than `min_text_length` are discarded.
    """
    if not isinstance(items, list):
        raise QuestionFormatError("Invalid questions format")

    questions = []
    for item in items:
        if not isinstance(item, dict):
            continue
        text = str(item.get("text") or "").strip()
        if len(text) < min_text_length:
            continue
        difficulty = item.get("difficulty") if item.get("difficulty") in DIFFICULTIES else "medium"
        expected = item.get("expectedTime")
        if isinstance(expected, bool) or expected not in EXPECTED_TIMES.values():
            expected = 90
        question = {
            "id": len(questions) + 1,
            "text": text,
            "difficulty": difficulty,
            "topic": str(item.get("topic") or "general"),
            "expectedTime": expected,
        }
        keywords = _clean_keywords(item.get("keywords"))
        if keywords:
            question["keywords"] = keywords
        questions.append(question)
    return questions


def _questions_from_reply(reply) -> list:
    if not isinstance(reply, dict) or not isinstance(reply.get("questions"), list):
        raise QuestionFormatError("Invalid questions format")
    return reply["questions"]


# ─── Question Generation ─────────────────────────────────────────────────────

def generate_questions(role: str, experience_level: str, interview_type: str,
                       question_count: int, tech_stack: list = None,
                       topics: list = None, mode: str = "interview") -> list:
    """
    Generate interview questions with Gemini. Falls back to generic questions
    when the model is unavailable; raises QuestionFormatError when it answers
    with something that is not a question list.
    """
    prompt = prompts.question_generator_prompt(
        role=role_display_name(role),
        experience=experience_level,
        interview_type=interview_type,
        question_count=question_count,
        tech_stack=tech_stack,
        topics=topics,
        mode=mode,
    )
    try:
        reply = llm.generate_json(prompt, system=prompts.INTERVIEWER_SYSTEM_MESSAGE)
    except llm.AIServiceError as e:
        logger.warning("⚠️ Question generation failed, using fallback questions: %s", e)
        return fallback_questions(role_display_name(role), question_count)

    questions = normalize_questions(_questions_from_reply(reply))
    if not questions:
        raise QuestionFormatError("No questions generated")
    return questions[:question_count]


def extract_questions_from_text(text: str):
    """Classify questions found in PDF text. Returns (questions, parsing_notes)."""
    reply = llm.generate_json(prompts.question_classifier_prompt(text),
                              system="You are an expert at parsing interview questions from text.")
    questions = normalize_questions(_questions_from_reply(reply),
                                    min_text_length=PDF_MIN_QUESTION_LENGTH)
    return questions, reply.get("parsingNotes")


def detect_role_from_questions(questions: list) -> str:
    """Suggest a role from question topics, defaulting to backend."""
    topic_counts = {}
    for q in questions:
        topic = str(q.get("topic") or "").lower()
        topic_counts[topic] = topic_counts.get(topic, 0) + 1

    role_scores = {role: 0 for role in ROLE_TOPIC_KEYWORDS}
    for topic, count in topic_counts.items():
        for role, keywords in ROLE_TOPIC_KEYWORDS.items():
            if any(kw in topic for kw in keywords):
                role_scores[role] += count

    detected, best = DEFAULT_SUGGESTED_ROLE, 0
    for role, score in role_scores.items():
        if score > best:
            detected, best = role, score
    return detected


# ─── Answer Evaluation ───────────────────────────────────────────────────────

def evaluate_answer(question_text: str, user_answer: str, keywords: list = None,
                    role: str = "", experience_level: str = "",
                    speaking_time: float = None) -> dict:
    """
    Evaluate a single answer. Empty answers score 0 without calling the model;
    otherwise the AI rating (or the fixed fallback) is combined with keyword
    coverage and speech metrics.
    """
    if not user_answer or not user_answer.strip():
        evaluation = unanswered_evaluation(keywords)
    else:
        prompt = prompts.answer_evaluator_prompt(
            question_text, user_answer, role_display_name(role), experience_level
        )
        try:
            evaluation = normalize_ai_evaluation(
                llm.generate_json(prompt, system=prompts.INTERVIEWER_SYSTEM_MESSAGE)
            )
        except (llm.AIServiceError, EvaluationFormatError) as e:
            logger.warning("⚠️ Answer evaluation failed, using fallback scores: %s", e)
            evaluation = fallback_evaluation()

    evaluation = score_answer_keywords(evaluation, keywords, user_answer or "")
    evaluation.update(analyze_speech(user_answer or "", speaking_time))
    return evaluation


def save_answer(interview, question_index: int, question_text: str,
                user_answer: str, evaluation: dict):
    """Insert or replace the answer stored for (interview, question_index)."""
    answer = Answer.query.filter_by(interview_id=interview.id,
                                    question_index=question_index).first()
    if answer is None:
        answer = Answer(interview_id=interview.id, question_index=question_index)
        db.session.add(answer)

    answer.question_text = question_text
    answer.user_answer = user_answer
    answer.feedback_json = to_json(evaluation)
    answer.technical_score = evaluation["technicalScore"]
    answer.communication_score = evaluation["communicationScore"]
    answer.depth_score = evaluation["depthScore"]
    answer.ideal_answer = evaluation.get("idealAnswer") or None
    answer.created_at = datetime.utcnow()

    if interview.status == "pending":
        interview.status = "in_progress"
    db.session.commit()
    return answer


# ─── Interview Summary ───────────────────────────────────────────────────────

def build_summary(interview) -> dict:
    """Score the interview and ask Gemini for the narrative; score and rating are never the AI's."""
    answers = interview.answers
    total_questions = len(interview.questions) or len(answers)
    score = interview_score(
        ((a.technical_score, a.communication_score, a.depth_score) for a in answers),
        total_questions,
    )

    prompt = prompts.summary_generator_prompt(
        [
            {
                "question": a.question_text,
                "answer": a.user_answer or "",
                "technicalScore": a.technical_score or 0,
                "communicationScore": a.communication_score or 0,
                "depthScore": a.depth_score or 0,
            }
            for a in answers
        ],
        role_display_name(interview.role),
    )
    try:
        reply = llm.generate_json(prompt, system=prompts.INTERVIEWER_SYSTEM_MESSAGE)
        if not isinstance(reply, dict):
            raise llm.AIServiceError("Summary is not an object")
        summary = finalize_summary(reply, score)
    except llm.AIServiceError as e:
        logger.warning("⚠️ Summary generation failed, using fallback summary: %s", e)
        summary = fallback_summary(score, len(answers), total_questions)

    summary["answeredQuestions"] = len(answers)
    summary["totalQuestions"] = total_questions
    return summary


def save_summary(interview, summary: dict):
    """Replace the interview's summary and mark the interview completed."""
    record = interview.summary
    if record is None:
        record = InterviewSummary(interview_id=interview.id)
        db.session.add(record)

    record.overall_score = summary["overallScore"]
    record.rating = summary["rating"]
    record.strengths_json = to_json(summary.get("strengths"))
    record.weaknesses_json = to_json(summary.get("weaknesses"))
    record.recommended_topics_json = to_json(summary.get("recommendedTopics"))
    record.action_plan = summary.get("actionPlan")
    record.summary_text = summary.get("performanceSummary")
    record.created_at = datetime.utcnow()

    interview.status = "completed"
    interview.total_score = summary["overallScore"]
    interview.completed_at = datetime.utcnow()
    db.session.commit()
    return record
