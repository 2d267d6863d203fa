"""
Interview routes: create, fetch, evaluate answers, summarize, retake,
history and PDF question import
"""
import uuid
from io import BytesIO

from flask import Blueprint, request, jsonify, g, current_app

import errors
import interview_engine as engine
from analytics import history_stats
from auth import approved_required
from catalog import question_count_for
from llm import AIServiceError
from logger import get_logger
from models import db, Interview
from utils import PdfParseError, extract_text_from_pdf, to_json
from validation import (CreateInterviewRequest, EvaluateAnswerRequest, InterviewRefRequest,
                        validate_request)

interview_bp = Blueprint('interview', __name__, url_prefix='/api/interview')
logger = get_logger("interview")

ALLOWED_PDF_TYPES = {"application/pdf"}


def _owned_interview(mock_id):
    interview = Interview.query.filter_by(mock_id=mock_id).first()
    if interview is None:
        raise errors.not_found("Interview")
    if interview.user_id != g.current_user.id:
        raise errors.forbidden()
    return interview


def _create_interview(role, experience_level, interview_type, duration, mode,
                      tech_stack, topics, questions):
    interview = Interview(
        mock_id=str(uuid.uuid4()),
        user_id=g.current_user.id,
        role=role,
        experience_level=experience_level,
        interview_type=interview_type,
        duration=duration,
        mode=mode,
        tech_stack_json=to_json(tech_stack),
        topics_json=to_json(topics),
        status='pending',
        questions_json=to_json({'questions': questions})
    )
    db.session.add(interview)
    db.session.commit()
    logger.info("✅ Interview %s created (%s, %d questions)",
                interview.mock_id, role, len(questions))
    return interview


def _generate_questions(role, experience_level, interview_type, duration, mode,
                        tech_stack, topics):
    try:
        return engine.generate_questions(
            role, experience_level, interview_type, question_count_for(duration),
            tech_stack=tech_stack, topics=topics, mode=mode
        )
    except engine.QuestionFormatError as e:
        logger.error("❌ Invalid questions from model: %s", e)
        raise errors.ai_service_error("Failed to generate valid questions", status=500)


@interview_bp.route('/create', methods=['POST'])
@approved_required
def create_interview():
    data = validate_request(CreateInterviewRequest, request.get_json(silent=True))

    if data.custom_questions is not None:
        questions = engine.normalize_questions(
            data.custom_questions, min_text_length=engine.PDF_MIN_QUESTION_LENGTH
        )
        if not questions:
            raise errors.bad_request("No valid questions provided")
    else:
        questions = _generate_questions(
            data.role, data.experience_level, data.interview_type, data.duration,
            data.mode, data.tech_stack, data.topics
        )

    interview = _create_interview(
        data.role, data.experience_level, data.interview_type, data.duration,
        data.mode, data.tech_stack, data.topics, questions
    )
    return jsonify({
        'success': True,
        'interviewId': interview.mock_id,
        'questions': questions
    }), 201


@interview_bp.route('/retake', methods=['POST'])
@approved_required
def retake_interview():
    data = validate_request(InterviewRefRequest, request.get_json(silent=True))
    original = _owned_interview(data.interview_id)

    questions = _generate_questions(
        original.role, original.experience_level, original.interview_type,
        original.duration, original.mode, original.tech_stack, original.topics
    )
    interview = _create_interview(
        original.role, original.experience_level, original.interview_type,
        original.duration, original.mode, original.tech_stack, original.topics, questions
    )
    return jsonify({
        'success': True,
        'interviewId': interview.mock_id,
        'questions': questions
    }), 201


@interview_bp.route('/evaluate', methods=['POST'])
@approved_required
def evaluate_answer():
    data = validate_request(EvaluateAnswerRequest, request.get_json(silent=True))
    interview = _owned_interview(data.interview_id)

    question = interview.question_at(data.question_index) or {}
    evaluation = engine.evaluate_answer(
        data.question_text,
        data.user_answer,
        keywords=question.get('keywords'),
        role=interview.role,
        experience_level=interview.experience_level,
        speaking_time=data.speaking_time
    )
    engine.save_answer(interview, data.question_index, data.question_text,
                       data.user_answer, evaluation)

    return jsonify({'success': True, 'evaluation': evaluation})


@interview_bp.route('/summary', methods=['POST'])
@approved_required
def interview_summary():
    data = validate_request(InterviewRefRequest, request.get_json(silent=True))
    interview = _owned_interview(data.interview_id)

    if not interview.answers:
        raise errors.bad_request("No answers found for this interview")

    summary = engine.build_summary(interview)
    engine.save_summary(interview, summary)
    logger.info("✅ Interview %s completed with score %d", interview.mock_id, summary['overallScore'])

    return jsonify({'success': True, 'summary': summary})


@interview_bp.route('/history', methods=['GET'])
@approved_required
def interview_history():
    """Get the user's interviews (filtered) plus stats over all of them"""
    user_id = g.current_user.id
    query = Interview.query.filter_by(user_id=user_id)

    status = request.args.get('status')
    role = request.args.get('role')
    interview_type = request.args.get('type')
    search = request.args.get('search')

    if status and status != 'all':
        query = query.filter(Interview.status == status)
    if role and role != 'all':
        query = query.filter(Interview.role == role)
    if interview_type and interview_type != 'all':
        query = query.filter(Interview.interview_type == interview_type)
    if search:
        query = query.filter(Interview.role.ilike(f"%{search.lower()}%"))

    interviews = query.order_by(Interview.created_at.desc(), Interview.id.desc()).all()
    all_interviews = Interview.query.filter_by(user_id=user_id).all()

    return jsonify({
        'success': True,
        'interviews': [i.to_dict() for i in interviews],
        'stats': history_stats(all_interviews)
    })


@interview_bp.route('/parse-pdf', methods=['POST'])
@approved_required
def parse_pdf():
    file = request.files.get('pdf')
    if file is None or not file.filename:
        raise errors.bad_request("No PDF file provided")
    if file.mimetype not in ALLOWED_PDF_TYPES:
        raise errors.bad_request("Invalid file type. Only PDF files are allowed.")

    content = file.read()
    if len(content) > current_app.config['MAX_PDF_SIZE']:
        raise errors.bad_request("File too large. Maximum size is 5MB.")

    try:
        text = extract_text_from_pdf(BytesIO(content))
    except PdfParseError:
        raise errors.bad_request("Failed to read PDF. The file may be corrupted.")
    if not text.strip():
        raise errors.bad_request("Could not extract text from PDF. The file may be scanned or image-based.")

    try:
        questions, notes = engine.extract_questions_from_text(text)
    except AIServiceError as e:
        logger.error("❌ PDF question classification failed: %s", e)
        raise errors.ai_service_error("Failed to classify questions. Please try again.", status=500)
    except engine.QuestionFormatError:
        raise errors.ai_service_error("Failed to parse questions. The PDF format may not be supported.",
                                      status=500)

    if not questions:
        raise errors.bad_request("No valid questions could be extracted from the PDF.")

    return jsonify({
        'success': True,
        'questions': questions,
        'totalExtracted': len(questions),
        'suggestedRole': engine.detect_role_from_questions(questions),
        'parsingNotes': notes
    })


@interview_bp.route('/<mock_id>', methods=['GET'])
@approved_required
def get_interview(mock_id):
    interview = _owned_interview(mock_id)
    return jsonify({
        'success': True,
        'interview': interview.to_dict(include_questions=True),
        'answers': [a.to_dict() for a in interview.answers],
        'summary': interview.summary.to_dict() if interview.summary else None
    })
