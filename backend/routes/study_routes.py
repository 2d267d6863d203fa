"""
Study tool routes: flash card generation and portfolio project ideas
"""
from flask import Blueprint, request, jsonify

import errors
import flashcards
import projects
from auth import jwt_required
from llm import AIServiceError
from logger import get_logger
from validation import GenerateFlashCardsRequest, GenerateProjectsRequest, validate_request

flashcards_bp = Blueprint('flashcards', __name__, url_prefix='/api/flashcards')
projects_bp = Blueprint('projects', __name__, url_prefix='/api/projects')
logger = get_logger("study")


# ─── Flash cards ─────────────────────────────────────────────────────────────

@flashcards_bp.route('/topics', methods=['GET'])
@jwt_required
def flashcard_topics():
    return jsonify({'success': True, 'topics': flashcards.TECH_TOPICS})


@flashcards_bp.route('/generate', methods=['POST'])
@jwt_required
def generate_flashcards():
    data = validate_request(GenerateFlashCardsRequest, request.get_json(silent=True))
    try:
        cards = flashcards.generate_flashcards(data.technology, data.topic, data.count)
    except AIServiceError as e:
        logger.error("❌ Flash card generation failed: %s", e)
        raise errors.ai_service_error()
    except flashcards.FlashCardFormatError as e:
        raise errors.ai_service_error(f"Failed to generate flash cards: {e}", status=500)
    return jsonify({'success': True, 'cards': cards})


# ─── Projects ────────────────────────────────────────────────────────────────

@projects_bp.route('/generate', methods=['GET'])
@jwt_required
def project_set_exists():
    technology = request.args.get('technology', '').strip()
    domain = request.args.get('domain', '').strip()
    if not technology or not domain:
        return jsonify({'exists': False})
    return jsonify({'exists': projects.find_cached(technology, domain) is not None})


@projects_bp.route('/generate', methods=['POST'])
@jwt_required
def generate_projects():
    data = validate_request(GenerateProjectsRequest, request.get_json(silent=True))
    try:
        result = projects.get_or_generate(data.technology, data.domain)
    except AIServiceError as e:
        logger.error("❌ Project generation failed: %s", e)
        raise errors.ai_service_error()
    except projects.ProjectFormatError as e:
        raise errors.ai_service_error(f"Failed to generate projects: {e}", status=500)
    return jsonify(result)
