"""
projects.py - Portfolio project ideas per technology and domain.

Generated project ideas are cached in the database by (technology, domain),
so every later request for the same pair is served without calling the model.
"""

import base64
import uuid
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError

import llm
import prompts
from logger import get_logger
from models import db, GeneratedProjectSet
from utils import isoformat, to_json

logger = get_logger("projects")

PROJECT_DIFFICULTIES = ("beginner", "intermediate", "advanced")
MERMAID_IMAGE_BASE = "https://mermaid.ink/img/"


class ProjectFormatError(ValueError):
    """Raised when the model reply has no usable project list."""


# ─── Reply validation ────────────────────────────────────────────────────────

def mermaid_image_url(mermaid_code) -> str:
    """PNG URL for a Mermaid diagram, rendered by mermaid.ink."""
    if not isinstance(mermaid_code, str) or not mermaid_code.strip():
        return ""
    # Models often double-escape newlines, quotes and tabs inside JSON strings
    code = (mermaid_code.replace("\\n", "\n")
            .replace('\\"', '"')
            .replace("\\t", "  ")
            .strip())
    encoded = base64.urlsafe_b64encode(code.encode("utf-8")).decode("ascii").rstrip("=")
    return MERMAID_IMAGE_BASE + encoded


def sanitize_project(project: dict, technology: str, domain: str) -> dict:
    diagrams = project.get("workflowDiagrams")
    diagrams = [
        {**d, "imageUrl": mermaid_image_url(d.get("mermaidCode"))}
        for d in diagrams if isinstance(d, dict)
    ] if isinstance(diagrams, list) else []

    difficulty = str(project.get("difficulty") or "").lower()
    return {
        **project,
        "id": str(uuid.uuid4()),
        "technology": technology,
        "domain": domain,
        "difficulty": difficulty if difficulty in PROJECT_DIFFICULTIES else "intermediate",
        "createdAt": isoformat(datetime.utcnow()),
        "workflowDiagrams": diagrams,
    }


def projects_from_reply(reply, technology: str, domain: str) -> list:
    if not isinstance(reply, dict) or not isinstance(reply.get("projects"), list):
        keys = list(reply) if isinstance(reply, dict) else type(reply).__name__
        logger.error("❌ Project reply without a projects array: %s", keys)
        raise ProjectFormatError("Invalid response format: missing projects array")
    return [sanitize_project(p, technology, domain)
            for p in reply["projects"] if isinstance(p, dict)]


# ─── Cache ───────────────────────────────────────────────────────────────────

def find_cached(technology: str, domain: str):
    return GeneratedProjectSet.query.filter_by(technology=technology, domain=domain).first()


def save_projects(technology: str, domain: str, projects: list):
    """Store a generated set; a failed write is logged and the projects are still returned."""
    try:
        db.session.add(GeneratedProjectSet(
            technology=technology, domain=domain, projects_json=to_json(projects)
        ))
        db.session.commit()
        logger.info("💾 Cached %d projects for %s + %s", len(projects), technology, domain)
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("❌ Failed to cache projects for %s + %s: %s", technology, domain, e)


# ─── Generation ──────────────────────────────────────────────────────────────

def generate_projects(technology: str, domain: str) -> list:
    """Ask Gemini for project ideas. AIServiceError and ProjectFormatError propagate."""
    logger.info("🛠️ Generating projects for %s + %s", technology, domain)
    reply = llm.generate_json(
        prompts.project_generator_prompt(technology, domain),
        system=prompts.PROJECT_SYSTEM_MESSAGE,
    )
    projects = projects_from_reply(reply, technology, domain)
    if not projects:
        raise ProjectFormatError("No projects generated")
    return projects


def get_or_generate(technology: str, domain: str) -> dict:
    cached = find_cached(technology, domain)
    if cached is not None:
        logger.info("📦 Project cache hit for %s + %s", technology, domain)
        return {
            "success": True,
            "projects": cached.projects,
            "cached": True,
            "cachedAt": isoformat(cached.created_at),
        }

    projects = generate_projects(technology, domain)
    save_projects(technology, domain, projects)
    return {"success": True, "projects": projects, "cached": False}
