# backend/routes/__init__.py
from .admin_routes import admin_bp
from .auth_routes import auth_bp
from .health_routes import health_bp
from .insights_routes import insights_bp
from .interview_routes import interview_bp
from .study_routes import flashcards_bp, projects_bp

ALL_BLUEPRINTS = (auth_bp, interview_bp, insights_bp, flashcards_bp, projects_bp, admin_bp, health_bp)

__all__ = ['ALL_BLUEPRINTS', 'admin_bp', 'auth_bp', 'flashcards_bp', 'health_bp', 'insights_bp',
           'interview_bp', 'projects_bp']
