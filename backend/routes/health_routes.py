"""
Health check route for uptime monitoring
"""
import time
from datetime import datetime, timezone

from flask import Blueprint, request, jsonify, current_app
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from logger import get_logger
from models import db

health_bp = Blueprint('health', __name__, url_prefix='/api')
logger = get_logger("health")

STARTED_AT = time.time()


def check_database():
    """Run SELECT 1; returns (up, latency_ms, error)."""
    started = time.perf_counter()
    try:
        db.session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("❌ Database health check failed: %s", e)
        return False, None, str(e)
    return True, round((time.perf_counter() - started) * 1000), None


@health_bp.route('/health', methods=['GET', 'HEAD'])
def health_check():
    db_up, latency, error = check_database()
    status_code = 200 if db_up else 503

    if request.method == 'HEAD':
        return '', status_code

    database = {'status': 'up' if db_up else 'down', 'latency': latency}
    if error and (current_app.debug or current_app.testing):
        database['error'] = error

    return jsonify({
        'status': 'healthy' if db_up else 'unhealthy',
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'version': current_app.config['APP_VERSION'],
        'uptime': int(time.time() - STARTED_AT),
        'services': {'database': database['status'], 'api': 'up'},
        'checks': {'database': database}
    }), status_code
