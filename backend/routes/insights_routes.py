"""
Insight routes: per-user analytics and the global leaderboard
"""
from flask import Blueprint, request, jsonify, g

from analytics import build_analytics
from auth import approved_required
from leaderboard import PERIOD_DAYS, build_leaderboard
from models import Interview

insights_bp = Blueprint('insights', __name__, url_prefix='/api/interview')


@insights_bp.route('/analytics', methods=['GET'])
@approved_required
def analytics():
    interviews = (
        Interview.query.filter_by(user_id=g.current_user.id)
        .order_by(Interview.created_at.desc(), Interview.id.desc())
        .all()
    )
    return jsonify(build_analytics(interviews))


@insights_bp.route('/leaderboard', methods=['GET'])
@approved_required
def leaderboard():
    period = request.args.get('period', 'all')
    if period not in PERIOD_DAYS:
        period = 'all'
    role = request.args.get('role') or None
    if role == 'all':
        role = None
    return jsonify(build_leaderboard(g.current_user.id, period=period, role=role))
