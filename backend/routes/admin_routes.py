"""
Admin routes: account approval workflow
"""
from flask import Blueprint, request, jsonify

import errors
from auth import admin_required
from logger import get_logger
from models import db, User

admin_bp = Blueprint('admin', __name__, url_prefix='/api/admin')
logger = get_logger("admin")

USER_STATUSES = ('pending', 'approved', 'rejected')


@admin_bp.route('/stats', methods=['GET'])
@admin_required
def stats():
    counts = {status: User.query.filter_by(status=status).count() for status in USER_STATUSES}
    return jsonify({
        'success': True,
        'stats': {'total': User.query.count(), **counts}
    })


@admin_bp.route('/users', methods=['GET'])
@admin_required
def list_users():
    query = User.query
    status = request.args.get('status')
    if status in USER_STATUSES:
        query = query.filter_by(status=status)
    users = query.order_by(User.created_at.desc(), User.id.desc()).all()
    return jsonify({'success': True, 'users': [u.to_dict() for u in users]})


def _set_status(user_id, status):
    try:
        user_id = int(user_id)
    except ValueError:
        raise errors.ApiError(errors.ErrorCodes.INVALID_INPUT, "Invalid user ID", 400)

    user = db.session.get(User, user_id)
    if user is None:
        raise errors.not_found("User")

    user.status = status
    db.session.commit()
    logger.info("✅ User %s %s", user.email, status)
    return jsonify({'success': True, 'message': f"User {user.email} {status}", 'user': user.to_dict()})


@admin_bp.route('/users/<user_id>/approve', methods=['POST'])
@admin_required
def approve_user(user_id):
    return _set_status(user_id, 'approved')


@admin_bp.route('/users/<user_id>/reject', methods=['POST'])
@admin_required
def reject_user(user_id):
    return _set_status(user_id, 'rejected')
