"""
Authentication routes: sign up, sign in, sign out and profile
"""
from flask import Blueprint, request, jsonify, g, current_app
from flask_login import login_user, logout_user

import errors
from auth import create_access_token, is_admin_email, jwt_required
from logger import get_logger
from models import db, User
from validation import ProfileUpdateRequest, SignInRequest, SignUpRequest, validate_request

auth_bp = Blueprint('auth', __name__, url_prefix='/api/auth')
logger = get_logger("auth")


def _session_payload(user, message):
    return {
        'success': True,
        'message': message,
        'token': create_access_token(user),
        'user': user.to_dict()
    }


@auth_bp.route('/signup', methods=['POST'])
def signup():
    data = validate_request(SignUpRequest, request.get_json(silent=True))

    if User.query.filter_by(email=data.email).first():
        raise errors.email_exists()

    admin = is_admin_email(data.email)
    user = User(
        email=data.email,
        name=data.name,
        phone=data.phone,
        role='admin' if admin else 'user',
        status='approved' if admin or not current_app.config['REQUIRE_USER_APPROVAL'] else 'pending'
    )
    user.set_password(data.password)
    db.session.add(user)
    db.session.commit()
    login_user(user)
    logger.info("✅ New user registered: %s (status=%s)", user.email, user.status)

    return jsonify(_session_payload(user, 'Registration successful')), 201


@auth_bp.route('/signin', methods=['POST'])
def signin():
    data = validate_request(SignInRequest, request.get_json(silent=True))

    user = User.query.filter_by(email=data.email).first()
    if not user or not user.check_password(data.password):
        raise errors.invalid_credentials()

    login_user(user)
    return jsonify(_session_payload(user, 'Login successful'))


@auth_bp.route('/signout', methods=['POST'])
def signout():
    logout_user()
    return jsonify({'success': True, 'message': 'Logged out successfully'})


@auth_bp.route('/me', methods=['GET'])
@jwt_required
def me():
    return jsonify({'success': True, 'user': g.current_user.to_dict()})


@auth_bp.route('/profile', methods=['POST'])
@jwt_required
def update_profile():
    data = validate_request(ProfileUpdateRequest, request.get_json(silent=True))
    user = g.current_user
    for field in data.model_fields_set:
        value = getattr(data, field)
        # name is required on the account; an explicit null leaves it unchanged
        if field == 'name' and value is None:
            continue
        setattr(user, field, value)
    db.session.commit()
    return jsonify({'success': True, 'message': 'Profile updated successfully', 'user': user.to_dict()})
