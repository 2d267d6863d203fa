import os

from flask import Flask, jsonify
from flask_cors import CORS
from flask_login import LoginManager

from config import Config
from errors import register_error_handlers, unauthorized
from logger import get_logger, register_request_logging
from models import db, User
from routes import ALL_BLUEPRINTS

logger = get_logger("app")

SECURITY_HEADERS = {
    'X-Content-Type-Options': 'nosniff',
    'X-Frame-Options': 'DENY',
    'Referrer-Policy': 'strict-origin-when-cross-origin',
    'Permissions-Policy': 'camera=(), microphone=(self), geolocation=()',
}


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    config_class.init_app(app)

    db.init_app(app)
    # Allow credentials so the frontend (on a different origin) can use cookie sessions
    CORS(app, supports_credentials=True, origins=app.config['CORS_ORIGINS'])

    login_manager = LoginManager()
    login_manager.init_app(app)

    @login_manager.user_loader
    def load_user(user_id):
        return db.session.get(User, int(user_id))

    # For API endpoints, return JSON 401 instead of redirecting to a login page
    @login_manager.unauthorized_handler
    def unauthorized_callback():
        error = unauthorized("Authentication required")
        return jsonify(error.to_dict()), error.status

    for blueprint in ALL_BLUEPRINTS:
        app.register_blueprint(blueprint)

    register_error_handlers(app)
    register_request_logging(app)

    @app.after_request
    def set_security_headers(response):
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        return response

    @app.route('/')
    def home():
        return jsonify({'message': 'AI Mock Interview API', 'status': 'running'})

    return app


if __name__ == '__main__':
    app = create_app()
    with app.app_context():
        db.create_all()

    logger.info("🚀 Starting Flask API server...")
    app.run(debug=os.getenv('FLASK_DEBUG') == '1', host='0.0.0.0', port=int(os.getenv('PORT', '5000')))
