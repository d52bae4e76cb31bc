"""
Main application initialization module.
Sets up the Flask app with configuration, storage, OAuth and blueprints.
"""
from flask import Flask, jsonify, render_template, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException, NotFound
from dotenv import load_dotenv
import logging
import secrets

from .config import Config
from .services.auth_service import current_user, init_oauth
from .services.course_service import CourseService
from .services.message_service import MessageStore


# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def _wants_json():
    return request.path.startswith('/api/') or request.path == '/contact'


def create_app(config_overrides=None):
    """
    Create and configure the Flask application
    @param config_overrides: dict - settings applied on top of Config
    @returns: Flask - Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    # cookie flags follow the final IS_PRODUCTION, overrides included
    app.config['SESSION_COOKIE_SECURE'] = bool(app.config.get('IS_PRODUCTION'))
    app.config['SESSION_COOKIE_SAMESITE'] = 'None' if app.config.get('IS_PRODUCTION') else 'Lax'

    Config.validate(app.config)
    if not app.config.get('SECRET_KEY'):
        logger.warning("SECRET_KEY is not set, sessions will not survive a restart")
        app.config['SECRET_KEY'] = secrets.token_hex(32)

    CORS(app, resources={
        r"/api/*": {"origins": app.config['CORS_ORIGINS']}
    })

    # Storage, one instance per app
    app.extensions['course_service'] = CourseService(
        courses_file=app.config['COURSES_FILE'],
        courses_dir=app.config['COURSES_DIR']
    )
    app.extensions['message_store'] = MessageStore(app.config['MESSAGES_FILE'])

    init_oauth(app)

    @app.context_processor
    def inject_user():
        return {'current_user': current_user()}

    # Register blueprints with error handling
    try:
        from .controllers.pages_controller import pages_bp
        app.register_blueprint(pages_bp)
        logger.info("Successfully registered pages blueprint")

        from .controllers.course_controller import course_bp
        app.register_blueprint(course_bp, url_prefix='/api')
        logger.info("Successfully registered course blueprint")

        from .controllers.contact_controller import contact_bp
        app.register_blueprint(contact_bp)
        logger.info("Successfully registered contact blueprint")

        from .controllers.auth_controller import auth_bp
        app.register_blueprint(auth_bp)
        logger.info("Successfully registered auth blueprint")

        # Add a simple health check route
        @app.route('/health', methods=['GET'])
        def health_check():
            return {'status': 'healthy'}, 200

    except Exception as e:
        logger.error(f"Error registering blueprints: {str(e)}")
        raise

    _register_error_handlers(app)

    return app


def _register_error_handlers(app):
    @app.errorhandler(NotFound)
    def not_found(e):
        if _wants_json():
            return jsonify({'error': 'Not found.'}), 404
        return render_template('error.html', message='Page not found.'), 404

    @app.errorhandler(Exception)
    def internal_error(e):
        if isinstance(e, HTTPException):
            if _wants_json():
                return jsonify({'error': e.description}), e.code
            return e
        logger.error(f"Unhandled error on {request.method} {request.path}: {str(e)}", exc_info=True)
        if _wants_json():
            return jsonify({'error': 'Internal server error.'}), 500
        return render_template('error.html', message='Something went wrong.'), 500
