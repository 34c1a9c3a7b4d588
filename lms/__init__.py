import os
from flask import Flask
from flask_login import LoginManager, current_user
from flask_jwt_extended import JWTManager
from flasgger import Flasgger

from lms.config import config

login_manager = LoginManager()
jwt = JWTManager()


def register_auth_handlers():
    """Route every authentication failure to the same 401 body."""
    from lms.utils.request_helpers import unauthorized_response

    @login_manager.unauthorized_handler
    def session_unauthorized():
        return unauthorized_response()

    @jwt.unauthorized_loader
    def missing_token(reason):
        return unauthorized_response()

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return unauthorized_response()

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return unauthorized_response()


def create_app(config_name=None):
    """Application factory."""
    if config_name is None:
        config_name = os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config.get(config_name, config['default']))

    # Initialize extensions
    login_manager.init_app(app)
    jwt.init_app(app)
    register_auth_handlers()

    # Swagger UI, only for logged in users
    Flasgger(app)

    @app.before_request
    def protect_swagger():
        """Require authentication for Swagger UI."""
        from flask import request
        if request.path.startswith('/apidocs') or request.path.startswith('/flasgger'):
            if not current_user.is_authenticated:
                return login_manager.unauthorized()

    if not app.config.get('TESTING'):
        from lms.elasticsearch.init_indices import init_elasticsearch
        with app.app_context():
            init_elasticsearch()

    # Register blueprints
    from lms.routes.auth import auth_bp
    from lms.routes.api_keys import api_keys_bp
    from lms.routes.services_api import services_api_bp

    app.register_blueprint(auth_bp, url_prefix='/auth')
    app.register_blueprint(api_keys_bp, url_prefix='/api/v1/users/self/api_keys')
    app.register_blueprint(services_api_bp, url_prefix='/api/v1/services')

    # Health check endpoint
    @app.route('/health')
    def health_check():
        return {'status': 'healthy'}, 200

    return app
