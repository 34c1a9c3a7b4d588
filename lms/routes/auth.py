import logging

from flask import Blueprint, jsonify, g
from flask_jwt_extended import create_access_token
from flask_login import login_user, logout_user

from lms import login_manager
from lms.auth import User, api_auth_required
from lms.utils.request_helpers import get_json_or_form, build_error_response

logger = logging.getLogger(__name__)

auth_bp = Blueprint('auth', __name__)


@login_manager.user_loader
def load_user(user_id):
    """Load user for Flask-Login."""
    return User.get_by_id(user_id)


def _authenticate():
    """Check posted credentials, returning (user, error_response)."""
    username = get_json_or_form('username')
    password = get_json_or_form('password')

    if not username or not password:
        return None, (jsonify(build_error_response('Username and password required')), 400)

    user = User.get_by_username(username)
    if not user or not user.check_password(password):
        logger.info('Failed login for %s', username)
        return None, (jsonify(build_error_response('Invalid username or password')), 401)

    return user, None


@auth_bp.route('/login', methods=['POST'])
def login():
    """Log in with a username and password, starting a session."""
    user, error = _authenticate()
    if error:
        return error

    login_user(user)
    user.update_last_login()

    return jsonify({
        'message': 'Login successful',
        'user': user.to_dict()
    })


@auth_bp.route('/logout', methods=['POST'])
@api_auth_required
def logout():
    """Logout handler."""
    logout_user()
    return jsonify({'message': 'Logged out successfully'})


@auth_bp.route('/token', methods=['POST'])
def issue_token():
    """
    Exchange a username and password for a bearer token.
    ---
    tags:
      - Authentication
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - username
            - password
          properties:
            username:
              type: string
            password:
              type: string
    responses:
      200:
        description: Access token issued
        schema:
          type: object
          properties:
            access_token:
              type: string
            token_type:
              type: string
              example: "Bearer"
      400:
        description: Missing username or password
      401:
        description: Invalid username or password
    """
    user, error = _authenticate()
    if error:
        return error

    return jsonify({
        'access_token': create_access_token(identity=user.id),
        'token_type': 'Bearer'
    })


@auth_bp.route('/api/me')
@api_auth_required
def get_current_user():
    """Get current user info (API)."""
    return jsonify(g.current_user.to_dict())
