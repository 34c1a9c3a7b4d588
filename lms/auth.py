import hashlib
import logging
import secrets
from datetime import datetime
from functools import wraps

import bcrypt
from flask import request, current_app, g
from flask_jwt_extended import verify_jwt_in_request, get_jwt_identity
from flask_login import UserMixin, current_user

from lms.services.elasticsearch_service import ElasticsearchService
from lms.utils.request_helpers import unauthorized_response

logger = logging.getLogger(__name__)


class User(UserMixin):
    """User model for authentication."""

    def __init__(self, user_data):
        self.id = user_data.get('id')
        self.username = user_data.get('username')
        self.email = user_data.get('email')
        self.password_hash = user_data.get('password_hash')
        self.created_at = user_data.get('created_at')
        self.last_login = user_data.get('last_login')
        self.is_admin = user_data.get('is_admin', False)

    def check_password(self, password):
        """Verify password against hash."""
        if not self.password_hash:
            return False
        return bcrypt.checkpw(
            password.encode('utf-8'),
            self.password_hash.encode('utf-8')
        )

    @staticmethod
    def hash_password(password):
        """Hash a password."""
        return bcrypt.hashpw(
            password.encode('utf-8'),
            bcrypt.gensalt()
        ).decode('utf-8')

    @classmethod
    def create(cls, username, email, password, is_admin=False):
        """Create a new user."""
        es = ElasticsearchService()

        existing = es.search('users', {
            'query': {
                'bool': {
                    'should': [
                        {'term': {'username.keyword': username}},
                        {'term': {'email.keyword': email}}
                    ]
                }
            }
        })

        if existing['hits']['total']['value'] > 0:
            return None, "User already exists"

        user_id = hashlib.sha256(username.encode()).hexdigest()[:16]
        user_data = {
            'id': user_id,
            'username': username,
            'email': email,
            'password_hash': cls.hash_password(password),
            'is_admin': is_admin,
            'created_at': datetime.utcnow().isoformat(),
            'last_login': None
        }

        es.index('users', user_id, user_data)
        return cls(user_data), None

    @classmethod
    def get_by_id(cls, user_id):
        """Get user by ID."""
        result = ElasticsearchService().get('users', user_id)
        if not result:
            return None
        user_data = result['_source']
        user_data['id'] = result['_id']
        return cls(user_data)

    @classmethod
    def get_by_username(cls, username):
        """Get user by username."""
        es = ElasticsearchService()
        result = es.search('users', {
            'query': {'term': {'username.keyword': username}}
        })

        if result['hits']['total']['value'] > 0:
            hit = result['hits']['hits'][0]
            user_data = hit['_source']
            user_data['id'] = hit['_id']
            return cls(user_data)
        return None

    def update_last_login(self):
        """Update last login timestamp."""
        es = ElasticsearchService()
        es.update('users', self.id, {
            'doc': {'last_login': datetime.utcnow().isoformat()}
        })

    def to_dict(self):
        """Convert user to dictionary."""
        return {
            'id': self.id,
            'username': self.username,
            'email': self.email,
            'is_admin': self.is_admin,
            'created_at': self.created_at,
            'last_login': self.last_login
        }


class APIKey:
    """API Key model."""

    def __init__(self, key_data):
        self.id = key_data.get('id')
        self.user_id = key_data.get('user_id')
        self.label = key_data.get('label')
        self.key_hash = key_data.get('key_hash')
        self.key_prefix = key_data.get('key_prefix')
        self.created_at = key_data.get('created_at')
        self.last_used = key_data.get('last_used')

    @staticmethod
    def generate_key():
        """Generate a new API key."""
        prefix = current_app.config.get('API_KEY_PREFIX', 'lms_')
        return prefix + secrets.token_hex(32)

    @staticmethod
    def hash_key(key):
        """Hash an API key."""
        return hashlib.sha256(key.encode()).hexdigest()

    @classmethod
    def create(cls, user_id, label):
        """Create a new API key. The plain key is only returned here."""
        es = ElasticsearchService()

        key = cls.generate_key()
        key_id = secrets.token_hex(8)
        prefix = current_app.config.get('API_KEY_PREFIX', 'lms_')

        key_data = {
            'id': key_id,
            'user_id': user_id,
            'label': label,
            'key_hash': cls.hash_key(key),
            'key_prefix': key[:len(prefix) + 8],
            'created_at': datetime.utcnow().isoformat(),
            'last_used': None
        }

        es.index('api_keys', key_id, key_data)
        return key, cls(key_data)

    @classmethod
    def get_by_key(cls, key):
        """Get API key by the key value."""
        es = ElasticsearchService()
        result = es.search('api_keys', {
            'query': {'term': {'key_hash': cls.hash_key(key)}}
        })

        if result['hits']['total']['value'] > 0:
            hit = result['hits']['hits'][0]
            key_data = hit['_source']
            key_data['id'] = hit['_id']
            return cls(key_data)
        return None

    @classmethod
    def get_by_user(cls, user_id):
        """Get all API keys for a user."""
        es = ElasticsearchService()
        result = es.search('api_keys', {
            'query': {'term': {'user_id': user_id}},
            'size': 100
        })

        keys = []
        for hit in result['hits']['hits']:
            key_data = hit['_source']
            key_data['id'] = hit['_id']
            keys.append(cls(key_data))
        return keys

    @classmethod
    def revoke(cls, key_id, user_id):
        """Revoke an API key owned by user_id."""
        es = ElasticsearchService()
        result = es.get('api_keys', key_id)
        if not result or result['_source'].get('user_id') != user_id:
            return False
        return es.delete('api_keys', key_id)

    def update_last_used(self):
        """Update last used timestamp."""
        es = ElasticsearchService()
        es.update('api_keys', self.id, {
            'doc': {'last_used': datetime.utcnow().isoformat()}
        })

    def to_dict(self):
        """Convert to dictionary (without hash)."""
        return {
            'id': self.id,
            'label': self.label,
            'key_prefix': self.key_prefix,
            'created_at': self.created_at,
            'last_used': self.last_used
        }


def _user_from_api_key(api_key):
    key_obj = APIKey.get_by_key(api_key)
    if not key_obj:
        return None, None
    user = User.get_by_id(key_obj.user_id)
    if not user:
        return None, None
    key_obj.update_last_used()
    return user, key_obj


def _user_from_bearer_token():
    # Raises on a malformed or expired token; the JWT loaders answer with 401.
    verify_jwt_in_request()
    return User.get_by_id(get_jwt_identity())


def api_auth_required(f):
    """Decorator accepting an API key, a bearer token or a session login."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        api_key = request.headers.get(current_app.config.get('API_KEY_HEADER', 'X-API-Key'))

        if api_key:
            user, key_obj = _user_from_api_key(api_key)
            if not user:
                logger.info('Rejected API key for %s', request.path)
                return unauthorized_response()
            g.current_user = user
            g.api_key = key_obj
            return f(*args, **kwargs)

        if request.headers.get('Authorization', '').startswith('Bearer '):
            user = _user_from_bearer_token()
            if not user:
                logger.info('Bearer token for unknown user on %s', request.path)
                return unauthorized_response()
            g.current_user = user
            g.api_key = None
            return f(*args, **kwargs)

        if current_user.is_authenticated:
            g.current_user = current_user
            g.api_key = None
            return f(*args, **kwargs)

        logger.info('Unauthenticated request to %s', request.path)
        return unauthorized_response()

    return decorated_function
