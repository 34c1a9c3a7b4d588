"""Pytest configuration and fixtures."""

import os
import sys
import pytest
from unittest.mock import Mock, patch

# Add the project root to the path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from flask_jwt_extended import create_access_token

from lms import create_app
from lms.auth import User, APIKey
from lms.services.kaltura_service import KalturaClient

KALTURA_CONFIG = {
    'domain': 'kaltura.fake.local',
    'resource_domain': 'cdn.kaltura.fake.local',
    'rtmp_domain': 'rtmp-kaltura.fake.local',
    'partner_id': '420',
}


@pytest.fixture
def app():
    """Create and configure a test app."""
    os.environ['FLASK_ENV'] = 'testing'

    app = create_app('testing')
    app.config['SERVER_NAME'] = None  # Disable host matching for tests

    return app


@pytest.fixture
def client(app):
    """Create a test client."""
    return app.test_client()


@pytest.fixture
def app_context(app):
    """Create an application context."""
    with app.app_context():
        yield app


@pytest.fixture
def test_user():
    """An active user with the password 'password123'."""
    return User({
        'id': 'student-id',
        'username': 'student',
        'email': 'student@lms.local',
        'password_hash': User.hash_password('password123'),
        'is_admin': False,
        'created_at': '2024-01-01T00:00:00',
        'last_login': None
    })


@pytest.fixture
def user_store(test_user):
    """Resolve user lookups against test_user instead of Elasticsearch."""
    def get_by_id(user_id):
        return test_user if user_id == test_user.id else None

    def get_by_username(username):
        return test_user if username == test_user.username else None

    with patch.object(User, 'get_by_id', side_effect=get_by_id), \
            patch.object(User, 'get_by_username', side_effect=get_by_username), \
            patch.object(User, 'update_last_login'):
        yield test_user


@pytest.fixture
def authenticated_client(client, user_store):
    """Test client with a logged in session."""
    with client.session_transaction() as sess:
        sess['_user_id'] = str(user_store.id)
        sess['_fresh'] = True
    yield client


@pytest.fixture
def token_headers(app, user_store):
    """Authorization header carrying a bearer token for test_user."""
    with app.app_context():
        token = create_access_token(identity=user_store.id)
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def api_key_headers(app, user_store):
    """X-API-Key header for a key owned by test_user."""
    key_obj = APIKey({
        'id': 'key-id',
        'user_id': user_store.id,
        'label': 'Test Key',
        'key_prefix': 'lms_12345678'
    })

    def get_by_key(key):
        return key_obj if key == 'lms_valid' else None

    with patch.object(APIKey, 'get_by_key', side_effect=get_by_key), \
            patch.object(APIKey, 'update_last_used'):
        yield {app.config['API_KEY_HEADER']: 'lms_valid'}


@pytest.fixture
def kaltura_config():
    """Stub the Kaltura configuration accessor with a full configuration."""
    with patch.object(KalturaClient, 'config', return_value=dict(KALTURA_CONFIG)) as config:
        yield config


@pytest.fixture
def mock_es():
    """Mock Elasticsearch service shared by the models."""
    es = Mock()
    es.get = Mock(return_value=None)
    es.search = Mock(return_value={'hits': {'total': {'value': 0}, 'hits': []}})
    es.index = Mock()
    es.update = Mock()
    es.delete = Mock(return_value=True)
    with patch('lms.auth.ElasticsearchService', return_value=es), \
            patch('lms.models.plugin_setting.ElasticsearchService', return_value=es):
        yield es
