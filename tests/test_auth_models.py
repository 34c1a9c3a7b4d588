"""Tests for the user and API key models."""

from lms.auth import User, APIKey


class TestUser:
    """Test the user model."""

    def test_check_password(self, test_user):
        assert test_user.check_password('password123')
        assert not test_user.check_password('wrong')

    def test_check_password_without_hash(self):
        assert not User({'id': 'x'}).check_password('anything')

    def test_to_dict_hides_hash(self, test_user):
        data = test_user.to_dict()
        assert data['username'] == 'student'
        assert 'password_hash' not in data

    def test_get_by_id_missing(self, mock_es):
        assert User.get_by_id('nobody') is None

    def test_get_by_id(self, mock_es):
        mock_es.get.return_value = {'_id': 'u1', '_source': {'username': 'teacher'}}
        user = User.get_by_id('u1')
        assert user.id == 'u1'
        assert user.username == 'teacher'

    def test_create_existing_user(self, mock_es):
        mock_es.search.return_value = {'hits': {'total': {'value': 1}, 'hits': []}}
        user, error = User.create('student', 'student@lms.local', 'password123')
        assert user is None
        assert error == 'User already exists'
        mock_es.index.assert_not_called()

    def test_create(self, mock_es):
        user, error = User.create('teacher', 'teacher@lms.local', 'password123', is_admin=True)
        assert error is None
        assert user.is_admin
        assert user.check_password('password123')
        assert mock_es.index.call_args[0][0] == 'users'


class TestAPIKey:
    """Test the API key model."""

    def test_generate_key_uses_prefix(self, app_context):
        key = APIKey.generate_key()
        assert key.startswith('lms_')
        assert len(key) == len('lms_') + 64

    def test_create_stores_only_hash(self, app_context, mock_es):
        key, key_obj = APIKey.create('student-id', 'CI')
        document = mock_es.index.call_args[0][2]
        assert document['key_hash'] == APIKey.hash_key(key)
        assert key not in document.values()
        assert key_obj.key_prefix == key[:12]

    def test_get_by_key_missing(self, mock_es):
        assert APIKey.get_by_key('lms_unknown') is None

    def test_revoke_requires_owner(self, mock_es):
        mock_es.get.return_value = {'_id': 'k1', '_source': {'user_id': 'someone-else'}}
        assert APIKey.revoke('k1', 'student-id') is False
        mock_es.delete.assert_not_called()

    def test_revoke(self, mock_es):
        mock_es.get.return_value = {'_id': 'k1', '_source': {'user_id': 'student-id'}}
        assert APIKey.revoke('k1', 'student-id') is True
        mock_es.delete.assert_called_once_with('api_keys', 'k1')
