from flask import Blueprint, jsonify, g

from lms.auth import APIKey, api_auth_required
from lms.utils.request_helpers import get_json_or_form, build_error_response

api_keys_bp = Blueprint('api_keys', __name__)


@api_keys_bp.route('', methods=['GET'])
@api_auth_required
def list_keys():
    """List all API keys for current user."""
    keys = APIKey.get_by_user(g.current_user.id)
    return jsonify({
        'api_keys': [key.to_dict() for key in keys]
    })


@api_keys_bp.route('', methods=['POST'])
@api_auth_required
def create_key():
    """Create a new API key."""
    label = get_json_or_form('label') or 'Unnamed Key'

    key, key_obj = APIKey.create(g.current_user.id, label)

    return jsonify({
        'message': 'API key created successfully',
        'api_key': key,  # Only returned once!
        'key_info': key_obj.to_dict()
    }), 201


@api_keys_bp.route('/<key_id>', methods=['DELETE'])
@api_auth_required
def revoke_key(key_id):
    """Revoke an API key."""
    if not APIKey.revoke(key_id, g.current_user.id):
        return jsonify(build_error_response('Key not found or not authorized')), 404

    return jsonify({'message': 'API key revoked successfully'})
