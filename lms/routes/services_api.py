"""Third-party service configuration exposed to API clients."""

from flask import Blueprint, jsonify

from lms.auth import api_auth_required
from lms.services.kaltura_service import KalturaClient, kaltura_config_response

services_api_bp = Blueprint('services_api', __name__)


@services_api_bp.route('/kaltura', methods=['GET'])
@api_auth_required
def show_kaltura_config():
    """
    Get the Kaltura integration settings.
    ---
    tags:
      - Services
    security:
      - ApiKeyAuth: []
      - BearerAuth: []
    responses:
      200:
        description: Kaltura settings, or only enabled=false when not configured
        schema:
          type: object
          properties:
            enabled:
              type: boolean
            domain:
              type: string
              example: "kaltura.example.com"
            resource_domain:
              type: string
            rtmp_domain:
              type: string
            partner_id:
              type: string
              example: "420"
      401:
        description: Not authenticated
        schema:
          type: object
          properties:
            status:
              type: string
              example: "unauthorized"
    """
    return jsonify(kaltura_config_response(KalturaClient.config()))
