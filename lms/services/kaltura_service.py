"""Kaltura video service configuration lookup."""

import logging
from typing import Any, Dict, Optional

from flask import current_app

from lms.models.plugin_setting import PluginSetting

logger = logging.getLogger(__name__)

PLUGIN_NAME = 'kaltura'
PUBLIC_FIELDS = ('domain', 'resource_domain', 'rtmp_domain', 'partner_id')


class KalturaClient:
    """Accessor for the site's Kaltura integration settings."""

    @classmethod
    def config(cls) -> Optional[Dict[str, Any]]:
        """
        Resolve the Kaltura configuration.

        A stored ``kaltura`` plugin setting wins over the KALTURA_* app
        config. Disabled or incomplete settings resolve to None.

        Returns:
            Settings mapping, or None when Kaltura is not usable
        """
        setting = PluginSetting.find(PLUGIN_NAME)
        if setting is not None:
            if not setting.enabled:
                logger.debug('Kaltura plugin setting is disabled')
                return None
            settings = dict(setting.settings)
            source = 'plugin setting'
        else:
            settings = cls._settings_from_app_config()
            if settings is None:
                logger.debug('Kaltura is not enabled in app config')
                return None
            source = 'app config'

        missing = [field for field in PUBLIC_FIELDS if not settings.get(field)]
        if missing:
            logger.warning('Kaltura %s is incomplete, missing: %s', source, ', '.join(missing))
            return None

        settings['partner_id'] = str(settings['partner_id'])
        logger.debug('Kaltura configuration loaded from %s', source)
        return settings

    @staticmethod
    def _settings_from_app_config() -> Optional[Dict[str, Any]]:
        app_config = current_app.config
        if not app_config.get('KALTURA_ENABLED'):
            return None
        return {
            'domain': app_config.get('KALTURA_DOMAIN'),
            'resource_domain': app_config.get('KALTURA_RESOURCE_DOMAIN'),
            'rtmp_domain': app_config.get('KALTURA_RTMP_DOMAIN'),
            'partner_id': app_config.get('KALTURA_PARTNER_ID'),
        }


def kaltura_config_response(config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Build the services API body for a resolved configuration."""
    if not config:
        return {'enabled': False}

    response = {'enabled': True}
    for field in PUBLIC_FIELDS:
        response[field] = config.get(field)
    return response
