"""Plugin settings managed by site administrators."""

from datetime import datetime
from typing import Any, Dict, Optional

from lms.services.elasticsearch_service import ElasticsearchService


class PluginSetting:
    """Stored settings for a named plugin (e.g. ``kaltura``)."""

    INDEX = 'plugin_settings'

    def __init__(self, data: Dict[str, Any]):
        self.name = data.get('name')
        self.settings = data.get('settings') or {}
        self.disabled = bool(data.get('disabled', False))
        self.updated_at = data.get('updated_at')

    @property
    def enabled(self) -> bool:
        return not self.disabled

    @classmethod
    def find(cls, name: str) -> Optional['PluginSetting']:
        """Get the stored setting for a plugin, or None."""
        result = ElasticsearchService().get(cls.INDEX, name)
        if not result:
            return None
        data = result['_source']
        data.setdefault('name', name)
        return cls(data)

    @classmethod
    def save(cls, name: str, settings: Dict[str, Any], disabled: bool = False) -> 'PluginSetting':
        """Create or replace the setting for a plugin."""
        data = {
            'name': name,
            'settings': settings,
            'disabled': disabled,
            'updated_at': datetime.utcnow().isoformat()
        }
        ElasticsearchService().index(cls.INDEX, name, data)
        return cls(data)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'settings': self.settings,
            'disabled': self.disabled,
            'updated_at': self.updated_at
        }
