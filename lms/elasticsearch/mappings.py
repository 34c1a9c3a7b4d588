"""Elasticsearch index mappings for the LMS."""


# Users Index Mapping
USERS_MAPPING = {
    "settings": {
        "number_of_shards": 1,
        "number_of_replicas": 0
    },
    "mappings": {
        "properties": {
            "id": {"type": "keyword"},
            "username": {
                "type": "text",
                "fields": {
                    "keyword": {"type": "keyword"}
                }
            },
            "email": {
                "type": "text",
                "fields": {
                    "keyword": {"type": "keyword"}
                }
            },
            "password_hash": {"type": "keyword", "index": False},
            "is_admin": {"type": "boolean"},
            "created_at": {"type": "date"},
            "last_login": {"type": "date"}
        }
    }
}


# API Keys Index Mapping
API_KEYS_MAPPING = {
    "settings": {
        "number_of_shards": 1,
        "number_of_replicas": 0
    },
    "mappings": {
        "properties": {
            "id": {"type": "keyword"},
            "user_id": {"type": "keyword"},
            "label": {"type": "text"},
            "key_hash": {"type": "keyword"},
            "key_prefix": {"type": "keyword"},
            "created_at": {"type": "date"},
            "last_used": {"type": "date"}
        }
    }
}


# Plugin Settings Index Mapping, one document per plugin name
PLUGIN_SETTINGS_MAPPING = {
    "settings": {
        "number_of_shards": 1,
        "number_of_replicas": 0
    },
    "mappings": {
        "properties": {
            "name": {"type": "keyword"},
            "settings": {"type": "object", "enabled": False},
            "disabled": {"type": "boolean"},
            "updated_at": {"type": "date"}
        }
    }
}


# All indices with their mappings
INDICES = {
    "lms_users": USERS_MAPPING,
    "lms_api_keys": API_KEYS_MAPPING,
    "lms_plugin_settings": PLUGIN_SETTINGS_MAPPING
}
