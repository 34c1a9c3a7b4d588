"""Initialize Elasticsearch indices."""

import logging
import os

from elasticsearch.exceptions import RequestError

from lms.elasticsearch.mappings import INDICES
from lms.services.elasticsearch_service import build_client

logger = logging.getLogger(__name__)


def init_elasticsearch(es=None):
    """Create missing indices and the default admin user."""
    es = es or build_client()

    if not es.ping():
        logger.warning('Elasticsearch is not available, skipping index setup')
        return False

    logger.info('Initializing Elasticsearch indices')

    for index_name, mapping in INDICES.items():
        try:
            if not es.indices.exists(index=index_name):
                es.indices.create(index=index_name, body=mapping)
                logger.info('Created index: %s', index_name)
            else:
                logger.debug('Index already exists: %s', index_name)
        except RequestError as e:
            logger.error('Error creating index %s: %s', index_name, e)

    create_default_admin()
    return True


def create_default_admin():
    """Create default admin user if it doesn't exist."""
    from lms.auth import User

    admin_username = os.getenv('DEFAULT_ADMIN_USER', 'admin')
    admin_password = os.getenv('DEFAULT_ADMIN_PASSWORD', 'admin123')

    if User.get_by_username(admin_username):
        logger.debug('Admin user already exists: %s', admin_username)
        return None

    user, _ = User.create(
        username=admin_username,
        email=f'{admin_username}@localhost',
        password=admin_password,
        is_admin=True
    )
    logger.info('Created default admin user: %s', admin_username)
    return user
