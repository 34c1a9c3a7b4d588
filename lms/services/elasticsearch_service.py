"""Elasticsearch Service for the LMS."""

import os
from typing import Dict, Any, Optional
from elasticsearch import Elasticsearch
from elasticsearch.exceptions import NotFoundError


class ElasticsearchService:
    """Service for Elasticsearch operations."""

    _instance = None
    _client = None
    INDEX_PREFIX = "lms_"

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._client is None:
            self._client = build_client()

    @property
    def client(self) -> Elasticsearch:
        """Get Elasticsearch client."""
        return self._client

    def _get_index_name(self, index: str) -> str:
        """Add prefix to index name if not already present."""
        if not index.startswith(self.INDEX_PREFIX):
            return f"{self.INDEX_PREFIX}{index}"
        return index

    def index(self, index: str, doc_id: str, document: Dict[str, Any]) -> Dict:
        """
        Index a document.

        Args:
            index: Index name
            doc_id: Document ID
            document: Document data

        Returns:
            Elasticsearch response
        """
        return self._client.index(
            index=self._get_index_name(index),
            id=doc_id,
            document=document,
            refresh=True
        )

    def get(self, index: str, doc_id: str) -> Optional[Dict]:
        """
        Get a document by ID.

        Returns:
            Document or None if not found
        """
        try:
            return self._client.get(index=self._get_index_name(index), id=doc_id)
        except NotFoundError:
            return None

    def search(self, index: str, query: Dict[str, Any], **kwargs) -> Dict:
        """Search for documents with a query DSL body."""
        return self._client.search(index=self._get_index_name(index), body=query, **kwargs)

    def update(self, index: str, doc_id: str, body: Dict[str, Any]) -> Dict:
        """Update a document with a 'doc' or 'script' body."""
        return self._client.update(
            index=self._get_index_name(index),
            id=doc_id,
            body=body,
            refresh=True
        )

    def delete(self, index: str, doc_id: str) -> bool:
        """
        Delete a document.

        Returns:
            True if deleted, False if not found
        """
        try:
            self._client.delete(index=self._get_index_name(index), id=doc_id, refresh=True)
            return True
        except NotFoundError:
            return False


def build_client() -> Elasticsearch:
    """Create an Elasticsearch client from the environment."""
    es_url = os.getenv('ELASTICSEARCH_URL', 'http://localhost:9200')
    es_user = os.getenv('ELASTICSEARCH_USER', 'elastic')
    es_password = os.getenv('ELASTICSEARCH_PASSWORD', 'elastic123')

    # Construct URL with credentials if not already included
    if es_user and es_password and 'http://' in es_url and '@' not in es_url:
        es_url = es_url.replace('http://', f'http://{es_user}:{es_password}@')

    return Elasticsearch([es_url], verify_certs=False, ssl_show_warn=False)
