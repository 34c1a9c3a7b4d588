#!/usr/bin/env python3
"""
Standalone script to initialize Elasticsearch indices.
Run this before starting the application for the first time.
"""

import os
import sys
import time

# Add the parent directory to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lms.elasticsearch.init_indices import init_elasticsearch
from lms.services.elasticsearch_service import build_client


def main():
    """Main entry point."""
    es = build_client()

    print("\nLMS - Initialize Elasticsearch")
    print("=" * 50)

    for attempt in range(1, 31):
        if es.ping():
            break
        print(f"  Waiting for Elasticsearch ({attempt}/30)...")
        time.sleep(2)
    else:
        print("✗ Cannot connect to Elasticsearch")
        sys.exit(1)

    init_elasticsearch(es)
    print("✓ Elasticsearch initialization complete")


if __name__ == "__main__":
    main()
