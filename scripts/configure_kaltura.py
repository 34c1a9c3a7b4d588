#!/usr/bin/env python
"""Script to store or disable the Kaltura plugin setting."""

import argparse
import json
import os
import sys

# Add the parent directory to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lms import create_app
from lms.models.plugin_setting import PluginSetting
from lms.services.kaltura_service import PLUGIN_NAME


def main():
    parser = argparse.ArgumentParser(description='Configure the Kaltura integration')
    parser.add_argument('--domain', help='Kaltura API domain')
    parser.add_argument('--resource-domain', help='Kaltura CDN domain')
    parser.add_argument('--rtmp-domain', help='Kaltura RTMP domain')
    parser.add_argument('--partner-id', help='Kaltura partner id')
    parser.add_argument('--disable', action='store_true', help='Keep settings but disable Kaltura')
    args = parser.parse_args()

    app = create_app()

    with app.app_context():
        existing = PluginSetting.find(PLUGIN_NAME)
        settings = dict(existing.settings) if existing else {}

        updates = {
            'domain': args.domain,
            'resource_domain': args.resource_domain,
            'rtmp_domain': args.rtmp_domain,
            'partner_id': args.partner_id,
        }
        settings.update({key: value for key, value in updates.items() if value is not None})

        setting = PluginSetting.save(PLUGIN_NAME, settings, disabled=args.disable)

    print(json.dumps(setting.to_dict(), indent=2))


if __name__ == '__main__':
    main()
