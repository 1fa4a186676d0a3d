#!/usr/bin/env python3
import argparse
import sys
from dataclasses import replace

from keepup.services import InventoryService
from keepup.utils.env_config import load_env_config
from keepup.utils.logging import setup_logger


def main() -> int:
    parser = argparse.ArgumentParser(description="Container Image Inventory Scanner")
    parser.add_argument('--dry-run', action='store_true', help='Print the report instead of sending it to the API')
    parser.add_argument('--rules-file', help='Detection rules file, overrides RULES_FILE')
    parser.add_argument('--include-helm-releases', action='store_true', help='Also report charts of Helm releases')
    args = parser.parse_args()
    logger = setup_logger("ImageScanner")
    try:
        env_config = load_env_config()
        if args.rules_file:
            env_config = replace(env_config, rules_file=args.rules_file)
        if args.include_helm_releases:
            env_config = replace(env_config, include_helm_releases=True)
        logger.info(f"Starting image scan with rules file: {env_config.rules_file}")
        service = InventoryService(env_config, args.dry_run)
        service.run()
        logger.info("Image scan completed successfully")
        return 0
    except Exception as e:
        logger.error(f"Image scan failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
