#!/usr/bin/env python3
"""
Cleanup script to remove seeded combos via API endpoints.

Run:
    poetry run python seed/cleanup_combos.py \
      --api-id <API-ID> \
      --api-key <API-KEY> \
      [--all]

Without --all only combos whose item pair appears in seed/data/combos.json
are deleted.
"""

import argparse
import json
from pathlib import Path
import sys
from typing import Any, cast

from aws_lambda_powertools import Logger
import requests

logger = Logger(service="cleanup")

BASE_API_URL = "http://localhost:4566/restapis/{0}/snd/_user_request_"


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Cleanup seeded combos via Food Combo API")

    parser.add_argument(
        "--api-id",
        required=True,
        help="API Gateway ID (LocalStack)",
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="API key for x-api-key header (optional for local)",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Delete every combo, not only the seeded ones",
    )

    return parser.parse_args()


def load_seeded_pairs() -> set[tuple[str, str]]:
    data_file = Path(__file__).parent / "data" / "combos.json"
    with open(data_file, encoding="utf-8") as f:
        data = cast(dict[str, Any], json.load(f))

    return {(item["itemA"], item["itemB"]) for item in data.get("combos", [])}


def cleanup_combos() -> None:
    try:
        args = parse_args()

        headers: dict[str, str] = {}
        if args.api_key:
            headers["x-api-key"] = args.api_key

        base_url = BASE_API_URL.format(args.api_id)

        logger.info(
            "Starting cleanup process",
            extra={"api_base_url": base_url, "delete_all": args.all},
        )

        response = requests.get(
            f"{base_url}/combos",
            headers=headers,
            timeout=30,
        )

        if not response.ok:
            logger.error(
                "Failed to list combos",
                extra={"status": response.status_code, "response": response.text},
            )
            sys.exit(1)

        response_json = cast(dict[str, Any], response.json())
        combos = cast(list[dict[str, Any]], response_json.get("combos", []))

        if not args.all:
            seeded = load_seeded_pairs()
            combos = [c for c in combos if (c.get("itemA"), c.get("itemB")) in seeded]

        if not combos:
            logger.info("No combos found for cleanup")
            return

        for combo in combos:
            combo_id = combo["id"]

            delete_resp = requests.delete(
                f"{base_url}/delete/{combo_id}",
                headers=headers,
                timeout=30,
            )

            if delete_resp.ok:
                logger.info("Deleted combo", extra={"combo_id": combo_id})
            else:
                logger.error(
                    "Failed to delete combo",
                    extra={
                        "combo_id": combo_id,
                        "status": delete_resp.status_code,
                        "response": delete_resp.text,
                    },
                )

        logger.info("Cleanup completed successfully")

    except Exception as exc:
        logger.exception("Cleanup failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    cleanup_combos()
