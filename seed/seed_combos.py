#!/usr/bin/env python3
"""
Seed script to populate the system via API endpoints.

Run:
    poetry run python seed/seed_combos.py \
      --api-id <API-ID> \
      --api-key <API-KEY>

Images are read from seed/images/. A 1x1 placeholder PNG is sent for
any image file that is not present.
"""

import argparse
import base64
import json
from pathlib import Path
import sys
from typing import Any, cast

from aws_lambda_powertools import Logger
import requests

logger = Logger(service="seed")


BASE_API_URL = "http://localhost:4566/restapis/{0}/snd/_user_request_"

PLACEHOLDER_PNG = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed combos via Food Combo API")

    parser.add_argument(
        "--api-id",
        required=True,
        help="Base API ID (e.g. LocalStack API Gateway ID)",
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="API key for x-api-key header (optional for local)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=5,
        help="Number of combos to seed",
    )

    return parser.parse_args()


def load_sample_data() -> dict[str, Any]:
    data_file = Path(__file__).parent / "data" / "combos.json"
    with open(data_file, encoding="utf-8") as f:
        return cast(dict[str, Any], json.load(f))


def encode_image(images_dir: Path, image_name: str) -> str:
    image_path = images_dir / image_name

    if image_path.exists():
        image_bytes = image_path.read_bytes()
    else:
        logger.warning("Image file not found, using placeholder", extra={"path": str(image_path)})
        image_bytes = PLACEHOLDER_PNG

    return base64.b64encode(image_bytes).decode("utf-8")


def seed_combos() -> None:
    try:
        args = parse_args()
        data = load_sample_data()

        images_dir = Path(__file__).parent / "images"

        headers: dict[str, str] = {
            "Content-Type": "application/json",
        }
        if args.api_key:
            headers["x-api-key"] = args.api_key

        base_url = BASE_API_URL.format(args.api_id)

        logger.info(
            "Starting seeding process",
            extra={"api_base_url": base_url},
        )

        for item in cast(list[dict[str, Any]], data.get("combos", []))[: args.limit]:
            payload: dict[str, Any] = {
                "itemA": item["itemA"],
                "itemB": item["itemB"],
                "imageA": encode_image(images_dir, item["imageA"]),
                "imageB": encode_image(images_dir, item["imageB"]),
            }

            response = requests.post(
                f"{base_url}/create",
                headers=headers,
                json=payload,
                timeout=30,
            )

            response_json = cast(dict[str, Any], response.json())

            if response.status_code == 201:
                logger.info(
                    "Seeded combo",
                    extra={
                        "combo": f"{item['itemA']} + {item['itemB']}",
                        "combo_id": response_json.get("id"),
                    },
                )
            else:
                logger.error(
                    "Failed to seed combo",
                    extra={
                        "combo": f"{item['itemA']} + {item['itemB']}",
                        "status": response.status_code,
                        "response": response_json,
                    },
                )

        logger.info("Seeding completed")

        list_response = requests.get(
            f"{base_url}/combos",
            headers=headers,
            timeout=30,
        )

        logger.info(
            "List combos response",
            extra={
                "status": list_response.status_code,
                "count": list_response.json().get("count") if list_response.ok else None,
            },
        )

    except Exception as exc:
        logger.exception("Seeding failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    seed_combos()
