"""CLI commands for ingredient recognition."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from app.config import settings
from app.services.recognition_service import IngredientRecognitionService
from app.services.vision_client import VisionClient


def recognize(image_path: str, url: str | None = None) -> None:
    """Recognize ingredients in a local image and print the outcome as JSON."""
    if not Path(image_path).is_file():
        print(f"Error: Image not found: {image_path}")
        sys.exit(1)

    service = IngredientRecognitionService(vision_client=VisionClient(base_url=url))
    outcome = asyncio.run(service.recognize(image_path))

    print(json.dumps(outcome.model_dump(mode="json"), indent=2))


def probe(url: str | None = None) -> None:
    """Check whether the vision service is reachable."""
    client = VisionClient(base_url=url)
    healthy = asyncio.run(client.probe())

    print(f"Vision service at {client.base_url}: {'healthy' if healthy else 'unavailable'}")
    if not healthy:
        sys.exit(1)


def main():
    parser = argparse.ArgumentParser(description="Ingredient recognition CLI")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    service_options = argparse.ArgumentParser(add_help=False)
    service_options.add_argument(
        "--url", help="Vision service base URL (defaults to RECOGNIZE_API_URL)"
    )

    # recognize command
    recognize_parser = subparsers.add_parser(
        "recognize", parents=[service_options], help="Recognize ingredients in an image"
    )
    recognize_parser.add_argument("image", help="Path to the image file")

    # probe command
    subparsers.add_parser(
        "probe", parents=[service_options], help="Check vision service availability"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "recognize":
        recognize(args.image, args.url)
    elif args.command == "probe":
        probe(args.url)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
