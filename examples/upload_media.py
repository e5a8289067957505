#!/usr/bin/env python
"""
Example: Upload a media file with the chunked uploader and optionally post it.

This example demonstrates:
- Loading credentials from environment, .env or a JSON file
- Creating a client using the factory
- Uploading media through INIT/APPEND/FINALIZE
- Creating a post with the uploaded media attached

Usage:
    # Upload only
    python examples/upload_media.py path/to/video.mp4

    # Upload and post
    python examples/upload_media.py path/to/image.png --text "Check out this image!"

Requirements:
    Set environment variables, a .env file or credentials/x_config.json:
    - X_API_KEY
    - X_API_SECRET
    - X_ACCESS_TOKEN
    - X_ACCESS_TOKEN_SECRET
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from xapi_client.config import ConfigManager
from xapi_client.exceptions import (
    AuthenticationError,
    ConfigurationError,
    MediaValidationError,
    XClientError,
)
from xapi_client.factory import XClientFactory
from xapi_client.services.media_service import MediaService
from xapi_client.services.post_service import PostService


def main() -> int:
    """Main entry point for the example."""
    parser = argparse.ArgumentParser(description="Upload media to X with chunked upload")
    parser.add_argument("path", type=Path, help="Path to an image or video file")
    parser.add_argument("--text", help="Post text; when given, a post is created with the media")
    parser.add_argument(
        "--mime-type",
        help="Override the MIME type guessed from the file name",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to credentials JSON file (default: credentials/x_config.json)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every upload segment")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ConfigManager(credential_path=args.config)
        client = XClientFactory.create_from_config(config)
        media_service = MediaService(client)

        print(f"Uploading {args.path}...")
        result = media_service.upload_file(args.path, mime_type=args.mime_type)
        print(f"Media uploaded: {result.media_id_string} ({result.size_bytes} bytes)")
        if result.requires_processing and result.processing_info is not None:
            print(
                f"   Processing state: {result.processing_info.state}, "
                f"check again after {result.processing_info.check_after_secs}s"
            )
            if args.text:
                print("Media is still processing; skipping post creation.")
                return 0

        if args.text:
            post = PostService(client).create_post(args.text, media_ids=[result.media_id_string])
            print(f"Post created: https://x.com/i/web/status/{post.id}")
        return 0

    except ConfigurationError as e:
        print(f"Configuration error: {e}")
        print("\nPlease set X_API_KEY, X_API_SECRET, X_ACCESS_TOKEN and X_ACCESS_TOKEN_SECRET.")
        return 1

    except AuthenticationError as e:
        print(f"Authentication error: {e}")
        return 1

    except MediaValidationError as e:
        print(f"Media validation error: {e}")
        return 1

    except XClientError as e:
        print(f"X API error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
