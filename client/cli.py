"""
Command-line front end.

    python -m client.cli photo.jpg --gender female --out results/
"""
import argparse
import sys
from typing import List, Optional

from config import Config
from client.api import FutureFaceClient
from client.state import GenerationSession, SourceImage, directory_downloader
from common.models import Gender
from utils.logger import get_logger

logger = get_logger("client.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate the adult version of a child's photo.")
    parser.add_argument("photo", help="JPEG or PNG photo of the child")
    parser.add_argument("--gender", required=True, choices=[g.value for g in Gender])
    parser.add_argument("--out", default=".", help="Directory for ai_future_face.<ext> (default: current directory)")
    parser.add_argument("--api-url", default=Config.FUTURE_FACE_API_URL, help="Base URL of the future-face API")
    return parser


def main(argv: Optional[List[str]] = None, session: Optional[GenerationSession] = None) -> int:
    args = build_parser().parse_args(argv)

    if session is None:
        session = GenerationSession(
            api_client=FutureFaceClient(base_url=args.api_url),
            downloader=directory_downloader(args.out),
        )

    try:
        source = SourceImage.from_path(args.photo)
    except OSError as e:
        print(f"Cannot read {args.photo}: {e}", file=sys.stderr)
        return 1

    if not session.select_image(source):
        print(session.error, file=sys.stderr)
        return 1
    session.select_gender(args.gender)

    if session.generate() is None:
        print(session.error, file=sys.stderr)
        return 1

    path = session.save()
    print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
