from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from lens_ocr.domain.errors import LensOCRError, NoTextFoundError, ServiceError

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_NO_TEXT = 3
_BODY_PREVIEW_CHARS = 500


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lens-ocr",
        description="Extract text from an image with Google Lens.",
    )
    parser.add_argument("image", help="Path to the image file.")
    parser.add_argument(
        "-c",
        "--clipboard",
        action="store_true",
        help="Copy the recognized text to the clipboard instead of printing it.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log requests and timings to stderr."
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv(Path.cwd() / ".env", override=False)
    args = build_parser().parse_args(argv)

    try:
        from lens_ocr.settings import LENS_LOG_LEVEL
        from lens_ocr import container
        from lens_ocr.services.image_loader import load_image

        logging.basicConfig(
            level=logging.DEBUG if args.verbose else LENS_LOG_LEVEL,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )
        services = container.build_services()
        image = load_image(args.image)
        result = services["ocr_service"].recognize(image)
        if args.clipboard:
            services["clipboard"].copy_text(result.text)
        else:
            print(f"{result.text}\n")
    except NoTextFoundError as exc:
        print(_format_error(exc), file=sys.stderr)
        return EXIT_NO_TEXT
    except LensOCRError as exc:
        print(_format_error(exc), file=sys.stderr)
        return EXIT_FAILURE
    return EXIT_OK


def _format_error(exc: LensOCRError) -> str:
    message = f"error [{exc.stage}]: {exc}"
    if isinstance(exc, ServiceError) and exc.body:
        body = exc.body.strip()
        if len(body) > _BODY_PREVIEW_CHARS:
            body = body[:_BODY_PREVIEW_CHARS] + "..."
        message = f"{message}\n{body}"
    return message


if __name__ == "__main__":
    raise SystemExit(main())
