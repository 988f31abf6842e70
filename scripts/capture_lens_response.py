from __future__ import annotations

import argparse
import json
from pathlib import Path

from dotenv import load_dotenv

_REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(_REPO_ROOT / ".env", override=False)

from lens_ocr.container import build_services
from lens_ocr.domain.errors import LensOCRError
from lens_ocr.domain.response_parser import parse_response
from lens_ocr.services.image_loader import load_image


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Upload one image to Google Lens and save the raw response body."
    )
    parser.add_argument("--image", required=True, help="Path to the image file.")
    parser.add_argument("--out", required=True, help="Where to write the response body.")
    args = parser.parse_args()

    transport = build_services()["transport"]
    raw = transport.submit(load_image(args.image))
    out_path = Path(args.out)
    out_path.write_text(raw.body, encoding="utf-8")
    print(f"Saved {len(raw.body)} characters from {raw.url or 'upload'} to {out_path}")

    try:
        result = parse_response(raw)
    except LensOCRError as exc:
        print(json.dumps({"stage": exc.stage, "error": str(exc)}, indent=2))
        return
    print(json.dumps({"lines": result.lines}, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
