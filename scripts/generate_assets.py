#!/usr/bin/env python3
"""
Generate the Expo branding bundle from a local logo, without the web app.

Usage:
  python scripts/generate_assets.py path/to/logo.png -c "#0066FF" --splash --app-name "Demo"

Writes a zip (default: expo-assets.zip) containing:
  - assets/branding/icon.png (1024x1024)
  - assets/branding/adaptive-icon-foreground.png (1024x1024)
  - assets/branding/adaptive-icon-background.png (1024x1024)
  - assets/branding/android-icon-monochrome.png (1024x1024)
  - assets/branding/splash.png (1242x2436, with --splash)
  - assets/branding/favicon.png (48x48)
  - app.json.snippet, README.txt
"""
import argparse
import logging
import mimetypes
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from branding.validation import UploadedFile, ValidationError, validate_upload  # noqa: E402
from branding.transforms import AssetGenerationError, generate  # noqa: E402
from branding.packaging import ArchiveError, build_archive  # noqa: E402


logger = logging.getLogger("generate_assets")


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Generate Expo branding assets from a square PNG logo.")
    p.add_argument("source", type=Path, help="Square PNG logo, at least 1024x1024")
    p.add_argument("-c", "--background-color", default="#FFFFFF", help="Background color as #RRGGBB")
    p.add_argument("--splash", action="store_true", help="Also generate splash.png")
    p.add_argument("--app-name", default="My App")
    p.add_argument("-o", "--output", type=Path, default=Path("expo-assets.zip"))
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(message)s")

    src = args.source
    if not src.exists():
        logger.error("Source not found: %s", src)
        return 1

    data = src.read_bytes()
    content_type = mimetypes.guess_type(src.name)[0] or "application/octet-stream"

    try:
        source = validate_upload(UploadedFile(content_type=content_type, size=len(data), data=data), args.background_color)
        bundle = generate(source.image, args.background_color, args.splash)
        archive = build_archive(bundle, args.background_color, args.app_name)
    except ValidationError as e:
        logger.error("%s", e.message)
        return 2
    except (AssetGenerationError, ArchiveError) as e:
        logger.error("%s", e)
        return 1

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_bytes(archive)
    logger.info("Generated %s (%d bytes)", args.output, len(archive))
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
