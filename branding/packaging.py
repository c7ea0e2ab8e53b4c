from __future__ import annotations

import io
import json
import zipfile

from .transforms import ASSET_FILENAMES, OutputBundle


BRANDING_DIR = "assets/branding"
SNIPPET_NAME = "app.json.snippet"
README_NAME = "README.txt"


class ArchiveError(Exception):
    pass


def asset_path(field: str) -> str:
    return f"./{BRANDING_DIR}/{ASSET_FILENAMES[field]}"


def app_json_snippet(background_color: str, app_name: str) -> str:
    snippet = {
        "expo": {
            "name": app_name,
            "icon": asset_path("icon"),
            "android": {
                "adaptiveIcon": {
                    "foregroundImage": asset_path("adaptive_icon_foreground"),
                    "backgroundColor": background_color,
                },
            },
            "splash": {
                "image": asset_path("splash"),
                "resizeMode": "contain",
                "backgroundColor": background_color,
            },
            "web": {
                "favicon": asset_path("favicon"),
            },
        },
    }
    return json.dumps(snippet, indent=2, ensure_ascii=False)


def readme_content(app_name: str) -> str:
    return f"""# {app_name} - Expo Assets

This folder contains all the branding assets required for your Expo project.

## Installation

1. Copy the `{BRANDING_DIR}` folder into your Expo project root directory.

2. Merge the `{SNIPPET_NAME}` content into your project's `app.json` file:
   - Copy the `expo` object properties from the snippet
   - Paste them into your existing `app.json`

3. Rebuild your app:
   ```bash
   eas build
   ```

## Asset Files

- **icon.png** (1024x1024) - Main app icon
- **adaptive-icon-foreground.png** (1024x1024) - Android adaptive icon foreground with 20% padding
- **adaptive-icon-background.png** (1024x1024) - Android adaptive icon background
- **android-icon-monochrome.png** (1024x1024) - Monochrome icon for Android
- **splash.png** (1242x2436) - Splash screen image
- **favicon.png** (48x48) - Web favicon

All images are optimized for Expo and follow official guidelines.

Generated with Expo Asset Generator"""


def build_archive(bundle: OutputBundle, background_color: str, app_name: str) -> bytes:
    """Zip the bundle under assets/branding/ with the snippet and README at the root."""
    buf = io.BytesIO()
    try:
        with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            for filename, data in bundle.files():
                zf.writestr(f"{BRANDING_DIR}/{filename}", data)
            zf.writestr(SNIPPET_NAME, app_json_snippet(background_color, app_name))
            zf.writestr(README_NAME, readme_content(app_name))
    except (OSError, ValueError, zipfile.BadZipFile) as e:
        raise ArchiveError(f"failed to build archive: {e}") from e
    return buf.getvalue()
