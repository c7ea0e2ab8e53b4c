import os
from dotenv import load_dotenv

# Pick up a local .env when present
load_dotenv()

BASE_DIR = os.path.dirname(__file__)

SECRET_KEY = os.getenv("SECRET_KEY", "dev-change-this")

# Test/limits toggles
TEST_MODE = os.getenv("TEST_MODE", "0") == "1"
DISABLE_RATELIMIT = (os.getenv("DISABLE_RATELIMIT", "0") == "1") or TEST_MODE
# Flask-Limiter respects this flag
RATELIMIT_ENABLED = not DISABLE_RATELIMIT
GENERATE_RATELIMIT = os.getenv("GENERATE_RATELIMIT", "10/minute")

# Whole request body; the 5MB image limit itself is enforced by the validator
MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH_MB", "6")) * 1024 * 1024

ARCHIVE_FILENAME = os.getenv("ARCHIVE_FILENAME", "expo-assets.zip")
DEFAULT_APP_NAME = os.getenv("DEFAULT_APP_NAME", "My App")
DEFAULT_BACKGROUND_COLOR = os.getenv("DEFAULT_BACKGROUND_COLOR", "#FFFFFF")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
