from .validation import (
    MAX_FILE_SIZE,
    SourceImage,
    UploadedFile,
    ValidationError,
    validate_upload,
)
from .transforms import (
    ASSET_FILENAMES,
    AssetGenerationError,
    InvalidColorError,
    OutputBundle,
    generate,
    hex_to_rgb,
    resize_contain,
)
from .packaging import ArchiveError, app_json_snippet, build_archive, readme_content
