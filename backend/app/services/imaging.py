"""
SkinTone Styler Imaging Utilities
Handles upload validation, data URI encoding and decoding photos for the eyedropper.
"""
import base64
import io
import warnings
from typing import Optional, Tuple

import numpy as np
from PIL import Image, UnidentifiedImageError

from app.config import config
from app.errors import ImageLoadError


def validate_upload(file_bytes: bytes, content_type: Optional[str] = None) -> str:
    """
    Validate an uploaded image payload for size and format compliance.

    Args:
        file_bytes: Raw file bytes
        content_type: MIME type declared by the client, if any

    Returns:
        MIME type detected from the magic bytes

    Raises:
        ImageLoadError: 413 for oversize files, 415 for unsupported formats,
            400 for empty or corrupt payloads
    """
    if len(file_bytes) > config.max_file_bytes():
        raise ImageLoadError(
            f"File too large. Maximum size: {config.MAX_FILE_MB}MB",
            status_code=413
        )

    if content_type and content_type not in config.SUPPORTED_MIME_TYPES:
        raise ImageLoadError(
            f"Unsupported media type. Supported: {', '.join(config.SUPPORTED_MIME_TYPES)}",
            status_code=415
        )

    return validate_magic_bytes(file_bytes)


def validate_magic_bytes(file_bytes: bytes) -> str:
    """
    Validate file magic bytes to ensure it's actually an image.

    Args:
        file_bytes: Raw file bytes

    Returns:
        Detected MIME type

    Raises:
        ImageLoadError: 400 for invalid/corrupt files
    """
    if len(file_bytes) < 12:
        raise ImageLoadError("File too small or corrupt")

    # Check magic bytes for supported image formats
    if file_bytes.startswith(b'\xff\xd8\xff'):
        return "image/jpeg"
    elif file_bytes.startswith(b'\x89PNG\r\n\x1a\n'):
        return "image/png"
    elif file_bytes[:6] in (b'GIF87a', b'GIF89a'):
        return "image/gif"
    elif file_bytes[:4] == b'RIFF' and file_bytes[8:12] == b'WEBP':
        return "image/webp"
    else:
        raise ImageLoadError(
            "Invalid image file. Magic bytes don't match supported formats."
        )


def to_data_uri(file_bytes: bytes, content_type: Optional[str] = None) -> str:
    """
    Encode a validated image payload as a displayable data URI.

    Args:
        file_bytes: Raw file bytes
        content_type: MIME type declared by the client, if any

    Returns:
        String of the form data:<mime>;base64,<payload>
    """
    mime_type = validate_upload(file_bytes, content_type)
    encoded = base64.b64encode(file_bytes).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def decode_image(file_bytes: bytes) -> np.ndarray:
    """
    Decode image bytes to an RGB numpy array.

    Args:
        file_bytes: Raw file bytes

    Returns:
        numpy array of shape (height, width, 3), dtype uint8

    Raises:
        ImageLoadError: 413 for images past the decompression bomb pixel limit,
            400 for decode errors
    """
    validate_upload(file_bytes)

    try:
        with warnings.catch_warnings():
            warnings.simplefilter("error", Image.DecompressionBombWarning)
            pil_image = Image.open(io.BytesIO(file_bytes))
            # Convert to RGB if necessary
            if pil_image.mode != 'RGB':
                pil_image = pil_image.convert('RGB')
            return np.array(pil_image)
    except (Image.DecompressionBombError, Image.DecompressionBombWarning) as e:
        raise ImageLoadError(f"Image dimensions too large: {str(e)}", status_code=413) from e
    except (UnidentifiedImageError, OSError, ValueError) as e:
        raise ImageLoadError(f"Failed to decode image: {str(e)}") from e


def get_image_dimensions(img_rgb: np.ndarray) -> Tuple[int, int]:
    """
    Get image width and height.

    Args:
        img_rgb: Input image

    Returns:
        Tuple of (width, height)
    """
    height, width = img_rgb.shape[:2]
    return width, height
