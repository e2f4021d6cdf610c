"""
SkinTone Styler Session

Holds the widget state (uploaded image, skin tone text, current suggestions)
and decides when the palette is regenerated.
"""

from dataclasses import dataclass
from typing import Optional

from app.errors import SamplingError, UnsupportedCapabilityError
from app.services.colors import Palette, generate_palette, is_valid_hex
from app.services.imaging import to_data_uri
from app.services.sampling import ColorSampler
from app.utils.logging import get_logger


@dataclass(frozen=True)
class StylerState:
    """Snapshot of a styler session."""
    image: Optional[str] = None  # data URI of the uploaded photo
    skin_tone: str = ""
    suggestions: Optional[Palette] = None


class StylerSession:
    """State machine behind the skin tone styler form."""

    def __init__(self, request_id: Optional[str] = None):
        self._log = get_logger(request_id)
        self._image: Optional[str] = None
        self._skin_tone: str = ""
        self._suggestions: Optional[Palette] = None

    @property
    def state(self) -> StylerState:
        return StylerState(
            image=self._image,
            skin_tone=self._skin_tone,
            suggestions=self._suggestions
        )

    def load_image(self, file_bytes: bytes, content_type: Optional[str] = None) -> str:
        """
        Store an uploaded photo for display.

        Raises:
            ImageLoadError: If the payload is not a supported image
        """
        self._image = to_data_uri(file_bytes, content_type)
        return self._image

    def set_skin_tone(self, text: str) -> bool:
        """
        Record typed skin tone text and regenerate suggestions when it is a valid color.

        Invalid text is kept as-is and leaves the previous suggestions untouched.

        Returns:
            True if suggestions were regenerated
        """
        self._skin_tone = text
        if not is_valid_hex(text):
            self._log.bind(skin_tone=text).debug("Skin tone text not a hex color, palette unchanged")
            return False

        self._suggestions = generate_palette(text)
        return True

    async def use_eyedropper(self, sampler: ColorSampler) -> bool:
        """
        Sample a skin tone with the eyedropper and regenerate suggestions.

        Returns:
            True if a color was sampled, False if sampling failed or was cancelled

        Raises:
            UnsupportedCapabilityError: If the sampler is unavailable on this host
        """
        if not sampler.is_supported():
            raise UnsupportedCapabilityError("EyeDropper is not supported in this environment")

        try:
            color = await sampler.sample()
        except SamplingError as e:
            self._log.bind(error_type=type(e).__name__).error(f"EyeDropper failed: {e}")
            return False

        self._skin_tone = color
        self._suggestions = generate_palette(color)
        self._log.bind(skin_tone=color).info("Skin tone sampled")
        return True
