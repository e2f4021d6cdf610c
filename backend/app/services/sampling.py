"""
Color Sampling Capability
Eyedropper abstraction: a sampler reports whether it can run on this host and,
when awaited, yields one #rrggbb color picked by the user.
"""
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from app.errors import SamplingError, UnsupportedCapabilityError
from app.services.colors import rgb_to_hex


class ColorSampler(ABC):
    """Interface for interactive color sampling devices."""

    @abstractmethod
    def is_supported(self) -> bool:
        """Whether sampling is available in the host environment."""

    @abstractmethod
    async def sample(self) -> str:
        """
        Sample a single color.

        Returns:
            Hex color string in format #rrggbb

        Raises:
            SamplingError: If sampling fails or is cancelled
        """


class UnsupportedSampler(ColorSampler):
    """Sampler for hosts without an eyedropper."""

    def is_supported(self) -> bool:
        return False

    async def sample(self) -> str:
        raise UnsupportedCapabilityError("Eyedropper is not supported on this host")


class ImagePointSampler(ColorSampler):
    """Eyedropper over a decoded photo at user-chosen pixel coordinates."""

    def __init__(self, image_rgb: Optional[np.ndarray], x: int, y: int):
        """
        Initialize the sampler.

        Args:
            image_rgb: Decoded RGB image (height, width, 3) or None if no photo is loaded
            x: Column of the sampled pixel
            y: Row of the sampled pixel
        """
        self.image_rgb = image_rgb
        self.x = x
        self.y = y

    def is_supported(self) -> bool:
        return self.image_rgb is not None

    async def sample(self) -> str:
        if self.image_rgb is None:
            raise UnsupportedCapabilityError("No image loaded to sample from")

        height, width = self.image_rgb.shape[:2]
        if not (0 <= self.x < width and 0 <= self.y < height):
            raise SamplingError(
                f"Point ({self.x}, {self.y}) is outside the {width}x{height} image"
            )

        r, g, b = (int(channel) for channel in self.image_rgb[self.y, self.x, :3])
        return rgb_to_hex(r, g, b)
