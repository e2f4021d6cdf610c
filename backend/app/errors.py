"""
SkinTone Styler Errors
Exception hierarchy shared by the color services, the styler session and the API.
Each class carries the HTTP status the API answers with when it escapes a route.
"""


class StylerError(Exception):
    """Base class for all SkinTone Styler errors."""
    status_code = 400

    @property
    def detail(self) -> str:
        return str(self)


class InvalidColorFormatError(StylerError, ValueError):
    """A color string is not in #RRGGBB format."""
    status_code = 422

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid hex color format: {value!r}")


class UnsupportedCapabilityError(StylerError):
    """The color sampling capability is not available on this host."""
    status_code = 501


class SamplingError(StylerError):
    """The color sampling operation failed."""
    status_code = 422


class SamplingCancelledError(SamplingError):
    """The user dismissed the color sampling operation."""


class ImageLoadError(StylerError):
    """An uploaded image payload could not be accepted."""

    def __init__(self, detail: str, status_code: int = 400):
        self.status_code = status_code
        super().__init__(detail)
