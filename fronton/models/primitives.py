"""
Shared primitive data types for Fronton.

Geometry and colour values that are validated once at the boundary so the
simulation step never has to re-check them.
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


class Color(BaseModel):
    """Immutable RGBA color with validation.

    All color components must be in the range [0, 255] inclusive.

    Attributes:
        r: Red component (0-255)
        g: Green component (0-255)
        b: Blue component (0-255)
        a: Alpha component (0-255). Renderers treat colors as
           premultiplied, so a=0 means "add the RGB on top".

    Examples:
        >>> green = Color(r=0, g=255, b=0, a=0)
        >>> green.as_rgb_tuple
        (0, 255, 0)
    """
    r: int
    g: int
    b: int
    a: int = 255

    model_config = ConfigDict(frozen=True)

    @field_validator('r', 'g', 'b', 'a')
    @classmethod
    def validate_color_range(cls, v: int) -> int:
        """Validate color components are in valid range [0, 255]."""
        if not 0 <= v <= 255:
            raise ValueError(f'Color component must be in range [0, 255], got {v}')
        return v

    @classmethod
    def from_tuple(cls, rgba: Tuple[int, ...]) -> 'Color':
        """Build a color from an (r, g, b) or (r, g, b, a) tuple."""
        if len(rgba) == 3:
            r, g, b = rgba
            return cls(r=r, g=g, b=b)
        r, g, b, a = rgba
        return cls(r=r, g=g, b=b, a=a)

    @property
    def as_tuple(self) -> Tuple[int, int, int, int]:
        """Return color as RGBA tuple for pygame compatibility."""
        return (self.r, self.g, self.b, self.a)

    @property
    def as_rgb_tuple(self) -> Tuple[int, int, int]:
        """Return color as RGB tuple (without alpha)."""
        return (self.r, self.g, self.b)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Color(r={self.r}, g={self.g}, b={self.b}, a={self.a})"


class FieldGeometry(BaseModel):
    """Playing field dimensions, fixed for the duration of a match.

    The host derives them from the display size (height already reduced by
    the HUD margin).

    Attributes:
        width: Field width in pixels (must be positive)
        height: Field height in pixels (must be positive)

    Examples:
        >>> field = FieldGeometry(width=400, height=600)
        >>> field.paddle_width
        100
    """
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def paddle_width(self) -> int:
        """Paddle spans a quarter of the field."""
        return self.width // 4

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"FieldGeometry({self.width}x{self.height})"
