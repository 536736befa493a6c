"""Chart colors and their hex representation."""

from dataclasses import dataclass

from PIL import ImageColor


@dataclass(frozen=True, slots=True)
class ChartColor:
    """An RGBA color as sent to the chart service."""
    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name} must be within 0-255, got {value}")

    @classmethod
    def of(cls, color: "ChartColor | str | tuple[int, ...]") -> "ChartColor":
        """
        Build a color from a Pillow color string or an RGB(A) tuple.

        Raises:
            ValueError: If the color can not be parsed
        """
        if color is None:
            raise ValueError("color can not be None")
        if isinstance(color, ChartColor):
            return color
        if isinstance(color, str):
            color = ImageColor.getrgb(color)
        if len(color) not in (3, 4):
            raise ValueError(f"Expected an RGB or RGBA tuple, got {color!r}")
        return cls(*color)

    @property
    def hex6(self) -> str:
        """``RRGGBB`` without transparency."""
        return f"{self.red:02x}{self.green:02x}{self.blue:02x}"

    @property
    def hex8(self) -> str:
        """``RRGGBBAA`` with transparency."""
        return f"{self.hex6}{self.alpha:02x}"

    def to_url_data(self) -> str:
        return self.hex6 if self.alpha == 255 else self.hex8
