"""Chart core: size, output format and the feature source registration."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterable, Mapping

from . import assembler
from .constants import GOOGLE_API, GOOGLE_POST_API, MAX_AREA, MAX_SIDE
from .features import FeatureSource


@dataclass(frozen=True, slots=True)
class Dimension:
    """
    Chart size in pixels.

    Leaving both sides unset lets the service pick the size; a height alone
    is allowed, a width alone is not.
    """
    width: int | None = None
    height: int | None = None

    def __post_init__(self) -> None:
        if self.width is not None and self.height is None:
            raise ValueError("width can not be set without a height")
        for name, value in (("width", self.width), ("height", self.height)):
            if value is None:
                continue
            if value <= 0:
                raise ValueError(f"{name} can not be <= 0")
            if value > MAX_SIDE:
                raise ValueError(f"height and/or width can not be > {MAX_SIDE}")
        if self.width is not None and self.height is not None:
            if self.width * self.height > MAX_AREA:
                raise ValueError(f"the largest possible area can not be > {MAX_AREA}")

    @classmethod
    def of(cls, size: "Dimension | tuple[int, int] | int") -> "Dimension":
        """
        Build a dimension from a ``(width, height)`` tuple or a bare height.

        Raises:
            ValueError: If ``size`` is None or violates the size limits
        """
        if size is None:
            raise ValueError("chart dimension can not be None")
        if isinstance(size, Dimension):
            return size
        if isinstance(size, int):
            return cls(height=size)
        width, height = size
        return cls(width=width, height=height)

    @property
    def is_auto(self) -> bool:
        return self.height is None

    def to_url_data(self) -> str:
        if self.height is None:
            return ""
        if self.width is None:
            return str(self.height)
        return f"{self.width}x{self.height}"


AUTO_SIZE = Dimension()


class OutputFormat(Enum):
    """Values of the ``chof`` parameter."""
    PNG = "png"
    GIF = "gif"
    JSON = "json"
    VALIDATE = "validate"


class ChartSpec:
    """
    A chart described by its type, its size and the feature sources it owns.

    Feature sources are registered explicitly; only registered sources
    contribute to the generated url. Sizes are validated here, so an invalid
    chart never reaches serialization.
    """

    family_separators: ClassVar[Mapping[str, str]] = {}

    def __init__(
        self,
        chart_type: str,
        size: Dimension | tuple[int, int] | int = AUTO_SIZE,
        sources: Iterable[FeatureSource] = (),
    ):
        """
        Initialize the chart.

        Args:
            chart_type: Value of the ``cht`` parameter, e.g. ``p``
            size: Chart size; omit it to let the service decide
            sources: Feature sources to register, in order

        Raises:
            ValueError: If the type is empty, or the size is None or out of bounds
        """
        if not chart_type:
            raise ValueError("chart type can not be empty")
        self._chart_type = chart_type
        self._size = Dimension.of(size)
        self._sources: list[FeatureSource] = []
        for source in sources:
            self.register(source)

    @property
    def chart_type(self) -> str:
        return self._chart_type

    @property
    def size(self) -> Dimension:
        return self._size

    @size.setter
    def size(self, size: Dimension | tuple[int, int] | int) -> None:
        self._size = Dimension.of(size)

    @property
    def sources(self) -> tuple[FeatureSource, ...]:
        return tuple(self._sources)

    @property
    def width(self) -> int | None:
        return self.size.width

    @property
    def height(self) -> int | None:
        return self.size.height

    def register(self, source: FeatureSource) -> FeatureSource:
        """Register a feature source and return it."""
        if not isinstance(source, FeatureSource):
            raise ValueError(f"{type(source).__name__} is not a feature source")
        self._sources.append(source)
        return source

    def get_url(
        self, base_url: str = GOOGLE_API, output_format: OutputFormat | None = None
    ) -> str:
        return assembler.build_url(self, base_url, output_format)

    def get_post_request(self, post_url: str = GOOGLE_POST_API) -> str:
        return assembler.build_post_form(self, post_url)

    def get_post_request_parameters(self) -> dict[str, str]:
        return assembler.post_parameters(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(chart_type={self.chart_type!r}, size={self.size!r})"
