"""Pie charts: plain, three dimensional and concentric."""

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from ..chart import Dimension
from ..coder import Encoder
from ..color import ChartColor
from ..constants import (
    CHART_COLOR_PREFIX,
    CHART_DATA_PREFIX,
    CHART_LABEL_PREFIX,
    COMMA_SEPARATOR,
    DEFAULT_SEPARATOR,
    DEFAULT_SLICE_COLOR,
)
from ..data import ChartTitle
from ..features import Fragment
from .base import DataChart, EncodedDataSource

PIE_CHART = "p"
PIE_CHART_3D = "p3"
CONCENTRIC_PIE_CHART = "pc"


@dataclass(frozen=True, slots=True)
class PieChartSlice:
    """One slice of a pie chart."""
    value: float
    label: str | None = None
    color: ChartColor | None = None

    def __post_init__(self) -> None:
        if self.value is None:
            raise ValueError("slice value can not be None")
        if self.color is not None:
            object.__setattr__(self, "color", ChartColor.of(self.color))


def _slice_labels(slices: Sequence[PieChartSlice]) -> Iterator[Fragment]:
    if any(pie_slice.label for pie_slice in slices):
        yield Fragment(
            CHART_LABEL_PREFIX,
            DEFAULT_SEPARATOR.join(pie_slice.label or "" for pie_slice in slices),
        )


def _slice_colors(slices: Sequence[PieChartSlice]) -> str:
    """One color per slice; slices without a color get the default slice color."""
    return DEFAULT_SEPARATOR.join(
        pie_slice.color.to_url_data() if pie_slice.color else DEFAULT_SLICE_COLOR
        for pie_slice in slices
    )


def _has_slice_colors(slices: Iterable[PieChartSlice]) -> bool:
    return any(pie_slice.color for pie_slice in slices)


class PieSliceAppender(EncodedDataSource):
    """Slices of a pie chart, contributing ``chd``, ``chl`` and ``chco``."""

    def __init__(self, encoder: Encoder | None = None):
        super().__init__(CHART_DATA_PREFIX, encoder)

    def fragments(self) -> Iterator[Fragment]:
        slices = self.items
        if not slices:
            return
        yield Fragment(
            CHART_DATA_PREFIX, self.encoder.encode([pie_slice.value for pie_slice in slices])
        )
        yield from _slice_labels(slices)
        if _has_slice_colors(slices):
            yield Fragment(CHART_COLOR_PREFIX, _slice_colors(slices))


class PieRingAppender(EncodedDataSource):
    """
    Rings of a concentric pie chart, innermost first.

    Slice colors are joined by ``|`` within a ring and by ``,`` between rings.
    """

    def __init__(self, encoder: Encoder | None = None):
        super().__init__(CHART_DATA_PREFIX, encoder)

    def fragments(self) -> Iterator[Fragment]:
        rings = self.items
        if not rings:
            return
        yield Fragment(
            CHART_DATA_PREFIX,
            self.encoder.encode_collection(
                [[pie_slice.value for pie_slice in ring] for ring in rings]
            ),
        )
        yield from _slice_labels([pie_slice for ring in rings for pie_slice in ring])
        if any(_has_slice_colors(ring) for ring in rings):
            yield Fragment(
                CHART_COLOR_PREFIX, COMMA_SEPARATOR.join(_slice_colors(ring) for ring in rings)
            )


class PieChart(DataChart):
    """
    Pie chart, see http://code.google.com/apis/chart/types.html#pie_charts

    Example:
        chart = PieChart((400, 180), title=ChartTitle("GDP of the world"))
        chart.add_slice(PieChartSlice(80, label="USA", color="blue"))
        chart.get_url()
    """

    def __init__(
        self,
        size: Dimension | tuple[int, int] | int,
        slices: Iterable[PieChartSlice] = (),
        *,
        three_d: bool = False,
        title: ChartTitle | None = None,
    ):
        super().__init__(PIE_CHART, size, PieSliceAppender(), title)
        self.three_d = three_d
        self.data_source.extend(slices)

    @property
    def chart_type(self) -> str:
        return PIE_CHART_3D if self.three_d else PIE_CHART

    @property
    def is_3d(self) -> bool:
        return self.three_d

    def set_3d(self, enabled: bool = True) -> None:
        self.three_d = enabled

    @property
    def slices(self) -> tuple[PieChartSlice, ...]:
        return self.data_source.items

    def add_slice(self, pie_slice: PieChartSlice) -> None:
        self.data_source.add(pie_slice)

    def add_slices(self, slices: Iterable[PieChartSlice]) -> None:
        self.data_source.extend(slices)

    def remove_slice(self, pie_slice: PieChartSlice) -> bool:
        return self.data_source.remove(pie_slice)

    def remove_slice_at(self, index: int) -> PieChartSlice:
        return self.data_source.remove_at(index)

    def clear_slices(self) -> None:
        self.data_source.clear()


class ConcentricPieChart(DataChart):
    """Pie chart made of rings; all rings share one data encoding."""

    def __init__(
        self,
        size: Dimension | tuple[int, int] | int,
        rings: Iterable[Sequence[PieChartSlice]] = (),
        *,
        title: ChartTitle | None = None,
    ):
        super().__init__(CONCENTRIC_PIE_CHART, size, PieRingAppender(), title)
        for ring in rings:
            self.add_ring(ring)

    @property
    def rings(self) -> tuple[tuple[PieChartSlice, ...], ...]:
        return self.data_source.items

    def add_ring(self, ring: Iterable[PieChartSlice]) -> None:
        if ring is None:
            raise ValueError("ring can not be None")
        slices = tuple(ring)
        if any(pie_slice is None for pie_slice in slices):
            raise ValueError("ring can not contain None")
        self.data_source.add(slices)

    def remove_ring_at(self, index: int) -> tuple[PieChartSlice, ...]:
        return self.data_source.remove_at(index)

    def clear_rings(self) -> None:
        self.data_source.clear()
