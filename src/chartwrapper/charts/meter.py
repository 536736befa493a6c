"""Google-O-Meter: a gauge with one or more arrows."""

from dataclasses import dataclass
from typing import Iterable, Iterator

from ..chart import Dimension
from ..constants import CHART_DATA_PREFIX, CHART_LABEL_PREFIX, DEFAULT_SEPARATOR
from ..data import ChartTitle
from ..features import Fragment
from .base import DataChart, EncodedDataSource

GOOGLE_O_METER = "gom"


@dataclass(frozen=True, slots=True)
class GoogleOMeterValue:
    """An arrow of the meter; the label is shown at its tip."""
    label: str
    value: float

    def __post_init__(self) -> None:
        if self.label is None:
            raise ValueError("label can not be None")


class MeterValueAppender(EncodedDataSource):
    """Arrows of a meter, contributing ``chd`` and ``chl``."""

    def __init__(self) -> None:
        super().__init__(CHART_DATA_PREFIX)

    def fragments(self) -> Iterator[Fragment]:
        values = self.items
        if not values:
            return
        yield Fragment(CHART_DATA_PREFIX, self.encoder.encode([arrow.value for arrow in values]))
        if any(arrow.label for arrow in values):
            yield Fragment(
                CHART_LABEL_PREFIX, DEFAULT_SEPARATOR.join(arrow.label for arrow in values)
            )


class GoogleOMeter(DataChart):
    """Google-O-Meter chart; chart colors define the gauge gradient."""

    def __init__(
        self,
        size: Dimension | tuple[int, int] | int,
        values: Iterable[GoogleOMeterValue] = (),
        *,
        title: ChartTitle | None = None,
    ):
        super().__init__(GOOGLE_O_METER, size, MeterValueAppender(), title)
        self.data_source.extend(values)

    @property
    def values(self) -> tuple[GoogleOMeterValue, ...]:
        return self.data_source.items

    def add_value(self, value: GoogleOMeterValue) -> None:
        self.data_source.add(value)

    def remove_value(self, value: GoogleOMeterValue) -> bool:
        return self.data_source.remove(value)

    def remove_value_at(self, index: int) -> GoogleOMeterValue:
        return self.data_source.remove_at(index)

    def clear_values(self) -> None:
        self.data_source.clear()
