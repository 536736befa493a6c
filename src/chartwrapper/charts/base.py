"""Shared sources and setters of the data carrying chart kinds."""

from typing import Iterable

from ..chart import ChartSpec, Dimension
from ..coder import AutoEncoder, Encoder, PercentageEncoder, TextEncoder
from ..color import ChartColor
from ..constants import CHART_COLOR_PREFIX, COMMA_SEPARATOR, DATA_SCALING_PREFIX
from ..data import ChartTitle, DataScalingSet, TitleSource
from ..features import GenericAppender, UpperLimitAppender, UpperLimitReaction


class EncodedDataSource(GenericAppender):
    """Appender whose items are turned into ``chd`` data by an encoder."""

    def __init__(self, prefix: str, encoder: Encoder | None = None):
        super().__init__(prefix)
        self.encoder = encoder or AutoEncoder()


class DataChart(ChartSpec):
    """
    Chart with encoded data, chart colors, data scaling and a title.

    Subclasses pass the source carrying their data; the remaining sources are
    registered here, in this order: data, colors, data scaling, title.
    """

    def __init__(
        self,
        chart_type: str,
        size: Dimension | tuple[int, int] | int,
        data_source: EncodedDataSource,
        title: ChartTitle | None = None,
    ):
        super().__init__(chart_type, size)
        self.data_source = self.register(data_source)
        self.color_appender: GenericAppender[ChartColor] = self.register(
            GenericAppender(CHART_COLOR_PREFIX, COMMA_SEPARATOR)
        )
        self.data_scaling_appender: UpperLimitAppender[DataScalingSet] = self.register(
            UpperLimitAppender(DATA_SCALING_PREFIX, 1, UpperLimitReaction.REMOVE_FIRST)
        )
        self.title_source = self.register(TitleSource(title))

    @property
    def encoder(self) -> Encoder:
        return self.data_source.encoder

    def set_encoder(self, encoder: Encoder) -> None:
        if encoder is None:
            raise ValueError("encoder can not be None")
        self.data_source.encoder = encoder

    def remove_encoder(self) -> None:
        """Fall back to automatic encoding."""
        self.data_source.encoder = AutoEncoder()

    def set_percentage_scaling(self, enabled: bool) -> None:
        """Send values as percentages of their total, which can shorten the url."""
        self.data_source.encoder = PercentageEncoder() if enabled else AutoEncoder()

    @property
    def data_scaling(self) -> DataScalingSet | None:
        items = self.data_scaling_appender.items
        return items[0] if items else None

    def set_data_scaling(self, scaling: DataScalingSet | None) -> None:
        """
        Scale text encoded data against ``scaling``; None removes the scaling.

        Setting a scaling switches the data to text encoding, removing it
        restores automatic encoding.
        """
        if scaling is None:
            self.remove_data_scaling()
            return
        self.data_scaling_appender.add(scaling)
        self.data_source.encoder = TextEncoder()

    def remove_data_scaling(self) -> None:
        self.data_scaling_appender.clear()
        self.data_source.encoder = AutoEncoder()

    @property
    def chart_colors(self) -> tuple[ChartColor, ...]:
        return self.color_appender.items

    def add_chart_color(self, color: ChartColor | str | tuple[int, ...]) -> None:
        self.color_appender.add(ChartColor.of(color))

    def add_chart_colors(self, colors: Iterable[ChartColor | str | tuple[int, ...]]) -> None:
        self.color_appender.extend(ChartColor.of(color) for color in colors)

    def remove_chart_color(self, color: ChartColor | str | tuple[int, ...]) -> bool:
        return self.color_appender.remove(ChartColor.of(color))

    def remove_chart_color_at(self, index: int) -> ChartColor:
        return self.color_appender.remove_at(index)

    def clear_chart_colors(self) -> None:
        self.color_appender.clear()

    @property
    def title(self) -> ChartTitle | None:
        return self.title_source.title

    def set_title(self, title: ChartTitle | str | None) -> None:
        if isinstance(title, str):
            title = ChartTitle(title)
        self.title_source.title = title
