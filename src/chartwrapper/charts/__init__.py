"""Chart kinds built on :class:`~chartwrapper.chart.ChartSpec`."""

from .base import DataChart, EncodedDataSource
from .meter import GOOGLE_O_METER, GoogleOMeter, GoogleOMeterValue
from .pie import (
    CONCENTRIC_PIE_CHART,
    PIE_CHART,
    PIE_CHART_3D,
    ConcentricPieChart,
    PieChart,
    PieChartSlice,
)

__all__ = [
    "DataChart",
    "EncodedDataSource",
    "GoogleOMeter",
    "GoogleOMeterValue",
    "ConcentricPieChart",
    "PieChart",
    "PieChartSlice",
    "GOOGLE_O_METER",
    "PIE_CHART",
    "PIE_CHART_3D",
    "CONCENTRIC_PIE_CHART",
]
