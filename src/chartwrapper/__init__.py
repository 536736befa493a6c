"""Build Google Chart API urls from chart descriptions."""

from .assembler import FragmentGroup, FragmentRegistry, build_post_form, build_url, post_parameters
from .chart import AUTO_SIZE, ChartSpec, Dimension, OutputFormat
from .charts import (
    ConcentricPieChart,
    GoogleOMeter,
    GoogleOMeterValue,
    PieChart,
    PieChartSlice,
)
from .coder import (
    AutoEncoder,
    EncodingType,
    ExtendedEncoder,
    PercentageEncoder,
    SimpleEncoder,
    TextEncoder,
    suggest,
)
from .color import ChartColor
from .data import ChartTitle, DataScalingSet
from .features import (
    FeatureSource,
    Fragment,
    GenericAppender,
    StaticSource,
    UpperLimitAppender,
    UpperLimitReaction,
)

__all__ = [
    "AUTO_SIZE",
    "AutoEncoder",
    "ChartColor",
    "ChartSpec",
    "ChartTitle",
    "ConcentricPieChart",
    "DataScalingSet",
    "Dimension",
    "EncodingType",
    "ExtendedEncoder",
    "FeatureSource",
    "Fragment",
    "FragmentGroup",
    "FragmentRegistry",
    "GenericAppender",
    "GoogleOMeter",
    "GoogleOMeterValue",
    "OutputFormat",
    "PercentageEncoder",
    "PieChart",
    "PieChartSlice",
    "SimpleEncoder",
    "StaticSource",
    "TextEncoder",
    "UpperLimitAppender",
    "UpperLimitReaction",
    "build_post_form",
    "build_url",
    "post_parameters",
    "suggest",
]
