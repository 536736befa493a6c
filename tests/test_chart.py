"""Tests for chart construction and size validation."""

import pytest

from chartwrapper.chart import AUTO_SIZE, ChartSpec, Dimension
from chartwrapper.features import GenericAppender


@pytest.mark.parametrize(
    "width, height",
    [(1, 1), (1000, 300), (300, 1000), (547, 548), (300, 300), (1000, 1)],
)
def test_valid_sizes(width: int, height: int) -> None:
    chart = ChartSpec("p", (width, height))
    assert chart.width == width
    assert chart.height == height


@pytest.mark.parametrize(
    "width, height",
    [(1001, 1), (1, 1001), (600, 600), (548, 548), (0, 10), (10, 0), (-1, 10)],
)
def test_invalid_sizes_fail_at_construction(width: int, height: int) -> None:
    with pytest.raises(ValueError):
        ChartSpec("p", (width, height))


def test_height_only() -> None:
    chart = ChartSpec("p", 250)
    assert chart.width is None
    assert chart.height == 250


def test_height_only_upper_bound() -> None:
    with pytest.raises(ValueError, match="can not be > 1000"):
        ChartSpec("p", 1001)


def test_area_error_message() -> None:
    with pytest.raises(ValueError, match="area can not be > 300000"):
        Dimension(width=600, height=600)


def test_none_size_is_rejected() -> None:
    with pytest.raises(ValueError, match="can not be None"):
        ChartSpec("p", None)


def test_size_reassignment_is_validated() -> None:
    chart = ChartSpec("p", (100, 100))
    with pytest.raises(ValueError, match="can not be > 1000"):
        chart.size = (5000, 5000)
    with pytest.raises(ValueError, match="can not be None"):
        chart.size = None
    assert chart.size == Dimension(100, 100)
    assert chart.get_url() == "http://chart.apis.google.com/chart?cht=p&chs=100x100"


def test_size_reassignment_accepts_tuples_and_heights() -> None:
    chart = ChartSpec("p")
    chart.size = (300, 200)
    assert chart.size == Dimension(300, 200)
    chart.size = 150
    assert chart.get_url() == "http://chart.apis.google.com/chart?cht=p&chs=150"


def test_width_without_height_is_rejected() -> None:
    with pytest.raises(ValueError, match="without a height"):
        Dimension(width=100)


def test_default_size_is_auto() -> None:
    chart = ChartSpec("p")
    assert chart.size == AUTO_SIZE
    assert chart.size.is_auto
    assert chart.size.to_url_data() == ""


def test_dimension_url_data() -> None:
    assert Dimension(width=300, height=200).to_url_data() == "300x200"
    assert Dimension(height=200).to_url_data() == "200"


def test_empty_chart_type_is_rejected() -> None:
    with pytest.raises(ValueError, match="chart type"):
        ChartSpec("")


def test_register_returns_source_in_order() -> None:
    chart = ChartSpec("p")
    first = chart.register(GenericAppender("chco"))
    second = chart.register(GenericAppender("chl"))
    assert chart.sources == (first, second)


def test_register_rejects_non_sources() -> None:
    with pytest.raises(ValueError, match="not a feature source"):
        ChartSpec("p", sources=["chd=s:A"])
