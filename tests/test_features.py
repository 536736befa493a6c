"""Tests for feature sources."""

import pytest

from chartwrapper.color import ChartColor
from chartwrapper.features import (
    FeatureSource,
    Fragment,
    GenericAppender,
    StaticSource,
    UpperLimitAppender,
    UpperLimitReaction,
)


def test_generic_appender_joins_items() -> None:
    appender = GenericAppender("chco", ",")
    appender.extend([ChartColor(255, 0, 0), ChartColor(0, 255, 0)])
    assert list(appender.fragments()) == [Fragment("chco", "ff0000,00ff00")]
    assert len(appender) == 2


def test_empty_generic_appender_yields_nothing() -> None:
    assert list(GenericAppender("chco").fragments()) == []


def test_generic_appender_rejects_none() -> None:
    appender = GenericAppender("chco")
    with pytest.raises(ValueError):
        appender.add(None)
    with pytest.raises(ValueError):
        appender.extend(None)
    with pytest.raises(ValueError):
        appender.extend([ChartColor(0, 0, 0), None])
    assert len(appender) == 0


def test_generic_appender_rejects_none_separator() -> None:
    with pytest.raises(ValueError):
        GenericAppender("chco", None)


def test_remove_missing_item_returns_false() -> None:
    appender = GenericAppender("chco")
    appender.add(ChartColor(0, 0, 0))
    assert not appender.remove(ChartColor(1, 1, 1))
    assert appender.remove(ChartColor(0, 0, 0))


def test_upper_limit_raise() -> None:
    appender = UpperLimitAppender("chds", 1)
    appender.add(ChartColor(0, 0, 0))
    with pytest.raises(ValueError, match="at most 1"):
        appender.add(ChartColor(1, 1, 1))


def test_upper_limit_remove_first() -> None:
    appender = UpperLimitAppender("chco", 2, UpperLimitReaction.REMOVE_FIRST)
    for value in range(3):
        appender.add(ChartColor(value, value, value))
    assert appender.items == (ChartColor(1, 1, 1), ChartColor(2, 2, 2))


def test_upper_limit_must_be_positive() -> None:
    with pytest.raises(ValueError):
        UpperLimitAppender("chds", 0)


def test_sources_satisfy_protocol() -> None:
    assert isinstance(GenericAppender("chco"), FeatureSource)
    assert isinstance(StaticSource(), FeatureSource)
    assert not isinstance(object(), FeatureSource)


def test_static_source_repeats_fragments() -> None:
    source = StaticSource(Fragment("chd", "s:A"))
    assert list(source.fragments()) == list(source.fragments()) == [Fragment("chd", "s:A")]
