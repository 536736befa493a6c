"""Base classes for numeric data encoders."""

import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable, Sequence

from ..constants import DEFAULT_SEPARATOR
from ..log import get_logger

Number = int | float
Dataset = Sequence[Number]

logger = get_logger("coder")


class EncodingType(Enum):
    """Wire encodings understood by the chart service.

    Each member carries the one-letter code sent ahead of the payload and a
    rank. When several datasets share one ``chd`` parameter, the encoding with
    the highest rank required by any of them is used for all of them.
    """

    SIMPLE = ("simple", "s", 1)
    EXTENDED = ("extended", "e", 2)
    PERCENTAGE = ("percentage", "t", 3)
    TEXT = ("text", "t", 3)

    def __init__(self, label: str, code: str, rank: int):
        self.label = label
        self.code = code
        self.rank = rank

    @property
    def marker(self) -> str:
        """Literal written in front of the encoded payload, e.g. ``s:``."""
        return f"{self.code}:"


def is_finite(value: Number) -> bool:
    return isinstance(value, int) or math.isfinite(value)


def round_half_up(value: Number) -> int:
    """Round to the nearest integer, halves away from zero for positives.

    Values that are not finite must be handled by the caller, see
    :func:`to_range`.
    """
    if isinstance(value, int):
        return value
    return int(math.floor(value + 0.5))


def clamp(value: int, upper: int) -> int:
    """Clamp ``value`` into ``[0, upper]``."""
    if value < 0:
        logger.debug("Clamped %s to 0", value)
        return 0
    if value > upper:
        logger.debug("Clamped %s to %s", value, upper)
        return upper
    return value


def to_range(value: Number, upper: int) -> int:
    """
    Round ``value`` and clamp it into ``[0, upper]``.

    ``inf`` becomes ``upper``; ``-inf`` and ``nan`` become 0.
    """
    if not is_finite(value):
        bounded = upper if value > 0 else 0
        logger.debug("Clamped %s to %s", value, bounded)
        return bounded
    return clamp(round_half_up(value), upper)


def format_number(value: Number) -> str:
    """Format a number for text encoding (at most one decimal place).

    Values that are not finite are written as ``0``.
    """
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        logger.debug("Replaced %s by 0", value)
        return "0"
    if abs(value - round(value)) < 1e-9:
        return str(int(round(value)))
    text = f"{value:.1f}"
    return "0" if text == "-0.0" else text.removesuffix(".0")


class Encoder(ABC):
    """Abstract base class for numeric data encoders."""

    @abstractmethod
    def encode(self, values: Dataset) -> str:
        """
        Encode a single dataset.

        Args:
            values: Integers or floats to encode

        Returns:
            The encoding marker followed by the payload, or an empty string
            for an empty dataset
        """
        raise NotImplementedError

    @abstractmethod
    def encode_collection(
        self, datasets: Iterable[Dataset], separator: str = DEFAULT_SEPARATOR
    ) -> str:
        """
        Encode several datasets under one marker.

        Args:
            datasets: Datasets to encode, in order
            separator: String placed between the encoded datasets

        Returns:
            The encoding marker followed by the joined payloads, or an empty
            string when there are no datasets
        """
        raise NotImplementedError


class FixedEncoder(Encoder, ABC):
    """Template encoder for one fixed :class:`EncodingType`."""

    @property
    @abstractmethod
    def encoding(self) -> EncodingType:
        raise NotImplementedError

    @abstractmethod
    def encode_payload(self, values: Dataset) -> str:
        """Encode ``values`` without the leading marker."""
        raise NotImplementedError

    def encode(self, values: Dataset) -> str:
        if not values:
            return ""
        return self.encoding.marker + self.encode_payload(values)

    def encode_collection(
        self, datasets: Iterable[Dataset], separator: str = DEFAULT_SEPARATOR
    ) -> str:
        dataset_list = list(datasets)
        if not dataset_list:
            return ""
        payloads = [self.encode_payload(values) for values in dataset_list]
        return self.encoding.marker + separator.join(payloads)

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
