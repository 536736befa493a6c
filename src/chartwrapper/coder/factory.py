"""Encoder lookup and encoding suggestion."""

import math
from typing import Iterable

from ..constants import SIMPLE_MAX
from .base import Dataset, EncodingType, FixedEncoder, is_finite, round_half_up
from .extended import ExtendedEncoder
from .simple import SimpleEncoder
from .text import PercentageEncoder, TextEncoder

ENCODER_TYPES: dict[EncodingType, type[FixedEncoder]] = {
    EncodingType.SIMPLE: SimpleEncoder,
    EncodingType.EXTENDED: ExtendedEncoder,
    EncodingType.PERCENTAGE: PercentageEncoder,
    EncodingType.TEXT: TextEncoder,
}


def get_encoder(encoding: EncodingType | str) -> FixedEncoder:
    """
    Create the encoder for an encoding.

    Args:
        encoding: An :class:`EncodingType` or its label (``"simple"``, ...)

    Returns:
        A fresh encoder instance

    Raises:
        ValueError: If the label is unknown
    """
    return ENCODER_TYPES[_resolve_encoding(encoding)]()


def suggest(values: Dataset) -> EncodingType:
    """Suggest the cheapest automatic encoding able to carry ``values``.

    ``nan`` encodes as 0 and fits simple encoding; infinities do not.
    """
    if all(_fits_simple(value) for value in values):
        return EncodingType.SIMPLE
    return EncodingType.EXTENDED


def _fits_simple(value) -> bool:
    if not is_finite(value):
        return math.isnan(value)
    return 0 <= round_half_up(value) <= SIMPLE_MAX


def suggest_collection(datasets: Iterable[Dataset]) -> EncodingType:
    """Suggest one encoding for all datasets: the highest ranked suggestion."""
    highest = EncodingType.SIMPLE
    for values in datasets:
        current = suggest(values)
        if current.rank > highest.rank:
            highest = current
    return highest


def _resolve_encoding(encoding: EncodingType | str) -> EncodingType:
    if isinstance(encoding, EncodingType):
        return encoding
    for member in EncodingType:
        if member.label == encoding.lower():
            return member
    supported = ", ".join(member.label for member in EncodingType)
    raise ValueError(f"Unknown encoding '{encoding}'. Available: {supported}")
