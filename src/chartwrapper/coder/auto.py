"""Encoder choosing the cheapest encoding for the given data."""

from typing import Iterable

from ..constants import DEFAULT_SEPARATOR
from ..log import get_logger
from .base import Dataset, Encoder
from .factory import get_encoder, suggest, suggest_collection

logger = get_logger("coder")


class AutoEncoder(Encoder):
    """
    Encoder switching between simple and extended encoding.

    The encoding is decided per call from the data. For a collection, a single
    encoding is picked for every dataset so the whole series decodes under one
    interpretation. Percentage and text encodings are never picked
    automatically; use their encoders explicitly.
    """

    def encode(self, values: Dataset) -> str:
        if not values:
            return ""
        encoding = suggest(values)
        logger.debug("Auto encoding %d values as %s", len(values), encoding.label)
        return get_encoder(encoding).encode(values)

    def encode_collection(
        self, datasets: Iterable[Dataset], separator: str = DEFAULT_SEPARATOR
    ) -> str:
        dataset_list = list(datasets)
        if not dataset_list:
            return ""
        encoding = suggest_collection(dataset_list)
        logger.debug("Auto encoding %d datasets as %s", len(dataset_list), encoding.label)
        return get_encoder(encoding).encode_collection(dataset_list, separator)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, AutoEncoder)

    def __hash__(self) -> int:
        return hash(AutoEncoder)

    def __repr__(self) -> str:
        return "AutoEncoder()"
