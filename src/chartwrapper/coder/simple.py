"""Simple encoding: one character per value."""

from ..constants import SIMPLE_ALPHABET, SIMPLE_MAX
from .base import Dataset, EncodingType, FixedEncoder, to_range


class SimpleEncoder(FixedEncoder):
    """Encoder for the simple ``s:`` format (values 0-61)."""

    @property
    def encoding(self) -> EncodingType:
        return EncodingType.SIMPLE

    def encode_payload(self, values: Dataset) -> str:
        return "".join(
            SIMPLE_ALPHABET[to_range(value, SIMPLE_MAX)] for value in values
        )
