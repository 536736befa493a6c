"""Extended encoding: two characters per value."""

from ..constants import EXTENDED_ALPHABET, EXTENDED_MAX
from .base import Dataset, EncodingType, FixedEncoder, to_range

_BASE = len(EXTENDED_ALPHABET)


class ExtendedEncoder(FixedEncoder):
    """Encoder for the extended ``e:`` format (values 0-4095)."""

    @property
    def encoding(self) -> EncodingType:
        return EncodingType.EXTENDED

    def encode_payload(self, values: Dataset) -> str:
        out = []
        for value in values:
            high, low = divmod(to_range(value, EXTENDED_MAX), _BASE)
            out.append(EXTENDED_ALPHABET[high])
            out.append(EXTENDED_ALPHABET[low])
        return "".join(out)
