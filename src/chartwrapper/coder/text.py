"""Text encodings: comma separated numbers."""

from ..constants import COMMA_SEPARATOR, PERCENTAGE_MAX
from .base import Dataset, EncodingType, FixedEncoder, format_number, is_finite


class TextEncoder(FixedEncoder):
    """
    Encoder for the ``t:`` format with unscaled values.

    Meant to be combined with a data scaling directive (``chds``); the service
    rescales the values against that range, so nothing is clamped here.
    """

    @property
    def encoding(self) -> EncodingType:
        return EncodingType.TEXT

    def encode_payload(self, values: Dataset) -> str:
        return COMMA_SEPARATOR.join(format_number(value) for value in values)


class PercentageEncoder(FixedEncoder):
    """
    Encoder for the ``t:`` format with values scaled to percentages.

    Every value becomes its share of the dataset total (0-100). Negative and
    non-finite values count as 0; a dataset summing to 0 encodes as all zeros.
    """

    @property
    def encoding(self) -> EncodingType:
        return EncodingType.PERCENTAGE

    def encode_payload(self, values: Dataset) -> str:
        positive = [value if is_finite(value) and value > 0 else 0 for value in values]
        total = sum(positive)
        if total == 0:
            return COMMA_SEPARATOR.join("0" for _ in positive)
        return COMMA_SEPARATOR.join(
            format_number(min(value * PERCENTAGE_MAX / total, PERCENTAGE_MAX))
            for value in positive
        )
