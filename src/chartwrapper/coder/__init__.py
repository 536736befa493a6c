"""Numeric data encoders for the ``chd`` parameter."""

from .auto import AutoEncoder
from .base import Encoder, EncodingType, FixedEncoder
from .extended import ExtendedEncoder
from .factory import ENCODER_TYPES, get_encoder, suggest, suggest_collection
from .simple import SimpleEncoder
from .text import PercentageEncoder, TextEncoder

AUTO_ENCODING_NAME = "auto"


def supported_encodings() -> tuple[str, ...]:
    """Return encoding names accepted by :func:`create_encoder`."""
    return (AUTO_ENCODING_NAME, *(encoding.label for encoding in ENCODER_TYPES))


def create_encoder(name: str) -> Encoder:
    """Create an encoder by name, including ``auto``."""
    if name.lower() == AUTO_ENCODING_NAME:
        return AutoEncoder()
    return get_encoder(name)


__all__ = [
    "AutoEncoder",
    "Encoder",
    "EncodingType",
    "ExtendedEncoder",
    "FixedEncoder",
    "PercentageEncoder",
    "SimpleEncoder",
    "TextEncoder",
    "ENCODER_TYPES",
    "create_encoder",
    "get_encoder",
    "suggest",
    "suggest_collection",
    "supported_encodings",
]
