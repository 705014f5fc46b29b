"""
Zero dependency base-N encoding of arbitrary bytes with caller defined alphabets.
"""

import logging

from .alphabet import Alphabet
from .encoding import Encoding, BASE62, BASE58
from .error import AlphabetError, DecodeError, EntropyError, UnknownEncodingError
from .config import ENCODING, current_encoding, get_encoding
from . import base58, base62

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Alphabet',
    'Encoding',
    'BASE62',
    'BASE58',
    'AlphabetError',
    'DecodeError',
    'EntropyError',
    'UnknownEncodingError',
    'ENCODING',
    'current_encoding',
    'get_encoding',
    'encode',
    'decode',
    'random',
]

__version__ = "0.1"


def encode(bts: bytes) -> str:
    return get_encoding().encode(bts)


def decode(s: str) -> bytes:
    return get_encoding().decode(s)


def random(n: int, source=None) -> str:
    return get_encoding().random(n, source)
