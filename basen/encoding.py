import logging
import secrets
from typing import Union, Callable, Optional

from basen.alphabet import Alphabet
from basen.error import DecodeError, EntropyError
from basen.transformations import bytes_to_int, int_to_bytes

__all__ = ['Encoding', 'BASE62', 'BASE58']

logger = logging.getLogger(__name__)

RandomSource = Callable[[int], bytes]


class Encoding:
    """Transcodes bytes to and from a positional numeral system whose digits are the alphabet symbols.

    The input bytes are read as one big-endian unsigned integer, so leading zero bytes
    carry no value and are not restored by decode:

    >>> BASE62.decode(BASE62.encode(b'\\x00\\x01'))
    b'\\x01'
    """

    def __init__(self, alphabet: Union[Alphabet, str, bytes]):
        if not isinstance(alphabet, Alphabet):
            alphabet = Alphabet(alphabet)
        self._alphabet = alphabet

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def base(self) -> int:
        return self.alphabet.base

    def encode_int(self, n: int) -> str:
        if n < 0:
            raise ValueError('Only non-negative integers can be encoded')
        base = self.base
        symbols = self.alphabet.symbols
        digits = []
        while n:
            n, r = divmod(n, base)
            digits.append(symbols[r])
        return ''.join(reversed(digits))

    def decode_int(self, s: str) -> int:
        if not isinstance(s, str):
            raise TypeError(f"Expected str, not {type(s).__name__}")
        base = self.base
        index = self.alphabet.index
        result = 0
        for i, char in enumerate(s):
            try:
                d = index[char]
            except KeyError:
                raise DecodeError(char, i) from None
            result = result * base + d
        return result

    def encode(self, bts: bytes) -> str:
        if not isinstance(bts, (bytes, bytearray, memoryview)):
            raise TypeError(f"Expected a bytes-like object, not {type(bts).__name__}")
        return self.encode_int(bytes_to_int(bts))

    def decode(self, s: str) -> bytes:
        return int_to_bytes(self.decode_int(s))

    encode_to_string = encode
    decode_string = decode

    def random(self, n: int, source: Optional[RandomSource] = None) -> str:
        """Encode n bytes drawn from source.

        source is either a callable returning the requested number of bytes or a binary
        file-like object, defaults to secrets.token_bytes. OSError from the source is not
        caught, a short read raises OSError as well.
        """
        if n < 0:
            raise ValueError('Cannot draw a negative number of bytes')
        if source is None:
            source = secrets.token_bytes
        read = getattr(source, 'read', source)

        logger.debug("Drawing %d random bytes for a base-%d token", n, self.base)
        bts = read(n)
        if bts is None or len(bts) != n:
            got = 0 if bts is None else len(bts)
            raise OSError(f"Random source returned {got} of {n} requested bytes")
        return self.encode(bts)

    def must_random(self, n: int, source: Optional[RandomSource] = None) -> str:
        """Like random() but a failing source is fatal"""
        try:
            return self.random(n, source)
        except OSError as e:
            raise EntropyError(f"Could not read {n} random bytes: {e}") from e

    def __eq__(self, other):
        if not isinstance(other, Encoding):
            return NotImplemented
        return self.alphabet == other.alphabet

    def __hash__(self):
        return hash(self.alphabet)

    def __repr__(self):
        return f"Encoding({self.alphabet.symbols!r})"


BASE62 = Encoding('0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz')

# bitcoin alphabet, no 0 O I l
BASE58 = Encoding('123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz')
