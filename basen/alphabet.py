import logging
from types import MappingProxyType
from typing import Union

from basen.error import AlphabetError

__all__ = ['Alphabet']

logger = logging.getLogger(__name__)


class Alphabet:
    """An ordered set of single-byte digit symbols. The number of symbols is the radix"""

    __slots__ = ('symbols', 'index')

    def __init__(self, symbols: Union[str, bytes]):
        if isinstance(symbols, (bytes, bytearray)):
            symbols = bytes(symbols).decode('latin-1')
        if not isinstance(symbols, str):
            raise TypeError(f"Alphabet must be str or bytes, not {type(symbols).__name__}")

        for symbol in symbols:
            if ord(symbol) > 0xff:
                raise AlphabetError(f"Symbol {symbol!r} does not fit in a single byte")

        index = {}
        for i, symbol in enumerate(symbols):
            if symbol in index:
                raise AlphabetError(f"Symbol {symbol!r} appears more than once in the alphabet")
            index[symbol] = i

        if len(index) < 2:
            raise AlphabetError('An alphabet needs at least 2 symbols')

        object.__setattr__(self, 'symbols', symbols)
        object.__setattr__(self, 'index', MappingProxyType(index))
        logger.debug("Built base-%d alphabet %r", len(symbols), symbols)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __reduce__(self):
        return (self.__class__, (self.symbols,))

    @property
    def base(self) -> int:
        return len(self.symbols)

    def digit(self, symbol: str) -> int:
        return self.index[symbol]

    def symbol(self, digit: int) -> str:
        return self.symbols[digit]

    def __len__(self):
        return len(self.symbols)

    def __iter__(self):
        return iter(self.symbols)

    def __contains__(self, symbol):
        return symbol in self.index

    def __eq__(self, other):
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self.symbols == other.symbols

    def __hash__(self):
        return hash(self.symbols)

    def __repr__(self):
        return f"Alphabet({self.symbols!r})"
