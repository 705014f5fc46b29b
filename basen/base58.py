from basen.encoding import BASE58 as ENCODING

ALPHABET = ENCODING.alphabet.symbols
BASE = len(ALPHABET)


def encode(bts: bytes) -> str:
    return ENCODING.encode(bts)


def decode(b58: str) -> bytes:
    return ENCODING.decode(b58)


def random(n: int, source=None) -> str:
    return ENCODING.random(n, source)
