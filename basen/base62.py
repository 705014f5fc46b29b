from basen.encoding import BASE62 as ENCODING

ALPHABET = ENCODING.alphabet.symbols
BASE = len(ALPHABET)


def encode(bts: bytes) -> str:
    return ENCODING.encode(bts)


def decode(b62: str) -> bytes:
    return ENCODING.decode(b62)


def random(n: int, source=None) -> str:
    return ENCODING.random(n, source)
