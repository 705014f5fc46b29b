import os
import logging
from enum import Enum, unique

from basen.encoding import Encoding, BASE62, BASE58
from basen.error import UnknownEncodingError

logger = logging.getLogger(__name__)


@unique
class ENCODING(Enum):
    BASE62 = 'base62'
    BASE58 = 'base58'


encodings = {
    ENCODING.BASE62: BASE62,
    ENCODING.BASE58: BASE58
}


def current_encoding() -> ENCODING:
    name = os.environ.get('BASEN_ENCODING', 'base62')
    try:
        return ENCODING(name.lower())
    except ValueError:
        raise UnknownEncodingError(f"Unknown encoding {name!r}, expected one of {[e.value for e in ENCODING]}") from None


def get_encoding(name=None) -> Encoding:
    """The predefined Encoding for name, or the configured default.

    BASEN_ALPHABET takes precedence over BASEN_ENCODING when no name is given.
    """
    if name is None:
        alphabet = os.environ.get('BASEN_ALPHABET')
        if alphabet:
            logger.debug("Using custom alphabet from BASEN_ALPHABET")
            return Encoding(alphabet)
        enc = current_encoding()
    elif isinstance(name, ENCODING):
        enc = name
    else:
        try:
            enc = ENCODING(name.lower())
        except ValueError:
            raise UnknownEncodingError(f"Unknown encoding {name!r}") from None
    logger.debug("Resolved default encoding %s", enc.value)
    return encodings[enc]
