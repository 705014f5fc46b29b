class AlphabetError(ValueError):
    pass


class DecodeError(ValueError):
    def __init__(self, character, position):
        self.character = character
        self.position = position
        super().__init__(f"invalid character {character!r} at index {position}")


class EntropyError(RuntimeError):
    pass


class UnknownEncodingError(ValueError):
    pass
