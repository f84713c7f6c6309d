class Code39Error(ValueError):
    """Base class of every classified encoding or geometry failure"""


class EmptyInputError(Code39Error):
    """Payload (or code string) is empty"""


class UnsupportedCharacterError(Code39Error):
    """Character has no Code 39 mapping

    :param str char:        Offending character
    :param int position:    Its index in the text being encoded, if known"""
    def __init__(self, char, position=None, encoding="Code39"):
        self.char = char
        self.position = position
        if position is None:
            message = "Character {!r} can't be encoded in {}".format(
                char, encoding
            )
        else:
            message = "Character {!r} at position {} can't be encoded " \
                      "in {}".format(char, position, encoding)
        super().__init__(message)


class ReservedCharacterError(Code39Error):
    """Start/stop sentinel found in payload data"""
    def __init__(self, char, position=None):
        self.char = char
        self.position = position
        super().__init__(
            "Character {!r} at position {} is reserved for start "
            "and stop".format(char, position)
        )


class InvalidGeometryTargetError(Code39Error):
    """Canvas size, height or insets leave no room for bars"""
