import logging

from .encoding import BarcodeEncoding
from ..errors import (
    EmptyInputError, ReservedCharacterError, UnsupportedCharacterError,
)


logger = logging.getLogger(__name__)

PLAIN = "plain"
MOD43 = "mod43"
FULL_ASCII = "full_ascii"
EXTENDED_MOD43 = "extended_mod43"

VARIANTS = (PLAIN, MOD43, FULL_ASCII, EXTENDED_MOD43)


class Code39(BarcodeEncoding):
    """Encoder for Code39 barcodes.

    Every symbol is nine elements, bar-space-bar-...-bar, three of them
    wide. Elements are written as bits, 1 for wide, 0 for narrow."""
    alphabet = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ-. $/+%*"

    # element patterns in alphabet order
    pattern = [
        0b000110100, 0b100100001, 0b001100001, 0b101100000, 0b000110001,
        0b100110000, 0b001110000, 0b000100101, 0b100100100, 0b001100100,
        0b100001001, 0b001001001, 0b101001000, 0b000011001, 0b100011000,
        0b001011000, 0b000001101, 0b100001100, 0b001001100, 0b000011100,
        0b100000011, 0b001000011, 0b101000010, 0b000010011, 0b100010010,
        0b001010010, 0b000000111, 0b100000110, 0b001000110, 0b000010110,
        0b110000001, 0b011000001, 0b111000000, 0b010010001, 0b110010000,
        0b011010000, 0b010000101, 0b110000100, 0b011000100, 0b010101000,
        0b010100010, 0b010001010, 0b000101010, 0b010010100
    ]

    # start and stop symbol, never part of the data
    sentinel = "*"

    code_bitlength = 9

    # narrow space between two symbols
    gap = 0

    # checksum modulus, alphabet without the sentinel
    modulus = 43

    # Full ASCII escapes for characters outside the alphabet,
    # lowercase letters are handled separately
    escapes = {
        "!": "/A", '"': "/B", "#": "/C", "&": "/F", "'": "/G",
        "(": "/H", ")": "/I", "*": "/J", ",": "/L", ":": "/Z",
        ";": "%F", "<": "%G", "=": "%H", ">": "%I", "?": "%J",
        "@": "%V", "[": "%K", "\\": "%L", "]": "%M", "^": "%N",
        "_": "%O", "`": "%W", "{": "%P", "|": "%Q", "}": "%R",
        "~": "%S", "\t": "$I", "\n": "$M",
    }

    @classmethod
    def index_of(cls, symbol, position=None):
        """Returns value of alphabet symbol

    :param str symbol:      string of length one
    :param int position:    position of symbol, used in error message
    :return:                zero based index in alphabet"""
        index = cls.alphabet.find(symbol) if len(symbol) == 1 else -1
        if index < 0:
            raise UnsupportedCharacterError(symbol, position)
        return index

    @classmethod
    def pattern_of(cls, symbol):
        """Returns element pattern of alphabet symbol as 9 bit integer"""
        return cls.pattern[cls.index_of(symbol)]

    @classmethod
    def pattern_flags(cls, symbol):
        return tuple(cls.bits(cls.pattern_of(symbol), cls.code_bitlength))

    @classmethod
    def _upper(cls, s):
        """Uppercases text one character at a time, so error positions
stay valid for the text the caller passed"""
        upper = []
        for position, char in enumerate(s):
            symbol = char.upper()
            if len(symbol) != 1:
                raise UnsupportedCharacterError(char, position)
            upper.append(symbol)
        return "".join(upper)

    @classmethod
    def _codes(cls, s):
        """Validates payload and returns list of symbol values"""
        if not s:
            raise EmptyInputError("Nothing to encode")
        codes = []
        for position, char in enumerate(s):
            code = cls.index_of(char, position)
            if char == cls.sentinel:
                raise ReservedCharacterError(char, position)
            codes.append(code)
        return codes

    @classmethod
    def encode(cls, s):
        """Encodes uppercase payload to series of elements

    :param str s:       Data to encode, alphabet characters only
    :return:            Yields 1 for wide element, 0 for narrow"""
        codes = cls._codes(s)
        stop = cls.pattern_of(cls.sentinel)
        yield from cls.bits(stop, cls.code_bitlength)
        for code in codes:
            yield cls.gap
            yield from cls.bits(cls.pattern[code], cls.code_bitlength)
        yield cls.gap
        yield from cls.bits(stop, cls.code_bitlength)

    @classmethod
    def checksum(cls, s):
        """Computes Mod 43 check value

    :param str s:       Text made of alphabet characters, sentinel excluded
    :return:            Index of check symbol in alphabet"""
        return sum(cls._codes(cls._upper(s))) % cls.modulus

    @classmethod
    def with_checksum(cls, s):
        """Returns uppercased text followed by its Mod 43 check symbol"""
        s = cls._upper(s)
        return s + cls.alphabet[cls.checksum(s)]

    @classmethod
    def _escape(cls, char, position):
        if char in cls.alphabet and char != cls.sentinel:
            return char
        if "a" <= char <= "z":
            return "+" + char.upper()
        escaped = cls.escapes.get(char)
        if escaped is None:
            raise UnsupportedCharacterError(char, position, "Full ASCII Code39")
        return escaped

    @classmethod
    def full_ascii(cls, s):
        """Expands text to Code39 alphabet using Full ASCII escapes

    :param str s:       Text to expand
    :return:            Text where every character is one or two
                        alphabet symbols"""
        if not s:
            raise EmptyInputError("Nothing to encode")
        return "".join(
            cls._escape(char, position) for position, char in enumerate(s)
        )

    @classmethod
    def _extended_mod43(cls, s):
        return cls.with_checksum(cls.full_ascii(s))

    @classmethod
    def transform(cls, s, variant=PLAIN):
        """Returns payload that the core encoder receives for given variant

    :param str s:           Data to encode
    :param str variant:     "plain", "mod43", "full_ascii" or
                            "extended_mod43"
    :return:                Uppercase text of alphabet symbols"""
        variants = {
            PLAIN: cls._upper,
            MOD43: cls.with_checksum,
            FULL_ASCII: cls.full_ascii,
            EXTENDED_MOD43: cls._extended_mod43,
        }
        transform = variants.get(variant, None)
        if transform is None:
            raise ValueError("Unsupported variant {!r}".format(variant))
        if not s:
            raise EmptyInputError("Nothing to encode")
        payload = transform(s)
        if payload != s:
            logger.debug("%s variant turned %r into %r", variant, s, payload)
        return payload

    @classmethod
    def bars(cls, s, variant=PLAIN):
        """Encodes data to elements according to selected variant

    :param str s:           Data to encode
    :param str variant:     Code39 variant
    :return:                Yields elements (0 narrow, 1 wide)"""
        payload = cls.transform(s, variant)
        yield from cls.encode(payload)


def encode(payload, variant=PLAIN):
    """Encodes payload to code string using selected variant"""
    return Code39.code_string(Code39.transform(payload, variant))


def encode_plain(payload):
    return encode(payload, PLAIN)


def encode_mod43(payload):
    return encode(payload, MOD43)


def encode_full_ascii(payload):
    return encode(payload, FULL_ASCII)


def encode_extended_mod43(payload):
    return encode(payload, EXTENDED_MOD43)
