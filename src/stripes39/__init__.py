"""
Code 39 barcode generator.

Encodes text as Plain, Mod 43, Full ASCII or Extended Mod 43 Code 39,
lays the elements out as bars and spaces and writes them as svg, png
or bmp images.
"""
from .config import DEFAULT_CONFIG, GeometryConfig
from .errors import (
    Code39Error, EmptyInputError, InvalidGeometryTargetError,
    ReservedCharacterError, UnsupportedCharacterError,
)
from .encoding.code39 import (
    Code39, VARIANTS, PLAIN, MOD43, FULL_ASCII, EXTENDED_MOD43,
    encode, encode_plain, encode_mod43, encode_full_ascii,
    encode_extended_mod43,
)
from .geometry import (
    Geometry, Insets, Segment, auto_fit, compute_geometry, fixed_width,
)
from .image import BmpBarcodeImage, PngBarcodeImage, SvgBarcodeImage

__version__ = "0.1.0"
