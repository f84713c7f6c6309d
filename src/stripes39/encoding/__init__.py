from .encoding import BarcodeEncoding
from .code39 import (
    Code39, VARIANTS, PLAIN, MOD43, FULL_ASCII, EXTENDED_MOD43,
)
