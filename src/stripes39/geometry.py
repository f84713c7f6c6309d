"""
Turns a Code39 code string into bar and space widths.

Two modes are supported. Auto-fit spreads the code string over the
width of a given canvas. Fixed-width uses a known narrow element width
and derives the canvas width from it.
"""
import logging
from collections import namedtuple
from math import isfinite

from .config import DEFAULT_CONFIG, MAX_RATIO, MIN_RATIO
from .errors import EmptyInputError, InvalidGeometryTargetError


logger = logging.getLogger(__name__)


Segment = namedtuple("Segment", "is_bar width")


class Insets(namedtuple("Insets", "top left bottom right")):
    """Margins between canvas edges and the bars"""
    __slots__ = ()

    def __new__(cls, top=0, left=0, bottom=0, right=0):
        return super().__new__(cls, top, left, bottom, right)

    @property
    def horizontal(self):
        return self.left + self.right

    @property
    def vertical(self):
        return self.top + self.bottom


Geometry = namedtuple(
    "Geometry",
    "width height x y bar_height narrow_width wide_width ratio segments"
)
Geometry.__doc__ = """Computed layout of a barcode

width, height:              whole canvas
x, y:                       top left corner of the first bar
bar_height:                 height shared by every bar
narrow_width, wide_width:   element widths
ratio:                      clamped wide/narrow ratio
segments:                   tuple of Segment, left to right"""


def clamp_ratio(ratio):
    return max(MIN_RATIO, min(MAX_RATIO, ratio))


def total_units(code_string, ratio):
    """Width of code string measured in narrow elements"""
    return sum(ratio if element == "1" else 1 for element in code_string)


def element_widths(code_string, narrow_width, wide_width):
    for element in code_string:
        yield wide_width if element == "1" else narrow_width


def segments(code_string, narrow_width, wide_width):
    """Builds segments, even positions are bars, odd positions spaces"""
    return tuple(
        Segment(i % 2 == 0, width)
        for i, width in enumerate(
            element_widths(code_string, narrow_width, wide_width)
        )
    )


def _positive(value):
    # NaN and infinity are not usable sizes
    return isfinite(value) and value > 0


def _check_code_string(code_string):
    if not code_string:
        raise EmptyInputError("Code string is empty")
    if code_string.strip("01"):
        raise ValueError("Code string must contain only 0 and 1")


def _check_insets(insets):
    if insets is None:
        return Insets()
    insets = Insets(*insets)
    if not all(isfinite(inset) and inset >= 0 for inset in insets):
        raise InvalidGeometryTargetError(
            "Insets must be finite and non negative: {}".format(insets)
        )
    return insets


def _resolve_ratio(ratio, config):
    if ratio is None:
        ratio = config.ratio
    valid_ratio = clamp_ratio(ratio)
    if valid_ratio != ratio:
        logger.debug("Ratio %r clamped to %r", ratio, valid_ratio)
    return valid_ratio


def auto_fit(code_string, size, insets=None, ratio=None, narrow_width=None,
             config=DEFAULT_CONFIG):
    """Fits code string into a canvas of given size

    :param str code_string:     Elements, "1" for wide, "0" for narrow
    :param size:                (width, height) of the canvas
    :param insets:              Insets or (top, left, bottom, right)
    :param float ratio:         Wide/narrow ratio, config.ratio if None
    :param float narrow_width:  Narrow width, computed to fill the
                                canvas unless positive
    :param config:              GeometryConfig with defaults
    :return:                    Geometry"""
    _check_code_string(code_string)
    width, height = size
    if not (_positive(width) and _positive(height)):
        raise InvalidGeometryTargetError(
            "Canvas size must be positive, got {}x{}".format(width, height)
        )
    insets = _check_insets(insets)
    available_width = width - insets.horizontal
    bar_height = height - insets.vertical
    if not (_positive(available_width) and _positive(bar_height)):
        raise InvalidGeometryTargetError(
            "Insets {} leave no room on {}x{} canvas".format(
                tuple(insets), width, height
            )
        )
    ratio = _resolve_ratio(ratio, config)
    if narrow_width is not None and _positive(narrow_width):
        narrow = narrow_width
    else:
        narrow = available_width / total_units(code_string, ratio)
    wide = narrow * ratio
    logger.debug(
        "Auto-fit %d elements into %rx%r: narrow %r, wide %r",
        len(code_string), width, height, narrow, wide
    )
    return Geometry(
        width=width,
        height=height,
        x=insets.left,
        y=insets.top,
        bar_height=bar_height,
        narrow_width=narrow,
        wide_width=wide,
        ratio=ratio,
        segments=segments(code_string, narrow, wide),
    )


def fixed_width(code_string, height, insets=None, ratio=None,
                narrow_width=None, config=DEFAULT_CONFIG):
    """Lays out code string with known narrow width and derives canvas width

    :param str code_string:     Elements, "1" for wide, "0" for narrow
    :param float height:        Canvas height
    :param insets:              Insets or (top, left, bottom, right)
    :param float ratio:         Wide/narrow ratio, config.ratio if None
    :param float narrow_width:  Narrow width, config.fixed_narrow_width
                                unless positive
    :param config:              GeometryConfig with defaults
    :return:                    Geometry"""
    _check_code_string(code_string)
    if not _positive(height):
        raise InvalidGeometryTargetError(
            "Height must be positive, got {}".format(height)
        )
    insets = _check_insets(insets)
    bar_height = height - insets.vertical
    if not _positive(bar_height):
        raise InvalidGeometryTargetError(
            "Insets {} leave no room for bars {} high".format(
                tuple(insets), height
            )
        )
    ratio = _resolve_ratio(ratio, config)
    if narrow_width is not None and _positive(narrow_width):
        narrow = narrow_width
    else:
        narrow = config.fixed_narrow_width
    wide = narrow * ratio
    bars = segments(code_string, narrow, wide)
    width = sum(segment.width for segment in bars)
    width = width + insets.left + insets.right
    logger.debug(
        "Fixed-width layout of %d elements: narrow %r, wide %r, canvas %rx%r",
        len(code_string), narrow, wide, width, height
    )
    return Geometry(
        width=width,
        height=height,
        x=insets.left,
        y=insets.top,
        bar_height=bar_height,
        narrow_width=narrow,
        wide_width=wide,
        ratio=ratio,
        segments=bars,
    )


def compute_geometry(code_string, size=None, height=None, insets=None,
                     ratio=None, narrow_width=None, config=DEFAULT_CONFIG):
    """Computes bar layout, auto-fit when size is given, fixed-width
when height is given. Exactly one of them must be supplied."""
    if (size is None) == (height is None):
        raise TypeError("Exactly one of size and height must be given")
    if size is not None:
        return auto_fit(code_string, size, insets, ratio, narrow_width, config)
    return fixed_width(code_string, height, insets, ratio, narrow_width,
                       config)
