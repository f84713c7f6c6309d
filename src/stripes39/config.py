"""
Geometry defaults.

Values here are immutable; callers who want other defaults build their
own GeometryConfig and pass it along.
"""
import os
from collections import namedtuple
from math import isfinite


# wide/narrow ratio limits recommended for Code 39 legibility
MIN_RATIO = 1.8
MAX_RATIO = 3.0
DEFAULT_RATIO = 2.0

# narrow element width in fixed-width mode, in caller units
FIXED_NARROW_WIDTH = 1.0

ENV_RATIO = "STRIPES39_RATIO"
ENV_NARROW_WIDTH = "STRIPES39_NARROW_WIDTH"


class GeometryConfig(namedtuple("GeometryConfig",
                                "ratio fixed_narrow_width")):
    """Snapshot of defaults used when a geometry call omits them"""
    __slots__ = ()

    def replace(self, **changes):
        return self._replace(**changes)


DEFAULT_CONFIG = GeometryConfig(DEFAULT_RATIO, FIXED_NARROW_WIDTH)


def _positive_float(name, value):
    try:
        number = float(value)
    except ValueError:
        raise ValueError("{} must be a number, got {!r}".format(name, value))
    if not (isfinite(number) and number > 0):
        raise ValueError("{} must be finite and positive, got {!r}".format(name, value))
    return number


def from_environ(environ=None, base=DEFAULT_CONFIG):
    """Returns config with overrides taken from environment variables

    :param environ:     Mapping to read, os.environ by default
    :param base:        Config supplying values that aren't overridden
    :return:            New GeometryConfig"""
    if environ is None:
        environ = os.environ
    config = base
    if environ.get(ENV_RATIO):
        config = config.replace(
            ratio=_positive_float(ENV_RATIO, environ[ENV_RATIO])
        )
    if environ.get(ENV_NARROW_WIDTH):
        config = config.replace(
            fixed_narrow_width=_positive_float(
                ENV_NARROW_WIDTH, environ[ENV_NARROW_WIDTH]
            )
        )
    return config
