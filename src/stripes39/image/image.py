#!/usr/bin/env python3
# Copyright Petr Machek
#
# Library for generating Code39 barcodes as bitmaps or svg images
#
from abc import ABC, abstractmethod
from math import ceil, floor


def parse_color(color):
    """Converts "#rgb", "#rrggbb" or (r, g, b) to tuple of three ints

    :param color:       Color in one of supported notations
    :return:            (r, g, b) tuple, every component 0-255"""
    if isinstance(color, str):
        value = color[1:] if color.startswith("#") else color
        if len(value) == 3:
            value = "".join(c * 2 for c in value)
        if len(value) != 6:
            raise ValueError("Invalid color {!r}".format(color))
        try:
            return tuple(int(value[i:i + 2], 16) for i in range(0, 6, 2))
        except ValueError:
            raise ValueError("Invalid color {!r}".format(color))
    rgb = tuple(color)
    if len(rgb) != 3 or not all(
        isinstance(c, int) and 0 <= c <= 255 for c in rgb
    ):
        raise ValueError("Invalid color {!r}".format(color))
    return rgb


def color_hex(rgb):
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def _pixel(coordinate):
    # half up, round() would round half to even
    return int(floor(coordinate + 0.5))


class BarcodeImage(ABC):
    file_open_mode = "wb"

    """Abstract class representing image of a Code39 barcode

    The image paints background first, then walks the segments of
    geometry left to right, filling only bars. Bars share the height
    and top edge given by geometry.
    """
    def __init__(self, geometry, background="#fff", foreground="#000"):
        self.geometry = geometry
        self.background = parse_color(background)
        self.foreground = parse_color(foreground)

    @property
    def image_width(self):
        """Total image width in pixels"""
        return int(ceil(self.geometry.width))

    @property
    def image_height(self):
        """Total image height in pixels"""
        return int(ceil(self.geometry.height))

    def bar_rectangles(self):
        """Yields (x, y, width, height) of every bar in canvas units"""
        x = self.geometry.x
        for segment in self.geometry.segments:
            if segment.is_bar:
                yield (x, self.geometry.y, segment.width,
                       self.geometry.bar_height)
            x += segment.width

    def pixel_line(self):
        """Returns one row of pixels crossing the bars, 1 for bar,
0 for background. Bar edges are snapped to whole pixels."""
        width = self.image_width
        line = [0] * width
        for x, _, bar_width, _ in self.bar_rectangles():
            start = max(0, _pixel(x))
            end = min(width, _pixel(x + bar_width))
            for i in range(start, end):
                line[i] = 1
        return line

    def pixel_rows(self):
        """Yields all image rows top to bottom, rows without bars
are background only"""
        top = max(0, _pixel(self.geometry.y))
        bottom = min(
            self.image_height,
            _pixel(self.geometry.y + self.geometry.bar_height)
        )
        empty = [0] * self.image_width
        bars = self.pixel_line()
        for y in range(self.image_height):
            yield bars if top <= y < bottom else empty

    @abstractmethod
    def _write_header(self, image_file):
        pass

    @abstractmethod
    def _write_bars(self, image_file):
        pass

    @abstractmethod
    def _write_finish(self, image_file):
        pass

    def write(self, image_file):
        self._write_header(image_file)
        self._write_bars(image_file)
        self._write_finish(image_file)
