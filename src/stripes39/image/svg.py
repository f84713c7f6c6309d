import logging
from io import StringIO

from .image import BarcodeImage, color_hex


logger = logging.getLogger(__name__)


def _number(value):
    """Formats coordinate without trailing zeros"""
    return "{:.4f}".format(value).rstrip("0").rstrip(".")


class SvgBarcodeImage(BarcodeImage):
    file_open_mode = "w"

    """Class for saving barcode image as .svg file

    Coordinates keep their fractional part, shape-rendering is set to
    crispEdges so viewers don't antialias bar edges."""
    SVG_OPEN = '<svg xmlns="http://www.w3.org/2000/svg"\n'\
        '    version="1.1" shape-rendering="crispEdges"\n'\
        '    width="{width}" height="{height}"'\
        ' viewBox="0 0 {width} {height}">\n'
    SVG_CLOSE = "</svg>\n"
    RECTANGLE = '    <rect x="{x}" y="{y}" width="{width}"'\
                ' height="{height}" fill="{fill}" />\n'

    def _write_header(self, image_file):
        width = _number(self.geometry.width)
        height = _number(self.geometry.height)
        image_file.write(self.SVG_OPEN.format(width=width, height=height))
        image_file.write(
            self.RECTANGLE.format(
                x=0,
                y=0,
                width=width,
                height=height,
                fill=color_hex(self.background)
            )
        )

    def _write_bars(self, image_file):
        fill = color_hex(self.foreground)
        count = 0
        for x, y, width, height in self.bar_rectangles():
            image_file.write(
                self.RECTANGLE.format(
                    x=_number(x),
                    y=_number(y),
                    width=_number(width),
                    height=_number(height),
                    fill=fill
                )
            )
            count += 1
        logger.debug("Wrote %d bars to svg", count)

    def _write_finish(self, image_file):
        image_file.write(self.SVG_CLOSE)

    def data(self):
        """Returns whole svg document as string"""
        out = StringIO()
        self.write(out)
        return out.getvalue()
