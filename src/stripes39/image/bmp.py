import logging

from .image import BarcodeImage


logger = logging.getLogger(__name__)


class BmpBarcodeImage(BarcodeImage):
    """Class for saving barcode image as 1 bit .bmp file with
two color palette, background and bar color"""
    bits_per_pixel = 1

    @classmethod
    def _unpadded_width(cls, width, bits_per_pixel):
        """Returns size of image row in bytes, without padding

        :param int width:           Number of pixels in row
        :param int bits_per_pixel:  Pixel size in bits
        :return:                    Size of row in bytes without padding"""
        return (width * bits_per_pixel - 1) // 8 + 1

    @classmethod
    def _width_alignment(cls, width):
        """Computes alignment for image row - number of extra bytes
to make row byte size divisible by four.

        :param int width:       Number of pixels in row
        :return:                Number of alignment bytes"""
        return -width % 4

    @classmethod
    def _padded_width(cls, width, bits_per_pixel):
        unpadded = cls._unpadded_width(width, bits_per_pixel)
        return unpadded + cls._width_alignment(unpadded)

    @classmethod
    def header(cls, width, height, bits_per_pixel, palette):
        """Returns bitmap file header for image of given parameters

        :param int width:           Width of image in pixels
        :param int height:          Height of image in pixels
        :param int bits_per_pixel:  Pixel size in bits
        :param palette:             List of (r, g, b) colors
        :return:                    Bitmap header bytes"""
        padded_width = cls._padded_width(width, bits_per_pixel)
        raw_bmp_size = height * padded_width
        offset = 54 + 4 * len(palette)  # pixel data offset
        file_size = offset + raw_bmp_size
        header_bytes = b"".join((
            b"BM",
            file_size.to_bytes(4, "little"),
            (0).to_bytes(4, "little"),
            offset.to_bytes(4, "little"),
            (40).to_bytes(4, "little"),  # dib header size
            width.to_bytes(4, "little"),
            # pixel rows are stored in reversed order unless height is negative
            (-height & 0xFFFFFFFF).to_bytes(4, "little"),
            (1).to_bytes(2, "little"),  # color planes
            bits_per_pixel.to_bytes(2, "little"),
            (0).to_bytes(4, "little"),
            raw_bmp_size.to_bytes(4, "little"),
            (2835).to_bytes(4, "little"),  # pixels per meter
            (2835).to_bytes(4, "little"),  # pixels per meter
            len(palette).to_bytes(4, "little"),
            (0).to_bytes(4, "little")
        ))
        # palette entries are stored as blue, green, red, reserved
        for r, g, b in palette:
            header_bytes += bytes((b, g, r, 0))
        return header_bytes

    @classmethod
    def encode_line(cls, pixels):
        """Encodes single image row

        :param pixels:      Palette index of every pixel (0 or 1)
        :return:            Bytes of image line, including padding"""
        width = len(pixels)
        as_int = 0
        for pixel in pixels:
            as_int = (as_int << 1) | pixel
        as_int <<= -width % 8
        unpadded_width = cls._unpadded_width(width, cls.bits_per_pixel)
        translated = as_int.to_bytes(unpadded_width, "big")
        return translated + bytes(cls._width_alignment(unpadded_width))

    def _write_header(self, image_file):
        image_file.write(
            self.header(
                self.image_width,
                self.image_height,
                self.bits_per_pixel,
                [self.background, self.foreground]
            )
        )

    def _write_bars(self, image_file):
        encoded = {}
        for row in self.pixel_rows():
            line = encoded.get(id(row))
            if line is None:
                line = encoded[id(row)] = self.encode_line(row)
            image_file.write(line)

    def _write_finish(self, image_file):
        logger.debug(
            "Wrote %dx%d bmp", self.image_width, self.image_height
        )
