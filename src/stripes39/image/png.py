import logging
from zlib import compress, crc32
from abc import ABC, abstractmethod

from .image import BarcodeImage


logger = logging.getLogger(__name__)


class PngBarcodeImage(BarcodeImage):
    """Class for saving barcode image as 1 bit indexed color .png file,
palette index 0 is background, 1 is bar color"""
    HEADER = b"\x89PNG\r\n\x1a\x0a"

    class Chunk(ABC):
        def __init__(self, type_):
            self.type = type_

        @staticmethod
        def encode_int(i, size=4):
            return i.to_bytes(size, "big")

        @abstractmethod
        def payload(self):
            """Return iterable of bytes that make the content of chunk"""
            pass

        def to_bytes(self):
            payload_bytes = b"".join(self.payload())
            length = self.encode_int(len(payload_bytes))
            type_and_payload = self.type + payload_bytes
            crc = self.encode_int(crc32(type_and_payload))
            return length + type_and_payload + crc

    class IhdrChunk(Chunk):
        INDEXED_COLOUR = 3
        NO_INTERLACE = 0

        def __init__(self, width, height, bit_depth, color_type):
            super().__init__(b"IHDR")
            self.width = width
            self.height = height
            self.bit_depth = bit_depth
            self.color_type = color_type
            self.compression_method = 0  # only deflate
            self.filter_method = 0  # only adaptive filtering with 5 basic types
            self.interlace_method = self.NO_INTERLACE

        def payload(self):
            yield self.encode_int(self.width)
            yield self.encode_int(self.height)
            yield self.encode_int(self.bit_depth, 1)
            yield self.encode_int(self.color_type, 1)
            yield self.encode_int(self.compression_method, 1)
            yield self.encode_int(self.filter_method, 1)
            yield self.encode_int(self.interlace_method, 1)

    class PlteChunk(Chunk):
        def __init__(self, colors):
            super().__init__(b"PLTE")
            self.colors = colors

        def payload(self):
            for color in self.colors:
                yield bytes(color)

    class IdatChunk(Chunk):
        NONE_FILTER = 0
        UP_FILTER = 2

        def __init__(self):
            super().__init__(b"IDAT")
            self._payload = bytearray()

        @classmethod
        def encode_line(cls, pixels):
            """Packs row of 1 bit pixels to bytes, last byte padded
with zero bits"""
            value = 0
            for pixel in pixels:
                value = (value << 1) | pixel
            padding = -len(pixels) % 8
            value <<= padding
            return value.to_bytes((len(pixels) + padding) // 8, "big")

        def set_payload_from_rows(self, rows):
            # a row equal to the previous one is stored as zero
            # differences with the Up filter, which deflate shrinks well
            lines = bytearray()
            prev_row = None
            encoded = b""
            for row in rows:
                if row is prev_row or row == prev_row:
                    lines.append(self.UP_FILTER)
                    lines.extend(bytes(len(encoded)))
                else:
                    encoded = self.encode_line(row)
                    lines.append(self.NONE_FILTER)
                    lines.extend(encoded)
                prev_row = row
            self._payload = lines

        def payload(self):
            yield compress(self._payload)

    class IendChunk(Chunk):
        def __init__(self):
            super().__init__(b"IEND")

        def payload(self):
            yield b""

    def _write_header(self, image_file):
        image_file.write(self.HEADER)
        ihdr = self.IhdrChunk(
            self.image_width,
            self.image_height,
            1,  # palette index bit depth
            self.IhdrChunk.INDEXED_COLOUR
        )
        image_file.write(ihdr.to_bytes())
        plte = self.PlteChunk([self.background, self.foreground])
        image_file.write(plte.to_bytes())

    def _write_bars(self, image_file):
        self.idat = self.IdatChunk()
        self.idat.set_payload_from_rows(self.pixel_rows())

    def _write_finish(self, image_file):
        image_file.write(self.idat.to_bytes())
        image_file.write(self.IendChunk().to_bytes())
        logger.debug(
            "Wrote %dx%d png", self.image_width, self.image_height
        )
