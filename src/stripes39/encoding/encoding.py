from abc import ABC, abstractmethod


class BarcodeEncoding(ABC):
    """Linear barcode base class"""

    @classmethod
    def bits(cls, number, bit_length):
        for shift in range(bit_length - 1, -1, -1):
            yield (number >> shift) & 1

    @classmethod
    @abstractmethod
    def encode(cls, data):
        """Yields elements of the barcode, 1 for wide, 0 for narrow"""
        raise NotImplementedError

    @classmethod
    def code_string(cls, data):
        """Encodes data to string of "0" (narrow) and "1" (wide) elements"""
        return "".join("1" if element else "0" for element in cls.encode(data))
