from .image import BarcodeImage, parse_color
from .svg import SvgBarcodeImage
from .png import PngBarcodeImage
from .bmp import BmpBarcodeImage
