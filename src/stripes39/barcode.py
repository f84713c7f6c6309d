import argparse
import logging
from math import isfinite

from .config import from_environ
from .encoding.code39 import Code39, VARIANTS, PLAIN
from .errors import Code39Error
from .geometry import Insets, compute_geometry

from .image.svg import SvgBarcodeImage
from .image.png import PngBarcodeImage
from .image.bmp import BmpBarcodeImage


logger = logging.getLogger(__name__)


def positive_number(value):
    number = float(value)
    if not (isfinite(number) and number > 0):
        raise argparse.ArgumentTypeError(
            "{!r} is not a finite positive number".format(value)
        )
    return number


def finite_number(value):
    number = float(value)
    if not isfinite(number):
        raise argparse.ArgumentTypeError(
            "{!r} is not a finite number".format(value)
        )
    return number


def insets(value):
    try:
        parts = [float(part) for part in value.split(",")]
        if not all(isfinite(part) for part in parts):
            parts = []
    except ValueError:
        parts = []
    if len(parts) == 1:
        parts *= 4
    if len(parts) != 4 or min(parts) < 0:
        raise argparse.ArgumentTypeError(
            "Insets must be one or four non negative numbers "
            "TOP,LEFT,BOTTOM,RIGHT, got {!r}".format(value)
        )
    return Insets(*parts)


parser = argparse.ArgumentParser(
    description="Generate an image of Code39 barcode",
)
parser.add_argument(
    "--file-type",
    type=str,
    default="png",
    choices=["svg", "png", "bmp"],
    help="Generated image filetype."
)
parser.add_argument(
    "--variant",
    type=str,
    default=PLAIN,
    choices=VARIANTS,
    help="Code39 variant. full_ascii variants encode lowercase letters "
         "and punctuation, mod43 variants append a check symbol."
)
parser.add_argument(
    "--width",
    type=positive_number,
    default=None,
    help="Image width. Bars are stretched to fill it. When omitted, "
         "width is derived from narrow bar width."
)
parser.add_argument(
    "--height",
    type=positive_number,
    default=50,
    help="Image height, including top and bottom insets."
)
parser.add_argument(
    "--ratio",
    type=finite_number,
    default=None,
    help="Wide to narrow element ratio, kept between 1.8 and 3.0."
)
parser.add_argument(
    "--narrow-width",
    type=positive_number,
    default=None,
    help="Narrow element width. Computed from --width when omitted."
)
parser.add_argument(
    "--insets",
    type=insets,
    default=Insets(),
    help="Margins around bars, TOP,LEFT,BOTTOM,RIGHT or a single value."
)
parser.add_argument(
    "--background",
    type=str,
    default="#fff",
    help="Background color, #rgb or #rrggbb."
)
parser.add_argument(
    "--foreground",
    type=str,
    default="#000",
    help="Bar color, #rgb or #rrggbb."
)
parser.add_argument(
    "--verbose",
    action="store_true",
    help="Log encoding and layout details."
)
parser.add_argument(
    "content",
    type=str,
    help="Content of barcode."
)
parser.add_argument(
    "out",
    type=str,
    help="Output path."
)


def main(cmd_args=None):
    image_classes = {
        "svg": SvgBarcodeImage,
        "png": PngBarcodeImage,
        "bmp": BmpBarcodeImage
    }
    if cmd_args is None:
        args = parser.parse_args()
    else:
        args = parser.parse_args(cmd_args)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING
    )

    image_class = image_classes.get(args.file_type)
    if image_class is None:
        raise ValueError(
            "Unknown image file type {!r}".format(args.file_type)
        )
    try:
        config = from_environ()
    except ValueError as error:
        parser.error(str(error))

    try:
        code_string = Code39.code_string(
            Code39.transform(args.content, args.variant)
        )
        if args.width is not None:
            geometry = compute_geometry(
                code_string,
                size=(args.width, args.height),
                insets=args.insets,
                ratio=args.ratio,
                narrow_width=args.narrow_width,
                config=config,
            )
        else:
            geometry = compute_geometry(
                code_string,
                height=args.height,
                insets=args.insets,
                ratio=args.ratio,
                narrow_width=args.narrow_width,
                config=config,
            )
    except Code39Error as error:
        parser.exit(1, "{}: error: {}\n".format(parser.prog, error))

    try:
        image = image_class(
            geometry,
            background=args.background,
            foreground=args.foreground,
        )
    except ValueError as error:
        parser.error(str(error))
    with open(args.out, image.file_open_mode) as image_file:
        image.write(image_file)
    logger.info("Wrote %s barcode to %s", args.variant, args.out)


if __name__ == "__main__":
    main()
