"""
RU: Растеризация строки модулей в монохромное изображение (PIL) и масштабирование без интерполяции.
EN: Module string -> PIL image, plus nearest-neighbour rescaling.

Geometry (fixed symbol-format constants):
    - width = len(composed) + 2 * 2 px horizontal margin
    - height = 28 px
    - bars start 1.5 px below the top and stop 2 px above the bottom; without
      anti-aliasing this covers the rows whose pixel centres lie in that band
      (rows 1..25)

Each "1" module is a crisp 1 px vertical line in the foreground colour, every
other module is left in the background colour. Only these two colours ever
appear in the output.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Final, Optional, Tuple, TypedDict, Union

from PIL import Image, ImageColor, ImageDraw

from src.barcodegen.exceptions import BarcodeGenError

logger = logging.getLogger(__name__)

__all__ = [
    "RasterOptions",
    "rasterize",
    "resize_image",
    "RASTER_HEIGHT",
    "HORIZONTAL_MARGIN",
]

Color = Union[str, Tuple[int, int, int]]

RASTER_HEIGHT: Final[int] = 28
HORIZONTAL_MARGIN: Final[int] = 2
TOP_MARGIN: Final[float] = 1.5
BOTTOM_MARGIN: Final[float] = 2.0

# Первая/последняя строки, центры пикселей которых попадают в полосу штрихов
BAR_TOP: Final[int] = math.ceil(TOP_MARGIN - 0.5)
BAR_BOTTOM: Final[int] = math.floor(RASTER_HEIGHT - BOTTOM_MARGIN - 0.5)


class RasterOptions(TypedDict, total=False):
    """
    Типобезопасные опции растеризации.

    Example:
        >>> options: RasterOptions = {"foreground": "navy", "scale": 3}
        >>> image = rasterize(composed, options)
    """

    background: Color  # Цвет фона (по умолчанию "white")
    foreground: Color  # Цвет штрихов (по умолчанию "black")
    scale: float  # Масштаб относительно 1 px на модуль


_DEFAULT_OPTIONS: Final[Dict[str, Any]] = {
    "background": "white",
    "foreground": "black",
    "scale": 1,
}


def _is_channel(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 255


def _parse_colour(key: str, value: Any) -> Tuple[int, int, int]:
    """Colour name/hex string or 3-4 int channels (0..255) -> RGB tuple."""
    if isinstance(value, str):
        try:
            rgb = ImageColor.getrgb(value)
        except ValueError as e:
            raise BarcodeGenError(f"Invalid {key} colour: {value!r}") from e
    elif (
        isinstance(value, (tuple, list))
        and len(value) in (3, 4)
        and all(_is_channel(channel) for channel in value)
    ):
        rgb = tuple(value)
    else:
        raise BarcodeGenError(f"Invalid {key} colour: {value!r}")
    # Альфа-канал отбрасывается: изображение в режиме RGB
    return rgb[0], rgb[1], rgb[2]


def _resolve_options(options: Optional[RasterOptions]) -> Dict[str, Any]:
    opts = dict(_DEFAULT_OPTIONS)
    if options:
        unknown = set(options) - set(_DEFAULT_OPTIONS)
        if unknown:
            raise BarcodeGenError(f"Unknown raster options: {sorted(unknown)}")
        opts.update(options)
    for key in ("background", "foreground"):
        opts[key] = _parse_colour(key, opts[key])
    return opts


def rasterize(
    composed: str, options: Optional[RasterOptions] = None
) -> Optional[Image.Image]:
    """
    Draw a composed module string.

    Args:
        composed: "1"/"0" module string from compose().
        options: Colours and scale, see RasterOptions.

    Returns:
        New RGB image, or None for an empty symbol.

    Raises:
        BarcodeGenError: unknown option key, bad colour or non-positive scale.
    """
    if not composed:
        logger.debug("Empty composed symbol, nothing to rasterize")
        return None
    opts = _resolve_options(options)

    size = (len(composed) + 2 * HORIZONTAL_MARGIN, RASTER_HEIGHT)
    image = Image.new("RGB", size, color=opts["background"])
    draw = ImageDraw.Draw(image)
    for position, module in enumerate(composed):
        if module == "1":
            x = position + HORIZONTAL_MARGIN
            draw.line(
                [(x, BAR_TOP), (x, BAR_BOTTOM)], fill=opts["foreground"], width=1
            )

    if opts["scale"] != 1:
        image = resize_image(image, opts["scale"])
    logger.debug("Rasterized %d modules into %dx%d", len(composed), *image.size)
    return image


def resize_image(image: Image.Image, scale: float) -> Image.Image:
    """
    Rescale without interpolation (nearest neighbour), integer or fractional.

    The source image is left untouched.

    Example:
        >>> resize_image(img, 2).size == (img.width * 2, img.height * 2)
        True
    """
    if not isinstance(scale, (int, float)) or isinstance(scale, bool) or scale <= 0:
        raise BarcodeGenError(f"Scale must be a positive number, got {scale!r}")
    width = max(1, round(image.width * scale))
    height = max(1, round(image.height * scale))
    return image.resize((width, height), resample=Image.Resampling.NEAREST)
