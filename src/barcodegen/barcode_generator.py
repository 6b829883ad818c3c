from __future__ import annotations

import logging
from dataclasses import dataclass
from io import BytesIO
from typing import Optional, Set

from PIL import Image

from src.barcodegen.composer import compose
from src.barcodegen.exceptions import BarcodeGenError
from src.barcodegen.rasterizer import RasterOptions, rasterize
from src.barcodegen.symbologies import get_spec, supported_symbologies
from src.barcodegen.validator import is_valid
from src.model.enums import Symbology

logger = logging.getLogger(__name__)

__all__ = [
    "BarcodeGenerator",
    "BarcodeGenError",
    "MachineReadableCode",
    "generate_code",
    "generate_code_from_scan",
]


@dataclass(frozen=True)
class MachineReadableCode:
    """
    Scan/decode result handed over by a scanner.

    Attributes:
        value: Decoded content string.
        type: Symbology tag as reported by the scanner (e.g. "org.gs1.EAN-13").
    """

    value: str
    type: str


def generate_code(
    content: str,
    symbology: Symbology,
    options: Optional[RasterOptions] = None,
) -> Optional[Image.Image]:
    """
    Validate, compose and rasterize content.

    Args:
        content: Text to encode.
        symbology: Target linear symbology.
        options: Raster options (colours, scale).

    Returns:
        A new PIL image, or None when content is not encodable.

    Raises:
        TypeError: symbology is not a Symbology.
        BarcodeGenError: invalid raster options.

    Example:
        >>> img = generate_code("123456", Symbology.INTERLEAVED_2OF5)
        >>> img.size
        (54, 28)
    """
    if not is_valid(content, symbology):
        logger.debug("Content %r is not valid for %s", content, symbology.name)
        return None
    image = rasterize(compose(content, symbology), options)
    if image is not None:
        logger.info(
            "1D code generated: %s type, %r chars", symbology.name, len(content)
        )
    return image


def generate_code_from_scan(
    code: MachineReadableCode, options: Optional[RasterOptions] = None
) -> Optional[Image.Image]:
    """Regenerate a scanned code. Unknown or 2D tags give None."""
    symbology = Symbology.from_tag(code.type)
    if symbology is None:
        logger.warning("Scanned code type %r is not a supported 1D symbology", code.type)
        return None
    return generate_code(code.value, symbology, options)


class BarcodeGenerator:
    """
    Object API for 1D barcode generation.

    Unlike generate_code(), render_image() raises BarcodeGenError for
    content that cannot be encoded.

    Args:
        symbology: Enum specifying barcode format (EAN, UPC, Code39, etc.)
        data: Payload string
        options: Optional raster options (background, foreground, scale)
    """

    def __init__(
        self,
        symbology: Symbology,
        data: str,
        options: Optional[RasterOptions] = None,
    ) -> None:
        if not isinstance(symbology, Symbology):
            raise TypeError(
                f"symbology must be Symbology enum, got {type(symbology)!r}"
            )
        self.symbology = symbology
        self.data = data
        self.options: RasterOptions = RasterOptions(**options) if options else {}

    def is_valid(self) -> bool:
        return is_valid(self.data, self.symbology)

    def validate(self) -> None:
        """
        Validate data against the symbology rules.
        Проверяет входные данные и доменные ограничения для типа штрихкода.
        Raises:
            BarcodeGenError: при ошибке данных или несоответствии доменным ограничениям.
        """
        name = self.symbology.localized_name("en")
        if not isinstance(self.data, str) or not self.data:
            raise BarcodeGenError("Barcode data must be non-empty string")
        alphabet = get_spec(self.symbology).alphabet
        unsupported = sorted({ch for ch in self.data if ch not in alphabet})
        if unsupported:
            raise BarcodeGenError(
                f"{name} does not support characters: {''.join(unsupported)!r}"
            )
        if not self.is_valid():
            raise BarcodeGenError(
                f"{name} rejects {self.data!r}: wrong length, check digit or prefix"
            )

    def composed(self) -> str:
        """Module string for the data; validates first."""
        self.validate()
        return compose(self.data, self.symbology)

    def render_image(self, options: Optional[RasterOptions] = None) -> Image.Image:
        """
        Рендеринг изображения штрихкода.

        Args:
            options: Per-call raster options, merged over the constructor options.

        Returns:
            PIL Image объект (RGB режим).

        Raises:
            BarcodeGenError: invalid data or options.
        """
        self.validate()
        merged: RasterOptions = RasterOptions(**self.options)
        if options:
            merged.update(options)
        image = generate_code(self.data, self.symbology, merged)
        if image is None:
            raise BarcodeGenError(
                f"Barcode image generation failed: {self.symbology.name}"
            )
        return image

    def render_bytes(self, options: Optional[RasterOptions] = None) -> bytes:
        img = self.render_image(options=options)
        buf = BytesIO()
        img.save(buf, format="PNG")
        buf.seek(0)
        return buf.read()

    @classmethod
    def supported_types(cls) -> Set[Symbology]:
        return supported_symbologies()
