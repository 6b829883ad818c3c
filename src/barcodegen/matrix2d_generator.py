"""
RU: Делегированная генерация 2D-кодов (QR, PDF417, Aztec, DataMatrix) сторонними библиотеками.
EN: Delegated 2D code generation. The core only maps a tag to a generator
identifier (filter_name); rendering is done by third-party libraries.

Provides:
- filter_name(): pure tag -> generator identifier lookup ("" when unknown)
- Matrix2DCodeGenerator: renders a code for that identifier

Generator identifiers follow the BWIPP encoder names:
    qrcode     -> qrcode
    pdf417     -> pdf417gen
    azteccode  -> treepoem (needs Ghostscript)
    datamatrix -> treepoem (needs Ghostscript)

Requirements: Pillow, qrcode, pdf417gen, treepoem
"""

from __future__ import annotations

import logging
from io import BytesIO
from types import MappingProxyType
from typing import Any, Dict, Final, Mapping, Optional, TypedDict, Union

import pdf417gen
import qrcode
from PIL import Image
from qrcode.constants import ERROR_CORRECT_M

from src.barcodegen.exceptions import BarcodeGenError, Matrix2DCodeGenError
from src.barcodegen.rasterizer import resize_image
from src.model.enums import Matrix2DCodeType

logger = logging.getLogger(__name__)

__all__ = [
    "Matrix2DCodeGenerator",
    "Matrix2DCodeGenError",
    "Matrix2DOptions",
    "MATRIX_GENERATOR_NAMES",
    "filter_name",
]

MATRIX_GENERATOR_NAMES: Final[Mapping[Matrix2DCodeType, str]] = MappingProxyType(
    {
        Matrix2DCodeType.QR: "qrcode",
        Matrix2DCodeType.PDF417: "pdf417",
        Matrix2DCodeType.AZTEC: "azteccode",
        Matrix2DCodeType.DATAMATRIX: "datamatrix",
    }
)

_TREEPOEM_GENERATORS: Final[frozenset[str]] = frozenset({"azteccode", "datamatrix"})


def filter_name(tag: Union[str, Matrix2DCodeType]) -> str:
    """
    Resolve the 2D generator identifier for a tag.

    Example:
        >>> filter_name("org.iso.QRCode")
        'qrcode'
        >>> filter_name("code39")
        ''
    """
    if isinstance(tag, Matrix2DCodeType):
        code_type: Optional[Matrix2DCodeType] = tag
    else:
        code_type = Matrix2DCodeType.from_tag(tag)
    if code_type is None:
        return ""
    return MATRIX_GENERATOR_NAMES[code_type]


class Matrix2DOptions(TypedDict, total=False):
    """Per-type options; unknown keys are ignored by the renderers that don't use them."""

    box_size: int  # QR: пикселей на модуль
    border: int  # QR: ширина тихой зоны в модулях
    foreground: str  # QR: цвет модулей
    background: str  # QR: цвет фона
    columns: int  # PDF417, DataMatrix
    security_level: int  # PDF417
    module_scale: int  # PDF417: пикселей на модуль
    eclevel: int  # Aztec: процент коррекции ошибок
    scale: float  # nearest-neighbour rescale of the final image


class Matrix2DCodeGenerator:
    """2D-code generator for QR/PDF417/Aztec/DataMatrix.

    Args:
        code_type: Matrix code type.
        data: Source data to encode.
        options: Rendering options (interpreted per code type).

    Examples:
        >>> gen = Matrix2DCodeGenerator(Matrix2DCodeType.QR, "test123")
        >>> img = gen.render_image()
    """

    def __init__(
        self,
        code_type: Matrix2DCodeType,
        data: str,
        options: Optional[Matrix2DOptions] = None,
    ) -> None:
        if not isinstance(code_type, Matrix2DCodeType):
            logger.error("code_type must be Matrix2DCodeType, got %r", type(code_type))
            raise TypeError("code_type must be Matrix2DCodeType")
        self.code_type = code_type
        self.data = data
        self.options: Dict[str, Any] = dict(options) if options else {}

    @property
    def generator_name(self) -> str:
        return filter_name(self.code_type)

    def validate(self) -> None:
        """Raises Matrix2DCodeGenError for empty or non-string data."""
        if not isinstance(self.data, str) or not self.data:
            logger.error("Input data is empty or not string, got %r", self.data)
            raise Matrix2DCodeGenError("Data must be a non-empty string")

    def render_image(self, options: Optional[Matrix2DOptions] = None) -> Image.Image:
        """
        Render the code as an RGB PIL image.

        Raises:
            Matrix2DCodeGenError: invalid data or renderer failure.
        """
        self.validate()
        opts = dict(self.options)
        if options:
            opts.update(options)
        name = self.generator_name

        try:
            if name == "qrcode":
                img = self._render_qr(opts)
            elif name == "pdf417":
                codes = pdf417gen.encode(
                    self.data,
                    columns=opts.get("columns", 6),
                    security_level=opts.get("security_level", 2),
                )
                img = pdf417gen.render_image(codes, scale=opts.get("module_scale", 3))
            elif name in _TREEPOEM_GENERATORS:
                img = self._render_treepoem(name, opts)
            else:
                raise Matrix2DCodeGenError(
                    f"Unsupported 2D code type: {self.code_type!r}"
                )
        except Matrix2DCodeGenError:
            raise
        except Exception as e:
            logger.error("%s generation error: %r", name, e)
            raise Matrix2DCodeGenError(f"{name} generation failed: {e}") from e

        if not isinstance(img, Image.Image):
            logger.error("%s did not produce a PIL.Image", name)
            raise Matrix2DCodeGenError(f"{name} did not produce a valid image")
        img = img.convert("RGB")

        if "scale" in opts:
            try:
                img = resize_image(img, opts["scale"])
            except BarcodeGenError as e:
                logger.error("%s rescale error: %s", name, e)
                raise Matrix2DCodeGenError(f"{name} rescale failed: {e}") from e
        logger.info(
            "2D code generated: %s type, %r chars", self.code_type.name, len(self.data)
        )
        return img

    def _render_qr(self, opts: Dict[str, Any]) -> Any:
        import qrcode.image.pil

        qr = qrcode.QRCode(
            error_correction=ERROR_CORRECT_M,
            box_size=opts.get("box_size", 10),
            border=opts.get("border", 4),
        )
        qr.add_data(self.data)
        qr.make(fit=True)
        qr_img = qr.make_image(
            fill_color=opts.get("foreground", "black"),
            back_color=opts.get("background", "white"),
            image_factory=qrcode.image.pil.PilImage,
        )
        if hasattr(qr_img, "get_image"):
            qr_img = qr_img.get_image()
        return qr_img

    def _render_treepoem(self, name: str, opts: Dict[str, Any]) -> Any:
        try:
            import treepoem
        except ImportError:
            logger.error("treepoem not installed for %s", name)
            raise Matrix2DCodeGenError(
                "treepoem not installed (install with: pip install treepoem)"
            )
        tp_opts: Dict[str, Any] = {}
        for key in ("columns", "eclevel"):
            if key in opts:
                tp_opts[key] = opts[key]
        return treepoem.generate_barcode(
            barcode_type=name, data=self.data, options=tp_opts
        )

    def render_bytes(self, options: Optional[Matrix2DOptions] = None) -> bytes:
        """Render code image to PNG bytes."""
        img = self.render_image(options)
        buf = BytesIO()
        img.save(buf, format="PNG")
        logger.debug("Output rendered as PNG (%d bytes)", buf.getbuffer().nbytes)
        return buf.getvalue()
