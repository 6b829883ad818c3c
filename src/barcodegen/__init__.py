"""
barcodegen

Модуль генерации линейных (1D) штрихкодов: проверка, контрольный символ,
сборка символа и растеризация в монохромное изображение PIL.

- Символики: UPC-E, Code 39 (+mod 43, расширенный), Code 93, Code 128,
  EAN-8/13, ISBN-13, ISSN-13, ITF-14, Interleaved 2 of 5.
- Недопустимое содержимое возвращает None, а не исключение.
- 2D-коды (QR, PDF417, Aztec, DataMatrix) делегируются сторонним библиотекам.

Public API:
    - generate_code(content, symbology, options) -> Image | None
    - generate_code_from_scan(MachineReadableCode, options) -> Image | None
    - is_valid, check_digit, compose, rasterize, resize_image
    - filter_name(tag) -> str: идентификатор 2D-генератора ("" если неизвестен)
    - BarcodeGenerator / BarcodeGenError, Matrix2DCodeGenerator / Matrix2DCodeGenError
    - RasterOptions: типобезопасные опции растеризации (TypedDict)

Примеры:
    >>> from src.barcodegen import generate_code
    >>> from src.model.enums import Symbology
    >>> img = generate_code("CODE39", Symbology.CODE39_MOD43, {"scale": 2})

Зависимости:
    Pillow, qrcode, pdf417gen, treepoem
"""

from src.barcodegen.barcode_generator import (
    BarcodeGenerator,
    MachineReadableCode,
    generate_code,
    generate_code_from_scan,
)
from src.barcodegen.check_digits import check_digit
from src.barcodegen.composer import compose
from src.barcodegen.exceptions import BarcodeGenError, Matrix2DCodeGenError
from src.barcodegen.matrix2d_generator import Matrix2DCodeGenerator, filter_name
from src.barcodegen.rasterizer import RasterOptions, rasterize, resize_image
from src.barcodegen.validator import is_valid

__all__ = [
    "BarcodeGenerator",
    "BarcodeGenError",
    "MachineReadableCode",
    "Matrix2DCodeGenerator",
    "Matrix2DCodeGenError",
    "RasterOptions",
    "check_digit",
    "compose",
    "filter_name",
    "generate_code",
    "generate_code_from_scan",
    "is_valid",
    "rasterize",
    "resize_image",
]
