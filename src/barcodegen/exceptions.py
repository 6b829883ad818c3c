"""
Централизованные исключения модуля barcodegen.

Invalid content is NOT an exception here: the pipeline reports it as an
absent result (None). These exceptions cover programming errors and
failures of the delegated 2D renderers.

Иерархия:
    BarcodeGenError (1D: wrong arguments, unknown options, validate())
    Matrix2DCodeGenError (2D delegated rendering)

Example:
    >>> from src.barcodegen.exceptions import BarcodeGenError
    >>> try:
    ...     BarcodeGenerator(Symbology.EAN13, "12AB").validate()
    ... except BarcodeGenError as e:
    ...     logger.warning("Rejected: %s", e)
"""

from __future__ import annotations

__all__ = [
    "BarcodeGenError",
    "Matrix2DCodeGenError",
]


class BarcodeGenError(Exception):
    """Barcode generation/validation error."""


class Matrix2DCodeGenError(Exception):
    """2D barcode generation error (Ошибка генерации 2D-штрихкода)."""
