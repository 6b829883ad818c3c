"""
model/enums.py

(Краткое RU: Перечисления поддерживаемых символик штрихкодов.)

EN: Domain enums for the barcode generator: linear symbologies encoded by
the core and 2D matrix kinds delegated to third-party renderers.
NO encoding tables or drawing logic here!

- Linear symbologies carry their own tag value (as reported by scanners).
- Matrix codes are only named here; see src/barcodegen/matrix2d_generator.

See Also:
    - src/barcodegen/symbologies (tables and per-symbology rules)
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Final, Literal, Optional

_logger: Final[logging.Logger] = logging.getLogger(__name__)


def normalize_tag(tag: str) -> str:
    """
    Bring a scanner tag to enum-value form.

    Vendor prefixes are dropped ("org.gs1.EAN-13" -> "ean13"), as are
    dashes, underscores and spaces. Non-string tags normalize to "".
    """
    if not isinstance(tag, str):
        return ""
    name = tag.strip().rsplit(".", 1)[-1]
    for sep in ("-", "_", " "):
        name = name.replace(sep, "")
    return name.lower()


class Symbology(str, Enum):
    UPCE = "upce"
    CODE39 = "code39"
    CODE39_MOD43 = "code39mod43"
    EXTENDED_CODE39 = "extendedcode39"  # Full ASCII via Code 39 shift pairs
    CODE93 = "code93"
    CODE128 = "code128"
    EAN8 = "ean8"
    EAN13 = "ean13"
    ISBN13 = "isbn13"  # EAN-13 with Bookland prefix 978/979
    ISSN13 = "issn13"  # EAN-13 with serial prefix 977
    ITF14 = "itf14"
    INTERLEAVED_2OF5 = "interleaved2of5"

    def localized_name(self, lang: Literal["ru", "en"] = "ru") -> str:
        names_ru = {
            Symbology.UPCE: "UPC-E",
            Symbology.CODE39: "Code 39",
            Symbology.CODE39_MOD43: "Code 39 (mod 43)",
            Symbology.EXTENDED_CODE39: "Code 39 (расширенный ASCII)",
            Symbology.CODE93: "Code 93",
            Symbology.CODE128: "Code 128",
            Symbology.EAN8: "EAN-8",
            Symbology.EAN13: "EAN-13",
            Symbology.ISBN13: "ISBN-13 (книги)",
            Symbology.ISSN13: "ISSN-13 (периодика)",
            Symbology.ITF14: "ITF-14 (короб)",
            Symbology.INTERLEAVED_2OF5: "Interleaved 2 of 5",
        }
        names_en = {
            Symbology.UPCE: "UPC-E",
            Symbology.CODE39: "Code 39",
            Symbology.CODE39_MOD43: "Code 39 mod 43",
            Symbology.EXTENDED_CODE39: "Extended Code 39",
            Symbology.CODE93: "Code 93",
            Symbology.CODE128: "Code 128",
            Symbology.EAN8: "EAN-8",
            Symbology.EAN13: "EAN-13",
            Symbology.ISBN13: "ISBN-13",
            Symbology.ISSN13: "ISSN-13",
            Symbology.ITF14: "ITF-14",
            Symbology.INTERLEAVED_2OF5: "Interleaved 2 of 5",
        }
        return (
            names_ru.get(self, self.value)
            if lang == "ru"
            else names_en.get(self, self.value)
        )

    @classmethod
    def from_tag(cls, tag: str) -> Optional[Symbology]:
        """Resolve a scanner tag ("org.gs1.EAN-13", "Code_128", ...). None if unknown."""
        normalized = normalize_tag(tag)
        for member in cls:
            if member.value == normalized:
                return member
        _logger.debug("Unknown linear symbology tag: %r", tag)
        return None


class Matrix2DCodeType(str, Enum):
    QR = "qr"
    PDF417 = "pdf417"
    AZTEC = "aztec"
    DATAMATRIX = "datamatrix"

    def localized_name(self, lang: str = "ru") -> str:
        names = {
            "qr": {"ru": "QR код", "en": "QR code"},
            "pdf417": {"ru": "PDF417", "en": "PDF417"},
            "aztec": {"ru": "Ацтек-код", "en": "Aztec code"},
            "datamatrix": {"ru": "DataMatrix", "en": "DataMatrix"},
        }
        return names[self.value][lang] if lang in names[self.value] else self.value

    @classmethod
    def from_tag(cls, tag: str) -> Optional[Matrix2DCodeType]:
        normalized = normalize_tag(tag)
        # "org.iso.QRCode" and friends
        if normalized == "qrcode":
            return cls.QR
        for member in cls:
            if member.value == normalized:
                return member
        return None


__all__ = [
    "Symbology",
    "Matrix2DCodeType",
    "normalize_tag",
]
