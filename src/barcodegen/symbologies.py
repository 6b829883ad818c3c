"""
RU: Каталог символик: алфавит, контрольный символ, начальный/конечный шаблоны, таблица и кодировщик.
EN: Symbology catalogue. One frozen SymbologySpec per Symbology member, all
fields supplied explicitly; the mapping is checked to be exhaustive at import.

Provides:
- SymbologySpec: the per-symbology rules
- get_spec(): lookup with enum type checking
- supported_symbologies(): all encodable linear symbologies
"""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Final, FrozenSet, Mapping, Optional, Set

from src.barcodegen import check_digits, encodings
from src.model.enums import Symbology

logger = logging.getLogger(__name__)

__all__ = [
    "SymbologySpec",
    "get_spec",
    "supported_symbologies",
]

Encoder = Callable[[Mapping[Any, str], str, str], str]

DIGITS: Final[FrozenSet[str]] = frozenset(string.digits)
EAN_GUARD: Final[str] = "101"
UPCE_END_GUARD: Final[str] = "010101"
ITF_START: Final[str] = "1010"
ITF_STOP: Final[str] = "1101"


@dataclass(frozen=True)
class SymbologySpec:
    """
    Rules of one linear symbology.

    Args:
        alphabet: Characters accepted in content.
        initiator: Start pattern (modules); empty when the encoder picks
            the start symbol from the content.
        terminator: Stop pattern (modules).
        table: Per-character (or per-value) bar/space patterns.
        encoder: Body encoder ``(table, content, check) -> modules``.
        check_digit: Check character function, or None when the symbology has none.
        data_length: Fixed number of data characters. Content of this length
            gets the check digit appended; content one longer must already end
            with the correct check digit. None means any length.
        content_rule: Extra predicate on the whole content (prefix, parity...).
    """

    alphabet: FrozenSet[str]
    initiator: str
    terminator: str
    table: Mapping[Any, str]
    encoder: Encoder
    check_digit: Optional[Callable[[str], str]]
    data_length: Optional[int]
    content_rule: Optional[Callable[[str], bool]]

    @property
    def requires_check_digit(self) -> bool:
        return self.check_digit is not None

    def pending_check(self, content: str) -> str:
        """Check character(s) still to append to validated content ("" if none)."""
        if self.check_digit is None:
            return ""
        if self.data_length is not None and len(content) != self.data_length:
            # Content carries its own (validated) check digit
            return ""
        return self.check_digit(content)

    def encode(self, content: str, check: str) -> str:
        return self.encoder(self.table, content, check)


def _even_length(content: str) -> bool:
    return len(content) % 2 == 0


def _upce_number_system(content: str) -> bool:
    return content[0] in "01"


def _isbn_prefix(content: str) -> bool:
    return content.startswith(("978", "979"))


def _issn_prefix(content: str) -> bool:
    return content.startswith("977")


_CODE39_STAR: Final[str] = encodings.CODE39_TABLE["*"]
_CODE93_STAR: Final[str] = encodings.CODE93_TABLE["*"]


def _ean13_like(content_rule: Optional[Callable[[str], bool]]) -> SymbologySpec:
    return SymbologySpec(
        alphabet=DIGITS,
        initiator=EAN_GUARD,
        terminator=EAN_GUARD,
        table=encodings.EAN_L_CODES,
        encoder=encodings.encode_ean13,
        check_digit=check_digits.gtin_check_digit,
        data_length=12,
        content_rule=content_rule,
    )


_SPECS: Final[Dict[Symbology, SymbologySpec]] = {
    Symbology.CODE39: SymbologySpec(
        alphabet=frozenset(encodings.CODE39_ALPHABET),
        initiator=_CODE39_STAR,
        # No inter-character gap after the stop character
        terminator=_CODE39_STAR[:-1],
        table=encodings.CODE39_TABLE,
        encoder=encodings.encode_characters,
        check_digit=None,
        data_length=None,
        content_rule=None,
    ),
    Symbology.CODE39_MOD43: SymbologySpec(
        alphabet=frozenset(encodings.CODE39_ALPHABET),
        initiator=_CODE39_STAR,
        terminator=_CODE39_STAR[:-1],
        table=encodings.CODE39_TABLE,
        encoder=encodings.encode_characters,
        check_digit=check_digits.mod43_check_digit,
        data_length=None,
        content_rule=None,
    ),
    Symbology.EXTENDED_CODE39: SymbologySpec(
        alphabet=frozenset(encodings.EXTENDED_CODE39_MAP),
        initiator=_CODE39_STAR,
        terminator=_CODE39_STAR[:-1],
        table=encodings.CODE39_TABLE,
        encoder=encodings.encode_extended_code39,
        check_digit=None,
        data_length=None,
        content_rule=None,
    ),
    Symbology.CODE93: SymbologySpec(
        alphabet=frozenset(encodings.CODE39_ALPHABET),
        initiator=_CODE93_STAR,
        # Termination bar after the stop character
        terminator=_CODE93_STAR + "1",
        table=encodings.CODE93_TABLE,
        encoder=encodings.encode_characters,
        check_digit=check_digits.code93_check_digits,
        data_length=None,
        content_rule=None,
    ),
    Symbology.CODE128: SymbologySpec(
        alphabet=frozenset(chr(code) for code in range(128)),
        # Start B or Start C, emitted by the encoder
        initiator="",
        terminator=encodings.CODE128_TABLE[encodings.CODE128_STOP],
        table=encodings.CODE128_TABLE,
        encoder=encodings.encode_code128,
        check_digit=check_digits.code128_check_value,
        data_length=None,
        content_rule=None,
    ),
    Symbology.EAN8: SymbologySpec(
        alphabet=DIGITS,
        initiator=EAN_GUARD,
        terminator=EAN_GUARD,
        table=encodings.EAN_L_CODES,
        encoder=encodings.encode_ean8,
        check_digit=check_digits.gtin_check_digit,
        data_length=7,
        content_rule=None,
    ),
    Symbology.EAN13: _ean13_like(None),
    Symbology.ISBN13: _ean13_like(_isbn_prefix),
    Symbology.ISSN13: _ean13_like(_issn_prefix),
    Symbology.UPCE: SymbologySpec(
        alphabet=DIGITS,
        initiator=EAN_GUARD,
        terminator=UPCE_END_GUARD,
        table=encodings.EAN_L_CODES,
        encoder=encodings.encode_upce,
        check_digit=check_digits.upce_check_digit,
        data_length=7,
        content_rule=_upce_number_system,
    ),
    Symbology.ITF14: SymbologySpec(
        alphabet=DIGITS,
        initiator=ITF_START,
        terminator=ITF_STOP,
        table=encodings.ITF_TABLE,
        encoder=encodings.encode_interleaved,
        check_digit=check_digits.gtin_check_digit,
        data_length=13,
        content_rule=None,
    ),
    Symbology.INTERLEAVED_2OF5: SymbologySpec(
        alphabet=DIGITS,
        initiator=ITF_START,
        terminator=ITF_STOP,
        table=encodings.ITF_TABLE,
        encoder=encodings.encode_interleaved,
        check_digit=None,
        data_length=None,
        content_rule=_even_length,
    ),
}

_missing = set(Symbology) - set(_SPECS)
if _missing:
    raise RuntimeError(f"Symbologies without rules: {sorted(s.name for s in _missing)}")

SPECS: Final[Mapping[Symbology, SymbologySpec]] = MappingProxyType(_SPECS)


def get_spec(symbology: Symbology) -> SymbologySpec:
    if not isinstance(symbology, Symbology):
        raise TypeError(f"symbology must be Symbology enum, got {type(symbology)!r}")
    return SPECS[symbology]


def supported_symbologies() -> Set[Symbology]:
    return set(SPECS)
