"""
RU: Вычисление контрольных символов для символик, которые их требуют.
EN: Check character calculators, one pure function per family.

Families:
    - mod 43 (Code 39 mod 43)
    - C/K mod 47 pair (Code 93)
    - mod 103 (Code 128), returned as the decimal symbol value
    - GTIN mod 10 with 3/1 weights (EAN-8, EAN-13, ISBN-13, ISSN-13, ITF-14)
    - UPC-E, via expansion to UPC-A

Examples:
    >>> mod43_check_digit("CODE39")
    'W'
    >>> code93_check_digits("TEST93")
    '+6'
    >>> gtin_check_digit("400638133393")
    '1'
"""

from __future__ import annotations

import logging
from typing import Final

from src.barcodegen.encodings import (
    CODE39_ALPHABET,
    CODE93_ALPHABET,
    CODE93_VALUES,
    code128_values,
)
from src.barcodegen.exceptions import BarcodeGenError
from src.model.enums import Symbology

logger = logging.getLogger(__name__)

__all__ = [
    "check_digit",
    "mod43_check_digit",
    "code93_check_digits",
    "code128_check_value",
    "gtin_check_digit",
    "upce_to_upca",
    "upce_check_digit",
]

CODE93_C_WEIGHT_CYCLE: Final[int] = 20
CODE93_K_WEIGHT_CYCLE: Final[int] = 15


def mod43_check_digit(content: str) -> str:
    total = sum(CODE39_ALPHABET.index(ch) for ch in content)
    return CODE39_ALPHABET[total % 43]


def _code93_weighted(content: str, cycle: int) -> str:
    total = 0
    for position, ch in enumerate(reversed(content)):
        weight = position % cycle + 1
        total += CODE93_VALUES[ch] * weight
    return CODE93_ALPHABET[total % 47]


def code93_check_digits(content: str) -> str:
    """Return the two Code 93 check characters C and K."""
    c = _code93_weighted(content, CODE93_C_WEIGHT_CYCLE)
    k = _code93_weighted(content + c, CODE93_K_WEIGHT_CYCLE)
    return c + k


def code128_check_value(content: str) -> str:
    """Mod 103 check over the start value plus weighted symbol values, as a decimal string."""
    start, *values = code128_values(content)
    total = start
    for position, value in enumerate(values, start=1):
        total += position * value
    return str(total % 103)


def gtin_check_digit(content: str) -> str:
    total = 0
    for position, ch in enumerate(reversed(content)):
        total += int(ch) * (3 if position % 2 == 0 else 1)
    return str((10 - total % 10) % 10)


def upce_to_upca(content: str) -> str:
    """
    Expand 7-digit UPC-E data (number system + 6 digits) to the 11 UPC-A data digits.

    Example:
        >>> upce_to_upca("0425261")
        '04210000526'
    """
    ns, d = content[0], content[1:7]
    last = d[5]
    if last in "012":
        body = d[0:2] + last + "0000" + d[2:5]
    elif last == "3":
        body = d[0:3] + "00000" + d[3:5]
    elif last == "4":
        body = d[0:4] + "00000" + d[4]
    else:
        body = d[0:5] + "0000" + last
    return ns + body


def upce_check_digit(content: str) -> str:
    return gtin_check_digit(upce_to_upca(content))


def check_digit(content: str, symbology: Symbology) -> str:
    """
    Compute the check character(s) of content for a symbology.

    Raises:
        BarcodeGenError: symbology defines no check character.
    """
    from src.barcodegen.symbologies import get_spec

    spec = get_spec(symbology)
    if spec.check_digit is None:
        raise BarcodeGenError(f"{symbology.name} has no check digit")
    result = spec.check_digit(content)
    logger.debug("Check digit for %s %r: %r", symbology.name, content, result)
    return result
