"""
RU: Проверка, что содержимое кодируется выбранной символикой.
EN: Content validation against a symbology's alphabet and length rules.

Invalid content is a normal outcome: is_valid() returns False and never raises
for bad content. Only a wrong symbology type raises TypeError.
"""

from __future__ import annotations

import logging

from src.barcodegen.symbologies import get_spec
from src.model.enums import Symbology

logger = logging.getLogger(__name__)

__all__ = ["is_valid"]


def is_valid(content: str, symbology: Symbology) -> bool:
    """
    Check whether content can be encoded.

    Rules: non-empty string; every character in the alphabet; fixed data
    length (optionally followed by the matching check digit) where the
    symbology defines one; extra content rule where defined.

    Example:
        >>> is_valid("400638133393", Symbology.EAN13)
        True
        >>> is_valid("4006381333930", Symbology.EAN13)  # wrong check digit
        False
    """
    spec = get_spec(symbology)
    if not isinstance(content, str) or not content:
        logger.debug("Rejected %s content: empty or not a string", symbology.name)
        return False

    for position, ch in enumerate(content):
        if ch not in spec.alphabet:
            logger.debug(
                "Rejected %s content: %r at position %d not in alphabet",
                symbology.name,
                ch,
                position,
            )
            return False

    if spec.data_length is not None:
        if len(content) == spec.data_length + 1 and spec.check_digit is not None:
            expected = spec.check_digit(content[:-1])
            if content[-1] != expected:
                logger.debug(
                    "Rejected %s content: check digit %r, expected %r",
                    symbology.name,
                    content[-1],
                    expected,
                )
                return False
        elif len(content) != spec.data_length:
            logger.debug(
                "Rejected %s content: length %d, expected %d",
                symbology.name,
                len(content),
                spec.data_length,
            )
            return False

    if spec.content_rule is not None and not spec.content_rule(content):
        logger.debug("Rejected %s content: %r", symbology.name, content)
        return False
    return True
