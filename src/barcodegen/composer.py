"""
RU: Сборка полного символа: начальный шаблон + тело + контрольный символ + конечный шаблон.
EN: Symbol composition. Input is assumed to have passed is_valid().
"""

from __future__ import annotations

import logging

from src.barcodegen.symbologies import get_spec
from src.model.enums import Symbology

logger = logging.getLogger(__name__)

__all__ = ["compose"]


def compose(content: str, symbology: Symbology) -> str:
    """
    Build the module string for validated content.

    Returns:
        initiator + encoded body (with check characters when required) + terminator,
        a string of "1" (bar) and "0" (space) modules.

    Example:
        >>> compose("123456", Symbology.INTERLEAVED_2OF5)[:4]
        '1010'
    """
    spec = get_spec(symbology)
    check = spec.pending_check(content)
    composed = spec.initiator + spec.encode(content, check) + spec.terminator
    logger.debug(
        "Composed %s %r (check=%r): %d modules",
        symbology.name,
        content,
        check,
        len(composed),
    )
    return composed
