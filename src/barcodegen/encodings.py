"""
RU: Таблицы кодирования символов в штрихи (1 = штрих, 0 = пробел) и кодировщики тела символа.
EN: Per-symbology bar/space tables ("1" = bar module, "0" = space module) and body encoders.

Every encoder has the signature ``encoder(table, content, check) -> str`` where
``check`` is the already computed check character(s) or "" when the symbology
has none (or the content carries it already). Encoders assume validated input.

Tables:
    - Code 39 (43 characters + "*"), with extended full-ASCII shift map
    - Code 93 (47 values; shift symbols ($) (%) (/) (+) are stored as "a".."d")
    - Code 128 (107 width patterns, auto B/C with SHIFT for control chars)
    - EAN/UPC digit codes (L; G and R derived), EAN-13 and UPC-E parity tables
    - Interleaved 2 of 5 narrow/wide digit patterns
"""

from __future__ import annotations

from typing import Any, Dict, Final, List, Mapping, Tuple

__all__ = [
    "CODE39_TABLE",
    "CODE39_ALPHABET",
    "EXTENDED_CODE39_MAP",
    "CODE93_TABLE",
    "CODE93_ALPHABET",
    "CODE93_VALUES",
    "CODE128_TABLE",
    "CODE128_START_B",
    "CODE128_START_C",
    "CODE128_STOP",
    "EAN_L_CODES",
    "EAN13_PARITY",
    "UPCE_PARITY",
    "ITF_TABLE",
    "ean_digit",
    "code128_values",
    "encode_characters",
    "encode_extended_code39",
    "encode_code128",
    "encode_ean13",
    "encode_ean8",
    "encode_upce",
    "encode_interleaved",
]

# =============================================================================
# CODE 39
# =============================================================================

# Каждый символ: 12 модулей + 1 модуль межсимвольного промежутка
CODE39_TABLE: Final[Dict[str, str]] = {
    "0": "1010011011010",
    "1": "1101001010110",
    "2": "1011001010110",
    "3": "1101100101010",
    "4": "1010011010110",
    "5": "1101001101010",
    "6": "1011001101010",
    "7": "1010010110110",
    "8": "1101001011010",
    "9": "1011001011010",
    "A": "1101010010110",
    "B": "1011010010110",
    "C": "1101101001010",
    "D": "1010110010110",
    "E": "1101011001010",
    "F": "1011011001010",
    "G": "1010100110110",
    "H": "1101010011010",
    "I": "1011010011010",
    "J": "1010110011010",
    "K": "1101010100110",
    "L": "1011010100110",
    "M": "1101101010010",
    "N": "1010110100110",
    "O": "1101011010010",
    "P": "1011011010010",
    "Q": "1010101100110",
    "R": "1101010110010",
    "S": "1011010110010",
    "T": "1010110110010",
    "U": "1100101010110",
    "V": "1001101010110",
    "W": "1100110101010",
    "X": "1001011010110",
    "Y": "1100101101010",
    "Z": "1001101101010",
    "-": "1001010110110",
    ".": "1100101011010",
    " ": "1001101011010",
    "$": "1001001001010",
    "/": "1001001010010",
    "+": "1001010010010",
    "%": "1010010010010",
    "*": "1001011011010",
}

# Order matters: index is the mod 43 value
CODE39_ALPHABET: Final[str] = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ-. $/+%"


def _build_extended_code39_map() -> Dict[str, str]:
    mapping: Dict[str, str] = {}
    for code in range(128):
        ch = chr(code)
        if code == 0:
            pair = "%U"
        elif code <= 26:
            pair = "$" + chr(64 + code)
        elif code <= 31:
            pair = "%" + chr(65 + code - 27)
        elif code == 32 or ch in "-." or ch.isdigit() or "A" <= ch <= "Z":
            pair = ch
        elif code <= 47:
            # "!" .. "/" except "-" and "." handled above
            pair = "/" + chr(65 + code - 33)
        elif ch == ":":
            pair = "/Z"
        elif code <= 63:
            pair = "%" + chr(70 + code - 59)
        elif ch == "@":
            pair = "%V"
        elif code <= 95:
            pair = "%" + chr(75 + code - 91)
        elif ch == "`":
            pair = "%W"
        elif code <= 122:
            pair = "+" + chr(code - 32)
        else:
            pair = "%" + chr(80 + code - 123)
        mapping[ch] = pair
    return mapping


EXTENDED_CODE39_MAP: Final[Dict[str, str]] = _build_extended_code39_map()

# =============================================================================
# CODE 93
# =============================================================================

# a = ($), b = (%), c = (/), d = (+)
CODE93_ALPHABET: Final[str] = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ-. $/+%abcd"
CODE93_VALUES: Final[Dict[str, int]] = {ch: i for i, ch in enumerate(CODE93_ALPHABET)}

CODE93_TABLE: Final[Dict[str, str]] = {
    "0": "100010100",
    "1": "101001000",
    "2": "101000100",
    "3": "101000010",
    "4": "100101000",
    "5": "100100100",
    "6": "100100010",
    "7": "101010000",
    "8": "100010010",
    "9": "100001010",
    "A": "110101000",
    "B": "110100100",
    "C": "110100010",
    "D": "110010100",
    "E": "110010010",
    "F": "110001010",
    "G": "101101000",
    "H": "101100100",
    "I": "101100010",
    "J": "100110100",
    "K": "100011010",
    "L": "101011000",
    "M": "101001100",
    "N": "101000110",
    "O": "100101100",
    "P": "100010110",
    "Q": "110110100",
    "R": "110110010",
    "S": "110101100",
    "T": "110100110",
    "U": "110010110",
    "V": "110011010",
    "W": "101101100",
    "X": "101100110",
    "Y": "100110110",
    "Z": "100111010",
    "-": "100101110",
    ".": "111010100",
    " ": "111010010",
    "$": "111001010",
    "/": "101101110",
    "+": "101110110",
    "%": "110101110",
    "a": "100100110",
    "b": "111011010",
    "c": "111010110",
    "d": "100110010",
    "*": "101011110",
}

# =============================================================================
# CODE 128
# =============================================================================

# Value -> bar/space widths (bar first), see https://en.wikipedia.org/wiki/Code_128
_CODE128_WIDTHS: Final[Tuple[str, ...]] = (
    "212222", "222122", "222221", "121223", "121322", "131222", "122213",
    "122312", "132212", "221213", "221312", "231212", "112232", "122132",
    "122231", "113222", "123122", "123221", "223211", "221132", "221231",
    "213212", "223112", "312131", "311222", "321122", "321221", "312212",
    "322112", "322211", "212123", "212321", "232121", "111323", "131123",
    "131321", "112313", "132113", "132311", "211313", "231113", "231311",
    "112133", "112331", "132131", "113123", "113321", "133121", "313121",
    "211331", "231131", "213113", "213311", "213131", "311123", "311321",
    "331121", "312113", "312311", "332111", "314111", "221411", "431111",
    "111224", "111422", "121124", "121421", "141122", "141221", "112214",
    "112412", "122114", "122411", "142112", "142211", "241211", "221114",
    "413111", "241112", "134111", "111242", "121142", "121241", "114212",
    "124112", "124211", "411212", "421112", "421211", "212141", "214121",
    "412121", "111143", "111341", "131141", "114113", "114311", "411113",
    "411311", "113141", "114131", "311141", "411131", "211412", "211214",
    "211232", "2331112",
)


def _widths_to_modules(widths: str) -> str:
    modules: List[str] = []
    for i, width in enumerate(widths):
        modules.append(("1" if i % 2 == 0 else "0") * int(width))
    return "".join(modules)


CODE128_TABLE: Final[Dict[int, str]] = {
    value: _widths_to_modules(widths) for value, widths in enumerate(_CODE128_WIDTHS)
}

CODE128_SHIFT: Final[int] = 98
CODE128_CODE_C: Final[int] = 99
CODE128_CODE_B: Final[int] = 100
CODE128_START_B: Final[int] = 104
CODE128_START_C: Final[int] = 105
CODE128_STOP: Final[int] = 106

# Серия цифр такой длины переключает на набор C
CODE128_MIN_DIGIT_RUN: Final[int] = 4


def _digit_run(text: str, pos: int) -> int:
    end = pos
    while end < len(text) and text[end].isdigit():
        end += 1
    return end - pos


def code128_values(content: str) -> List[int]:
    """
    Convert content to Code 128 symbol values, start value first.

    Content opening with an even run of four or more digits starts in code
    set C, anything else in code set B. Later runs of four or more digits
    are packed in code set C (a leading odd digit stays in B); ASCII control
    characters are sent through SHIFT as code set A values. The check value
    is not included.
    """
    leading_run = _digit_run(content, 0)
    in_code_c = leading_run >= CODE128_MIN_DIGIT_RUN and leading_run % 2 == 0
    values: List[int] = [CODE128_START_C if in_code_c else CODE128_START_B]
    pos = 0
    while pos < len(content):
        run = _digit_run(content, pos)
        if in_code_c:
            if run >= 2:
                values.append(int(content[pos : pos + 2]))
                pos += 2
                continue
            values.append(CODE128_CODE_B)
            in_code_c = False
        if run >= CODE128_MIN_DIGIT_RUN and run % 2 == 0:
            values.append(CODE128_CODE_C)
            in_code_c = True
            continue
        code = ord(content[pos])
        if code < 32:
            values.extend((CODE128_SHIFT, code + 64))
        else:
            values.append(code - 32)
        pos += 1
    return values


# =============================================================================
# EAN / UPC
# =============================================================================

# L-коды (нечётная чётность); R = инверсия L, G = R задом наперёд
EAN_L_CODES: Final[Dict[str, str]] = {
    "0": "0001101",
    "1": "0011001",
    "2": "0010011",
    "3": "0111101",
    "4": "0100011",
    "5": "0110001",
    "6": "0101111",
    "7": "0111011",
    "8": "0110111",
    "9": "0001011",
}

EAN_CENTER_GUARD: Final[str] = "01010"

# First digit -> parity of the six left-hand digits
EAN13_PARITY: Final[Dict[str, str]] = {
    "0": "LLLLLL",
    "1": "LLGLGG",
    "2": "LLGGLG",
    "3": "LLGGGL",
    "4": "LGLLGG",
    "5": "LGGLLG",
    "6": "LGGGLL",
    "7": "LGLGLG",
    "8": "LGLGGL",
    "9": "LGGLGL",
}

# Check digit -> parity for number system 0 (number system 1 is the inverse)
UPCE_PARITY: Final[Dict[str, str]] = {
    "0": "GGGLLL",
    "1": "GGLGLL",
    "2": "GGLLGL",
    "3": "GGLLLG",
    "4": "GLGGLL",
    "5": "GLLGGL",
    "6": "GLLLGG",
    "7": "GLGLGL",
    "8": "GLGLLG",
    "9": "GLLGLG",
}

_INVERT: Final[Dict[str, str]] = {"0": "1", "1": "0"}


def ean_digit(table: Mapping[str, str], digit: str, parity: str) -> str:
    """Encode one digit with L, G or R parity."""
    l_code = table[digit]
    if parity == "L":
        return l_code
    r_code = "".join(_INVERT[m] for m in l_code)
    return r_code if parity == "R" else r_code[::-1]


def _ean_halves(table: Mapping[str, str], left: str, parity: str, right: str) -> str:
    encoded = [ean_digit(table, d, p) for d, p in zip(left, parity)]
    encoded.append(EAN_CENTER_GUARD)
    encoded.extend(ean_digit(table, d, "R") for d in right)
    return "".join(encoded)


# =============================================================================
# INTERLEAVED 2 OF 5
# =============================================================================

# Narrow/wide pattern, "1" = wide element (2 modules)
ITF_TABLE: Final[Dict[str, str]] = {
    "0": "00110",
    "1": "10001",
    "2": "01001",
    "3": "11000",
    "4": "00101",
    "5": "10100",
    "6": "01100",
    "7": "00011",
    "8": "10010",
    "9": "01010",
}

ITF_WIDE_MODULES: Final[int] = 2

# =============================================================================
# BODY ENCODERS
# =============================================================================


def encode_characters(table: Mapping[Any, str], content: str, check: str) -> str:
    """Plain per-character lookup, check characters appended after content."""
    return "".join(table[ch] for ch in content + check)


def encode_extended_code39(table: Mapping[Any, str], content: str, check: str) -> str:
    mapped = "".join(EXTENDED_CODE39_MAP[ch] for ch in content)
    return encode_characters(table, mapped, check)


def encode_code128(table: Mapping[Any, str], content: str, check: str) -> str:
    # Start symbol comes from the content; check is the decimal mod 103 value
    values = code128_values(content)
    values.append(int(check))
    return "".join(table[value] for value in values)


def encode_ean13(table: Mapping[Any, str], content: str, check: str) -> str:
    digits = content + check
    return _ean_halves(table, digits[1:7], EAN13_PARITY[digits[0]], digits[7:13])


def encode_ean8(table: Mapping[Any, str], content: str, check: str) -> str:
    digits = content + check
    return _ean_halves(table, digits[:4], "LLLL", digits[4:8])


def encode_upce(table: Mapping[Any, str], content: str, check: str) -> str:
    digits = content + check
    parity = UPCE_PARITY[digits[7]]
    if digits[0] == "1":
        parity = "".join("L" if p == "G" else "G" for p in parity)
    return "".join(ean_digit(table, d, p) for d, p in zip(digits[1:7], parity))


def encode_interleaved(table: Mapping[Any, str], content: str, check: str) -> str:
    digits = content + check
    modules: List[str] = []
    for i in range(0, len(digits), 2):
        bars, spaces = table[digits[i]], table[digits[i + 1]]
        for bar, space in zip(bars, spaces):
            modules.append("1" * (ITF_WIDE_MODULES if bar == "1" else 1))
            modules.append("0" * (ITF_WIDE_MODULES if space == "1" else 1))
    return "".join(modules)
