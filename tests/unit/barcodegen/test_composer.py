import barcode
import pytest

from src.barcodegen.composer import compose
from src.barcodegen.encodings import (
    CODE39_TABLE,
    CODE93_TABLE,
    CODE128_TABLE,
    EXTENDED_CODE39_MAP,
    ean_digit,
    EAN_L_CODES,
)
from src.model.enums import Symbology


class TestComposeInterleaved:
    def test_123456(self) -> None:
        composed = compose("123456", Symbology.INTERLEAVED_2OF5)
        assert len(composed) == 50
        assert composed.startswith("1010")
        assert composed.endswith("1101")

    def test_pair_interleaving(self) -> None:
        # "12": bars 1=WNNNW, spaces 2=NWNNW
        body = compose("12", Symbology.INTERLEAVED_2OF5)[4:-4]
        assert body == "11" + "0" + "1" + "00" + "1" + "0" + "1" + "0" + "11" + "00"

    def test_itf14_appends_check(self) -> None:
        assert compose("1540014128876", Symbology.ITF14) == compose(
            "15400141288763", Symbology.ITF14
        )
        assert len(compose("1540014128876", Symbology.ITF14)) == 4 + 7 * 14 + 4


class TestComposeEan:
    def test_ean13_matches_python_barcode(self) -> None:
        expected = barcode.EAN13("400638133393").build()[0]
        assert compose("400638133393", Symbology.EAN13) == expected

    def test_ean8_matches_python_barcode(self) -> None:
        expected = barcode.get_barcode_class("ean8")("9638507").build()[0]
        assert compose("9638507", Symbology.EAN8) == expected

    def test_ean13_with_and_without_check(self) -> None:
        assert compose("400638133393", Symbology.EAN13) == compose(
            "4006381333931", Symbology.EAN13
        )

    def test_isbn13_is_ean13(self) -> None:
        assert compose("978030640615", Symbology.ISBN13) == compose(
            "978030640615", Symbology.EAN13
        )

    def test_ean13_length(self) -> None:
        composed = compose("400638133393", Symbology.EAN13)
        assert len(composed) == 95
        assert composed[:3] == "101"
        assert composed[45:50] == "01010"
        assert composed[-3:] == "101"

    def test_upce_layout(self) -> None:
        composed = compose("0425261", Symbology.UPCE)
        assert len(composed) == 3 + 6 * 7 + 6
        assert composed[:3] == "101"
        assert composed[-6:] == "010101"
        # Check digit 4, number system 0 -> parity GLGGLL
        assert composed[3:10] == "0011101"
        assert composed[10:17] == EAN_L_CODES["2"]

    def test_upce_number_system_1_inverts_parity(self) -> None:
        ns0 = compose("0425261", Symbology.UPCE)
        ns1 = compose("1425261", Symbology.UPCE)
        assert ns0 != ns1
        assert len(ns0) == len(ns1)

    @pytest.mark.parametrize(
        "digit,parity,expected",
        [
            ("0", "L", "0001101"),
            ("0", "G", "0100111"),
            ("0", "R", "1110010"),
            ("9", "G", "0010111"),
            ("9", "R", "1110100"),
        ],
    )
    def test_ean_digit_parities(self, digit: str, parity: str, expected: str) -> None:
        assert ean_digit(EAN_L_CODES, digit, parity) == expected


class TestComposeCode39And93:
    def test_code39_start_stop(self) -> None:
        composed = compose("CODE39", Symbology.CODE39)
        assert composed.startswith(CODE39_TABLE["*"])
        assert composed.endswith(CODE39_TABLE["*"][:-1])
        assert len(composed) == 13 + 6 * 13 + 12

    def test_code39_mod43_adds_check_character(self) -> None:
        plain = compose("CODE39", Symbology.CODE39)
        checked = compose("CODE39", Symbology.CODE39_MOD43)
        assert len(checked) == len(plain) + 13
        assert CODE39_TABLE["W"] + CODE39_TABLE["*"][:-1] == checked[-25:]

    def test_extended_code39_uses_shift_pairs(self) -> None:
        assert EXTENDED_CODE39_MAP["a"] == "+A"
        assert compose("a", Symbology.EXTENDED_CODE39) == compose(
            "+A", Symbology.CODE39
        )

    @pytest.mark.parametrize(
        "ch,pair",
        [("\x00", "%U"), ("!", "/A"), (":", "/Z"), (";", "%F"), ("@", "%V"),
         ("[", "%K"), ("`", "%W"), ("{", "%P"), ("\x7f", "%T"), ("7", "7")],
    )
    def test_extended_code39_map(self, ch: str, pair: str) -> None:
        assert EXTENDED_CODE39_MAP[ch] == pair

    def test_code93_terminator(self) -> None:
        composed = compose("TEST93", Symbology.CODE93)
        assert composed.startswith(CODE93_TABLE["*"])
        assert composed.endswith(CODE93_TABLE["*"] + "1")
        # start + 6 data + 2 checks + stop + termination bar
        assert len(composed) == 9 * 10 + 1
        assert composed[-28:-10] == CODE93_TABLE["+"] + CODE93_TABLE["6"]


class TestComposeCode128:
    def test_wikipedia(self) -> None:
        composed = compose("Wikipedia", Symbology.CODE128)
        assert composed.startswith(CODE128_TABLE[104])
        assert composed.endswith(CODE128_TABLE[88] + CODE128_TABLE[106])
        assert len(composed) == 11 * 11 + 13

    def test_stop_pattern(self) -> None:
        assert CODE128_TABLE[106] == "1100011101011"

    def test_leading_digit_run_starts_in_code_c(self) -> None:
        composed = compose("1234", Symbology.CODE128)
        assert composed[:11] == CODE128_TABLE[105]
        assert composed[11:22] == CODE128_TABLE[12]
        assert composed[22:33] == CODE128_TABLE[34]
        assert composed[33:44] == CODE128_TABLE[82]
        # start + 2 pairs + check + stop
        assert len(composed) == 11 * 4 + 13

    def test_digit_run_switches_to_code_c(self) -> None:
        composed = compose("AB1234", Symbology.CODE128)
        assert composed[:11] == CODE128_TABLE[104]
        assert composed[33:44] == CODE128_TABLE[99]
        assert composed[44:55] == CODE128_TABLE[12]
        assert composed[55:66] == CODE128_TABLE[34]

    def test_short_leading_digit_run_starts_in_b(self) -> None:
        composed = compose("12AB", Symbology.CODE128)
        assert composed[:11] == CODE128_TABLE[104]
        assert composed[11:22] == CODE128_TABLE[17]

    def test_odd_digit_run_keeps_first_digit_in_b(self) -> None:
        composed = compose("12345", Symbology.CODE128)
        assert composed[:11] == CODE128_TABLE[104]
        assert composed[11:22] == CODE128_TABLE[17]
        assert composed[22:33] == CODE128_TABLE[99]

    def test_control_character_uses_shift(self) -> None:
        composed = compose("\t", Symbology.CODE128)
        assert composed[11:22] == CODE128_TABLE[98]
        assert composed[22:33] == CODE128_TABLE[73]


class TestComposeGeneral:
    @pytest.mark.parametrize(
        "symbology,data",
        [
            (Symbology.CODE39, "ABC-123"),
            (Symbology.CODE39_MOD43, "ABC-123"),
            (Symbology.EXTENDED_CODE39, "abc"),
            (Symbology.CODE93, "ABC-123"),
            (Symbology.CODE128, "Hello 2024"),
            (Symbology.EAN8, "9638507"),
            (Symbology.EAN13, "400638133393"),
            (Symbology.ISBN13, "978030640615"),
            (Symbology.ISSN13, "977031784700"),
            (Symbology.UPCE, "0425261"),
            (Symbology.ITF14, "1540014128876"),
            (Symbology.INTERLEAVED_2OF5, "123456"),
        ],
    )
    def test_binary_and_framed(self, symbology: Symbology, data: str) -> None:
        composed = compose(data, symbology)
        assert composed
        assert set(composed) <= {"0", "1"}
        assert composed[0] == "1"
        assert composed[-1] == "1"

    def test_distinct_contents_distinct_symbols(self) -> None:
        assert compose("ABC", Symbology.CODE128) != compose("ABD", Symbology.CODE128)
        assert compose("123456", Symbology.INTERLEAVED_2OF5) != compose(
            "123465", Symbology.INTERLEAVED_2OF5
        )

    def test_deterministic(self) -> None:
        assert compose("CODE39", Symbology.CODE39) == compose(
            "CODE39", Symbology.CODE39
        )
