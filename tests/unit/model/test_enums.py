import pytest

from src.model.enums import Matrix2DCodeType, Symbology, normalize_tag


@pytest.mark.parametrize(
    "tag,expected",
    [
        ("org.gs1.EAN-13", "ean13"),
        ("org.iso.Code128", "code128"),
        ("Code_39 Mod43", "code39mod43"),
        ("  UPC-E ", "upce"),
        ("", ""),
    ],
)
def test_normalize_tag(tag: str, expected: str) -> None:
    assert normalize_tag(tag) == expected


def test_normalize_tag_non_string() -> None:
    assert normalize_tag(None) == ""  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "tag,expected",
    [
        ("org.gs1.EAN-13", Symbology.EAN13),
        ("org.gs1.EAN-8", Symbology.EAN8),
        ("org.gs1.UPC-E", Symbology.UPCE),
        ("org.gs1.ITF14", Symbology.ITF14),
        ("org.iso.Code39", Symbology.CODE39),
        ("org.iso.Code39Mod43", Symbology.CODE39_MOD43),
        ("org.iso.Code93", Symbology.CODE93),
        ("org.ansi.Interleaved2of5", Symbology.INTERLEAVED_2OF5),
        ("isbn13", Symbology.ISBN13),
        ("ISSN-13", Symbology.ISSN13),
        ("extended_code39", Symbology.EXTENDED_CODE39),
    ],
)
def test_symbology_from_tag(tag: str, expected: Symbology) -> None:
    assert Symbology.from_tag(tag) is expected


@pytest.mark.parametrize("tag", ["org.iso.QRCode", "org.iso.PDF417", "upca", ""])
def test_symbology_from_unknown_tag(tag: str) -> None:
    assert Symbology.from_tag(tag) is None


@pytest.mark.parametrize(
    "tag,expected",
    [
        ("org.iso.QRCode", Matrix2DCodeType.QR),
        ("qr", Matrix2DCodeType.QR),
        ("org.iso.PDF417", Matrix2DCodeType.PDF417),
        ("org.iso.Aztec", Matrix2DCodeType.AZTEC),
        ("org.iso.DataMatrix", Matrix2DCodeType.DATAMATRIX),
    ],
)
def test_matrix_from_tag(tag: str, expected: Matrix2DCodeType) -> None:
    assert Matrix2DCodeType.from_tag(tag) is expected


def test_matrix_from_linear_tag() -> None:
    assert Matrix2DCodeType.from_tag("org.gs1.EAN-13") is None


def test_symbology_localized_names() -> None:
    for member in Symbology:
        assert member.localized_name("ru")
        assert member.localized_name("en")
    assert Symbology.EAN13.localized_name("en") == "EAN-13"
    assert Symbology.ISBN13.localized_name("ru") == "ISBN-13 (книги)"


def test_matrix_localized_names() -> None:
    assert Matrix2DCodeType.QR.localized_name("en") == "QR code"
    assert Matrix2DCodeType.AZTEC.localized_name("ru") == "Ацтек-код"
    assert Matrix2DCodeType.PDF417.localized_name("de") == "pdf417"


def test_str_enum_values() -> None:
    assert Symbology("ean13") is Symbology.EAN13
    assert Symbology.CODE128 == "code128"
