from typing import Any
from unittest.mock import Mock, patch

import pytest
from PIL import Image
from pytest import MonkeyPatch

from src.barcodegen.exceptions import BarcodeGenError
from src.barcodegen.matrix2d_generator import (
    MATRIX_GENERATOR_NAMES,
    Matrix2DCodeGenerator,
    Matrix2DCodeGenError,
    filter_name,
)
from src.model.enums import Matrix2DCodeType


@pytest.mark.parametrize(
    "tag,expected",
    [
        ("org.iso.QRCode", "qrcode"),
        ("qrcode", "qrcode"),
        ("QR", "qrcode"),
        ("org.iso.PDF417", "pdf417"),
        ("org.iso.Aztec", "azteccode"),
        ("org.iso.DataMatrix", "datamatrix"),
        ("Data_Matrix", "datamatrix"),
        (Matrix2DCodeType.AZTEC, "azteccode"),
        ("org.gs1.EAN-13", ""),
        ("code39", ""),
        ("", ""),
    ],
)
def test_filter_name(tag: Any, expected: str) -> None:
    assert filter_name(tag) == expected


def test_every_type_has_generator() -> None:
    assert set(MATRIX_GENERATOR_NAMES) == set(Matrix2DCodeType)


@pytest.mark.parametrize(
    "code_type,data",
    [
        (Matrix2DCodeType.QR, "https://example.com"),
        (Matrix2DCodeType.PDF417, "PDF417 payload"),
    ],
)
def test_generate_basic(code_type: Matrix2DCodeType, data: str) -> None:
    img = Matrix2DCodeGenerator(code_type, data).render_image()
    assert isinstance(img, Image.Image)
    assert img.mode == "RGB"
    assert img.width > 0 and img.height > 0


def test_qr_box_size_and_border() -> None:
    small = Matrix2DCodeGenerator(Matrix2DCodeType.QR, "abc", {"box_size": 1, "border": 0})
    large = Matrix2DCodeGenerator(Matrix2DCodeType.QR, "abc", {"box_size": 4, "border": 0})
    assert large.render_image().width == small.render_image().width * 4


def test_scale_option_resizes_without_interpolation() -> None:
    gen = Matrix2DCodeGenerator(Matrix2DCodeType.QR, "abc", {"box_size": 1, "border": 1})
    base = gen.render_image()
    scaled = gen.render_image({"scale": 3})
    assert scaled.size == (base.width * 3, base.height * 3)
    colours = {colour for _, colour in scaled.getcolors()}
    assert colours == {(0, 0, 0), (255, 255, 255)}


def test_invalid_type() -> None:
    with pytest.raises(TypeError):
        Matrix2DCodeGenerator("qr", "data")  # type: ignore[arg-type]


def test_empty_data_error() -> None:
    with pytest.raises(Matrix2DCodeGenError, match="non-empty"):
        Matrix2DCodeGenerator(Matrix2DCodeType.QR, "").render_image()


def test_generator_name_property() -> None:
    gen = Matrix2DCodeGenerator(Matrix2DCodeType.DATAMATRIX, "data")
    assert gen.generator_name == "datamatrix"


def test_qrcode_makeimage_error() -> None:
    gen = Matrix2DCodeGenerator(Matrix2DCodeType.QR, "test")
    with patch("qrcode.QRCode.make_image", side_effect=Exception("qrfail")):
        with pytest.raises(Matrix2DCodeGenError, match="qrcode generation failed"):
            gen.render_image()


@patch("treepoem.generate_barcode")
def test_aztec_via_treepoem(mock_generate: Mock) -> None:
    mock_generate.return_value = Image.new("1", (15, 15), 1)
    img = Matrix2DCodeGenerator(
        Matrix2DCodeType.AZTEC, "hello", {"eclevel": 33, "box_size": 5}
    ).render_image()
    assert img.mode == "RGB"
    assert img.size == (15, 15)
    mock_generate.assert_called_once_with(
        barcode_type="azteccode", data="hello", options={"eclevel": 33}
    )


@patch("treepoem.generate_barcode")
def test_datamatrix_via_treepoem(mock_generate: Mock) -> None:
    mock_generate.return_value = Image.new("RGB", (10, 10), "white")
    Matrix2DCodeGenerator(
        Matrix2DCodeType.DATAMATRIX, "hello", {"columns": 16}
    ).render_bytes()
    mock_generate.assert_called_once_with(
        barcode_type="datamatrix", data="hello", options={"columns": 16}
    )


def test_datamatrix_treepoem_error_handling(monkeypatch: MonkeyPatch) -> None:
    import treepoem

    def mock_generate_error(*args: Any, **kwargs: Any) -> None:
        raise RuntimeError("ghostscript missing")

    monkeypatch.setattr(treepoem, "generate_barcode", mock_generate_error)
    gen = Matrix2DCodeGenerator(Matrix2DCodeType.DATAMATRIX, "data")
    with pytest.raises(Matrix2DCodeGenError, match="datamatrix generation failed"):
        gen.render_image()


@patch("treepoem.generate_barcode")
def test_non_image_result_raises(mock_generate: Mock) -> None:
    mock_generate.return_value = "not an image"
    with pytest.raises(Matrix2DCodeGenError, match="did not produce a valid image"):
        Matrix2DCodeGenerator(Matrix2DCodeType.AZTEC, "data").render_image()


@pytest.mark.parametrize("scale", [0, -2, "big"])
def test_bad_scale_raises_matrix_error(scale: Any) -> None:
    gen = Matrix2DCodeGenerator(Matrix2DCodeType.QR, "x", {"scale": scale})
    with pytest.raises(Matrix2DCodeGenError, match="qrcode rescale failed") as exc_info:
        gen.render_image()
    assert isinstance(exc_info.value.__cause__, BarcodeGenError)


def test_render_bytes_png() -> None:
    data = Matrix2DCodeGenerator(Matrix2DCodeType.QR, "png").render_bytes()
    assert data.startswith(b"\x89PNG\r\n\x1a\n")
