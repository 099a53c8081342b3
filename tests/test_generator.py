import pytest
from qrcode.exceptions import DataOverflowError

from qr_generator.encoder import PNG_SIGNATURE, ErrorCorrection
from qr_generator.errors import EncodingFailure, InvalidInput, QRGeneratorError
from qr_generator.generator import QRCodeGenerator


@pytest.fixture()
def generator() -> QRCodeGenerator:
    return QRCodeGenerator()


def test_defaults_are_medium_and_256() -> None:
    generator = QRCodeGenerator()
    assert generator.error_correction is ErrorCorrection.MEDIUM
    assert generator.size == 256


@pytest.mark.parametrize(
    "text",
    ["https://example.com", "Hello World", "12345", "Hello 世界 🌍", "a" * 1000],
)
def test_generate_returns_png(generator, text) -> None:
    result = generator.generate(text)
    assert len(result) > 8
    assert result[:8] == PNG_SIGNATURE


def test_generate_twice_yields_valid_png_each_time(generator) -> None:
    first = generator.generate("hello")
    second = generator.generate("hello")
    assert first[:8] == PNG_SIGNATURE
    assert second[:8] == PNG_SIGNATURE


def test_empty_text_is_invalid_input(generator) -> None:
    with pytest.raises(InvalidInput):
        generator.generate("")


def test_overflow_is_wrapped_as_encoding_failure(generator) -> None:
    with pytest.raises(EncodingFailure) as excinfo:
        generator.generate("A" * 5000)
    assert isinstance(excinfo.value.__cause__, (DataOverflowError, ValueError))
    assert isinstance(excinfo.value, QRGeneratorError)


def test_any_encoder_error_is_wrapped(monkeypatch, generator) -> None:
    def broken_encode(text, error_correction, size):
        raise RuntimeError("encoder exploded")

    monkeypatch.setattr("qr_generator.generator.encode", broken_encode)
    with pytest.raises(EncodingFailure) as excinfo:
        generator.generate("hello")
    assert isinstance(excinfo.value.__cause__, RuntimeError)
