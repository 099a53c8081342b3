from qr_generator import config
from qr_generator.encoder import encode
from qr_generator.errors import EncodingFailure, InvalidInput


class QRCodeGenerator:
    """Validates request text and turns it into a PNG via the encoder."""

    def __init__(self, error_correction=config.QR_ERROR_CORRECTION, size=config.QR_IMAGE_SIZE):
        self.error_correction = error_correction
        self.size = size

    def generate(self, text: str) -> bytes:
        if not text:
            raise InvalidInput("text cannot be empty")

        try:
            png_bytes = encode(text, self.error_correction, self.size)
        except Exception as exc:
            raise EncodingFailure(f"failed to generate QR code: {exc}") from exc

        return png_bytes
