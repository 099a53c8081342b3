"""Thin wrapper around the ``qrcode`` library producing fixed-size PNGs."""
import enum
from io import BytesIO

import qrcode
from PIL import Image

QUIET_ZONE = 4

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class ErrorCorrection(enum.Enum):
    LOW = qrcode.constants.ERROR_CORRECT_L
    MEDIUM = qrcode.constants.ERROR_CORRECT_M
    QUARTILE = qrcode.constants.ERROR_CORRECT_Q
    HIGH = qrcode.constants.ERROR_CORRECT_H


def _build_matrix(text: str, error_correction: ErrorCorrection):
    qr = qrcode.QRCode(
        version=None,
        error_correction=error_correction.value,
        box_size=1,
        border=QUIET_ZONE,
    )
    qr.add_data(text)
    qr.make(fit=True)
    return qr.get_matrix()


def _rasterize(matrix, size: int) -> Image.Image:
    """
    Draw the module matrix on a white ``size`` x ``size`` canvas.
    Every module gets the same whole number of pixels and the symbol is
    centered. If the canvas cannot hold one pixel per module, the symbol
    is returned at its natural size instead.
    """
    modules = len(matrix)
    symbol = Image.new("1", (modules, modules))
    symbol.putdata([0 if dark else 255 for row in matrix for dark in row])

    pixels_per_module = size // modules
    if pixels_per_module == 0:
        return symbol

    scaled = modules * pixels_per_module
    symbol = symbol.resize((scaled, scaled), Image.Resampling.NEAREST)
    canvas = Image.new("1", (size, size), 1)
    offset = (size - scaled) // 2
    canvas.paste(symbol, (offset, offset))
    return canvas


def encode(text: str, error_correction: ErrorCorrection, size: int) -> bytes:
    """Encode ``text`` as a QR symbol and return it as PNG bytes.

    Raises ``qrcode.exceptions.DataOverflowError`` (or ``ValueError`` on newer
    qrcode releases) when the text does not fit in the largest symbol at the
    requested error-correction level.
    """
    if size <= 0:
        raise ValueError(f"size must be positive, got {size}")

    image = _rasterize(_build_matrix(text, error_correction), size)

    img_io = BytesIO()
    image.save(img_io, format="PNG")
    return img_io.getvalue()
