import os

from qr_generator.encoder import ErrorCorrection


def truthy(v):
    if v is None:
        return False
    return str(v).strip().lower() in ("1", "true", "yes", "y", "on")


HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))
LOG_JSON = truthy(os.getenv("LOG_JSON", "true"))

# Fixed encoding parameters; clients cannot change them.
QR_ERROR_CORRECTION = ErrorCorrection.MEDIUM
QR_IMAGE_SIZE = 256

PNG_MIMETYPE = "image/png"
