class QRGeneratorError(Exception):
    """Base class for errors raised while handling a generation request."""


class InvalidInput(QRGeneratorError):
    """The client supplied no text, or an empty one."""


class EncodingFailure(QRGeneratorError):
    """The QR encoder rejected the text or failed internally.

    The original exception is kept as ``__cause__``.
    """
