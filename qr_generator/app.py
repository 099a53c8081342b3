import json
from io import BytesIO

import structlog
from flask import Flask, Response, current_app, request, send_file
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from qr_generator import config
from qr_generator.errors import EncodingFailure, InvalidInput
from qr_generator.generator import QRCodeGenerator
from qr_generator.log import configure_logging, init_request_logging

logger = structlog.get_logger(__name__)

GENERATE_PATH = "/api/v1/qr/generate"
USAGE = f"Missing required parameter 'text'. Usage: POST {GENERATE_PATH}?text=your-text-here"

HEALTH_BODY = json.dumps({"status": "healthy"}, separators=(",", ":"))


def _plain_text(body: str, status: int) -> Response:
    return Response(body + "\n", status=status, mimetype="text/plain")


def health_check():
    return Response(HEALTH_BODY, status=200, mimetype="application/json")


def generate_qr():
    text = request.args.get("text", "")
    if text:
        logger.info("processing qr code generation request", text=text)

    generator: QRCodeGenerator = current_app.extensions["qr_generator"]
    png_bytes = generator.generate(text)

    return send_file(
        BytesIO(png_bytes),
        mimetype=config.PNG_MIMETYPE,
        as_attachment=False,
        download_name="qrcode.png",
    )


def index():
    return _plain_text("QR Code Generator API", 200)


# (rule, methods, view); built once and registered by create_app.
ROUTES = (
    ("/health", ["GET"], health_check),
    (GENERATE_PATH, ["POST"], generate_qr),
    ("/", ["GET"], index),
)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(InvalidInput)
    def handle_invalid_input(exc):
        return _plain_text(USAGE, 400)

    @app.errorhandler(EncodingFailure)
    def handle_encoding_failure(exc):
        logger.error("qr code generation failed", error=str(exc), cause=repr(exc.__cause__))
        return _plain_text("Failed to generate QR code", 500)

    @app.errorhandler(NotFound)
    def handle_not_found(exc):
        return _plain_text("404 page not found", 404)

    @app.errorhandler(MethodNotAllowed)
    def handle_method_not_allowed(exc):
        response = _plain_text("Method not allowed", 405)
        if exc.valid_methods:
            response.headers["Allow"] = ", ".join(exc.valid_methods)
        return response

    @app.errorhandler(HTTPException)
    def handle_http_exception(exc):
        return _plain_text(exc.name, exc.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(exc):
        logger.exception("unhandled error")
        return _plain_text("Internal server error", 500)


def create_app(test_config=None, routes=ROUTES) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(
        HOST=config.HOST,
        PORT=config.PORT,
        LOG_JSON=config.LOG_JSON,
        QR_ERROR_CORRECTION=config.QR_ERROR_CORRECTION,
        QR_IMAGE_SIZE=config.QR_IMAGE_SIZE,
    )
    if test_config:
        app.config.from_mapping(test_config)

    # Uncached under TESTING so every test app picks up its own configuration.
    configure_logging(json_logs=app.config["LOG_JSON"], cache_loggers=not app.testing)
    init_request_logging(app)

    app.extensions["qr_generator"] = QRCodeGenerator(
        error_correction=app.config["QR_ERROR_CORRECTION"],
        size=app.config["QR_IMAGE_SIZE"],
    )

    for rule, methods, view in routes:
        app.add_url_rule(
            rule,
            endpoint=view.__name__,
            view_func=view,
            methods=methods,
            provide_automatic_options=False,
        )

    _register_error_handlers(app)
    return app
