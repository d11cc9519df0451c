from flask import Flask, request
import logging
import socket

logger = logging.getLogger(__name__)

GREETING_TEMPLATE = "Hello, World from {hostname}! Welcome to Cloud Native Infrastructure.\n"
UNKNOWN_HOSTNAME = ""
TEXT_PLAIN = {"Content-Type": "text/plain; charset=utf-8"}

# Both routes answer every method, OPTIONS included.
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def get_hostname():
    """Best-effort host name lookup; falls back to UNKNOWN_HOSTNAME."""
    try:
        return socket.gethostname()
    except OSError:
        return UNKNOWN_HOSTNAME


def remote_address():
    port = request.environ.get("REMOTE_PORT")
    if port:
        return f"{request.remote_addr}:{port}"
    return request.remote_addr


def create_app():
    app = Flask(__name__)

    @app.route("/", methods=ALL_METHODS, provide_automatic_options=False)
    def home():
        logger.info("Received request for %s from %s", request.path, remote_address())
        return GREETING_TEMPLATE.format(hostname=get_hostname()), TEXT_PLAIN

    @app.route("/health", methods=ALL_METHODS, provide_automatic_options=False)
    def health():
        return "OK", 200, TEXT_PLAIN

    return app


# WSGI target for gunicorn (gunicorn app.app:app)
app = create_app()
