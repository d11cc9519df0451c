# gunicorn app.app:app
import logging
import sys

from app.config import resolve_port
from app.server import ServerStartupError, bind_socket, configure_logging

logger = logging.getLogger("app.server")

port = resolve_port()

bind = f"0.0.0.0:{port}"
worker_class = "gthread"
workers = 1
threads = 8

errorlog = "-"
loglevel = "warning"


def on_starting(server):
    configure_logging()
    logger.info("Server starting on port %s", port)

    # gunicorn retries a busy port; fail on the first attempt instead.
    try:
        bind_socket(port).close()
    except ServerStartupError as exc:
        logger.critical("%s", exc)
        sys.exit(1)
