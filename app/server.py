"""Process entry point: resolve the port, bind the listener, serve until killed."""

import logging
import socket
import sys

from werkzeug.serving import WSGIRequestHandler, make_server

from app.app import create_app
from app.config import resolve_port

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class ServerStartupError(Exception):
    """The listener could not be bound on the requested port."""

    def __init__(self, port, cause):
        super().__init__(f"cannot listen on port {port}: {cause}")
        self.port = port
        self.cause = cause


class QuietRequestHandler(WSGIRequestHandler):
    """Request handler without the per-request access log line."""

    def log_request(self, code="-", size="-"):
        pass


def configure_logging(level=logging.INFO):
    logging.basicConfig(level=level, format=LOG_FORMAT)


def bind_socket(port):
    """Listen on ``port`` on all interfaces, IPv6 and IPv4 where the host allows it."""
    try:
        if socket.has_dualstack_ipv6():
            return socket.create_server(
                ("", int(port)), family=socket.AF_INET6, dualstack_ipv6=True
            )
        return socket.create_server(("", int(port)))
    except (OSError, ValueError, OverflowError) as exc:
        raise ServerStartupError(port, exc) from exc


def make_listener(app, port):
    """Bind ``port`` and return a threaded WSGI server for ``app``.

    Port "0" picks a free ephemeral port; read it back from ``server.port``.
    """
    sock = bind_socket(port)
    host = "::" if sock.family == socket.AF_INET6 else "0.0.0.0"

    # make_server adopts a duplicate of the descriptor, so ours is closed either way.
    try:
        return make_server(
            host,
            sock.getsockname()[1],
            app,
            threaded=True,
            request_handler=QuietRequestHandler,
            fd=sock.fileno(),
        )
    finally:
        sock.close()


def main():
    configure_logging()

    port = resolve_port()
    logger.info("Server starting on port %s", port)

    try:
        server = make_listener(create_app(), port)
    except ServerStartupError as exc:
        logger.critical("%s", exc)
        sys.exit(1)

    # serve_forever returns on Ctrl-C and closes the listener itself.
    try:
        server.serve_forever()
    except OSError as exc:
        logger.critical("Server on port %s failed: %s", port, exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
