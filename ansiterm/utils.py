import os
import socket
import logging

logger = logging.getLogger("ansiterm")
logger.addHandler(logging.NullHandler())

DEFAULT_PORT = 12013


def get_log_port():
    """Get the UDP port for log forwarding, from ANSITERM_LOG_PORT if set."""
    value = os.environ.get("ANSITERM_LOG_PORT", "")
    try:
        return int(value) if value else DEFAULT_PORT
    except ValueError:
        logger.warning(f"Invalid ANSITERM_LOG_PORT {value!r}, using {DEFAULT_PORT}")
        return DEFAULT_PORT


class UDPHandler(logging.Handler):
    """Send log records to localhost over UDP.

    When stdin is in single-character mode, log messages written to
    stderr would get mixed up with the prompt.
    """

    def __init__(self, port=None):
        super().__init__()
        self.udp_address = ("127.0.0.1", port or get_log_port())
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)

    def emit(self, record):
        msg = self.format(record)
        bb = msg.encode()
        size = 2**10
        while bb:
            bb1 = bb[:size]
            bb = bb[size:]
            self._socket.sendto(bb1, self.udp_address)

    def close(self):
        self._socket.close()
        super().close()


def enable_log_forwarding(port=None, level=logging.DEBUG):
    """Forward the ansiterm logs to ``listen_to_logs()``."""
    handler = UDPHandler(port)
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler


def disable_log_forwarding(handler):
    """Remove and close a handler from ``enable_log_forwarding()``."""
    logger.removeHandler(handler)
    handler.close()


def listen_to_logs(port=None):
    """Called from ``ansiterm --listen``

    This way we can see the logs from another process, so it does not get
    mixed up with the output of a prompt.
    """

    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.bind(("127.0.0.1", port or get_log_port()))
        while True:
            data, addr = sock.recvfrom(2**20)
            print(data.decode(errors="replace"))
