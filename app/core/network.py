"""
app/core/network.py

Best-effort discovery of the machine's LAN address, used only to print a
reachable URL at startup.
"""

import socket

from app.core.logger import get_logger

logger = get_logger(__name__)

# Any routable address works; connect() on a UDP socket sends no packets.
_PROBE_ADDRESS = ("10.255.255.255", 1)


def get_local_ip_address() -> str:
    """
    Return the first non-loopback IPv4 address of this host.

    Falls back to ``"localhost"`` when no such address can be determined.
    """
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect(_PROBE_ADDRESS)
            address = sock.getsockname()[0]
    except OSError as exc:
        logger.debug("LAN address lookup failed: %s", exc)
        return "localhost"

    if not address or address.startswith("127.") or address == "0.0.0.0":
        return "localhost"
    return address
