"""
NutriSnap Backend - Local Network Address
===========================================

What:  Finds the machine's LAN IPv4 address for the startup banner, so the UI
       can be opened from a phone on the same Wi-Fi.
"""

import logging
import socket

logger = logging.getLogger(__name__)

# Any non-loopback address works: connect() on a UDP socket sends nothing
_PROBE_ADDRESS = ("10.255.255.255", 1)


def get_local_ip() -> str:
    """
    Return the first non-loopback IPv4 address, or "localhost" if there is none.
    """
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect(_PROBE_ADDRESS)
            address = sock.getsockname()[0]
    except OSError as e:
        logger.debug("Could not determine LAN address: %s", e)
        return "localhost"

    if not address or address.startswith("127.") or address == "0.0.0.0":
        return "localhost"
    return address
