"""Transport-independent handling of framed packets."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from .protocol import HEADER_SIZE, MAGIC_NUMBER, Header, unpack_header

logger = logging.getLogger(__name__)


class Communication(ABC):
    """Frames outgoing messages and dispatches incoming datagrams."""

    def __init__(self) -> None:
        self._clients: dict[int, tuple[str, int]] = {}

    @property
    def clients(self) -> dict[int, tuple[str, int]]:
        """Known peers, keyed by port."""
        return dict(self._clients)

    def build_message(self, header: Header, body: bytes) -> bytes:
        """Bytes to send: the packed header followed by the body."""
        return header.pack() + bytes(body)

    def handle_receive(self, data: bytes, address: tuple[str, int]) -> bool:
        """Process one datagram; return whether it reached :meth:`handle_data`."""
        port = address[1]
        self._clients.setdefault(port, address)
        try:
            header = unpack_header(data)
        except ValueError:
            logger.error("Truncated packet from %s", address)
            return False
        if header.magic_number != MAGIC_NUMBER:
            logger.error("Invalid Magic Number")
            return False
        body = bytes(data[HEADER_SIZE:HEADER_SIZE + header.payload_size])
        self.handle_data(header, body, port)
        return True

    @abstractmethod
    def handle_data(self, header: Header, body: bytes, port: int) -> None:
        """React to a valid packet received from the peer on ``port``."""