"""Wire protocol shared by the client and the server."""

from __future__ import annotations

import struct
from dataclasses import astuple, dataclass
from enum import IntEnum
from typing import ClassVar, TypeVar

MAGIC_NUMBER = 0xA54CDEF5
MAX_BUFFER_SIZE = 65535
HEADER_SIZE = 8
PLAYER_SPEED = 100.0

_HEADER_FORMAT = "<IBxH"


class ComponentType(IntEnum):
    TRANSFORM = 1
    COLLISION = 2
    TEXTURE = 3
    CONTROLLABLE = 4
    INPUT = 5
    COLLISION_RES = 6
    TEXTURE_RES = 7
    TEXTURE_STATE = 8


class PacketType(IntEnum):
    STRING = 10
    CONNEXION = 11
    DESTROY = 12
    SCORE = 13
    ENDGAME = 14


class InputType(IntEnum):
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3
    SHOOT = 4


class TextureType(IntEnum):
    NONE = 1
    PLAYER = 2
    SIMPLE_SHOOT = 3
    CHARGED_SHOOT = 4
    SIMPLE_MOB = 5
    MEDIUM_MOB = 6


class GameState(IntEnum):
    GAME = 0
    WIN = 1
    LOSE = 2


@dataclass
class Header:
    """Packet header: magic number, packet type and payload size."""

    packet_type: int
    payload_size: int = 0
    magic_number: int = MAGIC_NUMBER

    def pack(self) -> bytes:
        try:
            return struct.pack(_HEADER_FORMAT, self.magic_number, int(self.packet_type), self.payload_size)
        except struct.error as exc:
            raise ValueError(f"header field out of range: {exc}") from exc


def unpack_header(data: bytes) -> Header:
    """Read a header from the first bytes of ``data``."""
    if len(data) < HEADER_SIZE:
        raise ValueError(f"header needs {HEADER_SIZE} bytes, got {len(data)}")
    magic, packet_type, size = struct.unpack_from(_HEADER_FORMAT, data)
    return Header(packet_type=packet_type, payload_size=size, magic_number=magic)


@dataclass
class InputData:
    FORMAT: ClassVar[str] = "<HBB"
    id: int
    input_id: int
    state: int


@dataclass
class ScoreData:
    FORMAT: ClassVar[str] = "<H"
    score: int


@dataclass
class EndGameData:
    FORMAT: ClassVar[str] = "<B"
    end_game_state: int


@dataclass
class StatePlayerData:
    FORMAT: ClassVar[str] = "<HBx"
    id: int
    invincibility: int


@dataclass
class EntityIdData:
    FORMAT: ClassVar[str] = "<H"
    id: int


@dataclass
class TextureResponse:
    FORMAT: ClassVar[str] = "<HH"
    id: int
    id_texture: int


@dataclass
class TransformData:
    FORMAT: ClassVar[str] = "<H2xffff"
    id: int
    x: float
    y: float
    dx: float
    dy: float


@dataclass
class CollisionData:
    FORMAT: ClassVar[str] = "<HBxffffB3x"
    id: int
    id_callback: int
    rect_left: float
    rect_top: float
    rect_width: float
    rect_height: float
    layer: int


@dataclass
class TextureData:
    FORMAT: ClassVar[str] = "<HBB8HBB2xf"
    id: int
    id_texture: int
    id_order_texture: int
    rect_left: int
    rect_top: int
    rect_width: int
    rect_height: int
    rect_texture_left: int
    rect_texture_top: int
    rect_texture_width: int
    rect_texture_height: int
    render_layer: int
    is_animated: int
    animation_speed: float


_P = TypeVar("_P")


def pack_payload(payload: object) -> bytes:
    """Serialise a payload dataclass with its wire layout."""
    fmt = getattr(type(payload), "FORMAT", None)
    if fmt is None:
        raise TypeError(f"{type(payload).__name__} is not a protocol payload")
    try:
        return struct.pack(fmt, *astuple(payload))
    except struct.error as exc:
        raise ValueError(f"cannot pack {type(payload).__name__}: {exc}") from exc


def unpack_payload(payload_type: type[_P], data: bytes) -> _P:
    """Build a payload of ``payload_type`` from its exact wire bytes."""
    fmt = getattr(payload_type, "FORMAT", None)
    if fmt is None:
        raise TypeError(f"{payload_type.__name__} is not a protocol payload")
    expected = struct.calcsize(fmt)
    if len(data) != expected:
        raise ValueError(f"{payload_type.__name__} needs {expected} bytes, got {len(data)}")
    return payload_type(*struct.unpack(fmt, data))


def encode_packet(packet_type: int, body: bytes) -> bytes:
    """Prefix ``body`` with a header describing it."""
    if len(body) > MAX_BUFFER_SIZE - HEADER_SIZE:
        raise ValueError("payload too large for one packet")
    return Header(packet_type=int(packet_type), payload_size=len(body)).pack() + bytes(body)


def decode_packet(data: bytes) -> tuple[Header, bytes]:
    """Split a packet into its header and body, checking the magic number."""
    header = unpack_header(data)
    if header.magic_number != MAGIC_NUMBER:
        raise ValueError("Invalid Magic Number")
    body = bytes(data[HEADER_SIZE:HEADER_SIZE + header.payload_size])
    if len(body) < header.payload_size:
        raise ValueError("truncated packet body")
    return header, body