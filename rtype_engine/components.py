"""Component data attached to entities, and their JSON form."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Protocol

from .errors import InvalidPrefabFileError
from .keyboard import Key
from .protocol import InputType
from .vector import Rect, Vector2


class PressableState(Enum):
    DEFAULT = "default"
    HOVERED = "hovered"
    PRESSED = "pressed"


class _Playable(Protocol):
    def play(self) -> None: ...


@dataclass
class TransformComponent:
    position: Vector2 = field(default_factory=Vector2)
    velocity: Vector2 = field(default_factory=Vector2)


@dataclass
class TextureComponent:
    path: str = ""
    texture_size: Rect | None = None
    texture_rects: list[Rect] = field(default_factory=list)
    render_layer: int = 0
    animated: bool = False
    animation_speed: float = 0.0
    last_update: float = 0.0
    animeid: int = 0
    is_rendered: bool = True
    position: Vector2 = field(default_factory=Vector2)
    rect: Rect | None = None

    def current_rect(self) -> Rect | None:
        """The animation frame selected by ``animeid``, if any."""
        if 0 <= self.animeid < len(self.texture_rects):
            return self.texture_rects[self.animeid]
        return None


@dataclass
class TextComponent:
    text: str = ""
    font_path: str = ""
    size: int = 24
    render_layer: int = 0
    is_rendered: bool = True
    position: Vector2 = field(default_factory=Vector2)


@dataclass
class CollisionComponent:
    rect: Rect = field(default_factory=lambda: Rect(0, 0, 0, 0))
    layer: int = 0
    is_active: bool = True
    actions: list[Callable[[int], Any]] = field(default_factory=list)


@dataclass
class GravityComponent:
    gravity_force: Vector2 = field(default_factory=Vector2)
    cumulated_g_velocity: Vector2 = field(default_factory=Vector2)
    is_active: bool = True


@dataclass
class DamageComponent:
    damage: int = 0
    list_damage: list[int] = field(default_factory=list)


@dataclass
class HealthComponent:
    health: int = 0


@dataclass
class ControllableComponent:
    key_up: Key = Key.NO_KEY
    key_left: Key = Key.NO_KEY
    key_down: Key = Key.NO_KEY
    key_right: Key = Key.NO_KEY
    speed: float = 0.0


@dataclass
class CameraComponent:
    center: Vector2 = field(default_factory=Vector2)
    size: Vector2 = field(default_factory=Vector2)
    target: int | None = None
    follow_x: bool = False
    follow_y: bool = False
    is_active: bool = True


@dataclass
class InputComponent:
    inputs: dict[InputType, Key] = field(default_factory=dict)


@dataclass
class MusicComponent:
    music: _Playable | None = None


@dataclass
class PressableComponent:
    hitbox: Rect = field(default_factory=lambda: Rect(0, 0, 0, 0))
    texture_default: Rect | None = None
    texture_hovered: Rect | None = None
    texture_pressed: Rect | None = None
    state: PressableState = PressableState.DEFAULT
    action: Callable[[], Any] = field(default=lambda: None)


@dataclass
class ScoreComponent:
    score: int = 0


@dataclass
class NetworkIdComponent:
    id: int = 0


def _number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected a number, got {value!r}")
    return float(value)


def _integer(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected an integer, got {value!r}")
    return value


def _optional_integer(value: Any) -> int | None:
    return None if value is None else _integer(value)


def _boolean(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"expected a boolean, got {value!r}")
    return value


def _string(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {value!r}")
    return value


def _vector(value: Any) -> Vector2:
    if not isinstance(value, dict):
        raise ValueError(f"expected a vector object, got {value!r}")
    return Vector2(_number(value.get("x", 0)), _number(value.get("y", 0)))


def _rect(value: Any) -> Rect:
    if not isinstance(value, dict):
        raise ValueError(f"expected a rect object, got {value!r}")
    return Rect(
        _number(value["left"]),
        _number(value["top"]),
        _number(value["width"]),
        _number(value["height"]),
    )


def _rects(value: Any) -> list[Rect]:
    if not isinstance(value, list):
        raise ValueError(f"expected a list of rects, got {value!r}")
    return [_rect(item) for item in value]


def _key(value: Any) -> Key:
    return Key[_string(value)]


_JSON_COMPONENTS: dict[str, tuple[type, dict[str, Callable[[Any], Any]]]] = {
    "TransformComponent": (TransformComponent, {"position": _vector, "velocity": _vector}),
    "ControllableComponent": (
        ControllableComponent,
        {"key_up": _key, "key_left": _key, "key_down": _key, "key_right": _key, "speed": _number},
    ),
    "TextureComponent": (
        TextureComponent,
        {
            "path": _string,
            "texture_size": _rect,
            "texture_rects": _rects,
            "render_layer": _integer,
            "animated": _boolean,
            "animation_speed": _number,
            "is_rendered": _boolean,
            "position": _vector,
        },
    ),
    "CollisionComponent": (
        CollisionComponent,
        {"rect": _rect, "layer": _integer, "is_active": _boolean},
    ),
    "HealthComponent": (HealthComponent, {"health": _integer}),
    "DamageComponent": (DamageComponent, {"damage": _integer}),
    "GravityComponent": (GravityComponent, {"gravity_force": _vector, "is_active": _boolean}),
    "CameraComponent": (
        CameraComponent,
        {
            "center": _vector,
            "size": _vector,
            "target": _optional_integer,
            "follow_x": _boolean,
            "follow_y": _boolean,
            "is_active": _boolean,
        },
    ),
    "TextComponent": (
        TextComponent,
        {
            "text": _string,
            "font_path": _string,
            "size": _integer,
            "render_layer": _integer,
            "is_rendered": _boolean,
            "position": _vector,
        },
    ),
}


def component_from_json(type_name: str, value: Any) -> Any:
    """Build the component named ``type_name`` from its JSON object."""
    entry = _JSON_COMPONENTS.get(type_name) if isinstance(type_name, str) else None
    if entry is None or not isinstance(value, dict):
        raise InvalidPrefabFileError()
    component_class, parsers = entry
    kwargs = {}
    for key, raw in value.items():
        parser = parsers.get(key)
        if parser is None:
            raise InvalidPrefabFileError(f"unknown field {key!r} for {type_name}")
        try:
            kwargs[key] = parser(raw)
        except (ValueError, TypeError, KeyError) as exc:
            raise InvalidPrefabFileError(f"invalid field {key!r} for {type_name}: {exc}") from exc
    return component_class(**kwargs)