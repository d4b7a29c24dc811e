"""Text reports on the registry, the event log and the frame rate."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable

from .components import (
    CameraComponent,
    CollisionComponent,
    ControllableComponent,
    DamageComponent,
    GravityComponent,
    HealthComponent,
    InputComponent,
    MusicComponent,
    NetworkIdComponent,
    PressableComponent,
    PressableState,
    ScoreComponent,
    TextComponent,
    TextureComponent,
    TransformComponent,
)
from .events import INTERNAL_EVENT_NAMES, EventManager, EventType
from .registry import Registry

DEFAULT_FPS_LIMIT_SLIDER_VALUE = 60
DEFAULT_FPS_LIMIT_SLIDER_MAX_VALUE = 240
DEFAULT_FPS_PLOT_NB_VALUES = 90

NOT_REGISTERED = "Component not registered"
NO_INFORMATION = "No information available for this component"

_PRESSABLE_STATE_NAMES = {
    PressableState.DEFAULT: "Default",
    PressableState.HOVERED: "Hovered",
    PressableState.PRESSED: "Pressed",
}


class FpsStats:
    """Frame-rate history, extremes and limit as shown in the game menu."""

    def __init__(
        self,
        fps_limit: int = DEFAULT_FPS_LIMIT_SLIDER_VALUE,
        history: int = DEFAULT_FPS_PLOT_NB_VALUES,
    ) -> None:
        self.fps_limit = fps_limit
        self.old_fps_limit = 0
        self.unlimited = False
        self.max_fps = 0
        self.low_fps = fps_limit
        self.values: deque[float] = deque(maxlen=history)

    def record(self, fps: float) -> None:
        """Add one frame-rate sample and update the extremes."""
        if fps > self.max_fps:
            self.max_fps = int(fps)
        if fps < self.low_fps:
            self.low_fps = int(fps)
        self.values.append(fps)
        if self.unlimited:
            self.fps_limit = self.max_fps

    def set_unlimited(self, unlimited: bool) -> float | None:
        """Switch the unlimited mode; return the limit to apply, or None if nothing changed.

        A limit of ``-1.0`` means no limit.
        """
        if unlimited == self.unlimited:
            return None
        self.unlimited = unlimited
        if unlimited:
            self.old_fps_limit = self.fps_limit
            self.max_fps = 0
            self.low_fps = self.fps_limit
            return -1.0
        self.fps_limit = self.old_fps_limit
        return float(self.fps_limit)

    @property
    def summary(self) -> str:
        return f"Low: {self.low_fps}, Max: {self.max_fps}"


def _flag(value: bool) -> str:
    return "Yes" if value else "No"


def _transform(c: TransformComponent) -> list[str]:
    return [
        f"Position: ({c.position.x:f}, {c.position.y:f})",
        f"Velocity: ({c.velocity.x:f}, {c.velocity.y:f})",
    ]


def _texture(c: TextureComponent) -> list[str]:
    lines = [
        f"Is Rendered: {_flag(c.is_rendered)}",
        f"Is Animated: {_flag(c.animated)}",
        f"Render Layer: {c.render_layer}",
        f'Texture Path: "{c.path}"',
    ]
    if c.animated:
        lines.append(
            f"Animation state: {c.last_update:f}/{c.animation_speed:f} "
            f"({c.animeid}/{len(c.texture_rects)})"
        )
    return lines


def _collision(c: CollisionComponent) -> list[str]:
    return [
        f"Collision Active: {_flag(c.is_active)}",
        f"Layer: {c.layer}",
        f"Actions registered: {len(c.actions)}",
    ]


def _pressable(c: PressableComponent) -> list[str]:
    return [f"State: {_PRESSABLE_STATE_NAMES.get(c.state, 'Undifined')}"]


def _text(c: TextComponent) -> list[str]:
    return [
        f"Text: {c.text}",
        f"Size: {c.size}",
        f"Is Rendered: {_flag(c.is_rendered)}",
        f"Layer: {c.render_layer}",
    ]


def _controllable(c: ControllableComponent) -> list[str]:
    return [f"Speed: {c.speed:f}"]


def _damage(c: DamageComponent) -> list[str]:
    return [f"Damage: {c.damage}"]


def _gravity(c: GravityComponent) -> list[str]:
    return [
        f"Gravity Force: ({c.gravity_force.x:f}, {c.gravity_force.y:f})",
        f"Cumulated G Velocity: ({c.cumulated_g_velocity.x:f}, {c.cumulated_g_velocity.y:f})",
        f"Is Active: {_flag(c.is_active)}",
    ]


def _input(c: InputComponent) -> list[str]:
    lines = [f"Input Registered: {len(c.inputs)}", "Inputs:"]
    lines.extend(f"[{int(input_type)} -> {key.name}]" for input_type, key in c.inputs.items())
    return lines


def _health(c: HealthComponent) -> list[str]:
    return [f"Health: {c.health}"]


def _score(c: ScoreComponent) -> list[str]:
    return [f"Score: {c.score}"]


def _network_id(c: NetworkIdComponent) -> list[str]:
    return [f"Network ID: {c.id}"]


_REPORTERS: dict[type, Callable[[Any], list[str]]] = {
    TransformComponent: _transform,
    TextureComponent: _texture,
    CollisionComponent: _collision,
    PressableComponent: _pressable,
    TextComponent: _text,
    ControllableComponent: _controllable,
    DamageComponent: _damage,
    GravityComponent: _gravity,
    InputComponent: _input,
    HealthComponent: _health,
    ScoreComponent: _score,
    NetworkIdComponent: _network_id,
}


class DebugMenu:
    """Inspects a registry and an event manager and drives the frame-rate limit."""

    def __init__(self, registry: Registry, event_manager: EventManager) -> None:
        self._registry = registry
        self._events = event_manager
        self.fps = FpsStats()

    def component_report(self, component_type: type, index: int) -> list[str]:
        """Lines describing the component of ``component_type`` held by entity ``index``."""
        if component_type is CameraComponent:
            return [NO_INFORMATION]
        if component_type is not MusicComponent and component_type not in _REPORTERS:
            raise TypeError(f"no report for {component_type.__name__}")
        if not self._registry.is_component_registered(component_type):
            return [NOT_REGISTERED]
        if component_type is MusicComponent:
            return [NO_INFORMATION]
        components = self._registry.get_components(component_type)
        if not 0 <= index < len(components) or components[index] is None:
            return []
        return _REPORTERS[component_type](components[index])

    def registry_report(self) -> list[str]:
        registry = self._registry
        return [
            f"Living Entities: {registry.living_entities}/{registry.max_entities}",
            f"Max Entity Id Used: {registry.nb_entities}/{registry.max_entities}",
            f"Systems Registered: {registry.system_count}",
        ]

    def events_report(self) -> list[str]:
        """One line per logged event, then the auto-clear threshold."""
        lines = []
        for position, event in enumerate(self._events.event_log):
            name = INTERNAL_EVENT_NAMES.get(event)  # type: ignore[call-overload]
            if name is not None:
                lines.append(f"[{position}](Internal) Event triggered: {name}")
            else:
                lines.append(f"[{position}] Event triggered: {event}")
        lines.append(f"(Auto Clear at {self._events.max_log_length} Event)")
        return lines

    def set_fps_limit(self, limit: int | None) -> None:
        """Set the frame-rate limit; ``None`` removes it.

        The new limit is published as a SET_FPS_LIMIT_EVENT, ``-1.0`` meaning none.
        """
        if limit is None:
            value = self.fps.set_unlimited(True)
            if value is not None:
                self._events.publish(EventType.SET_FPS_LIMIT_EVENT, value)
            return
        if not 1 <= limit <= DEFAULT_FPS_LIMIT_SLIDER_MAX_VALUE:
            raise ValueError(f"fps limit must be between 1 and {DEFAULT_FPS_LIMIT_SLIDER_MAX_VALUE}")
        self.fps.set_unlimited(False)
        self.fps.fps_limit = int(limit)
        self._events.publish(EventType.SET_FPS_LIMIT_EVENT, float(limit))

    def clear_event_log(self) -> None:
        self._events.clear_log()