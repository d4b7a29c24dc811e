"""Systems that update and draw the components of every entity each frame."""

from __future__ import annotations

from typing import Any, Callable, Protocol, Sequence, Union

from .components import (
    CameraComponent,
    CollisionComponent,
    ControllableComponent,
    DamageComponent,
    GravityComponent,
    HealthComponent,
    InputComponent,
    MusicComponent,
    PressableComponent,
    PressableState,
    TextComponent,
    TextureComponent,
    TransformComponent,
)
from .events import EventManager, EventType
from .keyboard import InputManager
from .vector import Rect, Vector2

DEFAULT_FPS_LIMIT = 60
GRAVITY_TICK = 0.1
CLOSED_EVENT = "closed"

Renderable = Union[TextureComponent, TextComponent]


def _at(array: Sequence[Any], index: int) -> Any:
    """The slot at ``index``, or ``None`` past the end of the array."""
    return array[index] if index < len(array) else None


def render_order(
    texts: Sequence[TextComponent | None], textures: Sequence[TextureComponent | None]
) -> list[Renderable]:
    """Texts then textures, present slots only, sorted by render layer."""
    items: list[Renderable] = [text for text in texts if text is not None]
    items.extend(texture for texture in textures if texture is not None)
    return sorted(items, key=lambda item: item.render_layer)


class AnimationSystem:
    """Steps animated textures through their frames."""

    def __call__(self, textures: Sequence[TextureComponent | None], delta_time: float) -> None:
        for texture in textures:
            if texture is None or not texture.animated:
                continue
            texture.last_update += delta_time
            if texture.last_update < texture.animation_speed:
                continue
            if texture.texture_rects:
                if texture.animeid < len(texture.texture_rects) - 1:
                    texture.animeid += 1
                else:
                    texture.animeid = 0
                texture.rect = texture.texture_rects[texture.animeid]
            texture.last_update = 0.0


class CollisionSystem:
    """Runs the actions of every active collision component with its entity id."""

    def __call__(self, collisions: Sequence[CollisionComponent | None]) -> None:
        for entity, collision in enumerate(collisions):
            if collision is None or not collision.is_active:
                continue
            for action in list(collision.actions):
                action(entity)


class ControlSystem:
    """Sets the velocity of controllable entities from the keys held."""

    def __init__(self, input_manager: InputManager) -> None:
        self._input = input_manager

    def __call__(
        self,
        transforms: Sequence[TransformComponent | None],
        controllables: Sequence[ControllableComponent | None],
    ) -> None:
        """Entities are handled in id order; the pass stops at the first one left at rest."""
        for controllable, transform in zip(controllables, transforms):
            if controllable is None or transform is None:
                continue
            velocity = Vector2(0.0, 0.0)
            if self._input.is_key_pressed(controllable.key_up):
                velocity += Vector2(0.0, -1.0)
            if self._input.is_key_pressed(controllable.key_left):
                velocity += Vector2(-1.0, 0.0)
            if self._input.is_key_pressed(controllable.key_down):
                velocity += Vector2(0.0, 1.0)
            if self._input.is_key_pressed(controllable.key_right):
                velocity += Vector2(1.0, 0.0)
            transform.velocity = velocity
            if velocity.x == 0.0 and velocity.y == 0.0:
                return
            transform.velocity = velocity.normalize() * controllable.speed


class DamageSystem:
    """Applies pending damage and announces entities whose health ran out."""

    def __init__(self, event_manager: EventManager) -> None:
        self._events = event_manager

    def __call__(
        self,
        damages: Sequence[DamageComponent | None],
        healths: Sequence[HealthComponent | None],
    ) -> None:
        for entity, damage in enumerate(damages):
            health = _at(healths, entity)
            if damage is None or health is None:
                continue
            while damage.list_damage:
                health.health -= damage.list_damage.pop()
            if health.health <= 0:
                self._events.publish(EventType.GET_DESTROY, entity)


class GravitySystem:
    """Adds each gravity force to its accumulated velocity every tenth of a second."""

    def __init__(self) -> None:
        self._current_delta_time = 0.0

    def __call__(self, gravities: Sequence[GravityComponent | None], delta_time: float) -> None:
        self._current_delta_time += delta_time
        for gravity in gravities:
            if not self._current_delta_time >= GRAVITY_TICK:
                return
            if gravity is not None and gravity.is_active:
                gravity.cumulated_g_velocity += gravity.gravity_force
        self._current_delta_time = 0.0


class InputSystem:
    """Publishes a SEND_INPUT event for each bound key pressed or released.

    Subscribers receive ``(entity, input_type, state)``.
    """

    def __init__(self, event_manager: EventManager, input_manager: InputManager) -> None:
        self._events = event_manager
        self._input = input_manager

    def __call__(self, inputs: Sequence[InputComponent | None]) -> None:
        for entity, component in enumerate(inputs):
            if component is None:
                continue
            for input_type, key in list(component.inputs.items()):
                if self._input.is_key_pressed(key):
                    self._events.publish(EventType.SEND_INPUT, entity, input_type, True)
                if self._input.is_key_released(key):
                    self._events.publish(EventType.SEND_INPUT, entity, input_type, False)


class PositionSystem:
    """Moves entities by their velocity plus any active gravity."""

    def __call__(
        self,
        transforms: Sequence[TransformComponent | None],
        textures: Sequence[TextureComponent | None],
        gravities: Sequence[GravityComponent | None],
        delta_time: float,
    ) -> None:
        for entity, transform in enumerate(transforms):
            if transform is None:
                continue
            gravity = _at(gravities, entity)
            pull = gravity.cumulated_g_velocity if gravity is not None and gravity.is_active else Vector2()
            transform.position += (transform.velocity + pull) * delta_time
            texture = _at(textures, entity)
            if texture is not None:
                texture.position = transform.position


class CameraSystem:
    """Centres cameras on their target along the followed axes."""

    def __call__(
        self,
        cameras: Sequence[CameraComponent | None],
        transforms: Sequence[TransformComponent | None],
    ) -> None:
        for camera in cameras:
            if camera is None or camera.target is None:
                continue
            transform = _at(transforms, camera.target)
            if transform is None:
                continue
            if camera.follow_x:
                camera.center = Vector2(transform.position.x, camera.center.y)
            if camera.follow_y:
                camera.center = Vector2(camera.center.x, transform.position.y)


class MusicSystem:
    """Plays every music component that holds a track."""

    def __call__(self, musics: Sequence[MusicComponent | None]) -> None:
        for component in musics:
            if component is not None and component.music is not None:
                component.music.play()


class PressableSystem:
    """Tracks the mouse over pressable entities and fires their action on release.

    The mouse position comes from the GET_WORLD_MOUSE_POS event: the last
    subscriber result that is not ``None`` is used, the origin otherwise.
    """

    def __init__(self, event_manager: EventManager, is_mouse_pressed: Callable[[], bool]) -> None:
        self._events = event_manager
        self._is_mouse_pressed = is_mouse_pressed
        self.last_mouse_state = False

    def _mouse_position(self) -> Vector2:
        results = self._events.publish(EventType.GET_WORLD_MOUSE_POS)
        coord = next((r for r in reversed(results) if r is not None), Vector2(0.0, 0.0))
        return Vector2(int(coord.x), int(coord.y))

    def __call__(
        self,
        transforms: Sequence[TransformComponent | None],
        textures: Sequence[TextureComponent | None],
        pressables: Sequence[PressableComponent | None],
    ) -> Any:
        mouse = self._mouse_position()
        pressed = bool(self._is_mouse_pressed())
        pointer = Rect(0, 0, 1, 1)

        for entity, transform in enumerate(transforms):
            texture = _at(textures, entity)
            pressable = _at(pressables, entity)
            if transform is None or texture is None or pressable is None:
                continue
            position = Vector2(int(transform.position.x), int(transform.position.y))
            if pressable.hitbox.is_colliding(position, pointer, mouse):
                if not pressed and pressable.state is PressableState.PRESSED:
                    texture.rect = pressable.texture_hovered
                    pressable.state = PressableState.HOVERED
                    return pressable.action()
                if not pressed and pressable.state is not PressableState.HOVERED:
                    texture.rect = pressable.texture_hovered
                    pressable.state = PressableState.HOVERED
                    continue
                if pressed and pressable.state is not PressableState.PRESSED:
                    texture.rect = pressable.texture_pressed
                    pressable.state = PressableState.PRESSED
                    continue
            elif pressable.state is not PressableState.DEFAULT:
                texture.rect = pressable.texture_default
                pressable.state = PressableState.DEFAULT
        self.last_mouse_state = pressed
        return None


class _Window(Protocol):
    def is_open(self) -> bool: ...

    def poll_event(self) -> Any: ...

    def close(self) -> None: ...

    def mouse_world_position(self) -> Vector2: ...

    def set_view(self, view: Any) -> None: ...

    def set_framerate_limit(self, limit: float) -> None: ...

    def clear(self) -> None: ...

    def draw(self, item: Renderable) -> None: ...

    def display(self) -> None: ...


class DrawSystem:
    """Draws texts and textures through a window and serves window events."""

    def __init__(self, event_manager: EventManager, window: _Window) -> None:
        self._events = event_manager
        self.window = window
        window.set_framerate_limit(DEFAULT_FPS_LIMIT)

        event_manager.add_handler(EventType.WINDOW_IS_OPEN).subscribe(window.is_open)
        event_manager.add_handler(EventType.QUIT_EVENT).subscribe(self._on_quit)
        event_manager.add_handler(EventType.POLL_EVENT).subscribe(window.poll_event)
        event_manager.add_handler(EventType.WINDOW_CLOSE_EVENT).subscribe(self._on_window_event)
        event_manager.add_handler(EventType.GET_WORLD_MOUSE_POS).subscribe(window.mouse_world_position)
        event_manager.add_handler(EventType.WINDOW_SET_VIEW).subscribe(window.set_view)
        event_manager.add_handler(EventType.SET_FPS_LIMIT_EVENT).subscribe(window.set_framerate_limit)

    def _on_quit(self, is_open: bool) -> None:
        if not is_open:
            self.window.close()

    def _on_window_event(self, event: Any) -> None:
        if event == CLOSED_EVENT:
            self.window.close()

    def __call__(
        self,
        texts: Sequence[TextComponent | None],
        textures: Sequence[TextureComponent | None],
        cameras: Sequence[CameraComponent | None],
    ) -> None:
        self.window.clear()
        items = render_order(texts, textures)
        for camera in cameras:
            if camera is None or not camera.is_active:
                continue
            for item in items:
                if item.is_rendered:
                    self.window.draw(item)
            self.window.set_view(camera)
        self.window.display()