import pytest

from rtype_engine.components import (
    CameraComponent,
    CollisionComponent,
    ControllableComponent,
    PressableComponent,
    PressableState,
    TextureComponent,
    TransformComponent,
    component_from_json,
)
from rtype_engine.errors import InvalidPrefabFileError
from rtype_engine.keyboard import Key
from rtype_engine.vector import Rect, Vector2


def test_current_rect_follows_animeid():
    rects = [Rect(0, 0, 10, 10), Rect(10, 0, 10, 10)]
    texture = TextureComponent(texture_rects=rects, animeid=1)
    assert texture.current_rect() == rects[1]


def test_current_rect_without_frames_is_none():
    assert TextureComponent().current_rect() is None


def test_default_lists_are_not_shared():
    first = TextureComponent()
    second = TextureComponent()
    first.texture_rects.append(Rect(0, 0, 1, 1))
    assert second.texture_rects == []


def test_pressable_starts_in_default_state():
    assert PressableComponent().state is PressableState.DEFAULT


def test_transform_from_json():
    component = component_from_json(
        "TransformComponent", {"position": {"x": 12, "y": 34}, "velocity": {"x": 1.5, "y": -2}}
    )
    assert component == TransformComponent(Vector2(12.0, 34.0), Vector2(1.5, -2.0))


def test_controllable_keys_from_json():
    component = component_from_json(
        "ControllableComponent",
        {"key_up": "Z", "key_left": "Q", "key_down": "S", "key_right": "D", "speed": 200},
    )
    assert isinstance(component, ControllableComponent)
    assert (component.key_up, component.key_right, component.speed) == (Key.Z, Key.D, 200.0)


def test_texture_rects_from_json():
    component = component_from_json(
        "TextureComponent",
        {
            "path": "assets/ship.png",
            "texture_rects": [{"left": 0, "top": 0, "width": 33, "height": 17}],
            "animated": True,
            "render_layer": 3,
        },
    )
    assert component.texture_rects == [Rect(0.0, 0.0, 33.0, 17.0)]
    assert component.path == "assets/ship.png"
    assert component.animated is True


def test_camera_target_from_json():
    component = component_from_json("CameraComponent", {"target": 4, "follow_x": True})
    assert component == CameraComponent(target=4, follow_x=True)


def test_collision_from_json_has_no_actions():
    component = component_from_json("CollisionComponent", {"layer": 2})
    assert isinstance(component, CollisionComponent)
    assert component.actions == []


@pytest.mark.parametrize(
    "type_name, value",
    [
        ("UnknownComponent", {}),
        ("HealthComponent", {"mana": 3}),
        ("HealthComponent", {"health": "lots"}),
        ("ControllableComponent", {"key_up": "NotAKey"}),
        ("TextureComponent", {"texture_rects": [{"left": 0}]}),
        ("HealthComponent", [1, 2]),
    ],
)
def test_invalid_json_raises(type_name, value):
    with pytest.raises(InvalidPrefabFileError):
        component_from_json(type_name, value)