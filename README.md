# rtype-engine

A compact entity-component-system (ECS) engine for side-scrolling shooters,
together with the binary packet protocol that clients and servers use to
exchange game state. It has no dependencies outside the standard library.

## What is inside

- `rtype_engine.registry` — `Registry`, which spawns and kills entities
  (`spawn_entity`, `kill_entity`) and stores components in one list per
  component type, with `None` in empty slots (`register_component`,
  `add_component`, `remove_component`, `get_components`).
- `rtype_engine.components` — the component dataclasses (`TransformComponent`,
  `TextureComponent`, `TextComponent`, `CollisionComponent`,
  `GravityComponent`, `DamageComponent`, `HealthComponent`,
  `ControllableComponent`, `CameraComponent`, `InputComponent`,
  `MusicComponent`, `PressableComponent`, `ScoreComponent`,
  `NetworkIdComponent`) and `component_from_json`, which builds a component
  from its JSON object.
- `rtype_engine.systems` — callable systems that run over component lists:
  `PositionSystem`, `GravitySystem`, `AnimationSystem`, `ControlSystem`,
  `CollisionSystem`, `DamageSystem`, `InputSystem`, `PressableSystem`,
  `CameraSystem`, `MusicSystem` and `DrawSystem`, plus `render_order`.
- `rtype_engine.events` — `EventManager` and `EventHandler`, a
  publish/subscribe bus keyed by `EventType` (or any hashable), which keeps
  an event log cleared automatically once it reaches its maximum length.
- `rtype_engine.prefabs` — `PrefabManager`, which loads entity templates from
  JSON files (`load_prefab_from_file`) or decoded documents (`load_prefab`)
  and instantiates them in a registry (`create_entity_from_prefab`).
- `rtype_engine.scenes` — the abstract `Scene` and `SceneManager`.
- `rtype_engine.protocol` — packet enums (`PacketType`, `ComponentType`,
  `InputType`, `TextureType`, `GameState`), the `Header` and payload
  dataclasses, `pack_payload` / `unpack_payload`, and `encode_packet` /
  `decode_packet` for the wire format (little-endian header holding the
  magic number, packet type and payload size).
- `rtype_engine.communication` — the abstract `Communication`, which frames
  outgoing messages, checks incoming datagrams for the magic number, tracks
  peers by port and passes valid packets to `handle_data`.
- `rtype_engine.debug` — `DebugMenu` and `FpsStats`, which produce text
  reports on components, the registry and the event log, and publish
  frame-rate limit changes.
- `rtype_engine.vector` (`Vector2`, `Rect`), `rtype_engine.keyboard`
  (`Key`, `InputManager`), `rtype_engine.timing` (`DeltaTime`) and
  `rtype_engine.errors` (every error derives from `EngineError`).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from rtype_engine.registry import Registry
from rtype_engine.components import TransformComponent
from rtype_engine.systems import PositionSystem
from rtype_engine.vector import Vector2

registry = Registry(100)
registry.register_component(TransformComponent)

ship = registry.spawn_entity()
registry.add_component(ship, TransformComponent(position=Vector2(0.0, 0.0),
                                                velocity=Vector2(100.0, 0.0)))

move = PositionSystem()
move(registry.get_components(TransformComponent), [], [], 0.5)
print(registry.get_components(TransformComponent)[ship].position)
# Vector2(x=50.0, y=0.0)
```

Packets round-trip through the protocol module:

```python
from rtype_engine.protocol import (
    PacketType, ScoreData, decode_packet, encode_packet, pack_payload, unpack_payload,
)

raw = encode_packet(PacketType.SCORE, pack_payload(ScoreData(score=1200)))
header, body = decode_packet(raw)
assert unpack_payload(ScoreData, body) == ScoreData(score=1200)
```

## What it does not do

The package holds the engine's logic only. It opens no window, draws
nothing, plays no sound and reads no keyboard or mouse by itself:
`DrawSystem` draws through a window object you supply, `InputManager` asks a
key-state callable you supply, and `MusicComponent` holds any object with a
`play()` method. Likewise `Communication` opens no socket; you feed it the
datagrams you receive and send the bytes `build_message` returns. There is
no game, server or command-line program in the package.