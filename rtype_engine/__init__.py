"""An entity-component-system game engine with a binary network protocol."""

__version__ = "0.1.0"

__all__ = [
    "communication",
    "components",
    "debug",
    "errors",
    "events",
    "keyboard",
    "prefabs",
    "protocol",
    "registry",
    "scenes",
    "systems",
    "timing",
    "vector",
]