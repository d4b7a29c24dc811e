"""Scenes and the manager that switches between them."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .errors import InvalidSceneNameError, SceneNotRegisterError


class Scene(ABC):
    """A game scene; subclasses fill in loading and per-frame work."""

    def __init__(self) -> None:
        self.entities_to_unload: list[int] = []

    @abstractmethod
    def load(self) -> None:
        """Create the scene's entities."""

    @abstractmethod
    def update(self) -> None:
        """Run one frame of scene logic."""

    def unload(self) -> list[int]:
        """Forget and return the entities recorded for unloading."""
        entities, self.entities_to_unload = self.entities_to_unload, []
        return entities

    def add_entity_to_unload(self, entity: int) -> None:
        self.entities_to_unload.append(entity)


class SceneManager:
    def __init__(self) -> None:
        self._scenes: dict[str, Scene] = {}
        self._current_scene = ""

    @property
    def current_scene(self) -> str:
        return self._current_scene

    def register_scene(self, name: str, scene: Scene) -> None:
        """Register ``scene``; a name already taken keeps its first scene."""
        if name == "":
            raise InvalidSceneNameError()
        self._scenes.setdefault(name, scene)

    def unregister_scene(self, name: str) -> None:
        if name not in self._scenes:
            raise SceneNotRegisterError()
        del self._scenes[name]

    def load_scene(self, name: str) -> None:
        if name not in self._scenes:
            raise SceneNotRegisterError()
        self._current_scene = name
        self._scenes[name].load()

    def unload_scene(self) -> None:
        scene = self._scenes.get(self._current_scene)
        if scene is None:
            return
        scene.unload()
        self._current_scene = ""

    def add_entity_to_current_scene_unload(self, entity: int) -> None:
        scene = self._scenes.get(self._current_scene)
        if scene is not None:
            scene.add_entity_to_unload(entity)

    def update_current_scene(self) -> None:
        scene = self._scenes.get(self._current_scene)
        if scene is not None:
            scene.update()