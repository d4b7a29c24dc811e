"""Entity templates loaded from JSON files."""

from __future__ import annotations

import copy
import json
from typing import Any, Protocol

from .components import TextComponent, TextureComponent, component_from_json
from .errors import InvalidPrefabFileError, PrefabNameAlreadyUsedError
from .registry import Registry
from .vector import Rect


class AssetLoader(Protocol):
    def load_texture(self, path: str, texture_size: Rect | None) -> Any: ...

    def load_font(self, path: str) -> Any: ...


class PrefabManager:
    """Stores named prefabs and instantiates them into a registry."""

    def __init__(self, asset_loader: AssetLoader | None = None) -> None:
        self._asset_loader = asset_loader
        self._prefabs: dict[str, dict[type, Any]] = {}

    def load_prefab_from_file(self, filename: str) -> str:
        """Load a prefab from a JSON file and return its name."""
        try:
            with open(filename, encoding="utf-8") as infile:
                data = json.load(infile)
        except (OSError, ValueError) as exc:
            raise InvalidPrefabFileError() from exc
        return self.load_prefab(data)

    def load_prefab(self, data: Any) -> str:
        """Register a prefab from its decoded JSON document and return its name."""
        if not isinstance(data, dict) or "name" not in data or "components" not in data:
            raise InvalidPrefabFileError()
        name = data["name"]
        components = data["components"]
        if not isinstance(name, str) or not isinstance(components, list):
            raise InvalidPrefabFileError()
        if name in self._prefabs:
            raise PrefabNameAlreadyUsedError()
        prefab: dict[type, Any] = {}
        for entry in components:
            if not isinstance(entry, dict) or "type" not in entry or "value" not in entry:
                raise InvalidPrefabFileError()
            component = component_from_json(entry["type"], entry["value"])
            prefab.setdefault(type(component), component)
        self._prefabs[name] = prefab
        return name

    def is_prefab_loaded(self, prefab_name: str) -> bool:
        return prefab_name in self._prefabs

    def create_entity_from_prefab(
        self,
        prefab_name: str,
        registry: Registry,
        entity_id: int | None = None,
        load_texture: bool = True,
        load_font: bool = True,
    ) -> int:
        """Spawn an entity carrying copies of the prefab's components."""
        try:
            prefab = self._prefabs[prefab_name]
        except KeyError:
            raise KeyError(f"prefab {prefab_name!r} is not loaded") from None
        entity = registry.spawn_entity(entity_id)
        for component in prefab.values():
            added = registry.add_component(entity, copy.deepcopy(component))
            if self._asset_loader is None:
                continue
            if isinstance(added, TextureComponent) and load_texture:
                self._asset_loader.load_texture(added.path, added.texture_size)
                if added.texture_rects:
                    added.rect = added.current_rect()
            if isinstance(added, TextComponent) and load_font:
                self._asset_loader.load_font(added.font_path)
        return entity