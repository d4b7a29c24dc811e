"""Exceptions raised by the engine."""


class EngineError(Exception):
    """Base class of every engine error."""

    default_message = "Engine error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)
        self.message = message if message is not None else self.default_message


class ComponentNotRegisterError(EngineError):
    default_message = "This component hasn't been registered"


class ComponentNotInsertedError(EngineError):
    default_message = "This component hasn't been inserted"


class TooMuchEntitiesError(EngineError):
    default_message = "Too much entities have been created"


class InvalidEntityIdError(EngineError):
    default_message = "Invalid id entity"


class InvalidSceneNameError(EngineError):
    default_message = "The scene name is invalid or already used"


class SceneNotRegisterError(EngineError):
    default_message = "The scene hasn't been registered"


class InvalidPrefabFileError(EngineError):
    default_message = "Invalid prefab config file"


class PrefabNameAlreadyUsedError(EngineError):
    default_message = "Prefab name already used"