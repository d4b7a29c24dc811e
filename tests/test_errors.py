import pytest

from rtype_engine.errors import (
    ComponentNotInsertedError,
    ComponentNotRegisterError,
    EngineError,
    InvalidEntityIdError,
    InvalidPrefabFileError,
    InvalidSceneNameError,
    PrefabNameAlreadyUsedError,
    SceneNotRegisterError,
    TooMuchEntitiesError,
)


@pytest.mark.parametrize(
    ("error_type", "message"),
    [
        (ComponentNotRegisterError, "This component hasn't been registered"),
        (ComponentNotInsertedError, "This component hasn't been inserted"),
        (TooMuchEntitiesError, "Too much entities have been created"),
        (InvalidEntityIdError, "Invalid id entity"),
        (InvalidSceneNameError, "The scene name is invalid or already used"),
        (SceneNotRegisterError, "The scene hasn't been registered"),
        (InvalidPrefabFileError, "Invalid prefab config file"),
        (PrefabNameAlreadyUsedError, "Prefab name already used"),
    ],
)
def test_default_messages(error_type, message):
    error = error_type()
    assert str(error) == message
    assert error.message == message


@pytest.mark.parametrize(
    ("error_type", "message"),
    [
        (ComponentNotRegisterError, "This component hasn't been registered"),
        (TooMuchEntitiesError, "Too much entities have been created"),
        (SceneNotRegisterError, "The scene hasn't been registered"),
        (PrefabNameAlreadyUsedError, "Prefab name already used"),
    ],
)
def test_caught_as_engine_error(error_type, message):
    with pytest.raises(EngineError) as info:
        raise error_type()
    assert type(info.value) is error_type
    assert str(info.value) == message


def test_custom_message_overrides_default():
    error = InvalidEntityIdError("entity 7 is dead")
    assert str(error) == "entity 7 is dead"