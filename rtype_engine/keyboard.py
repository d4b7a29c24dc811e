"""Keyboard keys and key-state queries."""

from __future__ import annotations

from enum import Enum, auto
from typing import Callable


class Key(Enum):
    NO_KEY = auto()
    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()  # noqa: E741
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()  # noqa: E741
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()
    Num0 = auto()
    Num1 = auto()
    Num2 = auto()
    Num3 = auto()
    Num4 = auto()
    Num5 = auto()
    Num6 = auto()
    Num7 = auto()
    Num8 = auto()
    Num9 = auto()
    Escape = auto()
    LControl = auto()
    LShift = auto()
    LAlt = auto()
    LSystem = auto()
    RControl = auto()
    RShift = auto()
    RAlt = auto()
    RSystem = auto()
    Menu = auto()
    LBracket = auto()
    RBracket = auto()
    Semicolon = auto()
    Comma = auto()
    Period = auto()
    Quote = auto()
    Slash = auto()
    Backslash = auto()
    Tilde = auto()
    Equal = auto()
    Dash = auto()
    Space = auto()
    Enter = auto()
    Backspace = auto()
    Tab = auto()
    Add = auto()
    Subtract = auto()
    Multiply = auto()
    Divide = auto()
    Left = auto()
    Right = auto()
    Up = auto()
    Down = auto()
    Numpad0 = auto()
    Numpad1 = auto()
    Numpad2 = auto()
    Numpad3 = auto()
    Numpad4 = auto()
    Numpad5 = auto()
    Numpad6 = auto()
    Numpad7 = auto()
    Numpad8 = auto()
    Numpad9 = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()
    F13 = auto()
    F14 = auto()
    F15 = auto()
    Pause = auto()


class InputManager:
    """Answers key queries from a backend that reports whether a key is held."""

    def __init__(self, key_state: Callable[[Key], bool]) -> None:
        self._key_state = key_state
        self._previous: dict[Key, bool] = {}

    def is_key_pressed(self, key: Key) -> bool:
        """Whether ``key`` is held down right now."""
        if key is Key.NO_KEY:
            return False
        return bool(self._key_state(key))

    def is_key_released(self, key: Key) -> bool:
        """Whether ``key`` was held at the previous query and is up now."""
        if key is Key.NO_KEY:
            return False
        now = bool(self._key_state(key))
        was = self._previous.get(key, False)
        self._previous[key] = now
        return was and not now