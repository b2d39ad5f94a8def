"""Keyboard and mouse state tracking fed by window events."""

from __future__ import annotations

from enum import Enum, IntEnum, IntFlag
from typing import Protocol

from voxelcore.signals import Signal


class Key(IntEnum):
    UNKNOWN = -1
    NONE = 0
    SPACE = 32
    APOSTROPHE = 39
    COMMA = 44
    MINUS = 45
    PERIOD = 46
    SLASH = 47
    KEY_0 = 48
    KEY_1 = 49
    KEY_2 = 50
    KEY_3 = 51
    KEY_4 = 52
    KEY_5 = 53
    KEY_6 = 54
    KEY_7 = 55
    KEY_8 = 56
    KEY_9 = 57
    SEMICOLON = 59
    EQUAL = 61
    A = 65
    B = 66
    C = 67
    D = 68
    E = 69
    F = 70
    G = 71
    H = 72
    I = 73  # noqa: E741
    J = 74
    K = 75
    L = 76
    M = 77
    N = 78
    O = 79  # noqa: E741
    P = 80
    Q = 81
    R = 82
    S = 83
    T = 84
    U = 85
    V = 86
    W = 87
    X = 88
    Y = 89
    Z = 90
    LEFT_BRACKET = 91
    BACKSLASH = 92
    RIGHT_BRACKET = 93
    GRAVE = 96
    WORLD_1 = 161
    WORLD_2 = 162
    ESCAPE = 256
    ENTER = 257
    TAB = 258
    BACKSPACE = 259
    INSERT = 260
    DELETE = 261
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265
    PAGE_UP = 266
    PAGE_DOWN = 267
    HOME = 268
    END = 269
    CAPS_LOCK = 280
    SCROLL_LOCK = 281
    NUM_LOCK = 282
    PRINT_SCREEN = 283
    PAUSE = 284
    F1 = 290
    F2 = 291
    F3 = 292
    F4 = 293
    F5 = 294
    F6 = 295
    F7 = 296
    F8 = 297
    F9 = 298
    F10 = 299
    F11 = 300
    F12 = 301
    F13 = 302
    F14 = 303
    F15 = 304
    F16 = 305
    F17 = 306
    F18 = 307
    F19 = 308
    F20 = 309
    F21 = 310
    F22 = 311
    F23 = 312
    F24 = 313
    F25 = 314
    KEYPAD_0 = 320
    KEYPAD_1 = 321
    KEYPAD_2 = 322
    KEYPAD_3 = 323
    KEYPAD_4 = 324
    KEYPAD_5 = 325
    KEYPAD_6 = 326
    KEYPAD_7 = 327
    KEYPAD_8 = 328
    KEYPAD_9 = 329
    KEYPAD_DECIMAL = 330
    KEYPAD_DIVIDE = 331
    KEYPAD_MULTIPLY = 332
    KEYPAD_SUBTRACT = 333
    KEYPAD_ADD = 334
    KEYPAD_ENTER = 335
    KEYPAD_EQUAL = 336
    LEFT_SHIFT = 340
    LEFT_CONTROL = 341
    LEFT_ALT = 342
    LEFT_SUPER = 343
    RIGHT_SHIFT = 344
    RIGHT_CONTROL = 345
    RIGHT_ALT = 346
    RIGHT_SUPER = 347
    MENU = 348


class MouseButton(IntEnum):
    BUTTON_1 = 0
    BUTTON_2 = 1
    BUTTON_3 = 2
    BUTTON_4 = 3
    BUTTON_5 = 4
    BUTTON_6 = 5
    BUTTON_7 = 6
    BUTTON_8 = 7
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class KeyState(IntFlag):
    NONE = 0
    DOWN = 1
    HOLD = 2
    UP = 4


class CursorState(Enum):
    NORMAL = "normal"
    LOCKED = "locked"


class Action(IntEnum):
    """The kind of a key or button event, as reported by the window system."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class CursorControl(Protocol):
    """What the input tracker needs from a window to manage the cursor."""

    def set_mode(self, state: CursorState) -> None: ...

    def position(self) -> tuple[float, float]: ...


def _as_key(value: int) -> Key | int:
    try:
        return Key(value)
    except ValueError:
        return value


def _as_button(value: int) -> MouseButton | int:
    try:
        return MouseButton(value)
    except ValueError:
        return value


class Input:
    """Tracks which keys and buttons went down, are held, or went up this frame."""

    def __init__(self, cursor: CursorControl | None = None) -> None:
        self._cursor = cursor
        self.on_key_changed = Signal()
        self.on_mouse_button_changed = Signal()
        self.on_mouse_moved = Signal()

        self._keys_held: set[int] = set()
        self._keys_down: set[int] = set()
        self._keys_up: set[int] = set()
        self._buttons_held: set[int] = set()
        self._buttons_down: set[int] = set()
        self._buttons_up: set[int] = set()

        self._cursor_state = CursorState.NORMAL
        self._mouse_position: tuple[float, float] = (0.0, 0.0)
        self._delta: tuple[float, float] = (0.0, 0.0)

    @property
    def cursor_state(self) -> CursorState:
        return self._cursor_state

    @property
    def mouse_position(self) -> tuple[float, float]:
        return self._mouse_position

    @property
    def mouse_delta(self) -> tuple[float, float]:
        return self._delta

    def pre_update(self) -> None:
        """Forget the per-frame transitions before new events are handled."""
        self._delta = (0.0, 0.0)
        self._keys_down.clear()
        self._keys_up.clear()
        self._buttons_down.clear()
        self._buttons_up.clear()

    def handle_key_input(self, key: int, scancode: int, action: int, mods: int) -> None:
        key = _as_key(key)
        if key not in self._keys_held:
            if action == Action.PRESS:
                self._keys_held.add(key)
                self._keys_down.add(key)
                self.on_key_changed.publish(key, KeyState.DOWN)
        elif action == Action.RELEASE:
            self._keys_held.discard(key)
            self._keys_up.add(key)
            self.on_key_changed.publish(key, KeyState.UP)

    def handle_mouse_button_input(self, button: int, action: int, mods: int) -> None:
        button = _as_button(button)
        if button not in self._buttons_held:
            if action == Action.PRESS:
                self._buttons_held.add(button)
                self._buttons_down.add(button)
                self.on_mouse_button_changed.publish(button, KeyState.DOWN)
        elif action == Action.RELEASE:
            self._buttons_held.discard(button)
            self._buttons_up.add(button)
            self.on_mouse_button_changed.publish(button, KeyState.UP)

    def handle_mouse_position(self, x: float, y: float) -> None:
        new = (float(x), float(y))
        self._delta = (new[0] - self._mouse_position[0], new[1] - self._mouse_position[1])
        self._mouse_position = new
        self.on_mouse_moved.publish(self._delta)

    @staticmethod
    def _state(down: bool, hold: bool, up: bool) -> KeyState:
        state = KeyState.NONE
        if down:
            state |= KeyState.DOWN
        if hold:
            state |= KeyState.HOLD
        if up:
            state |= KeyState.UP
        return state

    def key_state(self, key: int) -> KeyState:
        return self._state(self.key_down(key), self.key_hold(key), self.key_up(key))

    def key_down(self, key: int) -> bool:
        return key in self._keys_down

    def key_hold(self, key: int) -> bool:
        return key in self._keys_held

    def key_up(self, key: int) -> bool:
        return key in self._keys_up

    def mouse_button_state(self, button: int) -> KeyState:
        return self._state(
            self.mouse_button_down(button),
            self.mouse_button_hold(button),
            self.mouse_button_up(button),
        )

    def mouse_button_down(self, button: int) -> bool:
        return button in self._buttons_down

    def mouse_button_hold(self, button: int) -> bool:
        return button in self._buttons_held

    def mouse_button_up(self, button: int) -> bool:
        return button in self._buttons_up

    def set_cursor_state(self, state: CursorState) -> None:
        """Switch the cursor mode; the mouse position is resynced and the delta cleared."""
        if state == self._cursor_state:
            return
        if not isinstance(state, CursorState):
            return
        if self._cursor is not None:
            self._cursor.set_mode(state)
        self._cursor_state = state
        if self._cursor is not None:
            x, y = self._cursor.position()
            self._mouse_position = (float(x), float(y))
        self._delta = (0.0, 0.0)