"""Keyboard, mouse, joystick and gamepad state tracking."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Sequence

from ttge.vector import Vector2

__all__ = [
    "Key",
    "MouseButton",
    "Joystick",
    "GamepadButton",
    "GamepadAxis",
    "Action",
    "JoystickEvent",
    "Input",
]


class Key(IntEnum):
    """Named key codes."""

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
    KP_0 = 320
    KP_1 = 321
    KP_2 = 322
    KP_3 = 323
    KP_4 = 324
    KP_5 = 325
    KP_6 = 326
    KP_7 = 327
    KP_8 = 328
    KP_9 = 329
    KP_DECIMAL = 330
    KP_DIVIDE = 331
    KP_MULTIPLY = 332
    KP_SUBTRACT = 333
    KP_ADD = 334
    KP_ENTER = 335
    KP_EQUAL = 336
    LEFT_SHIFT = 340
    LEFT_CONTROL = 341
    LEFT_ALT = 342
    LEFT_SUPER = 343
    RIGHT_SHIFT = 344
    RIGHT_CONTROL = 345
    RIGHT_ALT = 346
    RIGHT_SUPER = 347
    MENU = 348
    LAST = 348


class MouseButton(IntEnum):
    BUTTON_1 = 0
    BUTTON_2 = 1
    BUTTON_3 = 2
    BUTTON_4 = 3
    BUTTON_5 = 4
    BUTTON_6 = 5
    BUTTON_7 = 6
    BUTTON_8 = 7
    LAST = 7
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class Joystick(IntEnum):
    JOYSTICK_1 = 0
    JOYSTICK_2 = 1
    JOYSTICK_3 = 2
    JOYSTICK_4 = 3
    JOYSTICK_5 = 4
    JOYSTICK_6 = 5
    JOYSTICK_7 = 6
    JOYSTICK_8 = 7
    JOYSTICK_9 = 8
    JOYSTICK_10 = 9
    JOYSTICK_11 = 10
    JOYSTICK_12 = 11
    JOYSTICK_13 = 12
    JOYSTICK_14 = 13
    JOYSTICK_15 = 14
    JOYSTICK_16 = 15
    LAST = 15


class GamepadButton(IntEnum):
    A = 0
    B = 1
    X = 2
    Y = 3
    LEFT_BUMPER = 4
    RIGHT_BUMPER = 5
    BACK = 6
    START = 7
    GUIDE = 8
    LEFT_THUMB = 9
    RIGHT_THUMB = 10
    DPAD_UP = 11
    DPAD_RIGHT = 12
    DPAD_DOWN = 13
    DPAD_LEFT = 14
    LAST = 14
    CROSS = 0
    CIRCLE = 1
    SQUARE = 2
    TRIANGLE = 3


class GamepadAxis(IntEnum):
    LEFT_X = 0
    LEFT_Y = 1
    RIGHT_X = 2
    RIGHT_Y = 3
    LEFT_TRIGGER = 4
    RIGHT_TRIGGER = 5
    LAST = 5


class Action(IntEnum):
    """What happened to a key or button."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class JoystickEvent(IntEnum):
    CONNECTED = 0x00040001
    DISCONNECTED = 0x00040002


def _in_range(index: int, last: int) -> bool:
    return 0 <= index <= last


def _apply_action(table: list[bool], index: int, action: int) -> None:
    if action == Action.PRESS:
        table[index] = True
    elif action == Action.RELEASE:
        table[index] = False


def _lookup(table: Sequence[bool], index: int, what: str) -> bool:
    if not 0 <= index < len(table):
        raise IndexError(f"{what} {index} is out of range 0..{len(table) - 1}")
    return table[index]


class Input:
    """Tracks the pressed/connected state of input devices.

    The ``*_callback`` methods are fed by the windowing layer; the query
    methods report the state they accumulated.
    """

    def __init__(self) -> None:
        self.init()

    def key_callback(
        self, window: Any, key: int, scancode: int, action: int, mods: int
    ) -> None:
        if _in_range(key, Key.LAST):
            _apply_action(self._keys, key, action)

    def mouse_button_callback(
        self, window: Any, button: int, action: int, mods: int
    ) -> None:
        if _in_range(button, MouseButton.LAST):
            _apply_action(self._mouse_buttons, button, action)

    def cursor_position_callback(self, window: Any, xpos: float, ypos: float) -> None:
        new_position = Vector2(float(xpos), float(ypos))
        self.mouse_delta = new_position - self.mouse_position
        self.mouse_position = new_position

    def joystick_callback(self, jid: int, event: int) -> None:
        if not _in_range(jid, Joystick.LAST):
            return
        if event == JoystickEvent.CONNECTED:
            self._joysticks[jid] = True
        elif event == JoystickEvent.DISCONNECTED:
            self._joysticks[jid] = False

    def gamepad_button_callback(self, jid: int, button: int, action: int) -> None:
        if _in_range(jid, Joystick.LAST) and _in_range(button, GamepadButton.LAST):
            _apply_action(self._gamepad_buttons, button, action)

    def is_key_pressed(self, key: int) -> bool:
        return _lookup(self._keys, key, "key")

    def is_mouse_button_pressed(self, button: int) -> bool:
        return _lookup(self._mouse_buttons, button, "mouse button")

    def is_joystick_connected(self, joystick: int) -> bool:
        return _lookup(self._joysticks, joystick, "joystick")

    def is_gamepad_button_pressed(self, button: int) -> bool:
        return _lookup(self._gamepad_buttons, button, "gamepad button")

    def reset_mouse_delta(self) -> None:
        self.mouse_delta = Vector2(0.0, 0.0)

    def reset(self) -> None:
        self.init()
        self.reset_mouse_delta()

    def init(self) -> None:
        """Clear all tracked state."""
        self._keys = [False] * (Key.LAST + 1)
        self._mouse_buttons = [False] * (MouseButton.LAST + 1)
        self.mouse_position = Vector2(0.0, 0.0)
        self.mouse_delta = Vector2(0.0, 0.0)
        self._joysticks = [False] * (Joystick.LAST + 1)
        self._gamepad_buttons = [False] * (GamepadButton.LAST + 1)