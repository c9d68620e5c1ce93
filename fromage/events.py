"""Event hooks attached to a window.

Events are numbered as in the X protocol. A window holds one hook per
event number; each hook carries the function to call, a parameter that is
passed back to it and the input mask the window must select for the
event to arrive.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from functools import reduce
from operator import or_
from typing import Any


class EventType(IntEnum):
    """Event numbers of the X protocol."""

    KEY_PRESS = 2
    KEY_RELEASE = 3
    BUTTON_PRESS = 4
    BUTTON_RELEASE = 5
    MOTION_NOTIFY = 6
    ENTER_NOTIFY = 7
    LEAVE_NOTIFY = 8
    FOCUS_IN = 9
    FOCUS_OUT = 10
    KEYMAP_NOTIFY = 11
    EXPOSE = 12
    GRAPHICS_EXPOSE = 13
    NO_EXPOSE = 14
    VISIBILITY_NOTIFY = 15
    CREATE_NOTIFY = 16
    DESTROY_NOTIFY = 17
    UNMAP_NOTIFY = 18
    MAP_NOTIFY = 19
    MAP_REQUEST = 20
    REPARENT_NOTIFY = 21
    CONFIGURE_NOTIFY = 22
    CONFIGURE_REQUEST = 23
    GRAVITY_NOTIFY = 24
    RESIZE_REQUEST = 25
    CIRCULATE_NOTIFY = 26
    CIRCULATE_REQUEST = 27
    PROPERTY_NOTIFY = 28
    SELECTION_CLEAR = 29
    SELECTION_REQUEST = 30
    SELECTION_NOTIFY = 31
    COLORMAP_NOTIFY = 32
    CLIENT_MESSAGE = 33
    MAPPING_NOTIFY = 34
    GENERIC_EVENT = 35


MAX_EVENT = 36


class EventMask(IntFlag):
    """Input masks of the X protocol."""

    NO_EVENT = 0
    KEY_PRESS = 1 << 0
    KEY_RELEASE = 1 << 1
    BUTTON_PRESS = 1 << 2
    BUTTON_RELEASE = 1 << 3
    ENTER_WINDOW = 1 << 4
    LEAVE_WINDOW = 1 << 5
    POINTER_MOTION = 1 << 6
    POINTER_MOTION_HINT = 1 << 7
    BUTTON1_MOTION = 1 << 8
    BUTTON2_MOTION = 1 << 9
    BUTTON3_MOTION = 1 << 10
    BUTTON4_MOTION = 1 << 11
    BUTTON5_MOTION = 1 << 12
    BUTTON_MOTION = 1 << 13
    KEYMAP_STATE = 1 << 14
    EXPOSURE = 1 << 15
    VISIBILITY_CHANGE = 1 << 16
    STRUCTURE_NOTIFY = 1 << 17
    RESIZE_REDIRECT = 1 << 18
    SUBSTRUCTURE_NOTIFY = 1 << 19
    SUBSTRUCTURE_REDIRECT = 1 << 20
    FOCUS_CHANGE = 1 << 21
    PROPERTY_CHANGE = 1 << 22
    COLORMAP_CHANGE = 1 << 23
    OWNER_GRAB_BUTTON = 1 << 24


@dataclass
class Hook:
    """A function bound to one event, with its parameter and input mask."""

    func: Callable[..., Any] | None
    param: Any = None
    mask: int = 0


def _expect(args: tuple[Any, ...], count: int, event: int) -> tuple[Any, ...]:
    if len(args) != count:
        raise TypeError(
            f"event {event} carries {count} value(s), got {len(args)}"
        )
    return args


class HookTable:
    """The hooks of one window, one slot per event number."""

    def __init__(self) -> None:
        self._hooks: list[Hook | None] = [None] * MAX_EVENT

    @staticmethod
    def _index(event: int) -> int:
        index = int(event)
        if not 0 <= index < MAX_EVENT:
            raise ValueError(f"event number must be below {MAX_EVENT}, got {index}")
        return index

    def __getitem__(self, event: int) -> Hook | None:
        return self._hooks[self._index(event)]

    def set(
        self,
        event: int,
        func: Callable[..., Any] | None,
        mask: int = 0,
        param: Any = None,
    ) -> None:
        """Bind *func* to *event*, replacing any earlier hook."""
        self._hooks[self._index(event)] = Hook(func, param, int(mask))

    def key_hook(self, func: Callable[..., Any] | None, param: Any = None) -> None:
        """Call *func(keycode, param)* when a key is released."""
        self.set(EventType.KEY_RELEASE, func, EventMask.KEY_RELEASE, param)

    def mouse_hook(self, func: Callable[..., Any] | None, param: Any = None) -> None:
        """Call *func(button, x, y, param)* when a mouse button is pressed."""
        self.set(EventType.BUTTON_PRESS, func, EventMask.BUTTON_PRESS, param)

    def expose_hook(self, func: Callable[..., Any] | None, param: Any = None) -> None:
        """Call *func(param)* when the window needs redrawing."""
        self.set(EventType.EXPOSE, func, EventMask.EXPOSURE, param)

    def combined_mask(self) -> EventMask:
        """Return the union of the masks of all hooks."""
        masks = (hook.mask for hook in self._hooks if hook is not None)
        return EventMask(reduce(or_, masks, 0))

    def dispatch(self, event: int, *args: Any) -> Any:
        """Call the hook for *event* with the values the event carries.

        Key events carry a keycode, button events a button and a position,
        motion events a position, expose events an optional count of
        further expose events (the hook runs only when it is 0); other
        events carry nothing. Returns what the hook returned, or ``None``
        when no hook runs.
        """
        try:
            index = self._index(event)
        except ValueError:
            return None
        hook = self._hooks[index]
        if hook is None or hook.func is None or index < EventType.KEY_PRESS:
            return None
        func, param = hook.func, hook.param
        if index in (EventType.KEY_PRESS, EventType.KEY_RELEASE):
            (keycode,) = _expect(args, 1, index)
            return func(keycode, param)
        if index in (EventType.BUTTON_PRESS, EventType.BUTTON_RELEASE):
            button, x, y = _expect(args, 3, index)
            return func(button, x, y, param)
        if index == EventType.MOTION_NOTIFY:
            x, y = _expect(args, 2, index)
            return func(x, y, param)
        if index == EventType.EXPOSE:
            (count,) = _expect(args, 1, index) if args else (0,)
            if count:
                return None
            return func(param)
        _expect(args, 0, index)
        return func(param)