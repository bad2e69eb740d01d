from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

CUSTOM_KEYBINDING_COUNT = 19

# Default rofi bindings for kb-custom-1 .. kb-custom-19
_DEFAULT_KEYS = (
    "Alt+1",
    "Alt+2",
    "Alt+3",
    "Alt+4",
    "Alt+5",
    "Alt+6",
    "Alt+7",
    "Alt+8",
    "Alt+9",
    "Alt+0",
    "Alt+exclam",
    "Alt+at",
    "Alt+numbersign",
    "Alt+dollar",
    "Alt+percent",
    "Alt+dead_circumflex",
    "Alt+ampersand",
    "Alt+asterisk",
    "Alt+parenleft",
)


class RofiState(IntEnum):
    """Known values of ROFI_RETV."""

    INITIAL = 0
    SELECTED = 1
    SELECTED_CUSTOM = 2
    CUSTOM_KEYBINDING_1 = 10
    CUSTOM_KEYBINDING_2 = 11
    CUSTOM_KEYBINDING_3 = 12
    CUSTOM_KEYBINDING_4 = 13
    CUSTOM_KEYBINDING_5 = 14
    CUSTOM_KEYBINDING_6 = 15
    CUSTOM_KEYBINDING_7 = 16
    CUSTOM_KEYBINDING_8 = 17
    CUSTOM_KEYBINDING_9 = 18
    CUSTOM_KEYBINDING_10 = 19
    CUSTOM_KEYBINDING_11 = 20
    CUSTOM_KEYBINDING_12 = 21
    CUSTOM_KEYBINDING_13 = 22
    CUSTOM_KEYBINDING_14 = 23
    CUSTOM_KEYBINDING_15 = 24
    CUSTOM_KEYBINDING_16 = 25
    CUSTOM_KEYBINDING_17 = 26
    CUSTOM_KEYBINDING_18 = 27
    CUSTOM_KEYBINDING_19 = 28

    def __str__(self) -> str:
        return self.name

    @classmethod
    def custom_keybinding(cls, number: int) -> "RofiState":
        if not 1 <= number <= CUSTOM_KEYBINDING_COUNT:
            raise ValueError(f"custom keybinding must be 1..{CUSTOM_KEYBINDING_COUNT}, got {number}")
        return cls(cls.CUSTOM_KEYBINDING_1 + number - 1)

    @property
    def is_custom_keybinding(self) -> bool:
        return self >= RofiState.CUSTOM_KEYBINDING_1

    @property
    def keybinding_number(self) -> int | None:
        if not self.is_custom_keybinding:
            return None
        return int(self) - RofiState.CUSTOM_KEYBINDING_1 + 1

    @property
    def default_key(self) -> str | None:
        number = self.keybinding_number
        if number is None:
            return None
        return _DEFAULT_KEYS[number - 1]


@dataclass(frozen=True)
class UnrecognizedState:
    """A ROFI_RETV value this library does not know, kept verbatim."""

    raw: str

    @property
    def code(self) -> int | None:
        try:
            return int(self.raw)
        except ValueError:
            return None

    def __str__(self) -> str:
        return f"Unknown Rofi State '{self.raw}'"


InvocationState = RofiState | UnrecognizedState


def parse_state(raw: str) -> InvocationState:
    """Map a raw ROFI_RETV value to a state, never guessing a known one."""
    if not (raw.isascii() and raw.isdigit()):
        return UnrecognizedState(raw=raw)
    try:
        return RofiState(int(raw))
    except ValueError:
        return UnrecognizedState(raw=raw)
