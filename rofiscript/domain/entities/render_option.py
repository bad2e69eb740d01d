from enum import Enum


class RenderOption(str, Enum):
    """Global options understood by rofi script mode."""

    PROMPT = "prompt"
    MESSAGE = "message"
    MARKUP_ROWS = "markup-rows"  # 'true' renders pango markup in rows
    URGENT = "urgent"
    ACTIVE = "active"
    DELIM = "delim"  # only honoured on the first call
    NO_CUSTOM = "no-custom"
    USE_HOT_KEYS = "use-hot-keys"
    KEEP_SELECTION = "keep-selection"
    NEW_SELECTION = "new-selection"
    THEME = "theme"
    DATA = "data"  # reserved for the encoded payload

    def __str__(self) -> str:
        return self.value
