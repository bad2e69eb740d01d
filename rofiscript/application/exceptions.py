class RofiScriptError(RuntimeError):
    """Base class for errors raised by the rofi script protocol layer."""
    pass


class PayloadParseError(RofiScriptError):
    """Raised when a payload cannot be rebuilt from its decoded bytes."""
    pass


class TransportFormatError(RofiScriptError):
    """Raised when ROFI_DATA does not hold well-formed ASCII85 text."""
    pass


class PayloadSizeExceededError(RofiScriptError):
    """Raised when the encoded payload would not fit in ROFI_DATA."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(f"data byte length {size} * 1.25 exceeds max allowed {limit}")
        self.size = size
        self.limit = limit


class SessionFinalizedError(RofiScriptError):
    """Raised when a session is finalized more than once."""
    pass
