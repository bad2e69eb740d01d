from __future__ import annotations

from rofiscript.application.exceptions import PayloadParseError
from rofiscript.application.ports.payload_codec import PayloadCodec


class TextPayload(PayloadCodec):
    def __init__(self, value: str = "", encoding: str = "utf-8") -> None:
        self.value = value
        self._encoding = encoding

    def to_bytes(self) -> bytes:
        return self.value.encode(self._encoding)

    def from_bytes(self, data: bytes) -> None:
        try:
            self.value = data.decode(self._encoding)
        except UnicodeDecodeError as exc:
            raise PayloadParseError(f"payload is not valid {self._encoding} text") from exc


class BytesPayload(PayloadCodec):
    def __init__(self, value: bytes = b"") -> None:
        self.value = value

    def to_bytes(self) -> bytes:
        return self.value

    def from_bytes(self, data: bytes) -> None:
        self.value = bytes(data)
