from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

from rofiscript.application.exceptions import PayloadParseError
from rofiscript.application.ports.payload_codec import PayloadCodec

M = TypeVar("M", bound=BaseModel)


class ModelPayload(PayloadCodec, Generic[M]):
    """Carries a pydantic model as compact JSON."""

    def __init__(self, value: M) -> None:
        self.value = value
        self._model_type = type(value)

    def to_bytes(self) -> bytes:
        return self.value.model_dump_json().encode("utf-8")

    def from_bytes(self, data: bytes) -> None:
        try:
            # ValidationError subclasses ValueError
            self.value = self._model_type.model_validate_json(data)
        except ValueError as exc:
            raise PayloadParseError(f"invalid {self._model_type.__name__} payload: {exc}") from exc
