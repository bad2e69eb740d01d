from abc import ABC, abstractmethod


class PayloadCodec(ABC):
    """State a script keeps between rofi invocations, carried in ROFI_DATA."""

    @abstractmethod
    def to_bytes(self) -> bytes:
        """
        Serialize the current value.

        Requirements:
        - Must be deterministic: the same value always gives the same bytes
        - Must not fail for any value the payload can hold

        Returns:
            Byte representation accepted by `from_bytes`
        """
        raise NotImplementedError

    @abstractmethod
    def from_bytes(self, data: bytes) -> None:
        """
        Populate this instance from bytes produced by `to_bytes`.

        Requirements:
        - Must update the instance in place
        - Must raise PayloadParseError when `data` is malformed

        Args:
            data: Bytes decoded from ROFI_DATA
        """
        raise NotImplementedError
