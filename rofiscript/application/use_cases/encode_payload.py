from __future__ import annotations

import logging
from dataclasses import dataclass

from rofiscript.application.exceptions import PayloadSizeExceededError
from rofiscript.application.ports.payload_codec import PayloadCodec
from rofiscript.application.utils import transport

logger = logging.getLogger(__name__)

# Environment values are capped at 8192 bytes in practice; keep half of that.
MAX_DATA_BYTES = 4096
# ASCII85 turns 4 bytes into 5 characters.
ENCODING_EXPANSION = 1.25


def check_payload_size(size: int, limit: int = MAX_DATA_BYTES) -> None:
    if int(size * ENCODING_EXPANSION) > limit:
        raise PayloadSizeExceededError(size=size, limit=limit)


@dataclass
class EncodePayloadUseCase:
    max_data_bytes: int = MAX_DATA_BYTES

    def execute(self, payload: PayloadCodec) -> str:
        data = payload.to_bytes()
        check_payload_size(len(data), self.max_data_bytes)
        encoded = transport.encode(data)
        logger.debug(
            "Payload encoded",
            extra={"payload_bytes": len(data), "encoded_length": len(encoded)},
        )
        return encoded
