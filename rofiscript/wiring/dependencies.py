from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TypeVar

from rofiscript.application.ports.payload_codec import PayloadCodec
from rofiscript.application.use_cases.rofi_session import RofiSession
from rofiscript.infrastructure.environment.rofi_environment import read_process_inputs

P = TypeVar("P", bound=PayloadCodec)


def new_session(
    payload: P,
    argv: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> RofiSession[P]:
    """
    Start a session from the current process (or the given argv/environ).

    ``payload`` is the default value; it is overwritten from ROFI_DATA when
    the previous invocation left one.
    """
    inputs = read_process_inputs(argv=argv, environ=environ)
    return RofiSession.from_inputs(payload, inputs)
