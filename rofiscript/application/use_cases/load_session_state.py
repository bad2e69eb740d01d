from __future__ import annotations

import logging

from rofiscript.application.exceptions import PayloadParseError, TransportFormatError
from rofiscript.application.ports.payload_codec import PayloadCodec
from rofiscript.application.utils import transport
from rofiscript.domain.entities.invocation_state import RofiState, parse_state
from rofiscript.domain.entities.process_inputs import ProcessInputs
from rofiscript.domain.entities.selected_row import SelectedRow
from rofiscript.domain.entities.session_state import SessionState


class LoadSessionStateUseCase:
    """Rebuild invocation state and the carried payload from process inputs."""

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def execute(self, inputs: ProcessInputs, payload: PayloadCodec) -> SessionState:
        ran_by_launcher = inputs.raw_state is not None
        state = parse_state(inputs.raw_state) if ran_by_launcher else RofiState.INITIAL

        selected_row = None
        if inputs.raw_arg is not None:
            selected_row = SelectedRow(text=inputs.raw_arg, info=inputs.raw_info or "")

        self._restore_payload(inputs.raw_data, payload)

        session_state = SessionState(
            state=state,
            ran_by_launcher=ran_by_launcher,
            selected_row=selected_row,
        )
        self._logger.debug(
            "Session state loaded",
            extra={
                "state": str(state),
                "ran_by_launcher": ran_by_launcher,
                "has_selection": session_state.has_selection,
            },
        )
        return session_state

    def _restore_payload(self, raw_data: str | None, payload: PayloadCodec) -> None:
        if not raw_data:
            return

        try:
            data = transport.decode(raw_data)
        except TransportFormatError as exc:
            raise TransportFormatError(f"failed to decode ASCII85 string: {exc}") from exc

        try:
            payload.from_bytes(data)
        except (PayloadParseError, ValueError) as exc:
            # UnicodeDecodeError and pydantic.ValidationError are ValueErrors
            raise PayloadParseError(f"failed to convert bytes to value: {exc}") from exc

        self._logger.debug("Payload restored", extra={"payload_bytes": len(data)})
