from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from typing import Generic, TextIO, TypeVar

from rofiscript.application.exceptions import SessionFinalizedError
from rofiscript.application.ports.payload_codec import PayloadCodec
from rofiscript.application.use_cases.encode_payload import EncodePayloadUseCase
from rofiscript.application.use_cases.load_session_state import LoadSessionStateUseCase
from rofiscript.domain.entities.invocation_state import InvocationState
from rofiscript.domain.entities.process_inputs import ProcessInputs
from rofiscript.domain.entities.render_model import OptionValue, RenderModel
from rofiscript.domain.entities.render_option import RenderOption
from rofiscript.domain.entities.row import Row
from rofiscript.domain.entities.selected_row import SelectedRow
from rofiscript.domain.entities.session_state import SessionState

P = TypeVar("P", bound=PayloadCodec)


class RofiSession(Generic[P]):
    """
    One invocation of a rofi script.

    Build it with :meth:`from_inputs` (or ``rofiscript.new_session`` for the
    real process), read the selection, update ``payload`` and the render
    model, then call :meth:`finalize` exactly once as the last step.
    """

    def __init__(
        self,
        payload: P,
        session_state: SessionState,
        render_model: RenderModel | None = None,
        encode_payload: EncodePayloadUseCase | None = None,
    ) -> None:
        self.payload = payload
        self._session_state = session_state
        self._render_model = render_model or RenderModel()
        self._encode_payload = encode_payload or EncodePayloadUseCase()
        self._finalized = False
        self._logger = logging.getLogger(__name__)

    @classmethod
    def from_inputs(cls, payload: P, inputs: ProcessInputs) -> "RofiSession[P]":
        """Raises TransportFormatError or PayloadParseError if ROFI_DATA is unusable."""
        session_state = LoadSessionStateUseCase().execute(inputs, payload)
        return cls(payload=payload, session_state=session_state)

    @property
    def state(self) -> InvocationState:
        return self._session_state.state

    @property
    def ran_by_launcher(self) -> bool:
        return self._session_state.ran_by_launcher

    @property
    def has_selection(self) -> bool:
        return self._session_state.has_selection

    @property
    def selected_row(self) -> SelectedRow | None:
        return self._session_state.selected_row

    @property
    def session_state(self) -> SessionState:
        return self._session_state

    @property
    def render_model(self) -> RenderModel:
        return self._render_model

    @property
    def finalized(self) -> bool:
        return self._finalized

    def get_selected_row(self) -> tuple[SelectedRow | None, bool]:
        return self._session_state.selected_row, self._session_state.has_selection

    def set_option(self, key: RenderOption | str, value: OptionValue) -> None:
        self._render_model.set_option(key, value)

    def append_row(self, row: Row) -> None:
        self._render_model.append_row(row)

    def extend_rows(self, rows: Iterable[Row]) -> None:
        self._render_model.extend_rows(rows)

    def finalize(self, stream: TextIO | None = None) -> None:
        """
        Store the encoded payload under the ``data`` option and write the output.

        Raises PayloadSizeExceededError before anything is written. A failed
        call may be retried; a second successful call raises
        SessionFinalizedError.
        """
        if self._finalized:
            raise SessionFinalizedError("session has already been finalized")

        encoded = self._encode_payload.execute(self.payload)
        self._render_model.set_data(encoded)
        self._render_model.flush(stream if stream is not None else sys.stdout)
        self._finalized = True
        self._logger.debug("Session finalized", extra={"state": str(self.state)})
