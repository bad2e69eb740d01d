"""
Helpers for writing rofi script-mode programs (see ``man rofi-script``).

Public API:
- new_session / RofiSession: read the invocation, carry a payload, draw rows
- PayloadCodec: contract for state kept in ROFI_DATA between invocations
- ModelPayload, TextPayload, BytesPayload: ready-made payloads
- Row, RenderOption, RenderModel: what gets written to stdout
- RofiState, UnrecognizedState, SelectedRow: what rofi passed in
- escape_pango_markup: for rows rendered with markup-rows
"""

from rofiscript.application.exceptions import (
    PayloadParseError,
    PayloadSizeExceededError,
    RofiScriptError,
    SessionFinalizedError,
    TransportFormatError,
)
from rofiscript.application.ports.payload_codec import PayloadCodec
from rofiscript.application.use_cases.encode_payload import MAX_DATA_BYTES
from rofiscript.application.use_cases.rofi_session import RofiSession
from rofiscript.application.utils.markup import escape_pango_markup
from rofiscript.core.logging import configure_logging
from rofiscript.domain.entities.invocation_state import InvocationState, RofiState, UnrecognizedState
from rofiscript.domain.entities.process_inputs import ProcessInputs
from rofiscript.domain.entities.render_model import RenderModel
from rofiscript.domain.entities.render_option import RenderOption
from rofiscript.domain.entities.row import Row
from rofiscript.domain.entities.selected_row import SelectedRow
from rofiscript.infrastructure.payloads.model_payload import ModelPayload
from rofiscript.infrastructure.payloads.text_payload import BytesPayload, TextPayload
from rofiscript.wiring.dependencies import new_session

__all__ = [
    "BytesPayload",
    "InvocationState",
    "MAX_DATA_BYTES",
    "ModelPayload",
    "PayloadCodec",
    "PayloadParseError",
    "PayloadSizeExceededError",
    "ProcessInputs",
    "RenderModel",
    "RenderOption",
    "RofiScriptError",
    "RofiSession",
    "RofiState",
    "Row",
    "SelectedRow",
    "SessionFinalizedError",
    "TextPayload",
    "TransportFormatError",
    "UnrecognizedState",
    "configure_logging",
    "escape_pango_markup",
    "new_session",
]

__version__ = "0.1.0"
