from __future__ import annotations

from dataclasses import dataclass

from rofiscript.domain.entities.invocation_state import InvocationState, RofiState
from rofiscript.domain.entities.selected_row import SelectedRow


@dataclass(frozen=True)
class SessionState:
    state: InvocationState = RofiState.INITIAL
    ran_by_launcher: bool = False
    selected_row: SelectedRow | None = None

    @property
    def has_selection(self) -> bool:
        return self.selected_row is not None
