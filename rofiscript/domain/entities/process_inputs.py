from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessInputs:
    """
    Snapshot of everything rofi hands to a script invocation.

    ``None`` means "not provided", which is distinct from an empty string:
    an absent ``raw_state`` means rofi did not start the process and an
    absent ``raw_arg`` means no row was selected.
    """

    raw_state: str | None = None
    raw_info: str | None = None
    raw_arg: str | None = None
    raw_data: str | None = None
