#!/usr/bin/env python3
"""
Counter menu for rofi script mode.

Usage:
  rofi -show counter -modi "counter:scripts/counter_menu.py"

What it does:
- Shows a counter that goes up on every redraw
- Keeps the counter in ROFI_DATA between invocations
- Exits without output when "quit" is selected, which closes rofi
"""

import logging
import sys
from pathlib import Path

from pydantic import BaseModel

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from rofiscript import (  # noqa: E402
    ModelPayload,
    RenderOption,
    RofiScriptError,
    Row,
    configure_logging,
    escape_pango_markup,
    new_session,
)


class CounterData(BaseModel):
    number: int = 0


def main() -> int:
    configure_logging()
    logger = logging.getLogger("rofiscript.scripts.counter_menu")

    try:
        session = new_session(ModelPayload(CounterData()))
    except RofiScriptError as e:
        logger.error("Could not start session", extra={"error": str(e)})
        return 1

    selected, has_selection = session.get_selected_row()
    if not has_selection:
        session.append_row(Row(text="initial run", nonselectable=True))
    elif selected.text == "quit":
        return 0

    counter = session.payload.value
    session.set_option(RenderOption.PROMPT, "counter")
    session.set_option(RenderOption.MARKUP_ROWS, True)
    session.set_option(RenderOption.MESSAGE, escape_pango_markup(f"state: {session.state!s} <{session.ran_by_launcher}>"))
    session.extend_rows(
        [
            Row(text=f"counter: {counter.number}", display=f"<b>counter:</b> {counter.number}"),
            Row(text="quit", icon="application-exit"),
        ]
    )

    counter.number += 1

    try:
        session.finalize()
    except RofiScriptError as e:
        logger.error("Could not draw menu", extra={"error": str(e)})
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
