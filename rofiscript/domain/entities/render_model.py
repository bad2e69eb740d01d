from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TextIO

from rofiscript.domain.entities.render_option import RenderOption
from rofiscript.domain.entities.row import ENTRY_DELIMITER, FIELD_SEPARATOR, Row

OptionValue = str | bool | int


def _format_value(value: OptionValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class RenderModel:
    """Options and rows for one rofi redraw, written out in a single flush."""

    def __init__(self) -> None:
        self._options: dict[RenderOption, str] = {}
        self._rows: list[Row] = []
        self._logger = logging.getLogger(__name__)

    @property
    def options(self) -> Mapping[RenderOption, str]:
        return MappingProxyType(self._options)

    @property
    def rows(self) -> tuple[Row, ...]:
        return tuple(self._rows)

    def set_option(self, key: RenderOption | str, value: OptionValue) -> None:
        option = RenderOption(key)
        if option is RenderOption.DATA:
            raise ValueError("'data' is reserved for the session payload")
        self._options[option] = _format_value(value)

    def set_data(self, encoded: str) -> None:
        self._options[RenderOption.DATA] = encoded

    def append_row(self, row: Row) -> None:
        self._rows.append(row)

    def extend_rows(self, rows: Iterable[Row]) -> None:
        self._rows.extend(rows)

    def lines(self) -> list[str]:
        lines = [
            f"{ENTRY_DELIMITER}{option.value}{FIELD_SEPARATOR}{value}"
            for option, value in self._options.items()
        ]
        lines.extend(row.serialize() for row in self._rows)
        return lines

    def render(self) -> str:
        return "".join(f"{line}\n" for line in self.lines())

    def flush(self, stream: TextIO) -> None:
        output = self.render()
        self._logger.debug(
            "Flushing rofi output",
            extra={"option_count": len(self._options), "row_count": len(self._rows)},
        )
        stream.write(output)
        stream.flush()
