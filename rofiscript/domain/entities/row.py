from __future__ import annotations

from dataclasses import dataclass

ENTRY_DELIMITER = "\x00"
FIELD_SEPARATOR = "\x1f"


@dataclass(frozen=True)
class Row:
    """
    One menu entry in rofi script mode.

    ``display`` replaces the shown text while ``text`` is still used for
    filtering and is what rofi passes back on selection. ``meta`` holds
    invisible search terms and ``info`` is handed back through ROFI_INFO.
    """

    text: str
    icon: str = ""
    display: str = ""
    meta: str = ""
    info: str = ""
    nonselectable: bool = False
    urgent: bool = False
    active: bool = False

    def fields(self) -> list[tuple[str, str]]:
        """Set row properties in wire order; empty strings and False are left out."""
        candidates: list[tuple[str, str | bool]] = [
            ("icon", self.icon),
            ("display", self.display),
            ("meta", self.meta),
            ("info", self.info),
            ("nonselectable", self.nonselectable),
            ("urgent", self.urgent),
            ("active", self.active),
        ]
        pairs: list[tuple[str, str]] = []
        for key, value in candidates:
            if value is True:
                pairs.append((key, "true"))
            elif value:
                pairs.append((key, str(value)))
        return pairs

    def serialize(self) -> str:
        pairs = self.fields()
        if not pairs:
            return self.text
        encoded = "".join(f"{key}{FIELD_SEPARATOR}{value}" for key, value in pairs)
        return f"{self.text}{ENTRY_DELIMITER}{encoded}"

    def __str__(self) -> str:
        return self.serialize()
