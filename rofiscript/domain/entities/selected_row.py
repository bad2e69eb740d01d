from dataclasses import dataclass


@dataclass(frozen=True)
class SelectedRow:
    text: str
    info: str = ""  # ROFI_INFO of the chosen row, empty when unset
