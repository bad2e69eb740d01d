from __future__ import annotations

import logging
import sys
from collections.abc import Mapping, Sequence

from pydantic_settings import BaseSettings, SettingsConfigDict

from rofiscript.domain.entities.process_inputs import ProcessInputs

STATE_ENV_VAR = "ROFI_RETV"
INFO_ENV_VAR = "ROFI_INFO"
DATA_ENV_VAR = "ROFI_DATA"

logger = logging.getLogger(__name__)


class RofiEnvironment(BaseSettings):
    """Variables rofi exports to a script; unset ones stay None."""

    model_config = SettingsConfigDict(case_sensitive=True, extra="ignore")

    ROFI_RETV: str | None = None
    ROFI_INFO: str | None = None
    ROFI_DATA: str | None = None

    @classmethod
    def from_mapping(cls, environ: Mapping[str, str]) -> "RofiEnvironment":
        # model_construct skips the settings sources, so os.environ is not consulted
        return cls.model_construct(
            ROFI_RETV=environ.get(STATE_ENV_VAR),
            ROFI_INFO=environ.get(INFO_ENV_VAR),
            ROFI_DATA=environ.get(DATA_ENV_VAR),
        )


def read_process_inputs(
    argv: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> ProcessInputs:
    """Snapshot the rofi variables and the first positional argument."""
    args = sys.argv if argv is None else argv
    env = RofiEnvironment() if environ is None else RofiEnvironment.from_mapping(environ)

    inputs = ProcessInputs(
        raw_state=env.ROFI_RETV,
        raw_info=env.ROFI_INFO,
        raw_arg=args[1] if len(args) > 1 else None,
        raw_data=env.ROFI_DATA,
    )
    logger.debug(
        "Process inputs read",
        extra={"ran_by_launcher": inputs.raw_state is not None, "has_selection": inputs.raw_arg is not None},
    )
    return inputs
