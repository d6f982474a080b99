"""Runtime settings for pinpad: defaults, environment overrides and log location."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from controller.validators import parse_bool, validate_passcode_length, validate_reset_delay
from model import DEFAULT_PASSCODE_LENGTH

log = logging.getLogger(__name__)

DEFAULT_RESET_DELAY = 0.6  # seconds the mismatch error stays up before reset

ENV_LENGTH = "PINPAD_LENGTH"
ENV_RESET_DELAY = "PINPAD_RESET_DELAY"
ENV_BIOMETRICS = "PINPAD_BIOMETRICS"


@dataclass
class Settings:
    """Prompt settings. CLI flags override environment, environment overrides defaults."""

    length: int = DEFAULT_PASSCODE_LENGTH
    reset_delay: float = DEFAULT_RESET_DELAY
    biometrics: bool = True

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        """Build settings from PINPAD_* environment variables.

        Invalid values are ignored (with a warning) and the default is kept.
        """
        env = os.environ if environ is None else environ
        settings = cls()

        raw = env.get(ENV_LENGTH)
        if raw is not None:
            length = validate_passcode_length(raw)
            if length is None:
                log.warning(f"Ignoring invalid {ENV_LENGTH}={raw!r}")
            else:
                settings.length = length

        raw = env.get(ENV_RESET_DELAY)
        if raw is not None:
            delay = validate_reset_delay(raw)
            if delay is None:
                log.warning(f"Ignoring invalid {ENV_RESET_DELAY}={raw!r}")
            else:
                settings.reset_delay = delay

        raw = env.get(ENV_BIOMETRICS)
        if raw is not None:
            enabled = parse_bool(raw)
            if enabled is None:
                log.warning(f"Ignoring invalid {ENV_BIOMETRICS}={raw!r}")
            else:
                settings.biometrics = enabled

        return settings


def get_log_path() -> Path:
    """Get the log file path using XDG Base Directory spec."""
    xdg_state = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state) / "pinpad"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "pinpad.log"


def setup_logging() -> None:
    """Send all pinpad logging to the XDG state log file."""
    logging.basicConfig(
        filename=str(get_log_path()),
        level=logging.DEBUG,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
