import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from advisor.domain import ProfileType

ENV_PREFIX = "ADVISOR_"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}")


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the advisor engines and the dashboard.

    Values come from ``ADVISOR_*`` environment variables, see ``from_env``.
    """

    response_delay: float = 1.0          # seconds before the bot answers
    random_seed: Optional[int] = None    # seed for the fallback responses
    housing_limit: float = 0.30          # max housing / income ratio
    student_savings_target: float = 10   # percent
    professional_savings_target: float = 20
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Settings":
        """Build settings from the environment.

        A ``.env`` file (``env_file``, or the nearest one found above this
        package) is loaded first; variables already set in the environment win.
        """
        load_dotenv(env_file)
        delay = _env_float("RESPONSE_DELAY", cls.response_delay)
        if delay < 0:
            raise ValueError(f"{ENV_PREFIX}RESPONSE_DELAY must not be negative, got {delay}")
        log_level = (os.getenv(ENV_PREFIX + "LOG_LEVEL") or "").strip().upper() or cls.log_level
        if log_level not in LOG_LEVELS:
            raise ValueError(
                f"{ENV_PREFIX}LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
            )
        return cls(
            response_delay=delay,
            random_seed=_env_int("RANDOM_SEED"),
            housing_limit=_env_float("HOUSING_LIMIT", cls.housing_limit),
            student_savings_target=_env_float("STUDENT_SAVINGS_TARGET", cls.student_savings_target),
            professional_savings_target=_env_float(
                "PROFESSIONAL_SAVINGS_TARGET", cls.professional_savings_target
            ),
            log_level=log_level,
        )

    def savings_target(self, profile: ProfileType) -> float:
        if profile == ProfileType.STUDENT:
            return self.student_savings_target
        return self.professional_savings_target
