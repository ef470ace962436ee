import os
from typing import Optional

from pydantic import BaseModel, Field

from ._utils.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_WORKERS,
    DEFAULT_USER_AGENT,
    ENV_LOG_LEVEL,
    ENV_MAX_WORKERS,
    ENV_USER_AGENT,
)


class Config(BaseModel):
    user_agent: str = DEFAULT_USER_AGENT
    max_workers: int = Field(default=DEFAULT_MAX_WORKERS, ge=1)
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> "Config":
        """Build a config from ``HTTPBRIDGE_*`` environment variables.

        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        values: dict[str, str] = {}
        for field_name, variable in (
            ("user_agent", ENV_USER_AGENT),
            ("max_workers", ENV_MAX_WORKERS),
            ("log_level", ENV_LOG_LEVEL),
        ):
            value = env.get(variable)
            if value:
                values[field_name] = value
        return cls.model_validate(values)
