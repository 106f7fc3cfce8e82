"""Unified settings — CLI flags and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``JPDT_*`` prefix
  3. Code defaults

The locale and time zone are not settings: they are fixed in
:mod:`jpdatetime.domain.context` for the lifetime of the process.
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource


class JpdtSettings(BaseSettings):
    """Settings for the ``jpdt`` CLI, frozen after construction."""

    model_config = {
        "frozen": True,
        "env_prefix": "JPDT_",
    }

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Only init kwargs and env vars; no dotenv or secrets files."""
        return (init_settings, env_settings)

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> JpdtSettings:
        """Construct settings from a CLI invocation.

        Flags left at their Click default (False) do not mask env vars.
        """
        return cls(**{k: v for k, v in cli_flags.items() if v})
