# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for funcopts."""

import os
from dataclasses import dataclass


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class BuilderSettings:
    """Validation policy applied by OptionBuilder."""

    validate_required: bool = True
    validate_base_url: bool = True
    max_options: int = 256

    @property
    def option_limit(self) -> int | None:
        return self.max_options if self.max_options > 0 else None

    @classmethod
    def from_env(cls) -> "BuilderSettings":
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            validate_required=_bool_env("FUNCOPTS_VALIDATE_REQUIRED", cls.validate_required),
            validate_base_url=_bool_env("FUNCOPTS_VALIDATE_BASE_URL", cls.validate_base_url),
            max_options=_int_env("FUNCOPTS_MAX_OPTIONS", cls.max_options),
        )


def load_builder_settings() -> BuilderSettings:
    """Load builder settings from environment with sensible defaults."""
    return BuilderSettings.from_env()
