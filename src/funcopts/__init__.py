# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
funcopts package entrypoint.

This package provides a functional-options builder: a value is constructed from a
required identifier plus an ordered sequence of named options, with defaults,
last-write-wins overrides, and fail-fast validation. `funcopts.client` applies it
to a placeholder HTTP client description.
"""

from .client import (
    Client,
    ClientBuilder,
    ClientConfig,
    new_client,
    new_client_from_config,
    with_base_client,
    with_header,
    with_logger,
)
from .config import BuilderSettings, load_builder_settings
from .errors import (
    ConfigurationError,
    ConfigurationIncomplete,
    ErrorCategory,
    InvalidArgument,
    OptionApplicationFailure,
)
from .log import setup_logging
from .options import FunctionOption, Option, OptionBuilder, as_option, build, option_factory
from .version import __version__

__all__ = [
    "BuilderSettings",
    "Client",
    "ClientBuilder",
    "ClientConfig",
    "ConfigurationError",
    "ConfigurationIncomplete",
    "ErrorCategory",
    "FunctionOption",
    "InvalidArgument",
    "Option",
    "OptionApplicationFailure",
    "OptionBuilder",
    "as_option",
    "build",
    "load_builder_settings",
    "new_client",
    "new_client_from_config",
    "option_factory",
    "setup_logging",
    "with_base_client",
    "with_header",
    "with_logger",
    "__version__",
]
