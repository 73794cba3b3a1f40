# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Reference client description built with functional options."""

from .builder import (
    ClientBuilder,
    ClientConfig,
    ClientOption,
    client_builder,
    default_client_builder,
    new_client,
    new_client_from_config,
    validate_base_url,
)
from .headers import validate_headers
from .models import Client, ClientDraft, DiagnosticSink
from .options import add_header, with_base_client, with_header, with_logger

__all__ = [
    "Client",
    "ClientBuilder",
    "ClientConfig",
    "ClientDraft",
    "ClientOption",
    "DiagnosticSink",
    "add_header",
    "client_builder",
    "default_client_builder",
    "new_client",
    "new_client_from_config",
    "validate_base_url",
    "validate_headers",
    "with_base_client",
    "with_header",
    "with_logger",
]
