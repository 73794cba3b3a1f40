# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Named option factories for ClientDraft."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

import httpx

from ..options import option_factory
from .headers import validate_header_name, validate_header_value, validate_headers
from .models import ClientDraft, DiagnosticSink, check_base_client, check_logger


@option_factory
def with_header(header: Mapping[str, str]) -> Callable[[ClientDraft], None]:
    """Replace the whole header mapping (no merge with earlier headers)."""
    captured: Any = MappingProxyType(dict(header)) if isinstance(header, Mapping) else header

    def apply(draft: ClientDraft) -> None:
        draft.header = validate_headers(captured)

    return apply


@option_factory
def add_header(name: str, value: str) -> Callable[[ClientDraft], None]:
    """Set one header on top of the current mapping, replacing any differently-cased key."""

    def apply(draft: ClientDraft) -> None:
        validate_header_name(name)
        validate_header_value(name, value)
        lower = name.lower()
        merged = {key: val for key, val in draft.header.items() if key.lower() != lower}
        merged[name] = value
        draft.header = merged

    return apply


@option_factory
def with_logger(logger: DiagnosticSink | None) -> Callable[[ClientDraft], None]:
    """Set the diagnostic sink; None clears it."""

    def apply(draft: ClientDraft) -> None:
        draft.logger = check_logger(logger)

    return apply


@option_factory
def with_base_client(client: httpx.Client | None) -> Callable[[ClientDraft], None]:
    """Attach a caller-owned httpx.Client; None clears it."""

    def apply(draft: ClientDraft) -> None:
        draft.base_client = check_base_client(client)

    return apply


__all__ = ["add_header", "with_base_client", "with_header", "with_logger"]
