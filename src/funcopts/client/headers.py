# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header validation utilities.

HTTP header field names are case-insensitive tokens (RFC 9110). Header options copy
and validate caller mappings here so a malformed mapping fails the option that
carried it instead of surfacing later in a transport layer.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

_TOKEN_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")
_FORBIDDEN_VALUE_CHARS = ("\r", "\n", "\0")


def validate_header_name(name: Any) -> str:
    if not isinstance(name, str):
        raise TypeError(f"header name must be a string, got {type(name).__name__}")
    if not name:
        raise ValueError("header name must not be empty")
    if not _TOKEN_RE.fullmatch(name):
        raise ValueError(f"invalid header name {name!r}")
    return name


def validate_header_value(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"header {name!r} value must be a string, got {type(value).__name__}")
    if any(ch in value for ch in _FORBIDDEN_VALUE_CHARS):
        raise ValueError(f"header {name!r} value contains a line break or NUL")
    return value


def validate_headers(headers: Any) -> dict[str, str]:
    """Return a validated copy of a header mapping, preserving key casing."""
    if not isinstance(headers, Mapping):
        raise TypeError(f"headers must be a mapping, got {type(headers).__name__}")
    out: dict[str, str] = {}
    seen: set[str] = set()
    for key, value in headers.items():
        name = validate_header_name(key)
        lower = name.lower()
        if lower in seen:
            raise ValueError(f"duplicate header {name!r} (names are case-insensitive)")
        seen.add(lower)
        out[name] = validate_header_value(name, value)
    return out


__all__ = ["validate_header_name", "validate_header_value", "validate_headers"]
