# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Client description models: the mutable draft options see and the frozen result."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Protocol

import httpx

from .headers import validate_headers


class DiagnosticSink(Protocol):
    """Anything logging.Logger-like; only `log` is required."""

    def log(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None: ...


def check_logger(logger: Any) -> DiagnosticSink | None:
    if logger is not None and not callable(getattr(logger, "log", None)):
        raise TypeError(f"logger must provide a callable 'log', got {type(logger).__name__}")
    return logger


def check_base_client(client: Any) -> httpx.Client | None:
    if client is not None and not isinstance(client, httpx.Client):
        raise TypeError(f"base_client must be an httpx.Client, got {type(client).__name__}")
    return client


@dataclass(frozen=True)
class Client:
    """Fully configured client description handed back to callers."""

    base_url: str
    header: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    logger: DiagnosticSink | None = None
    base_client: httpx.Client | None = None


class ClientDraft:
    """
    Target mutated by client options while a build is in progress.

    `base_url` is fixed at allocation; options may only touch the optional attributes.
    Custom callables can assign anything, so `freeze` re-checks every attribute.
    """

    __slots__ = ("_base_url", "header", "logger", "base_client")

    def __init__(self, base_url: str):
        self._base_url = base_url
        self.header: dict[str, str] = {}
        self.logger: DiagnosticSink | None = None
        self.base_client: httpx.Client | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    def freeze(self) -> Client:
        return Client(
            base_url=self._base_url,
            header=MappingProxyType(validate_headers(self.header)),
            logger=check_logger(self.logger),
            base_client=check_base_client(self.base_client),
        )

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"ClientDraft(base_url={self._base_url!r}, header={self.header!r}, logger={self.logger!r})"
