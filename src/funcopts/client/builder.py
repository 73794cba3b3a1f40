# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Client constructors: functional options, configuration struct, and fluent builder."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from functools import lru_cache
from urllib.parse import urlsplit

import httpx

from ..config import BuilderSettings, load_builder_settings
from ..errors import InvalidArgument
from ..options import Option, OptionBuilder, as_option
from .models import Client, ClientDraft, DiagnosticSink
from .options import add_header, with_base_client, with_header, with_logger

ClientOption = Option[ClientDraft] | Callable[[ClientDraft], None]

_ALLOWED_SCHEMES = frozenset({"http", "https"})


def validate_base_url(base_url: str) -> None:
    """Require an absolute http(s) URL with a host."""
    # urlsplit silently strips surrounding whitespace and drops tab/CR/LF.
    if any(ch.isspace() or ord(ch) < 0x20 or ord(ch) == 0x7F for ch in base_url):
        raise InvalidArgument(f"base_url must not contain whitespace or control characters, got {base_url!r}")
    try:
        parts = urlsplit(base_url)
        host = parts.hostname
    except ValueError as exc:
        raise InvalidArgument(f"base_url {base_url!r} is not a valid URL: {exc}") from exc
    if parts.scheme.lower() not in _ALLOWED_SCHEMES or not host:
        raise InvalidArgument(f"base_url must be an absolute http(s) URL, got {base_url!r}")


def client_builder(settings: BuilderSettings | None = None) -> OptionBuilder[ClientDraft, Client]:
    settings = settings or load_builder_settings()
    return OptionBuilder(
        ClientDraft,
        finalize=ClientDraft.freeze,
        validate_identifier=validate_base_url if settings.validate_base_url else None,
        settings=settings,
        name="Client",
    )


@lru_cache(maxsize=1)
def default_client_builder() -> OptionBuilder[ClientDraft, Client]:
    """Builder used when no settings are passed; the environment is read on first use only."""
    return client_builder()


def new_client(base_url: str, *options: ClientOption, settings: BuilderSettings | None = None) -> Client:
    """
    Build a Client from a base URL and options applied in order.

    Raises InvalidArgument for a missing/malformed base URL and
    OptionApplicationFailure naming the first option that failed.
    """
    builder = client_builder(settings) if settings is not None else default_client_builder()
    return builder.build(base_url, *options)


@dataclass
class ClientConfig:
    """Configuration-struct style input; unset fields keep their defaults."""

    base_url: str
    header: Mapping[str, str] | None = None
    logger: DiagnosticSink | None = None
    base_client: httpx.Client | None = None

    def to_options(self) -> list[Option[ClientDraft]]:
        options: list[Option[ClientDraft]] = []
        if self.header is not None:
            options.append(with_header(self.header))
        if self.logger is not None:
            options.append(with_logger(self.logger))
        if self.base_client is not None:
            options.append(with_base_client(self.base_client))
        return options


def new_client_from_config(config: ClientConfig, *, settings: BuilderSettings | None = None) -> Client:
    return new_client(config.base_url, *config.to_options(), settings=settings)


@dataclass(frozen=True)
class ClientBuilder:
    """
    Immutable fluent builder.

    Every setter returns a new builder, so an intermediate builder can be shared
    and extended along different chains without the chains affecting each other.
    """

    base_url: str
    options: tuple[Option[ClientDraft], ...] = ()
    settings: BuilderSettings | None = None

    def option(self, *options: ClientOption) -> ClientBuilder:
        return replace(self, options=self.options + tuple(as_option(opt) for opt in options))

    def header(self, header: Mapping[str, str]) -> ClientBuilder:
        return self.option(with_header(header))

    def add_header(self, name: str, value: str) -> ClientBuilder:
        return self.option(add_header(name, value))

    def logger(self, logger: DiagnosticSink | None) -> ClientBuilder:
        return self.option(with_logger(logger))

    def base_client(self, client: httpx.Client | None) -> ClientBuilder:
        return self.option(with_base_client(client))

    def build(self) -> Client:
        return new_client(self.base_url, *self.options, settings=self.settings)


__all__ = [
    "ClientBuilder",
    "ClientConfig",
    "ClientOption",
    "client_builder",
    "default_client_builder",
    "new_client",
    "new_client_from_config",
    "validate_base_url",
]
