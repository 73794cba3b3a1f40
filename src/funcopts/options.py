# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Functional-options builder.

An option is a named, deferred adjustment applied to a freshly allocated target.
OptionBuilder validates the required identifier, allocates the target, applies
every option in order (last write wins), and hands the finished value back to
the caller. The first failing option aborts the build; the partial target is
never returned.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from .config import BuilderSettings, load_builder_settings
from .errors import (
    ConfigurationError,
    ConfigurationIncomplete,
    InvalidArgument,
    OptionApplicationFailure,
    categorize_exception,
)

logger = logging.getLogger(__name__)

# Option name reported when the finished draft fails its final checks.
FINALIZE_STEP = "finalize"

TargetT = TypeVar("TargetT")
TargetT_contra = TypeVar("TargetT_contra", contravariant=True)
ResultT = TypeVar("ResultT")


@runtime_checkable
class Option(Protocol[TargetT_contra]):
    """A named adjustment applied to a partially built target."""

    name: str

    def apply(self, target: TargetT_contra) -> None: ...


@dataclass(frozen=True)
class FunctionOption(Generic[TargetT]):
    """Option backed by a plain callable receiving the mutable target."""

    name: str
    fn: Callable[[TargetT], None]

    def apply(self, target: TargetT) -> None:
        self.fn(target)


def as_option(obj: Any) -> Option[Any]:
    """Accept an Option or a bare callable; reject anything else."""
    if isinstance(obj, Option):
        return obj
    if callable(obj):
        return FunctionOption(getattr(obj, "__name__", type(obj).__name__), obj)
    raise InvalidArgument(f"expected an option or callable, got {type(obj).__name__}")


def option_factory(func: Callable[..., Callable[[Any], None]]) -> Callable[..., FunctionOption[Any]]:
    """Name the options returned by `func` after the factory itself."""

    @functools.wraps(func)
    def factory(*args: Any, **kwargs: Any) -> FunctionOption[Any]:
        return FunctionOption(func.__name__, func(*args, **kwargs))

    return factory


class OptionBuilder(Generic[TargetT, ResultT]):
    """
    Build values from a required identifier plus an ordered sequence of options.

    - `factory` allocates a target with the identifier set and every optional
      attribute at its default.
    - `finalize` (optional) converts the mutable target into the returned value.
    - `validate_identifier` (optional) adds domain checks on top of the
      non-empty identifier policy; both are skipped when
      `settings.validate_required` is off.
    - `required_attributes` must be non-None once every option ran.
    """

    def __init__(
        self,
        factory: Callable[[str], TargetT],
        *,
        finalize: Callable[[TargetT], ResultT] | None = None,
        validate_identifier: Callable[[str], None] | None = None,
        required_attributes: Iterable[str] = (),
        settings: BuilderSettings | None = None,
        name: str | None = None,
    ):
        self.factory = factory
        self.finalize = finalize
        self.validate_identifier = validate_identifier
        self.required_attributes = tuple(required_attributes)
        self.settings = settings or load_builder_settings()
        self.name = name or getattr(factory, "__name__", "target")

    def build(self, required: str, *options: Option[TargetT] | Callable[[TargetT], None]) -> ResultT:
        try:
            return self._build(required, options)
        except ConfigurationError as exc:
            logger.debug("%s build failed [%s]: %s", self.name, categorize_exception(exc).value, exc)
            raise

    def _build(self, required: str, options: Sequence[Any]) -> ResultT:
        self._check_identifier(required)
        resolved = self._resolve(options)

        try:
            target = self.factory(required)
        except Exception as exc:  # noqa: BLE001
            raise InvalidArgument(f"{self.name} could not be allocated for {required!r}: {exc}") from exc

        for index, option in enumerate(resolved):
            self._apply(target, option, index)

        missing = [attr for attr in self.required_attributes if getattr(target, attr, None) is None]
        if missing:
            raise ConfigurationIncomplete(missing, target=self.name)

        if self.finalize is None:
            return target  # type: ignore[return-value]
        try:
            return self.finalize(target)
        except ConfigurationError:
            raise
        except Exception as exc:  # noqa: BLE001
            # Options can leave the draft in a state no single option validated.
            reason = str(exc) or type(exc).__name__
            raise OptionApplicationFailure(FINALIZE_STEP, reason) from exc

    def _check_identifier(self, required: Any) -> None:
        if not self.settings.validate_required:
            return
        if not isinstance(required, str) or not required.strip():
            raise InvalidArgument(f"{self.name} requires a non-empty identifier, got {required!r}")
        if self.validate_identifier is None:
            return
        try:
            self.validate_identifier(required)
        except InvalidArgument:
            raise
        except (TypeError, ValueError) as exc:
            raise InvalidArgument(f"{self.name} identifier {required!r} is malformed: {exc}") from exc

    def _resolve(self, options: Sequence[Any]) -> list[Option[TargetT]]:
        limit = self.settings.option_limit
        if limit is not None and len(options) > limit:
            raise InvalidArgument(f"{self.name} accepts at most {limit} options, got {len(options)}")
        return [as_option(option) for option in options]

    def _apply(self, target: TargetT, option: Option[TargetT], index: int) -> None:
        logger.debug("Applying option %s (position %d) to %s", option.name, index, self.name)
        try:
            option.apply(target)
        except OptionApplicationFailure as exc:
            logger.debug("Option %s rejected %s: %s", option.name, self.name, exc.reason)
            raise exc.at(index) from exc
        except Exception as exc:  # noqa: BLE001
            reason = str(exc) or type(exc).__name__
            logger.debug("Option %s raised %s: %s", option.name, type(exc).__name__, reason)
            raise OptionApplicationFailure(option.name, reason, index=index) from exc


def build(
    factory: Callable[[str], TargetT],
    required: str,
    *options: Option[TargetT] | Callable[[TargetT], None],
    **kwargs: Any,
) -> Any:
    """One-shot helper: `OptionBuilder(factory, **kwargs).build(required, *options)`."""
    return OptionBuilder(factory, **kwargs).build(required, *options)


__all__ = [
    "FINALIZE_STEP",
    "FunctionOption",
    "Option",
    "OptionBuilder",
    "as_option",
    "build",
    "option_factory",
]
