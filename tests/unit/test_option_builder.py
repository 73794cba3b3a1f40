# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging

import pytest

from funcopts.config import BuilderSettings
from funcopts.errors import ConfigurationIncomplete, InvalidArgument, OptionApplicationFailure
from funcopts.options import (
    FINALIZE_STEP,
    FunctionOption,
    Option,
    OptionBuilder,
    as_option,
    build,
    option_factory,
)


class Widget:
    def __init__(self, name):
        self.name = name
        self.color = "grey"
        self.size = None
        self.applied = []


def set_color(color):
    return FunctionOption("set_color", lambda w: setattr(w, "color", color))


@option_factory
def set_size(size):
    def apply(widget):
        if size <= 0:
            raise ValueError("size must be positive")
        widget.size = size

    return apply


def record(label):
    return FunctionOption(label, lambda w: w.applied.append(label))


class RejectingOption:
    name = "reject"

    def apply(self, target):
        raise OptionApplicationFailure(self.name, "conflicting value")


def test_build_without_options_uses_defaults():
    widget = build(Widget, "w1", settings=BuilderSettings())
    assert widget.name == "w1"
    assert widget.color == "grey"
    assert widget.size is None


def test_options_apply_in_order_and_last_write_wins():
    builder = OptionBuilder(Widget, settings=BuilderSettings())
    widget = builder.build("w", set_color("red"), record("a"), set_color("blue"), record("b"))
    assert widget.color == "blue"
    assert widget.applied == ["a", "b"]


def test_disjoint_options_are_order_independent():
    builder = OptionBuilder(Widget, settings=BuilderSettings())
    first = builder.build("w", set_color("red"), set_size(3))
    second = builder.build("w", set_size(3), set_color("red"))
    assert (first.color, first.size) == (second.color, second.size) == ("red", 3)


def test_repeating_an_assignment_option_is_idempotent():
    builder = OptionBuilder(Widget, settings=BuilderSettings())
    option = set_color("green")
    once = builder.build("w", option)
    twice = builder.build("w", option, option)
    assert once.color == twice.color == "green"


def test_option_factory_names_options_after_factory():
    option = set_size(4)
    assert isinstance(option, FunctionOption)
    assert option.name == "set_size"
    assert set_size.__name__ == "set_size"


def test_failure_is_fail_fast_and_reports_option():
    builder = OptionBuilder(Widget, settings=BuilderSettings())
    after = record("after")
    with pytest.raises(OptionApplicationFailure) as excinfo:
        builder.build("w", set_color("red"), set_size(0), after)

    err = excinfo.value
    assert err.option == "set_size"
    assert err.index == 1
    assert "size must be positive" in err.reason
    assert isinstance(err.__cause__, ValueError)


def test_subsequent_options_are_not_applied_after_failure():
    seen = []
    builder = OptionBuilder(Widget, settings=BuilderSettings())
    with pytest.raises(OptionApplicationFailure):
        builder.build("w", RejectingOption(), FunctionOption("later", lambda w: seen.append(w)))
    assert seen == []


def test_explicit_failure_gets_position():
    builder = OptionBuilder(Widget, settings=BuilderSettings())
    with pytest.raises(OptionApplicationFailure) as excinfo:
        builder.build("w", set_color("red"), RejectingOption())
    assert excinfo.value.option == "reject"
    assert excinfo.value.index == 1
    assert excinfo.value.reason == "conflicting value"


def test_exception_without_message_uses_type_name():
    def explode(widget):  # noqa: ARG001
        raise KeyError()

    builder = OptionBuilder(Widget, settings=BuilderSettings())
    with pytest.raises(OptionApplicationFailure) as excinfo:
        builder.build("w", explode)
    assert excinfo.value.option == "explode"
    assert excinfo.value.reason == "KeyError"


@pytest.mark.parametrize("required", ["", "   ", None, 42])
def test_missing_identifier_is_invalid_argument(required):
    builder = OptionBuilder(Widget, settings=BuilderSettings())
    with pytest.raises(InvalidArgument):
        builder.build(required)


def test_identifier_validation_can_be_disabled():
    builder = OptionBuilder(Widget, settings=BuilderSettings(validate_required=False))
    assert builder.build("").name == ""


def test_domain_identifier_validator_errors_are_translated():
    def must_start_with_w(name):
        if not name.startswith("w"):
            raise ValueError("must start with w")

    builder = OptionBuilder(Widget, validate_identifier=must_start_with_w, settings=BuilderSettings())
    assert builder.build("widget").name == "widget"
    with pytest.raises(InvalidArgument) as excinfo:
        builder.build("gadget")
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_non_option_arguments_are_rejected_before_any_mutation():
    seen = []
    builder = OptionBuilder(Widget, settings=BuilderSettings())
    with pytest.raises(InvalidArgument):
        builder.build("w", FunctionOption("first", lambda w: seen.append(w)), "not-an-option")
    assert seen == []


def test_max_options_limit():
    builder = OptionBuilder(Widget, settings=BuilderSettings(max_options=2))
    builder.build("w", set_color("a"), set_color("b"))
    with pytest.raises(InvalidArgument):
        builder.build("w", set_color("a"), set_color("b"), set_color("c"))


def test_required_attributes_raise_configuration_incomplete():
    builder = OptionBuilder(Widget, required_attributes=["size"], settings=BuilderSettings(), name="Widget")
    assert builder.build("w", set_size(2)).size == 2
    with pytest.raises(ConfigurationIncomplete) as excinfo:
        builder.build("w", set_color("red"))
    assert excinfo.value.missing == ("size",)
    assert excinfo.value.target == "Widget"


def test_finalize_converts_target():
    builder = OptionBuilder(Widget, finalize=lambda w: (w.name, w.color), settings=BuilderSettings())
    assert builder.build("w", set_color("red")) == ("w", "red")


def test_builds_are_deterministic_and_independent():
    builder = OptionBuilder(Widget, settings=BuilderSettings())
    options = (set_color("red"), set_size(5))
    first = builder.build("w", *options)
    second = builder.build("w", *options)
    assert first is not second
    assert vars(first) == vars(second)


def test_as_option_accepts_options_and_callables():
    option = set_color("red")
    assert as_option(option) is option

    def paint(widget):
        widget.color = "paint"

    wrapped = as_option(paint)
    assert isinstance(wrapped, Option)
    assert wrapped.name == "paint"

    with pytest.raises(InvalidArgument):
        as_option(None)


def test_applied_options_are_logged_at_debug(caplog):
    builder = OptionBuilder(Widget, settings=BuilderSettings(), name="Widget")
    with caplog.at_level(logging.DEBUG, logger="funcopts.options"):
        builder.build("w", set_color("red"))
    assert "set_color" in caplog.text
    assert "Widget" in caplog.text


def test_factory_failure_is_translated():
    def broken_factory(name):
        raise RuntimeError(f"cannot allocate {name}")

    builder = OptionBuilder(broken_factory, settings=BuilderSettings())
    with pytest.raises(InvalidArgument) as excinfo:
        builder.build("w")
    assert isinstance(excinfo.value.__cause__, RuntimeError)


def test_finalize_failure_is_translated():
    def finalize(widget):
        return int(widget.color)

    builder = OptionBuilder(Widget, finalize=finalize, settings=BuilderSettings())
    assert builder.build("w", set_color("7")) == 7
    with pytest.raises(OptionApplicationFailure) as excinfo:
        builder.build("w", set_color("red"))
    assert excinfo.value.option == FINALIZE_STEP
    assert excinfo.value.index is None
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_finalize_configuration_errors_pass_through():
    def finalize(widget):  # noqa: ARG001
        raise ConfigurationIncomplete(["size"], target="Widget")

    builder = OptionBuilder(Widget, finalize=finalize, settings=BuilderSettings())
    with pytest.raises(ConfigurationIncomplete):
        builder.build("w")


def test_build_failures_are_logged_with_category(caplog):
    builder = OptionBuilder(Widget, settings=BuilderSettings(), name="Widget")
    with caplog.at_level(logging.DEBUG, logger="funcopts.options"):
        with pytest.raises(OptionApplicationFailure):
            builder.build("w", RejectingOption())
    assert "Widget build failed [OPTION_APPLICATION_FAILURE]" in caplog.text
