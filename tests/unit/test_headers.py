# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from types import MappingProxyType

import pytest

from funcopts.client.headers import validate_header_name, validate_headers


def test_validate_headers_returns_copy_preserving_case():
    source = {"Content-Type": "application/json", "X-Empty": ""}
    result = validate_headers(source)
    assert result == source
    assert result is not source


def test_validate_headers_accepts_read_only_mappings():
    assert validate_headers(MappingProxyType({"A": "1"})) == {"A": "1"}


@pytest.mark.parametrize("name", ["", "Has Space", "colon:", "tab\t", "new\nline"])
def test_validate_header_name_rejects_invalid(name):
    with pytest.raises(ValueError):
        validate_header_name(name)


def test_validate_header_name_rejects_non_strings():
    with pytest.raises(TypeError):
        validate_header_name(b"X-Bytes")


def test_validate_headers_rejects_non_mapping():
    with pytest.raises(TypeError):
        validate_headers([("A", "1")])

