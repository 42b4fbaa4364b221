"""Unit tests for request binders and exception parsers."""

from __future__ import annotations

import pytest
from pydantic import BaseModel

from stratus.cloud.core.exceptions import ProviderError, ResourceNotFoundError
from stratus.cloud.runtime.rest import return_false_on_not_found, return_none_on_not_found
from stratus.cloud.runtime.rest.binders import bind_form, bind_path_param, bind_to_json


class _Thing(BaseModel):
    name: str
    note: str | None = None


def test_bind_path_param_quotes_segment():
    assert bind_path_param("my org/1") == "my%20org%2F1"
    assert bind_path_param(42) == "42"


@pytest.mark.parametrize("value", [None, ""])
def test_bind_path_param_rejects_missing(value):
    with pytest.raises(ValueError, match="must be defined"):
        bind_path_param(value)


def test_bind_to_json_drops_none():
    assert bind_to_json(_Thing(name="a")) == {"name": "a"}
    assert bind_to_json(_Thing(name="a", note="b")) == {"name": "a", "note": "b"}


def test_bind_form_skips_none_and_encodes_bools():
    assert bind_form(serverid="vz1", keepip=True, description=None, disksize=20) == {
        "serverid": "vz1",
        "keepip": "1",
        "disksize": "20",
    }
    assert bind_form(keepip=False) == {"keepip": "0"}


def test_return_none_on_not_found():
    assert return_none_on_not_found(ResourceNotFoundError("missing")) is None
    assert return_none_on_not_found(ProviderError("missing", status_code=404)) is None


def test_return_false_on_not_found():
    assert return_false_on_not_found(ResourceNotFoundError("missing")) is False


@pytest.mark.parametrize("parser", [return_none_on_not_found, return_false_on_not_found])
def test_exception_parsers_reraise_other_errors(parser):
    error = ProviderError("server error", status_code=500)
    with pytest.raises(ProviderError) as exc_info:
        parser(error)
    assert exc_info.value is error
