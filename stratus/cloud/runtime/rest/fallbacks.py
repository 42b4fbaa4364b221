"""Exception parsers mapping "not found" responses to sentinel values.

``None`` stands for both "no such resource" and "nothing to return", so a
single parser covers lookups and deletes.
"""

from __future__ import annotations

from ...core.exceptions import ProviderError, ResourceNotFoundError


def is_not_found(exc: ProviderError) -> bool:
    return isinstance(exc, ResourceNotFoundError) or exc.status_code == 404


def return_none_on_not_found(exc: ProviderError) -> None:
    if is_not_found(exc):
        return None
    raise exc


def return_false_on_not_found(exc: ProviderError) -> bool:
    if is_not_found(exc):
        return False
    raise exc
