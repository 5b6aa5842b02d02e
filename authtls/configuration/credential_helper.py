"""
Credential helpers are external executables that hand out credentials for remote endpoints. They are configured with
the repeatable ``--experimental_credential_helper`` option, one ``[scope=]path`` value per occurrence:

.. code-block:: bash

    --experimental_credential_helper=github.com=/usr/local/bin/gh-helper
    --experimental_credential_helper=/usr/local/bin/default-helper

A helper without a scope applies to every domain that no scoped helper matches. Paths are kept exactly as given, they
are resolved and executed later by whoever picks the helper for a connection.
"""
from __future__ import annotations

import typing
from dataclasses import dataclass

from dataclasses_json import dataclass_json

from authtls.exceptions.user import InvalidPathException, InvalidScopeException
from authtls.loggers import logger

SCOPE_SEPARATOR = "="


def _check_scope(scope: typing.Optional[str]):
    if scope is not None and not scope:
        raise InvalidScopeException("Scope of credential helper must not be empty")


def _check_path(path: typing.Optional[str]) -> str:
    if not path:
        raise InvalidPathException("Path to credential helper must not be empty")
    return path


@dataclass_json
@dataclass(init=True, repr=True, eq=True, frozen=True)
class ScopedCredentialHelper(object):
    """
    One value of the ``--experimental_credential_helper`` option.

    Attributes:
        path (str): The unresolved path (or lookup name) of the credential helper executable.
        scope (Optional[str]): The domain the helper is used for, ``None`` if it applies to all domains.
    """

    path: str
    scope: typing.Optional[str] = None

    def __post_init__(self):
        _check_scope(self.scope)
        _check_path(self.path)

    def __str__(self) -> str:
        if self.scope is None:
            return self.path
        return f"{self.scope}{SCOPE_SEPARATOR}{self.path}"

    @classmethod
    def from_str(cls, raw: str) -> ScopedCredentialHelper:
        return parse_scoped_credential_helper(raw)


def parse_scoped_credential_helper(raw: str) -> ScopedCredentialHelper:
    """
    Parses ``[scope=]path`` into a :class:`ScopedCredentialHelper`. Only the first ``=`` separates the scope, so the
    path may contain ``=`` itself. Nothing is trimmed or expanded.

    :param raw: a single option value, must not be None
    :raises InvalidScopeException: if a ``=`` is present and the scope before it is empty
    :raises InvalidPathException: if the path is empty
    """
    if not isinstance(raw, str):
        raise TypeError(f"Credential helper value must be a str, got {type(raw)}")

    scope, sep, path = raw.partition(SCOPE_SEPARATOR)
    if sep:
        _check_scope(scope)
        helper = ScopedCredentialHelper(path=_check_path(path), scope=scope)
    else:
        helper = ScopedCredentialHelper(path=_check_path(raw))
    logger.debug(f"Parsed credential helper {raw!r} into scope={helper.scope!r} path={helper.path!r}")
    return helper
