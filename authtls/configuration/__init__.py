"""
=====================
Configuration
=====================

.. currentmodule:: authtls.configuration

Authentication and TLS Configuration
------------------------------------

Where can configuration come from?
^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^

- Command line arguments. This is the ideal location for settings to go. (See ``authtls show --help``.)
- Environment variables, named ``AUTHTLS_{SECTION}_{OPTION}``, for example ``AUTHTLS_TLS_CERTIFICATE``.
- A config file - an INI style configuration file. Unless one is passed explicitly, authtls looks at

  1. the file named by the ``AUTHTLS_CONFIG`` environment variable
  2. a file named ``authtls.config`` in the Python interpreter's starting directory
  3. a file in ``~/.authtls/config`` in the home directory as detected by Python.

Command line arguments win over environment variables, which win over the config file, which wins over the defaults.

Configuration Objects
---------------------

.. autosummary::
   :template: custom.rst
   :toctree: generated/
   :nosignatures:

   ~AuthAndTLSOptions
   ~ScopedCredentialHelper
   ~ConfigFile

"""
from __future__ import annotations

import dataclasses
import datetime
import typing
from dataclasses import dataclass, field
from typing import List, Optional

from dataclasses_json import config, dataclass_json

from authtls.configuration import internal as _internal
from authtls.configuration.converters import (
    parse_comma_separated_list,
    parse_credential_helpers,
    parse_duration,
)
from authtls.configuration.credential_helper import ScopedCredentialHelper, parse_scoped_credential_helper
from authtls.configuration.file import ConfigEntry, ConfigFile, LegacyConfigEntry, get_config_file, set_if_exists
from authtls.exceptions.user import OptionsParsingException
from authtls.loggers import logger

DEFAULT_GOOGLE_AUTH_SCOPES = ["https://www.googleapis.com/auth/cloud-platform"]
DEFAULT_GRPC_KEEPALIVE_TIMEOUT = datetime.timedelta(seconds=20)
DEFAULT_CREDENTIAL_HELPER_TIMEOUT = datetime.timedelta(seconds=5)
DEFAULT_CREDENTIAL_HELPER_CACHE_DURATION = datetime.timedelta(minutes=30)


def _encode_duration(d: Optional[datetime.timedelta]) -> Optional[float]:
    return None if d is None else d.total_seconds()


def _decode_duration(v: Optional[float]) -> Optional[datetime.timedelta]:
    return None if v is None else datetime.timedelta(seconds=v)


def _duration_field(default: Optional[datetime.timedelta]):
    return field(default=default, metadata=config(encoder=_encode_duration, decoder=_decode_duration))


@dataclass_json
@dataclass(init=True, repr=True, eq=True, frozen=True)
class AuthAndTLSOptions(object):
    """
    Common options for authentication and TLS, used when talking to remote caches and executors.

    :param use_google_default_credentials: Whether to use 'Google Application Default Credentials' for
      authentication. See https://cloud.google.com/docs/authentication for details. Disabled by default.
    :param google_auth_scopes: Google Cloud authentication scopes.
    :param google_credentials: The file to get authentication credentials from.
    :param tls_certificate: Path to a TLS certificate that is trusted to sign server certificates.
    :param tls_client_certificate: The TLS client certificate to use, needs ``tls_client_key`` too.
    :param tls_client_key: The TLS client key to use, needs ``tls_client_certificate`` too.
    :param tls_authority_override: TESTING ONLY! Can be used with a self-signed certificate to consider the specified
      value a valid TLS authority.
    :param grpc_keepalive_time: If set, keep-alive pings are sent after this much time without reads on a
      connection that has at least one pending call. None disables keep-alive pings.
    :param grpc_keepalive_timeout: A connection is closed if a ping reply does not arrive within this time. Ignored
      when keep-alive pings are disabled.
    :param credential_helpers: Credential helpers in the order they were given. Credentials from credential helpers
      take precedence over Google credentials and ``.netrc``.
    :param credential_helper_timeout: Credential helpers failing to respond within this time fail the invocation.
    :param credential_helper_cache_duration: How long credentials obtained from credential helpers are cached.
    """

    use_google_default_credentials: bool = False
    google_auth_scopes: List[str] = field(default_factory=lambda: list(DEFAULT_GOOGLE_AUTH_SCOPES))
    google_credentials: Optional[str] = None
    tls_certificate: Optional[str] = None
    tls_client_certificate: Optional[str] = None
    tls_client_key: Optional[str] = None
    tls_authority_override: Optional[str] = None
    grpc_keepalive_time: Optional[datetime.timedelta] = _duration_field(None)
    grpc_keepalive_timeout: datetime.timedelta = _duration_field(DEFAULT_GRPC_KEEPALIVE_TIMEOUT)
    credential_helpers: List[ScopedCredentialHelper] = field(default_factory=list)
    credential_helper_timeout: datetime.timedelta = _duration_field(DEFAULT_CREDENTIAL_HELPER_TIMEOUT)
    credential_helper_cache_duration: datetime.timedelta = _duration_field(DEFAULT_CREDENTIAL_HELPER_CACHE_DURATION)

    def __post_init__(self):
        if bool(self.tls_client_certificate) != bool(self.tls_client_key):
            raise OptionsParsingException(
                "--tls_client_certificate and --tls_client_key must both be specified to enable client authentication"
            )
        for name in (
            "grpc_keepalive_time",
            "grpc_keepalive_timeout",
            "credential_helper_timeout",
            "credential_helper_cache_duration",
        ):
            d = getattr(self, name)
            if d is not None:
                parse_duration(d)

    @property
    def tls_client_auth_enabled(self) -> bool:
        return bool(self.tls_client_certificate and self.tls_client_key)

    def with_params(self, **kwargs) -> AuthAndTLSOptions:
        """
        Returns a copy with the given fields replaced, the copy is validated like a new instance.
        """
        return dataclasses.replace(self, **kwargs)

    @classmethod
    def auto(cls, config_file: typing.Union[str, ConfigFile, None] = None) -> AuthAndTLSOptions:
        """
        Reads from Config file, and overrides from Environment variables. Refer to ConfigEntry for details.
        Malformed values raise an :class:`~authtls.exceptions.user.OptionsParsingException`, they are never skipped.

        :param config_file: file path to read the config from, if not specified default locations are searched
        :return: AuthAndTLSOptions
        """
        config_file = get_config_file(config_file)
        kwargs = {}
        kwargs = set_if_exists(
            kwargs, "use_google_default_credentials", _internal.Google.DEFAULT_CREDENTIALS.read(config_file)
        )
        kwargs = set_if_exists(kwargs, "google_auth_scopes", _internal.Google.AUTH_SCOPES.read(config_file))
        kwargs = set_if_exists(kwargs, "google_credentials", _internal.Google.CREDENTIALS.read(config_file))
        kwargs = set_if_exists(kwargs, "tls_certificate", _internal.TLS.CERTIFICATE.read(config_file))
        kwargs = set_if_exists(kwargs, "tls_client_certificate", _internal.TLS.CLIENT_CERTIFICATE.read(config_file))
        kwargs = set_if_exists(kwargs, "tls_client_key", _internal.TLS.CLIENT_KEY.read(config_file))
        kwargs = set_if_exists(kwargs, "tls_authority_override", _internal.TLS.AUTHORITY_OVERRIDE.read(config_file))
        kwargs = set_if_exists(kwargs, "grpc_keepalive_time", _internal.GRPC.KEEPALIVE_TIME.read(config_file))
        kwargs = set_if_exists(kwargs, "grpc_keepalive_timeout", _internal.GRPC.KEEPALIVE_TIMEOUT.read(config_file))
        kwargs = set_if_exists(kwargs, "credential_helpers", _internal.CredentialHelper.HELPERS.read(config_file))
        kwargs = set_if_exists(
            kwargs, "credential_helper_timeout", _internal.CredentialHelper.TIMEOUT.read(config_file)
        )
        kwargs = set_if_exists(
            kwargs, "credential_helper_cache_duration", _internal.CredentialHelper.CACHE_DURATION.read(config_file)
        )
        if kwargs.get("credential_helpers"):
            logger.info(f"Configured {len(kwargs['credential_helpers'])} credential helper(s)")
        return AuthAndTLSOptions(**kwargs)


__all__ = [
    "AuthAndTLSOptions",
    "ConfigEntry",
    "ConfigFile",
    "LegacyConfigEntry",
    "ScopedCredentialHelper",
    "get_config_file",
    "parse_comma_separated_list",
    "parse_credential_helpers",
    "parse_duration",
    "parse_scoped_credential_helper",
    "set_if_exists",
]
