import dataclasses
import datetime
import typing
from dataclasses import dataclass

import rich_click as click
from click.core import ParameterSource

from authtls.clis.utils import get_option_from_metadata, make_click_option_field
from authtls.configuration import AuthAndTLSOptions, ScopedCredentialHelper
from authtls.interaction.click_types import (
    CommaSeparatedListParamType,
    DurationParamType,
    ScopedCredentialHelperParamType,
)
from authtls.loggers import logger


@dataclass
class AuthAndTLSParams:
    """
    The command line form of :class:`~authtls.configuration.AuthAndTLSOptions`. Every field carries its click option,
    field names match the option fields they override.
    """

    use_google_default_credentials: bool = make_click_option_field(
        click.Option(
            param_decls=[
                "--google_default_credentials/--nogoogle_default_credentials",
                "--auth_enabled/--noauth_enabled",
                "use_google_default_credentials",
            ],
            required=False,
            default=False,
            show_default=True,
            help="Whether to use 'Google Application Default Credentials' for authentication."
            " See https://cloud.google.com/docs/authentication for details.",
        )
    )
    google_auth_scopes: typing.Optional[typing.List[str]] = make_click_option_field(
        click.Option(
            param_decls=["--google_auth_scopes", "--auth_scope", "google_auth_scopes"],
            required=False,
            type=CommaSeparatedListParamType(),
            default=None,
            help="A comma-separated list of Google Cloud authentication scopes."
            " Defaults to https://www.googleapis.com/auth/cloud-platform",
        )
    )
    google_credentials: typing.Optional[str] = make_click_option_field(
        click.Option(
            param_decls=["--google_credentials", "--auth_credentials", "google_credentials"],
            required=False,
            type=str,
            default=None,
            help="Specifies the file to get authentication credentials from."
            " See https://cloud.google.com/docs/authentication for details.",
        )
    )
    tls_certificate: typing.Optional[str] = make_click_option_field(
        click.Option(
            param_decls=["--tls_certificate", "tls_certificate"],
            required=False,
            type=str,
            default=None,
            help="Specify a path to a TLS certificate that is trusted to sign server certificates.",
        )
    )
    tls_client_certificate: typing.Optional[str] = make_click_option_field(
        click.Option(
            param_decls=["--tls_client_certificate", "tls_client_certificate"],
            required=False,
            type=str,
            default=None,
            help="Specify the TLS client certificate to use; you also need to provide a client key to enable client"
            " authentication.",
        )
    )
    tls_client_key: typing.Optional[str] = make_click_option_field(
        click.Option(
            param_decls=["--tls_client_key", "tls_client_key"],
            required=False,
            type=str,
            default=None,
            help="Specify the TLS client key to use; you also need to provide a client certificate to enable client"
            " authentication.",
        )
    )
    tls_authority_override: typing.Optional[str] = make_click_option_field(
        click.Option(
            param_decls=["--tls_authority_override", "tls_authority_override"],
            required=False,
            type=str,
            default=None,
            hidden=True,
            help="TESTING ONLY! Can be used with a self-signed certificate to consider the specified value a valid"
            " TLS authority.",
        )
    )
    grpc_keepalive_time: typing.Optional[datetime.timedelta] = make_click_option_field(
        click.Option(
            param_decls=["--grpc_keepalive_time", "grpc_keepalive_time"],
            required=False,
            type=DurationParamType(),
            default=None,
            help="Configures keep-alive pings for outgoing gRPC connections. If this is set, pings are sent after"
            " this much time of no read operations on the connection, but only if there is at least one pending"
            " gRPC call. Times are treated as second granularity; it is an error to set a value less than one"
            " second. By default, keep-alive pings are disabled.",
        )
    )
    grpc_keepalive_timeout: typing.Optional[datetime.timedelta] = make_click_option_field(
        click.Option(
            param_decls=["--grpc_keepalive_timeout", "grpc_keepalive_timeout"],
            required=False,
            type=DurationParamType(),
            default=None,
            help="Configures a keep-alive timeout for outgoing gRPC connections. A connection times out if it does"
            " not receive a ping reply after this much time. Times are treated as second granularity; it is an"
            " error to set a value less than one second. Defaults to 20s.",
        )
    )
    credential_helpers: typing.Tuple[ScopedCredentialHelper, ...] = make_click_option_field(
        click.Option(
            param_decls=["--experimental_credential_helper", "credential_helpers"],
            required=False,
            multiple=True,
            type=ScopedCredentialHelperParamType(),
            default=(),
            help="Configures a credential helper, as [scope=]path, to use for retrieving credentials for the"
            " provided scope (domain). Credentials from credential helpers take precedence over credentials from"
            " --google_default_credentials, --google_credentials, or .netrc.",
        )
    )
    credential_helper_timeout: typing.Optional[datetime.timedelta] = make_click_option_field(
        click.Option(
            param_decls=["--experimental_credential_helper_timeout", "credential_helper_timeout"],
            required=False,
            type=DurationParamType(),
            default=None,
            help="Configures the timeout for the credential helper. Credential helpers failing to respond within"
            " this timeout will fail the invocation. Defaults to 5s.",
        )
    )
    credential_helper_cache_duration: typing.Optional[datetime.timedelta] = make_click_option_field(
        click.Option(
            param_decls=["--experimental_credential_helper_cache_duration", "credential_helper_cache_duration"],
            required=False,
            type=DurationParamType(),
            default=None,
            help="Configures the duration for which credentials from credential helpers are cached."
            " Defaults to 30m.",
        )
    )

    @classmethod
    def from_dict(cls, d: typing.Dict[str, typing.Any]) -> "AuthAndTLSParams":
        names = {f.name for f in dataclasses.fields(cls)}
        return cls(**{k: v for k, v in d.items() if k in names})

    @classmethod
    def options(cls) -> typing.List[click.Option]:
        """
        Return the set of options added to every command that needs auth and TLS settings.
        """
        return [get_option_from_metadata(f.metadata) for f in dataclasses.fields(cls)]

    def apply(self, options: AuthAndTLSOptions, ctx: click.Context) -> AuthAndTLSOptions:
        """
        Overrides ``options`` with the values given on the command line. Values that come from click defaults are
        ignored, so environment variables and the config file still apply. Credential helpers from the command line
        are appended after the configured ones.
        """
        overrides = {}
        for f in dataclasses.fields(self):
            if ctx.get_parameter_source(f.name) != ParameterSource.COMMANDLINE:
                continue
            v = getattr(self, f.name)
            if f.name == "credential_helpers":
                v = list(options.credential_helpers) + list(v)
            overrides[f.name] = v
        if overrides:
            logger.debug(f"Command line overrides for {sorted(overrides)}")
        return options.with_params(**overrides)
