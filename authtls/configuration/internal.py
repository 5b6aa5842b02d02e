from authtls.configuration.converters import parse_credential_helpers, parse_duration
from authtls.configuration.file import ConfigEntry, LegacyConfigEntry


class Google(object):
    SECTION = "google"
    DEFAULT_CREDENTIALS = ConfigEntry(LegacyConfigEntry(SECTION, "default_credentials", bool))
    """
    Whether to use 'Google Application Default Credentials' for authentication.
    See https://cloud.google.com/docs/authentication for details.
    """

    AUTH_SCOPES = ConfigEntry(LegacyConfigEntry(SECTION, "auth_scopes", list))
    """
    A comma-separated list of Google Cloud authentication scopes.
    """

    CREDENTIALS = ConfigEntry(LegacyConfigEntry(SECTION, "credentials", str))


class TLS(object):
    SECTION = "tls"
    CERTIFICATE = ConfigEntry(LegacyConfigEntry(SECTION, "certificate", str))
    """
    Path to a TLS certificate that is trusted to sign server certificates.
    """

    CLIENT_CERTIFICATE = ConfigEntry(LegacyConfigEntry(SECTION, "client_certificate", str))
    CLIENT_KEY = ConfigEntry(LegacyConfigEntry(SECTION, "client_key", str))
    AUTHORITY_OVERRIDE = ConfigEntry(LegacyConfigEntry(SECTION, "authority_override", str))
    """
    TESTING ONLY! Can be used with a self-signed certificate to consider the specified value a valid TLS authority.
    """


class GRPC(object):
    SECTION = "grpc"
    KEEPALIVE_TIME = ConfigEntry(LegacyConfigEntry(SECTION, "keepalive_time", str), transform=parse_duration)
    """
    Idle time after which keep-alive pings are sent on outgoing connections with pending calls. Unset disables pings.
    """

    KEEPALIVE_TIMEOUT = ConfigEntry(LegacyConfigEntry(SECTION, "keepalive_timeout", str), transform=parse_duration)


class CredentialHelper(object):
    SECTION = "credential_helper"
    HELPERS = ConfigEntry(LegacyConfigEntry(SECTION, "helpers", str), transform=parse_credential_helpers)
    """
    One ``[scope=]path`` value per line. Order matters, it is kept as written.
    """

    TIMEOUT = ConfigEntry(LegacyConfigEntry(SECTION, "timeout", str), transform=parse_duration)
    CACHE_DURATION = ConfigEntry(LegacyConfigEntry(SECTION, "cache_duration", str), transform=parse_duration)
