from __future__ import annotations

import configparser as _configparser
import os
import typing
from dataclasses import dataclass
from pathlib import Path

from authtls.configuration.converters import parse_comma_separated_list
from authtls.exceptions import user as _user_exceptions
from authtls.loggers import logger

# Points at a config file to use instead of the discovered ones.
AUTHTLS_CONFIG_ENV_VAR = "AUTHTLS_CONFIG"
ENV_VAR_PREFIX = "AUTHTLS"
DEFAULT_CONFIG_FILE_NAME = "authtls.config"


@dataclass
class LegacyConfigEntry(object):
    """
    Creates a record for the config entry. contains
    Args:
        section: section the option should be found under
        option: the option str to lookup
        type_: Expected type of the value
    """

    section: str
    option: str
    type_: typing.Type = str

    def get_env_name(self) -> str:
        return f"{ENV_VAR_PREFIX}_{self.section.upper()}_{self.option.upper()}"

    def read_from_env(self, transform: typing.Optional[typing.Callable] = None) -> typing.Optional[typing.Any]:
        """
        Reads the config entry from environment variable, the structure of the env var is
        ``AUTHTLS_{SECTION}_{OPTION}`` all upper cased.
        :return:
        """
        env = self.get_env_name()
        v = os.environ.get(env, None)
        if v is None:
            return None
        return transform(v) if transform else v

    def read_from_file(
        self, cfg: typing.Optional[ConfigFile], transform: typing.Optional[typing.Callable] = None
    ) -> typing.Optional[typing.Any]:
        if not cfg:
            return None
        try:
            v = cfg.get(self)
        except (_configparser.NoSectionError, _configparser.NoOptionError):
            return None
        return transform(v) if transform else v


_TRUE_WORDS = ("true", "1", "yes", "on")
_FALSE_WORDS = ("false", "0", "no", "off")


def bool_transformer(config_val: typing.Any):
    if type(config_val) is not str:
        return config_val
    if config_val.lower() in _TRUE_WORDS:
        return True
    if config_val.lower() in _FALSE_WORDS:
        return False
    raise _user_exceptions.OptionsParsingException(
        f"'{config_val}' is not a valid boolean, expected one of {', '.join(_TRUE_WORDS + _FALSE_WORDS)}"
    )


@dataclass
class ConfigEntry(object):
    """
    A top level Config entry holder. ``transform`` is applied to the raw value, whichever source it came from, and
    may raise :class:`~authtls.exceptions.user.OptionsParsingException` to reject it.
    """

    legacy: LegacyConfigEntry
    transform: typing.Optional[typing.Callable[[typing.Any], typing.Any]] = None

    legacy_default_transforms = {
        bool: bool_transformer,
        list: parse_comma_separated_list,
    }

    def __post_init__(self):
        if self.legacy:
            if not self.transform and self.legacy.type_ in ConfigEntry.legacy_default_transforms:
                self.transform = ConfigEntry.legacy_default_transforms[self.legacy.type_]

    def read(self, cfg: typing.Optional[ConfigFile] = None) -> typing.Optional[typing.Any]:
        """
        Reads the config Entry from the various sources in the following order,
         First try to read from environment, if not then try to read from the given config file
        :param cfg:
        :return:
        """
        from_env = self.legacy.read_from_env(self.transform)
        if from_env is None:
            return self.legacy.read_from_file(cfg, self.transform)
        return from_env


class ConfigFile(object):
    def __init__(self, location: typing.Union[str, os.PathLike]):
        """
        Load the config from this location
        """
        self._location = str(location)
        self._legacy_config = self._read_legacy_config(self._location)

    def _read_legacy_config(self, location: str) -> _configparser.ConfigParser:
        # Values are paths and URLs, '%' is kept as written.
        c = _configparser.ConfigParser(interpolation=None)
        if not c.read(location):
            raise _user_exceptions.ConfigFileNotFoundException(
                f"Config file '{location}' does not exist or cannot be read"
            )
        if c.has_section("internal"):
            raise _user_exceptions.AuthTLSAssertion(
                "The config file '{}' cannot contain a section for internal only configurations.".format(location)
            )
        return c

    def _get_from_legacy(self, c: LegacyConfigEntry) -> typing.Any:
        # Typed conversion is left to the entry's transform so env vars and files agree.
        return self._legacy_config.get(c.section, c.option)

    def get(self, c: LegacyConfigEntry) -> typing.Any:
        if isinstance(c, LegacyConfigEntry):
            return self._get_from_legacy(c)
        raise NotImplementedError("Support for other config types besides .ini / .config files not yet supported")

    @property
    def location(self) -> str:
        return self._location

    @property
    def legacy_config(self) -> _configparser.ConfigParser:
        return self._legacy_config


def get_config_file(c: typing.Union[str, ConfigFile, None]) -> typing.Optional[ConfigFile]:
    """
    Checks if the given argument is a file or a configFile and returns a loaded configFile else returns None.
    When nothing is given, the following locations are tried in order:

    #. the file named by the ``AUTHTLS_CONFIG`` environment variable
    #. ``authtls.config`` in the directory the Python process was started from
    #. ``~/.authtls/config``
    """
    if c is None:
        env_config = os.environ.get(AUTHTLS_CONFIG_ENV_VAR)
        if env_config:
            logger.info(f"Using configuration from env var {AUTHTLS_CONFIG_ENV_VAR}={env_config}")
            return ConfigFile(env_config)

        current_location_config = Path(DEFAULT_CONFIG_FILE_NAME)
        if current_location_config.exists():
            logger.info(f"Using configuration from Python process root {current_location_config.absolute()}")
            return ConfigFile(current_location_config.absolute())

        home_dir_config = Path(Path.home(), ".authtls", "config")
        if home_dir_config.exists():
            logger.info(f"Using configuration from home directory {home_dir_config.absolute()}")
            return ConfigFile(home_dir_config.absolute())

        return None
    if isinstance(c, (str, os.PathLike)):
        return ConfigFile(c)
    return c


def set_if_exists(d: dict, k: str, v: typing.Any) -> dict:
    """
    Given a dict ``d`` sets the key ``k`` with value of config ``v``, if the config value ``v`` is set
    and return the updated dictionary. ``None`` means unset, falsy values like ``False`` or an empty list are
    kept because they can be set explicitly.

    .. note::

        The input dictionary ``d`` will be mutated.
    """
    if v is not None:
        d[k] = v
    return d
