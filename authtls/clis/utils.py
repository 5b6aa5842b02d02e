import typing
from dataclasses import Field, dataclass, field
from types import MappingProxyType

import rich_click as click
from click.exceptions import Exit
from rich.console import Console
from rich.traceback import Traceback

from authtls.exceptions.base import AuthTLSException
from authtls.exceptions.user import OptionsParsingException
from authtls.loggers import get_level_from_cli_verbosity, logger


def make_click_option_field(o: click.Option) -> Field:
    if o.multiple:
        o.help = click.style("Multiple values allowed. ", bold=True) + f"{o.help}"
        return field(default_factory=lambda: o.default, metadata={"click.option": o})
    return field(default=o.default, metadata={"click.option": o})


def get_option_from_metadata(metadata: MappingProxyType) -> click.Option:
    return metadata["click.option"]


def pretty_print_exception(e: Exception, verbosity: int = 0):
    """
    Prints user errors as a one line message, everything else with a traceback. The traceback is only shown for
    user errors when the verbosity is raised.
    """
    if isinstance(e, (Exit, click.ClickException)):
        raise e

    if isinstance(e, AuthTLSException):
        if isinstance(e, OptionsParsingException):
            click.secho("Invalid auth/TLS configuration.", fg="red", err=True)
        click.secho(str(e), fg="red", err=True)
        if verbosity < 2:
            return

    console = Console(stderr=True)
    console.print(Traceback.from_exception(type(e), e, e.__traceback__))


@dataclass
class BaseParams:
    config_file: typing.Optional[str] = None
    verbose: int = 0

    @classmethod
    def from_dict(cls, d: typing.Dict[str, typing.Any]) -> "BaseParams":
        return cls(**d)


class ErrorHandlingCommand(click.RichGroup):
    """
    Helper class that wraps the invoke method of a click command to catch exceptions and print them in a nice way.
    """

    def invoke(self, ctx: click.Context) -> typing.Any:
        base_opts = BaseParams.from_dict(ctx.params)
        logger.setLevel(get_level_from_cli_verbosity(base_opts.verbose))
        ctx.obj = base_opts
        try:
            return super().invoke(ctx)
        except (Exit, click.ClickException):
            raise
        except Exception as e:
            pretty_print_exception(e, base_opts.verbose)
            raise SystemExit(1) from e
