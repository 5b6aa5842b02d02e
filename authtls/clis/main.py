import dataclasses
import datetime
import typing

import rich_click as click
from rich.console import Console
from rich.table import Table

from authtls.clis.options import AuthAndTLSParams
from authtls.clis.utils import BaseParams, ErrorHandlingCommand
from authtls.configuration import AuthAndTLSOptions
from authtls.loggers import logger

_config_option = click.Option(
    param_decls=["-c", "--config", "config_file"],
    required=False,
    type=str,
    default=None,
    help="Path to an authtls config file. If not given, AUTHTLS_CONFIG, ./authtls.config and ~/.authtls/config are"
    " tried in that order.",
)

_verbose_option = click.Option(
    param_decls=["-v", "--verbose", "verbose"],
    required=False,
    count=True,
    default=0,
    help="Show verbose messages and tracebacks, repeat for more detail.",
)


def _format_value(v: typing.Any) -> str:
    if v is None:
        return "-"
    if isinstance(v, datetime.timedelta):
        return f"{int(v.total_seconds())}s" if v.total_seconds().is_integer() else f"{v.total_seconds()}s"
    if isinstance(v, list):
        return "\n".join(str(i) for i in v) if v else "[]"
    return str(v)


def _print_table(options: AuthAndTLSOptions):
    table = Table(title="Auth and TLS options")
    table.add_column("Option", style="cyan", no_wrap=True)
    table.add_column("Value", overflow="fold")
    for f in dataclasses.fields(options):
        table.add_row(f.name, _format_value(getattr(options, f.name)))
    Console().print(table)


@click.pass_context
def _show(ctx: click.Context, json_output: bool, **kwargs):
    base_opts: typing.Optional[BaseParams] = ctx.find_object(BaseParams)
    config_file = base_opts.config_file if base_opts else None
    params = AuthAndTLSParams.from_dict(kwargs)
    options = params.apply(AuthAndTLSOptions.auto(config_file), ctx)
    logger.debug(f"Resolved options {options}")
    if json_output:
        click.echo(options.to_json(indent=2))
    else:
        _print_table(options)


show = click.RichCommand(
    "show",
    callback=_show,
    params=AuthAndTLSParams.options()
    + [
        click.Option(
            param_decls=["--json", "json_output"],
            is_flag=True,
            default=False,
            help="Print the resolved options as JSON.",
        )
    ],
    help="Resolve the auth and TLS options from the command line, the environment and the config file, and print"
    " them. Fails if any value is malformed.",
)


@click.pass_context
def main_cb(ctx: click.Context, *args, **kwargs):
    pass


main = ErrorHandlingCommand(
    "authtls",
    callback=main_cb,
    params=[_config_option, _verbose_option],
    help="Inspect authentication and TLS settings for remote cache and execution services.",
)
main.add_command(show)

if __name__ == "__main__":
    main()
