import functools
import socket
from typing import Any, Callable, Optional

import click

from hostfqdn._cogs.configs import configuration
from hostfqdn._cogs.helpers import lines, versions
from hostfqdn._core.engines import loggers
from hostfqdn._core.resolution import errors, fqdn


class LogFormatParamType(click.Choice):

    def __init__(self) -> None:
        super().__init__(choices=[v.name.lower() for v in loggers.LogFormat])

    def convert(self, value: Any, param: Any, ctx: Any) -> loggers.LogFormat:
        if isinstance(value, loggers.LogFormat):
            return value
        name: str = super().convert(value, param, ctx)
        return loggers.LogFormat[name.upper()]


class LineEndingsParamType(click.Choice):

    def __init__(self) -> None:
        super().__init__(choices=[v.value for v in lines.LineEndings])

    def convert(self, value: Any, param: Any, ctx: Any) -> lines.LineEndings:
        if isinstance(value, lines.LineEndings):
            return value
        name: str = super().convert(value, param, ctx)
        return lines.LineEndings(name)


def logging_options(fn: Callable[..., Any]) -> Callable[..., Any]:
    """ A decorator to configure logging in all commands the same way."""
    @click.option('-v', '--verbose', is_flag=True)
    @click.option('-d', '--debug', is_flag=True)
    @click.option('-q', '--quiet', is_flag=True)
    @click.option('--log-format', type=LogFormatParamType(), default='full')
    @click.option('--log-prefix/--no-log-prefix', default=None)
    @functools.wraps(fn)  # to preserve other opts/args
    def wrapper(verbose: bool, quiet: bool, debug: bool,
                log_format: loggers.LogFormat = loggers.LogFormat.FULL,
                log_prefix: Optional[bool] = False,
                *args: Any, **kwargs: Any) -> Any:
        loggers.configure(debug=debug, verbose=verbose, quiet=quiet,
                          log_format=log_format, log_prefix=log_prefix)
        return fn(*args, **kwargs)

    return wrapper


@click.version_option(prog_name='hostfqdn', version=versions.version or 'unknown')
@click.group(name='hostfqdn', context_settings=dict(
    auto_envvar_prefix='HOSTFQDN',
))
def main() -> None:
    pass


@main.command()
@logging_options
@click.option('-H', '--hosts-file', 'hosts_path', type=str, default=None,
              envvar='HOSTFQDN_RESOLVE_HOSTS_FILE')
@click.option('--newlines', type=LineEndingsParamType(), default=None)
@click.option('--fallback/--no-fallback', default=False)
def resolve(
        hosts_path: Optional[str],
        newlines: Optional[lines.LineEndings],
        fallback: bool,
) -> None:
    """ Print the fully qualified hostname of this machine, as `hostname -f` does. """
    settings = configuration.FqdnSettings()
    if hosts_path is not None:
        settings.hosts.path = hosts_path
    if newlines is not None:
        settings.hosts.newlines = newlines

    try:
        name = fqdn.get_fqdn_hostname(settings=settings)
    except errors.FqdnNotFound as e:
        if not fallback:
            raise click.ClickException(str(e))
        name = socket.gethostname()
    except errors.HostnameLookupFailed as e:
        raise click.ClickException(str(e))
    click.echo(name)
