"""
The FQDN from the local hosts database, as described in ``hosts(5)``.

Each line of the file is: an IP address, a canonical hostname, and optionally
the aliases of that host, all separated by spaces or tabs. Everything after
``#`` is a comment. Example::

    127.0.0.1   localhost
    10.0.0.5    myhost.example.com  myhost  # the main interface

The line is matched if the short hostname is either the canonical name
or one of its aliases. The canonical name of the first matching line wins.

The parsing mimics libc (namely, musl) rather than a strict tokenizer:
e.g. a field is only complete when followed by a whitespace or the line's end,
so ``myhost#comment`` is never a field ``myhost``, and the line is ignored.
"""
import enum
import logging
from typing import Optional

from hostfqdn._cogs.configs import configuration
from hostfqdn._cogs.helpers import hostnames, lines, typedefs
from hostfqdn._core.resolution import errors

WHITESPACE = ' \t'
COMMENT = '#'

_logger = logging.getLogger(__name__)


class _State(enum.Enum):
    SKIP_WHITESPACE = enum.auto()
    ADDRESS = enum.auto()
    CANONICAL = enum.auto()
    ALIAS = enum.auto()


def parse_host_line(
        host: str,
        line: str,
        *,
        logger: Optional[typedefs.Logger] = None,
) -> Optional[str]:
    """
    Get the canonical name from a hosts line if the host is mentioned there.

    Returns ``None`` if the host is not in the line, or if the line is empty,
    a comment, or malformed (e.g. with an invalid canonical name).
    """
    logger = logger if logger is not None else _logger
    logger.debug("Looking for the host in a line.", extra=dict(host=host, line=line))

    state = _State.SKIP_WHITESPACE
    upcoming = _State.ADDRESS
    canonical: Optional[str] = None
    start = 0
    for index, char in enumerate(line):
        if char == COMMENT:
            logger.debug("Found a comment, terminating the line.")
            break

        # A field starts on its first character, which is also examined as a part of that field.
        if state is _State.SKIP_WHITESPACE:
            if char in WHITESPACE:
                continue
            state = upcoming
            start = index

        # The field is complete if the lookahead is the end of line or a whitespace (not a comment).
        if index + 1 < len(line) and line[index + 1] not in WHITESPACE:
            continue
        field = line[start:index + 1]

        if state is _State.ADDRESS:
            upcoming = _State.CANONICAL
        elif state is _State.CANONICAL:
            if not hostnames.is_valid_hostname(field):
                logger.debug("Invalid canonical name, skipping the line.", extra=dict(fqdn=field))
                return None
            if field == host:
                logger.debug("The canonical name matches.", extra=dict(host=host, fqdn=field))
                return field
            canonical = field
            upcoming = _State.ALIAS
        elif state is _State.ALIAS:
            if field == host:
                logger.debug("An alias matches.", extra=dict(host=host, fqdn=canonical))
                return canonical
            upcoming = _State.ALIAS
        else:
            raise RuntimeError(f"Unhandled state of the hosts line parser: {state!r}")
        state = _State.SKIP_WHITESPACE

    logger.debug("No match in the line.", extra=dict(host=host))
    return None


def from_hosts(
        host: str,
        *,
        settings: configuration.FqdnSettings,
        logger: Optional[typedefs.Logger] = None,
) -> str:
    """
    Get the canonical name of the host from the hosts file.

    The first line that refers to the host as its canonical name or as an alias
    is used, the rest of the file is not read. If none of the lines refers to it,
    `FqdnNotFound` is raised. If the file cannot be opened or read at all,
    `HostsFileUnavailable` is raised instead.
    """
    logger = logger if logger is not None else _logger
    path = settings.hosts.path
    try:
        stream = open(path, 'rb')
    except OSError as e:
        raise errors.HostsFileUnavailable(f"Cannot open the hosts file {path!r}: {e}") from e

    with stream:
        logger.debug("Scanning the hosts file.", extra=dict(host=host, hosts_path=path))
        try:
            for line in lines.LineReader(stream, newlines=settings.hosts.newlines):
                fqdn = parse_host_line(host, line, logger=logger)
                if fqdn is not None:
                    return fqdn
        except OSError as e:
            raise errors.HostsFileUnavailable(f"Failed to read the hosts file {path!r}: {e}") from e

    raise errors.FqdnNotFound(f"The host {host!r} is not in the hosts file {path!r}.")
