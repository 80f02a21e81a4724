import logging
import socket
from typing import Optional

from hostfqdn._cogs.configs import configuration
from hostfqdn._cogs.helpers import typedefs
from hostfqdn._core.resolution import errors, hostsfile, lookups

_logger = logging.getLogger(__name__)


def get_fqdn_hostname(
        *,
        settings: Optional[configuration.FqdnSettings] = None,
        logger: Optional[typedefs.Logger] = None,
) -> str:
    """
    Get the fully qualified hostname of the current machine.

    It mimics how ``hostname -f`` works, so except for a few edge cases,
    the results of both should be the same. It checks these sources in order:

    1. The hosts file: the first canonical hostname of the lines that
       reference the short hostname of the machine (see ``hosts(5)``).
    2. The system resolver: the canonical name of the short hostname,
       or the name of its first address that resolves back to a name.

    There is no guarantee that the result is really fully qualified:
    there is no way to do that, and ``hostname -f`` also returns whatever
    is written in a misconfigured hosts file.

    If no source knows the name, `FqdnNotFound` is raised. The callers will
    probably want to use :func:`socket.gethostname` at that point.
    If even that one fails, `HostnameLookupFailed` is raised.
    """
    settings = settings if settings is not None else configuration.FqdnSettings()
    logger = logger if logger is not None else _logger

    try:
        host = socket.gethostname()
    except OSError as e:
        raise errors.HostnameLookupFailed(f"Cannot get the hostname: {e}") from e
    logger.debug("Got the short hostname.", extra=dict(host=host))

    try:
        fqdn = hostsfile.from_hosts(host, settings=settings, logger=logger)
    except errors.FqdnError as e:
        logger.debug(f"No FQDN from the hosts file: {e}", extra=dict(host=host))
    else:
        logger.debug("Got the FQDN from the hosts file.", extra=dict(host=host, fqdn=fqdn))
        return fqdn

    try:
        fqdn = lookups.from_lookup(host, logger=logger)
    except errors.FqdnNotFound as e:
        logger.debug(f"No FQDN from the lookups: {e}", extra=dict(host=host))
        raise
    logger.debug("Got the FQDN from the lookups.", extra=dict(host=host, fqdn=fqdn))
    return fqdn
