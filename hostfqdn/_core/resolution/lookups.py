"""
The FQDN from the system resolver: DNS, NSS modules, etc.

First, the canonical name is requested directly, the same as ``hostname -f``
or :func:`socket.getfqdn` do. If the resolver does not know it, the host is
resolved to its IP addresses, and those are resolved back to the names:
the first name of the first resolvable address is the result.

The low-level lookups are separated, so that they could be replaced or mocked.
Empty results are treated the same as failures: some platforms (e.g. Windows)
can succeed with no names at all.
"""
import logging
import socket
from typing import List, Optional

from hostfqdn._cogs.helpers import hostnames, typedefs
from hostfqdn._core.resolution import errors

_logger = logging.getLogger(__name__)


def lookup_cname(host: str) -> str:
    # The canonical name is only in the first entry; see getaddrinfo(3) on AI_CANONNAME.
    infos = socket.getaddrinfo(host, None, flags=socket.AI_CANONNAME)
    return infos[0][3] if infos else ''


def lookup_ip(host: str) -> List[str]:
    # Every address repeats for each socket type & protocol. Keep the resolver's order.
    infos = socket.getaddrinfo(host, None)
    addresses: List[str] = []
    for _family, _type, _proto, _canonname, sockaddr in infos:
        address = str(sockaddr[0])
        if address not in addresses:
            addresses.append(address)
    return addresses


def lookup_addr(address: str) -> List[str]:
    hostname, aliases, _ = socket.gethostbyaddr(address)
    return [name for name in [hostname] + list(aliases) if name]


def from_lookup(
        host: str,
        *,
        logger: Optional[typedefs.Logger] = None,
) -> str:
    """
    Get the canonical name of the host from the system resolver.

    Raises `FqdnNotFound` if neither the direct lookup nor the reverse lookups
    of the host's addresses give any name. The resolver's error, if any,
    is chained as the cause.
    """
    logger = logger if logger is not None else _logger

    try:
        fqdn = lookup_cname(host)
    except (OSError, UnicodeError) as e:
        logger.debug(f"Canonical name lookup failed: {e}", extra=dict(host=host))
    else:
        if fqdn:
            logger.debug("Canonical name lookup succeeded.", extra=dict(host=host, fqdn=fqdn))
            return hostnames.remove_trailing_dot(fqdn)
        logger.debug("Canonical name lookup returned nothing.", extra=dict(host=host))

    try:
        addresses = lookup_ip(host)
    except (OSError, UnicodeError) as e:
        raise errors.FqdnNotFound(f"Cannot resolve the host {host!r}: {e}") from e
    logger.debug("Resolved the addresses.", extra=dict(host=host, addresses=addresses))

    for address in addresses:
        try:
            names = lookup_addr(address)
        except (OSError, UnicodeError) as e:
            logger.debug(f"Reverse lookup failed: {e}", extra=dict(host=host, address=address))
            continue
        if not names:
            logger.debug("Reverse lookup returned nothing.", extra=dict(host=host, address=address))
            continue

        # The first one is the canonical name; the rest are the aliases.
        logger.debug("Reverse lookup succeeded.", extra=dict(host=host, address=address, fqdn=names[0]))
        return hostnames.remove_trailing_dot(names[0])

    raise errors.FqdnNotFound(f"None of the addresses of the host {host!r} resolves to a name.")
