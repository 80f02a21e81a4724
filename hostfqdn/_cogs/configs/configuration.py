"""
All configuration flags, options, settings to fine-tune the FQDN resolution.

All settings are grouped semantically just for convenience
(instead of a flat mega-object with all the values in it).

Some of the settings are derived from the current platform, but all of them
have reasonable defaults, so that the settings object can be created
with no arguments and then adjusted (e.g. from the CLI options).
"""
import dataclasses
import os

from hostfqdn._cogs.helpers import lines


def _default_hosts_path() -> str:
    if os.name == 'nt':
        root = os.environ.get('SystemRoot', r'C:\Windows')
        return os.path.join(root, 'System32', 'drivers', 'etc', 'hosts')
    else:
        return '/etc/hosts'


@dataclasses.dataclass
class HostsSettings:

    path: str = dataclasses.field(default_factory=_default_hosts_path)
    """
    The local static hosts database, as described in ``hosts(5)``.

    The default is ``/etc/hosts`` on POSIX systems, and the ``hosts`` file
    in the drivers' directory of the system root on Windows.

    If the file cannot be opened or read, it is skipped, and the DNS lookups
    are used instead.
    """

    newlines: lines.LineEndings = dataclasses.field(default_factory=lines.LineEndings.native)
    """
    How to split the hosts file into lines.

    The default follows the platform's own convention. It can be switched
    to read the files made on other platforms, e.g. mounted into containers.
    """


@dataclasses.dataclass
class FqdnSettings:
    hosts: HostsSettings = dataclasses.field(default_factory=HostsSettings)
