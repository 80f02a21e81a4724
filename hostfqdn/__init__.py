"""
The main module for all the exported functions & classes.
"""
# isort: skip_file

# Unlike all other places, where we import other modules and refer
# the functions via the modules, this is the package's top-level interface,
# as it is seen by the users. So, we export the individual functions.

import logging

from hostfqdn._cogs.configs.configuration import (
    FqdnSettings,
    HostsSettings,
)
from hostfqdn._cogs.helpers.hostnames import (
    is_valid_hostname,
)
from hostfqdn._cogs.helpers.lines import (
    LineEndings,
    LineReader,
)
from hostfqdn._cogs.helpers.typedefs import (
    Logger,
)
from hostfqdn._cogs.helpers.versions import (
    version as __version__,
)
from hostfqdn._core.engines.loggers import (
    configure,
    LogFormat,
)
from hostfqdn._core.resolution.errors import (
    FqdnError,
    HostnameLookupFailed,
    HostsFileUnavailable,
    FqdnNotFound,
)
from hostfqdn._core.resolution.fqdn import (
    get_fqdn_hostname,
)
from hostfqdn._core.resolution.hostsfile import (
    parse_host_line,
)

# Stay silent as a library, unless the application configures the logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'configure', 'LogFormat',
    'FqdnSettings',
    'HostsSettings',
    'is_valid_hostname',
    'LineEndings',
    'LineReader',
    'Logger',
    'FqdnError',
    'HostnameLookupFailed',
    'HostsFileUnavailable',
    'FqdnNotFound',
    'get_fqdn_hostname',
    'parse_host_line',
]
