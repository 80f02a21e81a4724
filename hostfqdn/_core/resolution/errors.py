"""
Errors of the FQDN resolution.

The underlying errors of the OS, the file system, or the resolvers
(``OSError`` and its descendants, e.g. ``socket.gaierror``) are not exposed
as is. Instead, they are chained as the causes of our own specialised errors,
for better explainability of the failures in the stack traces.

Only two of them reach the callers of :func:`hostfqdn.get_fqdn_hostname`:
the failure to get the local hostname at all, and the absence of the FQDN.
The hosts file's unavailability is handled internally by falling back to DNS.
"""


class FqdnError(Exception):
    """ A base class for all errors of the FQDN resolution. """


class HostnameLookupFailed(FqdnError):
    """ The OS could not report the hostname of the current machine. """


class HostsFileUnavailable(FqdnError):
    """ The hosts file cannot be opened or read (unlike a mere absence of the host in it). """


class FqdnNotFound(FqdnError):
    """ No source knows the fully qualified name of the host. """
