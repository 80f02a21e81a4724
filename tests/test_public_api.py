import logging

import hostfqdn


def test_exported_names():
    for name in hostfqdn.__all__:
        assert hasattr(hostfqdn, name)


def test_error_hierarchy():
    assert issubclass(hostfqdn.HostnameLookupFailed, hostfqdn.FqdnError)
    assert issubclass(hostfqdn.HostsFileUnavailable, hostfqdn.FqdnError)
    assert issubclass(hostfqdn.FqdnNotFound, hostfqdn.FqdnError)
    assert not issubclass(hostfqdn.FqdnNotFound, hostfqdn.HostsFileUnavailable)


def test_package_logger_has_a_null_handler():
    handlers = logging.getLogger('hostfqdn').handlers
    assert any(isinstance(handler, logging.NullHandler) for handler in handlers)
