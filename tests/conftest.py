import logging
import socket

import pytest

from hostfqdn._cogs.configs.configuration import FqdnSettings
from hostfqdn._cogs.helpers.lines import LineEndings


def pytest_configure(config):
    # Unexpected warnings should fail the tests. Use `-Wignore` to explicitly disable it.
    config.addinivalue_line('filterwarnings', 'error')


@pytest.fixture(autouse=True)
def _no_real_resolving(mocker):
    """ Never touch the real machine's name or the real DNS, unless mocked explicitly. """
    mocker.patch('socket.gethostname', side_effect=OSError("unmocked gethostname"))
    mocker.patch('socket.getaddrinfo', side_effect=socket.gaierror("unmocked getaddrinfo"))
    mocker.patch('socket.gethostbyaddr', side_effect=socket.herror("unmocked gethostbyaddr"))


@pytest.fixture()
def hosts_path(tmp_path):
    return tmp_path / 'hosts'


@pytest.fixture()
def hosts_file(hosts_path):
    """ A writer of the hosts file's content: either text or raw bytes. """
    def write(content):
        if isinstance(content, str):
            content = content.encode('utf-8')
        hosts_path.write_bytes(content)
        return hosts_path
    return write


@pytest.fixture()
def settings(hosts_path):
    settings = FqdnSettings()
    settings.hosts.path = str(hosts_path)
    settings.hosts.newlines = LineEndings.POSIX
    return settings


@pytest.fixture()
def logger():
    logger = logging.getLogger('hostfqdn.tests')
    logger.setLevel(logging.DEBUG)
    return logger


@pytest.fixture(autouse=True)
def _caplog_all_levels(caplog):
    caplog.set_level(0)
