import pytest

from hostfqdn._cogs.helpers.hostnames import MAX_HOSTNAME_LENGTH, is_valid_hostname, \
                                             remove_trailing_dot


@pytest.mark.parametrize('name', [
    'host',
    'host.example.com',
    'my-host.example.com',
    'HOST.Example.COM',
    '10.0.0.5',
    'höst.example.com',
    'caf\udce9.example.com',  # an undecodable byte 0xE9
    'a' * MAX_HOSTNAME_LENGTH,
    '\udce9' * MAX_HOSTNAME_LENGTH,  # one byte each, as in the file
    'a\ud800',  # a lone surrogate, not an escaped byte
])
def test_valid_hostnames(name):
    assert is_valid_hostname(name)


@pytest.mark.parametrize('name', [
    'bad_host',
    'host:80',
    'host/path',
    'host*',
    'a' * (MAX_HOSTNAME_LENGTH + 1),
    'ö' * (MAX_HOSTNAME_LENGTH // 2 + 1),  # short in characters, but too long in bytes
    '\udce9' * (MAX_HOSTNAME_LENGTH + 1),
    '\ud800' * (MAX_HOSTNAME_LENGTH // 3 + 1),
])
def test_invalid_hostnames(name):
    assert not is_valid_hostname(name)


@pytest.mark.parametrize('name, expected', [
    ('host.example.com.', 'host.example.com'),
    ('host.example.com', 'host.example.com'),
    ('host..', 'host.'),
    ('', ''),
])
def test_trailing_dot_removal(name, expected):
    assert remove_trailing_dot(name) == expected
