import functools
import logging

import click.testing
import pytest

from hostfqdn.cli import main


@pytest.fixture(autouse=True)
def _restore_root_logger():
    # The CLI configures the root logger; do not leak its handlers into other tests.
    logger = logging.getLogger()
    handlers = list(logger.handlers)
    level = logger.level
    try:
        yield
    finally:
        logger.handlers[:] = handlers
        logger.setLevel(level)


@pytest.fixture()
def runner():
    runner = click.testing.CliRunner()
    return runner


@pytest.fixture()
def invoke(runner):
    return functools.partial(runner.invoke, main)


@pytest.fixture()
def real_resolve(mocker):
    return mocker.patch('hostfqdn._core.resolution.fqdn.get_fqdn_hostname',
                        return_value='myhost.example.com')
