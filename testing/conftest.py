import logging

import pytest
from fake_context import FakeContext
from fake_context import TitledContext


def pytest_addoption(parser):
    parser.addoption(
        "--lazyview-log",
        action="store_true",
        default=False,
        help="Send the lazyview log records to the 'lazyview_tests' logger instead of dropping them.",
    )


@pytest.fixture(scope="session")
def test_logger(request):
    """Logger handed to the contexts, None means the records are dropped."""
    if request.config.getoption("--lazyview-log"):
        return logging.getLogger("lazyview_tests")
    return None


@pytest.fixture(scope="function")
def context(test_logger):
    return FakeContext(logger=test_logger)


@pytest.fixture(scope="function")
def titled_context(test_logger):
    return TitledContext(logger=test_logger)
