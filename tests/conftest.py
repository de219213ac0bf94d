import logging

import pytest

from tooldispatch.dispatcher import Dispatcher
from tooldispatch.registry import ToolRegistry


@pytest.fixture
def logger():
    return logging.getLogger("tooldispatch.tests")


@pytest.fixture
def registry():
    return ToolRegistry()


@pytest.fixture
def dispatcher(registry, logger):
    return Dispatcher(registry, logger)
