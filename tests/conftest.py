"""
Test configuration and fixtures for the customer registry
"""

import logging
import os
from unittest.mock import patch

import pytest

from customer_registry.domain.entities.customer_entity import Customer
from customer_registry.infrastructure.configuration.config import reset_config


@pytest.fixture(autouse=True)
def mock_env():
    """Isolate environment variables and the cached settings for each test"""
    test_env = {
        'CUSTOMER_REGISTRY_ENVIRONMENT': 'test',
        'CUSTOMER_REGISTRY_LOG_LEVEL': 'DEBUG',
    }

    reset_config()
    with patch.dict(os.environ, test_env, clear=True):
        yield test_env
    reset_config()


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after logging setup tests"""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield root_logger
    # pytest manages its own capture handlers
    for handler in list(root_logger.handlers):
        if not type(handler).__module__.startswith("_pytest"):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


@pytest.fixture
def customer():
    """A customer with an id, a parsed name and two contacts"""
    return (
        Customer("Meyer, Eric")
        .set_id(42)
        .add_contact("eric@example.com")
        .add_contact("+49 170 1234567")
    )
