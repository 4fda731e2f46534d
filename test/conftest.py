# If you choose to run the tests with py.test, this is its config.

import logging

import pytest

from test import env


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    logging.getLogger("motor_examples").setLevel(logging.DEBUG)
    if not env.initialized:
        env.setup()
