# Copyright 2023-present MongoDB, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Resolve the connection string the examples and tests connect with.

In continuous integration (``CI=true``) the connection string comes from the
``CONNECTION_URI`` environment variable. Everywhere else it comes from the
``MONGODB_CONNECTION_URI`` key of a local ``.env`` file.
"""

import collections
import logging
import os

from dotenv import dotenv_values, find_dotenv
from pymongo.errors import ConfigurationError

_logger = logging.getLogger(__name__)

CI_VAR = "CI"
CI_CONNECTION_URI_VAR = "CONNECTION_URI"
DOTENV_CONNECTION_URI_KEY = "MONGODB_CONNECTION_URI"

Config = collections.namedtuple("Config", ["connection_uri"])


def _environ(environ):
    return os.environ if environ is None else environ


def _load_dotenv(dotenv_path=None):
    if dotenv_path is None:
        dotenv_path = find_dotenv(usecwd=True)
    if not dotenv_path:
        return {}

    return dotenv_values(dotenv_path)


def is_ci(environ=None):
    """True when running in continuous integration."""
    return _environ(environ).get(CI_VAR) == "true"


def get_config(environ=None, dotenv_path=None):
    """Get a :class:`Config` for the current environment.

    Raises :class:`~pymongo.errors.ConfigurationError` if the selected
    source doesn't provide a connection string.
    """
    environ = _environ(environ)
    if is_ci(environ):
        _logger.debug("CI is true, reading %s from the environment", CI_CONNECTION_URI_VAR)
        uri = environ.get(CI_CONNECTION_URI_VAR)
        if not uri:
            raise ConfigurationError(
                "CI is true but the %s environment variable is not set" % CI_CONNECTION_URI_VAR
            )
        return Config(uri)

    values = _load_dotenv(dotenv_path)
    _logger.debug("Reading %s from %r", DOTENV_CONNECTION_URI_KEY, dotenv_path or ".env")
    uri = values.get(DOTENV_CONNECTION_URI_KEY)
    if not uri:
        raise ConfigurationError(
            "%s is not set in the .env file; set it, or set CI=true and %s"
            % (DOTENV_CONNECTION_URI_KEY, CI_CONNECTION_URI_VAR)
        )
    return Config(uri)


def get_setting(key, default=None, environ=None, dotenv_path=None):
    """Read an optional setting.

    The process environment takes precedence over the ``.env`` file.
    """
    value = _environ(environ).get(key)
    if value:
        return value

    value = _load_dotenv(dotenv_path).get(key)
    return value if value else default
