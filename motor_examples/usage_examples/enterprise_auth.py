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

"""Connect with enterprise and standard authentication mechanisms.

None of these clients authenticate until their first operation, so the
examples can be built without a Kerberos realm, LDAP proxy or identity
provider at hand.
"""

from urllib.parse import quote_plus

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.auth_oidc import OIDCCallback, OIDCCallbackResult

from motor_examples.config import get_setting


def settings_from_config(environ=None, dotenv_path=None):
    """Read the host and credentials for these examples from the config."""
    return {
        "host": get_setting("MONGODB_HOST_NAME", "localhost", environ, dotenv_path),
        "port": int(get_setting("MONGODB_PORT", "27017", environ, dotenv_path)),
        "username": get_setting("MONGODB_USER_NAME", None, environ, dotenv_path),
        "password": get_setting("MONGODB_PASSWORD", None, environ, dotenv_path),
        "source": get_setting("MONGODB_SOURCE", "$external", environ, dotenv_path),
    }


def default_credential_client(host, port, username, password, auth_source):
    # :snippet-start: default-mongo-cred
    client = AsyncIOMotorClient(
        host,
        port,
        username=username,
        password=password,
        authSource=auth_source,
    )
    # :snippet-end:
    return client


def scram_sha_256_client(host, port, username, password, auth_source):
    # :snippet-start: scram-sha-256-cred
    client = AsyncIOMotorClient(
        host,
        port,
        username=username,
        password=password,
        authSource=auth_source,
        authMechanism="SCRAM-SHA-256",
    )
    # :snippet-end:
    return client


def gssapi_client(host, port, username):
    # :snippet-start: auth-creds-gssapi
    client = AsyncIOMotorClient(
        host,
        port,
        username=username,
        authMechanism="GSSAPI",
        authSource="$external",
    )
    # :snippet-end:
    return client


def gssapi_service_name_client(host, port, username):
    # :snippet-start: service-name-key
    client = AsyncIOMotorClient(
        host,
        port,
        username=username,
        authMechanism="GSSAPI",
        authSource="$external",
        authMechanismProperties="SERVICE_NAME:myService",
    )
    # :snippet-end:
    return client


def ldap_client(host, port, username, password):
    # :snippet-start: ldap-mongo-credential
    client = AsyncIOMotorClient(
        host,
        port,
        username=username,
        password=password,
        authMechanism="PLAIN",
        authSource="$external",
    )
    # :snippet-end:
    return client


def gssapi_connection_string_client(host, port, username):
    # :snippet-start: gssapi-connection-string
    uri = f"mongodb://{quote_plus(username)}@{host}:{port}/?authSource=$external&authMechanism=GSSAPI"
    client = AsyncIOMotorClient(uri)
    # :snippet-end:
    return client


def gssapi_properties_connection_string_client(host, port, username):
    # :snippet-start: gssapi-properties-connection-string
    uri = (
        f"mongodb://{quote_plus(username)}@{host}:{port}/?authSource=$external"
        "&authMechanism=GSSAPI&authMechanismProperties=SERVICE_NAME:myService"
    )
    client = AsyncIOMotorClient(uri)
    # :snippet-end:
    return client


def ldap_connection_string_client(host, port, username, password):
    # :snippet-start: ldap-connection-string
    uri = (
        f"mongodb://{quote_plus(username)}:{quote_plus(password)}@{host}:{port}/"
        "?authSource=$external&authMechanism=PLAIN"
    )
    client = AsyncIOMotorClient(uri)
    # :snippet-end:
    return client


def oidc_azure_client(host, port, username, audience):
    # :snippet-start: oidc-azure-credential
    client = AsyncIOMotorClient(
        host,
        port,
        username=username,
        authMechanism="MONGODB-OIDC",
        authMechanismProperties={"ENVIRONMENT": "azure", "TOKEN_RESOURCE": audience},
    )
    # :snippet-end:
    return client


# :snippet-start: oidc-callback
class MyCallback(OIDCCallback):
    def fetch(self, context):
        access_token = "..."
        return OIDCCallbackResult(access_token=access_token)


# :snippet-end:


def oidc_callback_client(host, port):
    # :snippet-start: oidc-callback-client
    client = AsyncIOMotorClient(
        host,
        port,
        authMechanism="MONGODB-OIDC",
        authMechanismProperties={"OIDC_CALLBACK": MyCallback()},
    )
    # :snippet-end:
    return client
