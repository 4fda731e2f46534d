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

"""Ask the server to compress network traffic."""

from motor.motor_asyncio import AsyncIOMotorClient


def connection_string_client(host, port):
    # :snippet-start: connection-string-compression-example
    # Replace the placeholders with values from your connection string
    uri = f"mongodb://{host}:{port}/?compressors=snappy,zlib,zstd"

    # Create a new client with your settings
    client = AsyncIOMotorClient(uri)
    # :snippet-end:
    return client


def keyword_options_client(uri):
    # :snippet-start: client-options-compression-example
    client = AsyncIOMotorClient(uri, compressors="snappy,zlib,zstd", zlibCompressionLevel=6)
    # :snippet-end:
    return client
