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

"""Find the documents that match a query, projected and sorted."""

# :replace-start: {
#    "terms": {
#       "CONNECTION_URI_PLACEHOLDER": "\"<connection string uri>\"",
#       "\nfrom motor_examples.config import get_config\n": ""
#    }
# }
# :snippet-start: find-usage-example
import asyncio

import pymongo
from motor.motor_asyncio import AsyncIOMotorClient

from motor_examples.config import get_config


async def main():
    # :remove-start:
    CONNECTION_URI_PLACEHOLDER = get_config().connection_uri
    # :remove-end:
    # Replace the uri string with your MongoDB deployment's connection string
    uri = CONNECTION_URI_PLACEHOLDER
    client = AsyncIOMotorClient(uri)
    database = client["sample_mflix"]
    collection = database["movies"]

    projection = {"title": 1, "imdb": 1, "_id": 0}
    cursor = collection.find({"runtime": {"$lt": 15}}, projection).sort(
        "title", pymongo.DESCENDING
    )
    async for movie in cursor:
        print(movie)
    # :remove-start:
    # clean up
    await client.drop_database("sample_mflix")
    # :remove-end:
    client.close()


if __name__ == "__main__":
    asyncio.run(main())
# :snippet-end:
# :replace-end:
