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

"""Update one document, inserting it if nothing matches."""

# :replace-start: {
#    "terms": {
#       "CONNECTION_URI_PLACEHOLDER": "\"<connection string uri>\"",
#       "\nfrom motor_examples.config import get_config\n": ""
#    }
# }
# :snippet-start: update-usage-example
import asyncio
import sys

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

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

    await collection.insert_one(
        {"title": "Cool Runnings 2", "runtime": 90, "genres": ["Adventure", "Family", "Comedy"]}
    )

    query = {"title": "Cool Runnings 2"}
    update = {
        "$set": {"runtime": 99},
        "$addToSet": {"genres": "Sports"},
        "$currentDate": {"lastUpdated": {"$type": "timestamp"}},
    }
    try:
        result = await collection.update_one(query, update, upsert=True)
        print("Modified document count: %d" % result.modified_count)
        # Only contains a value when an upsert is performed
        print("Upserted id: %s" % result.upserted_id)
    except PyMongoError as exc:
        print("Unable to update due to an error: %s" % exc, file=sys.stderr)
    client.close()


if __name__ == "__main__":
    asyncio.run(main())
# :snippet-end:
# :replace-end:
