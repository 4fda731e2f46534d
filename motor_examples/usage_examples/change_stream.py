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

"""Print the events of a change stream, splitting events that are too large."""

import asyncio

from motor.motor_asyncio import AsyncIOMotorClient

from motor_examples.config import get_config


# :snippet-start: split-large-change-stream
async def print_changes(collection, max_events=None):
    pipeline = [{"$changeStreamSplitLargeEvent": {}}]
    received = 0  # :remove:
    async with collection.watch(pipeline) as change_stream:
        async for change in change_stream:
            print("Received a change event: %s" % change)
            # :remove-start:
            received += 1
            if max_events is not None and received >= max_events:
                break
            # :remove-end:
    return received  # :remove:
# :snippet-end:


async def main():
    client = AsyncIOMotorClient(get_config().connection_uri)
    try:
        await print_changes(client["sample_db"]["fruit"])
    finally:
        client.close()


if __name__ == "__main__":
    asyncio.run(main())
