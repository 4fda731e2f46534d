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

"""Move money between two accounts in a multi-document transaction."""

# :replace-start: {
#    "terms": {
#       "CONNECTION_URI_PLACEHOLDER": "\"<connection string uri>\"",
#       "\nfrom motor_examples.config import get_config\n": ""
#    }
# }
# :snippet-start: transaction
import asyncio

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from motor_examples.config import get_config


async def perform_transaction(client):
    async with await client.start_session() as session:
        # Start the transaction
        session.start_transaction()
        try:
            database = client["bank"]

            savings_coll = database["savings_accounts"]
            await savings_coll.find_one_and_update(
                {"accountId": "9876"}, {"$inc": {"amount": -100}}, session=session
            )

            checking_coll = database["checking_accounts"]
            await checking_coll.find_one_and_update(
                {"accountId": "9876"}, {"$inc": {"amount": 100}}, session=session
            )
        except PyMongoError as exc:
            print("An error occurred during the transaction: %s" % exc)
            await session.abort_transaction()
            return False

        # Commit the transaction
        try:
            await session.commit_transaction()
        except PyMongoError as exc:
            print("The transaction could not be committed: %s" % exc)
            return False

        print("Transaction committed.")
        return True


async def main():
    # :remove-start:
    CONNECTION_URI_PLACEHOLDER = get_config().connection_uri
    # :remove-end:
    uri = CONNECTION_URI_PLACEHOLDER
    client = AsyncIOMotorClient(uri)
    await perform_transaction(client)
    client.close()


if __name__ == "__main__":
    asyncio.run(main())
# :snippet-end:
# :replace-end:
