# Copyright 2014 MongoDB, Inc.
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

"""Utilities for testing the examples with asyncio."""

import asyncio
import functools
import gc
import inspect
import unittest
from asyncio import ensure_future
from test.test_environment import env
from test.utils import get_async_test_timeout
from unittest import SkipTest

from motor import motor_asyncio


class _TestMethodWrapper(object):
    """Wraps a test method to raise an error if it returns a value.

    This is mainly used to detect undecorated coroutines (if a test
    method is a coroutine it must use a decorator to run it), but will
    also detect other kinds of return values.

    Adapted from Tornado's test framework.
    """

    def __init__(self, orig_method):
        self.orig_method = orig_method

    def __call__(self):
        result = self.orig_method()
        if inspect.iscoroutine(result):
            # Close the coroutine to avoid this warning:
            # RuntimeWarning: coroutine 'test_foo' was never awaited
            result.close()
            raise TypeError("Coroutine test methods should be decorated with @asyncio_test")
        elif result is not None:
            raise ValueError("Return value from test method ignored: %r" % result)

    def __getattr__(self, name):
        """Proxy all unknown attributes to the original method.

        This is important for some of the decorators in the `unittest`
        module, such as `unittest.skipIf`.
        """
        return getattr(self.orig_method, name)


class AsyncIOTestCase(unittest.TestCase):
    """Runs each test on a new event loop with a new AsyncIOMotorClient.

    Fixtures go in through ``env.sync_cx``; the test database is dropped
    after every test.
    """

    longMessage = True  # Used by unittest.TestCase
    db_name = "motor_examples_test"
    collection_name = "test_collection"

    def __init__(self, methodName="runTest"):
        super().__init__(methodName)

        # It's easy to forget the @asyncio_test decorator, but if you do
        # the test will silently be ignored because nothing will await
        # the coroutine. Replace the test method with a wrapper that will
        # make sure it's not an undecorated coroutine.
        # (Adapted from Tornado's AsyncTestCase.)
        if hasattr(self, methodName):
            setattr(self, methodName, _TestMethodWrapper(getattr(self, methodName)))

    @classmethod
    def setUpClass(cls):
        super().setUpClass()
        if not env.initialized:
            env.setup()
        if not env.connected:
            raise SkipTest("No MongoDB server at %s" % env.uri)

    def setUp(self):
        super().setUp()

        # Ensure that the event loop is passed explicitly in Motor.
        asyncio.set_event_loop(None)
        self.loop = asyncio.new_event_loop()
        asyncio.set_event_loop(self.loop)

        self.sync_db = env.sync_cx[self.db_name]
        self.sync_db.drop_collection(self.collection_name)
        self.cx = self.asyncio_client()
        self.db = self.cx[self.db_name]
        self.collection = self.db[self.collection_name]

    def asyncio_client(self, uri=None, *args, **kwargs):
        """Get an AsyncIOMotorClient on this test's event loop."""
        kwargs.setdefault("io_loop", self.loop)
        return motor_asyncio.AsyncIOMotorClient(uri or env.uri, *args, **kwargs)

    def insert_fixtures(self, documents, collection_name=None):
        """Replace the contents of a collection with ``documents``."""
        collection = self.sync_db[collection_name or self.collection_name]
        collection.drop()
        if documents:
            collection.insert_many(documents)

    def tearDown(self):
        self.cx.close()
        env.sync_cx.drop_database(self.db_name)
        self.loop.stop()
        self.loop.run_forever()
        self.loop.close()
        asyncio.set_event_loop(asyncio.new_event_loop())
        gc.collect()


def asyncio_test(func=None, timeout=None):
    """Decorator for coroutine methods of AsyncIOTestCase::

        class MyTestCase(AsyncIOTestCase):
            @asyncio_test
            async def test(self):
                # Your test code here....
                pass

    Default timeout is 5 seconds. Override like::

        class MyTestCase(AsyncIOTestCase):
            @asyncio_test(timeout=10)
            async def test(self):
                # Your test code here....
                pass

    You can also set the ASYNC_TEST_TIMEOUT environment variable to a number
    of seconds. The final timeout is the ASYNC_TEST_TIMEOUT or the timeout
    in the test (5 seconds or the passed-in timeout), whichever is longest.
    """

    def wrap(f):
        @functools.wraps(f)
        def wrapped(self, *args, **kwargs):
            if timeout is None:
                actual_timeout = get_async_test_timeout()
            else:
                actual_timeout = get_async_test_timeout(timeout)

            coro_exc = None

            def exc_handler(loop, context):
                nonlocal coro_exc
                # Exception is optional.
                coro_exc = context.get("exception", Exception(context))

                # Raise CancelledError from run_until_complete below.
                task.cancel()

            self.loop.set_exception_handler(exc_handler)
            coro = asyncio.wait_for(f(self, *args, **kwargs), actual_timeout)
            task = ensure_future(coro, loop=self.loop)
            try:
                self.loop.run_until_complete(task)
            except BaseException:
                if coro_exc:
                    # Raise the error thrown in on_timeout, with only the
                    # traceback from the coroutine itself, not from
                    # run_until_complete.
                    raise coro_exc from None

                raise

        return wrapped

    if func is not None:
        # Used like:
        #     @asyncio_test
        #     async def f(self):
        #         pass
        if not inspect.isfunction(func):
            msg = (
                "%r is not a test method. Pass a timeout as"
                " a keyword argument, like @asyncio_test(timeout=7)"
            )
            raise TypeError(msg % func)
        return wrap(func)
    else:
        # Used like @asyncio_test(timeout=10)
        return wrap


async def list_collection_info(db, name):
    """The listCollections entry for collection ``name``, or None."""
    async for info in await db.list_collections(filter={"name": name}):
        return info
    return None
