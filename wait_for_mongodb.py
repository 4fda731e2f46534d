"""python wait_for_mongodb.py [-H HOST] [-p PORT] [--uri] SECONDS

Wait for mongodb to begin listening for connections, or return -1 on timeout.
Ensures tests don't start before MongoDB does. With --uri, the host and port
come from the configured connection string (CI/CONNECTION_URI or .env)."""

import socket
import sys
import time
from optparse import OptionParser

from pymongo.errors import ConfigurationError, InvalidURI
from pymongo.uri_parser import parse_uri

from motor_examples.config import get_config


def wait_for_mongodb(host, port, seconds):
    start = time.time()
    while time.time() - start < seconds:
        s = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            try:
                s.connect((host, port))
                return True
            except OSError:
                time.sleep(0.25)
        finally:
            s.close()

    return False


def configured_address():
    """The first host and port of the configured connection string."""
    nodes = parse_uri(get_config().connection_uri)["nodelist"]
    return nodes[0]


def parse_args(argv=None):
    parser = OptionParser(__doc__)
    parser.add_option(
        "-H", "--host", default="localhost", help="MongoDB server, default localhost"
    )

    parser.add_option(
        "-p", "--port", default=27017, type=int, help="MongoDB port, default 27017"
    )

    parser.add_option(
        "--uri",
        action="store_true",
        default=False,
        help="take host and port from the configured connection string",
    )

    (options, args) = parser.parse_args(argv)
    if len(args) != 1:
        parser.error("requires one argument: SECONDS")

    seconds = None
    try:
        seconds = float(args[0])
    except ValueError:
        parser.error('"%s" is not a valid number for SECONDS' % args[0])

    host, port = options.host, options.port
    if options.uri:
        try:
            host, port = configured_address()
        except (ConfigurationError, InvalidURI) as exc:
            parser.error(str(exc))

    return host, port, seconds


def main(argv=None):
    host, port, seconds = parse_args(argv)
    if not wait_for_mongodb(host, port, seconds):
        sys.stderr.write("Could not connect to MongoDB at %s:%s\n" % (host, port))
        return -1
    return 0


if __name__ == "__main__":
    sys.exit(main())
