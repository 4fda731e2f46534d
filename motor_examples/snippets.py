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

"""python -m motor_examples.snippets [-o OUTPUT_DIR] PATH [PATH ...]

Extract documentation snippets from example and test sources.

A snippet is delimited by comment markers::

    # :snippet-start: insert-one
    await collection.insert_one({"qty": 5})
    await collection.drop()  # :remove:
    # :snippet-end:

Lines between ``# :remove-start:`` and ``# :remove-end:``, and lines ending
with ``# :remove:``, are left out. A ``# :replace-start: {"terms": {...}}``
block applies literal replacements to every snippet that ends inside it; the
JSON may continue over the following comment lines.
"""

import collections
import json
import logging
import os
import re
import sys
import textwrap
from optparse import OptionParser

_logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = os.path.join("source", "examples", "generated")

_SNIPPET_START = re.compile(r"^\s*#\s*:snippet-start:\s*(?P<name>[\w.-]+)\s*$")
_SNIPPET_END = re.compile(r"^\s*#\s*:snippet-end:\s*$")
_REMOVE_START = re.compile(r"^\s*#\s*:remove-start:\s*$")
_REMOVE_END = re.compile(r"^\s*#\s*:remove-end:\s*$")
_REMOVE_LINE = re.compile(r"#\s*:remove:\s*$")
_REPLACE_START = re.compile(r"^\s*#\s*:replace-start:\s*(?P<terms>.*)$")
_REPLACE_END = re.compile(r"^\s*#\s*:replace-end:\s*$")
_COMMENT = re.compile(r"^\s*#\s?(?P<text>.*)$")

Snippet = collections.namedtuple("Snippet", ["name", "source", "text"])


class SnippetError(ValueError):
    """Raised for malformed snippet markers."""

    def __init__(self, source, lineno, message):
        self.source = source
        self.lineno = lineno
        super().__init__("%s:%s: %s" % (source, lineno, message))


def _parse_terms(source, lineno, text, following):
    """Parse the JSON that follows a replace-start marker.

    Returns the terms mapping and the number of continuation lines used.
    """
    consumed = 0
    while True:
        try:
            spec = json.loads(text)
            break
        except ValueError:
            if consumed == len(following):
                raise SnippetError(source, lineno, "replace terms are not valid JSON")
            match = _COMMENT.match(following[consumed])
            if not match:
                raise SnippetError(source, lineno, "replace terms are not valid JSON")
            text += "\n" + match.group("text")
            consumed += 1

    terms = spec.get("terms") if isinstance(spec, dict) else None
    if not isinstance(terms, dict):
        raise SnippetError(source, lineno, 'replace block needs a "terms" object')
    return terms, consumed


def _finish(text, replacements):
    for terms in replacements:
        for old, new in terms.items():
            text = text.replace(old, new)

    return textwrap.dedent(text).strip("\n") + "\n"


def extract_snippets_from_lines(lines, source="<string>"):
    """Return the snippets in ``lines``, in the order they end."""
    snippets = []
    seen = set()
    open_snippets = []
    replacements = []
    remove_start = None
    i = 0
    while i < len(lines):
        line = lines[i].rstrip("\r\n")
        lineno = i + 1
        i += 1

        match = _SNIPPET_START.match(line)
        if match:
            name = match.group("name")
            if name in seen:
                raise SnippetError(source, lineno, "duplicate snippet %r" % name)
            seen.add(name)
            open_snippets.append((name, lineno, []))
            continue

        if _SNIPPET_END.match(line):
            if not open_snippets:
                raise SnippetError(source, lineno, "snippet-end without snippet-start")
            name, _, body = open_snippets.pop()
            text = _finish("\n".join(body), [terms for terms, _ in replacements])
            snippets.append(Snippet(name, source, text))
            continue

        if _REMOVE_START.match(line):
            if remove_start is not None:
                raise SnippetError(source, lineno, "nested remove-start")
            remove_start = lineno
            continue

        if _REMOVE_END.match(line):
            if remove_start is None:
                raise SnippetError(source, lineno, "remove-end without remove-start")
            remove_start = None
            continue

        match = _REPLACE_START.match(line)
        if match:
            terms, consumed = _parse_terms(source, lineno, match.group("terms"), lines[i:])
            i += consumed
            replacements.append((terms, lineno))
            continue

        if _REPLACE_END.match(line):
            if not replacements:
                raise SnippetError(source, lineno, "replace-end without replace-start")
            replacements.pop()
            continue

        if remove_start is not None or _REMOVE_LINE.search(line):
            continue

        for _, _, body in open_snippets:
            body.append(line)

    if open_snippets:
        name, lineno, _ = open_snippets[-1]
        raise SnippetError(source, lineno, "snippet %r is never closed" % name)
    if remove_start is not None:
        raise SnippetError(source, remove_start, "remove block is never closed")
    if replacements:
        raise SnippetError(source, replacements[-1][1], "replace block is never closed")

    return snippets


def extract_snippets(path):
    with open(path, encoding="utf-8") as f:
        return extract_snippets_from_lines(f.readlines(), source=path)


def iter_source_files(paths):
    for path in paths:
        if os.path.isdir(path):
            for dirpath, dirnames, filenames in os.walk(path):
                dirnames[:] = sorted(d for d in dirnames if not d.startswith((".", "__")))
                for filename in sorted(filenames):
                    if filename.endswith(".py"):
                        yield os.path.join(dirpath, filename)
        else:
            yield path


def snippet_filename(snippet):
    stem = os.path.splitext(os.path.basename(snippet.source))[0]
    return "%s.snippet.%s.py" % (stem, snippet.name)


def write_snippets(paths, output_dir=DEFAULT_OUTPUT_DIR):
    """Extract every snippet under ``paths`` into ``output_dir``.

    Returns the list of files written.
    """
    written = []
    os.makedirs(output_dir, exist_ok=True)
    for source in iter_source_files(paths):
        for snippet in extract_snippets(source):
            target = os.path.join(output_dir, snippet_filename(snippet))
            with open(target, "w", encoding="utf-8") as f:
                f.write(snippet.text)
            _logger.info("Wrote %s", target)
            written.append(target)

    return written


def parse_args(argv=None):
    parser = OptionParser(__doc__)
    parser.add_option(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT_DIR,
        help="directory for generated snippets, default %s" % DEFAULT_OUTPUT_DIR,
    )
    parser.add_option("-v", "--verbose", action="store_true", default=False)

    options, args = parser.parse_args(argv)
    if not args:
        parser.error("requires at least one PATH")

    return options, args


def main(argv=None):
    options, paths = parse_args(argv)
    logging.basicConfig(
        stream=sys.stdout, level=logging.INFO if options.verbose else logging.WARNING
    )
    try:
        written = write_snippets(paths, options.output)
    except (OSError, SnippetError) as exc:
        sys.stderr.write("%s\n" % exc)
        return 1

    print("Extracted %d snippets into %s" % (len(written), options.output))
    return 0


if __name__ == "__main__":
    sys.exit(main())
