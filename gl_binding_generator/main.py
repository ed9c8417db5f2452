# Copyright (C) 2022 Google Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""This is the entry point for GL Binding Generator"""

from pathlib import Path
from typing import List
from typing import Optional

import argparse
import io
import logging
import sys

from gl_binding_generator import generator

DEFAULT_HEADER = "gl3.h"


def parse_arguments(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generates the function pointers, wrapper methods and loader "
                    "statements of a GL context from a GL header")
    parser.add_argument("header", nargs="?", default=DEFAULT_HEADER,
                        help=f"Path to the GL header (default: {DEFAULT_HEADER})")
    parser.add_argument("-o", "--output", help="Write the generated code to this file instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log parsing details")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """ Entry point """
    args = parse_arguments(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s")

    # The output file is only written once the header has been parsed
    generated = io.StringIO()
    try:
        generator.generate(Path(args.header), generated)
    except OSError as e:
        logging.error("Could not read %s: %s", args.header, e.strerror or e)
        return 1

    if not args.output:
        sys.stdout.write(generated.getvalue())
        return 0

    try:
        with open(args.output, "w", encoding="utf-8") as output_file:
            output_file.write(generated.getvalue())
    except OSError as e:
        logging.error("Could not write %s: %s", args.output, e.strerror or e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
