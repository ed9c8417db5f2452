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

"""This is the top level point for GL Binding Generator"""

from pathlib import Path
from typing import TextIO

import logging

from gl_binding_generator.binding_emitter import emitter
from gl_binding_generator.gl_parser import parser as gl_parser

logger = logging.getLogger(__name__)


def generate(header_path: Path, output: TextIO) -> None:
    """Parses the header and writes the binding fragments to output

    Raises OSError if the header can not be read.
    """
    table = gl_parser.parse(header_path)
    logger.debug("Parsed %d definitions, %d core versions",
                 len(table), len(table.version_guards()))

    output.write(emitter.generate_bindings(table))
