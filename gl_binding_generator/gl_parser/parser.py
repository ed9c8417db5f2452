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

"""This module is the entry point for the GL header parser that extracts the guarded regions"""

from pathlib import Path
from typing import Dict
from typing import Iterable
from typing import Optional

import logging

from gl_binding_generator.gl_parser import line_matchers
from gl_binding_generator.gl_parser import types

logger = logging.getLogger(__name__)


class HeaderParser:
    """Scans a GL header line by line and collects the contents of every guarded region.

    The parser is either searching for a region start or inside a region.
    Inside a region it counts the nested conditionals so that only the
    #endif matching the region's own #ifndef ends it.
    """

    def __init__(self) -> None:
        self.definitions: Dict[str, types.DefinitionBuilder] = {}
        self.current: Optional[types.DefinitionBuilder] = None
        self.nesting_level = 0

    def parse_lines(self, lines: Iterable[str]) -> types.DefinitionTable:
        for line in lines:
            self.process_line(line.rstrip("\r\n"))

        if self.current is not None:
            logger.warning("Header ended inside %s, region abandoned", self.current.guard)
            self.current = None

        # The table gets frozen copies, the parser starts over on the next call
        table = types.DefinitionTable({guard: builder.build() for guard, builder in self.definitions.items()})
        self.definitions = {}
        self.nesting_level = 0
        return table

    def process_line(self, line: str) -> None:
        if self.current is None:
            guard = line_matchers.match_guard_open(line)
            if guard:
                self.open_region(guard)
            return

        if line_matchers.is_conditional_open(line):
            self.nesting_level += 1
            return

        if line_matchers.is_conditional_close(line):
            if self.nesting_level > 0:
                self.nesting_level -= 1
            else:
                self.close_region()
            return

        self.process_region_line(line)

    def open_region(self, guard: str) -> None:
        logger.debug("Entering %s", guard)

        # A guard can be opened more than once, keep accumulating into the same definition
        if guard not in self.definitions:
            self.definitions[guard] = types.DefinitionBuilder(guard=guard)

        self.current = self.definitions[guard]
        self.nesting_level = 0

    def close_region(self) -> None:
        if self.current is not None:
            logger.debug("Leaving %s", self.current.guard)
        self.current = None

    def process_region_line(self, line: str) -> None:
        definition = self.current
        if definition is None:
            return

        extension = line_matchers.match_extension_comment(line)
        if extension:
            definition.includes.append(extension)
            return

        declaration = line_matchers.match_function_declaration(line)
        if declaration:
            definition.functions[declaration.name] = declaration.signature
            return

        typedef = line_matchers.match_function_pointer_typedef(line)
        if typedef:
            definition.functions[typedef.alias] = typedef.signature


def parse_lines(lines: Iterable[str]) -> types.DefinitionTable:
    return HeaderParser().parse_lines(lines)


def parse(filename: Path) -> types.DefinitionTable:
    """Parses the header at the given path. Raises OSError if it can not be read."""
    with open(filename, "r", encoding="utf-8", errors="replace") as header:
        return parse_lines(header)
