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

"""This module decides which functions are bound and in which order.

Every generated fragment walks the definitions through version_sections so
that all of them agree on the bound functions and their order.
"""

from dataclasses import dataclass
from dataclasses import field
from typing import Iterator
from typing import List
from typing import Union

import logging

from gl_binding_generator.binding_emitter import naming
from gl_binding_generator.gl_parser import types

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoundFunction:
    """A function that has both a declaration and a function pointer typedef"""
    name: str
    signature: types.FunctionSignature

    # Guard of the region the function is declared in
    origin: str


@dataclass(frozen=True)
class ExtensionMarker:
    """Marks where the functions of an included extension start"""
    guard: str


SectionItem = Union[BoundFunction, ExtensionMarker]


@dataclass
class VersionSection:
    guard: str
    items: List[SectionItem] = field(default_factory=list)


def is_fully_defined(definition: types.Definition, name: str) -> bool:
    return (naming.is_gl_function(name) and
            naming.function_pointer_type_name(name) in definition.functions)


def fully_defined_functions(definition: types.Definition) -> Iterator[BoundFunction]:
    """Yields the functions of a single definition in declaration order"""
    for name, signature in definition.functions.items():
        if is_fully_defined(definition, name):
            yield BoundFunction(name=name, signature=signature, origin=definition.guard)


def version_section(table: types.DefinitionTable, definition: types.Definition) -> VersionSection:
    section = VersionSection(guard=definition.guard)
    section.items.extend(fully_defined_functions(definition))

    for include in definition.includes:
        extension_guard = naming.extension_guard(include)
        extension = table.get(extension_guard)
        if extension is None:
            logger.info("%s includes %s but %s is not defined, skipping",
                        definition.guard, include, extension_guard)
            continue

        section.items.append(ExtensionMarker(guard=extension_guard))
        section.items.extend(fully_defined_functions(extension))

    return section


def version_sections(table: types.DefinitionTable) -> Iterator[VersionSection]:
    """Yields a section for every core version in lexicographical order"""
    for definition in table.version_definitions():
        yield version_section(table, definition)
