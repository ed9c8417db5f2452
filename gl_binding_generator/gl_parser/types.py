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

"""This module contains the definitions extracted from a GL header"""

from dataclasses import dataclass
from dataclasses import field
from types import MappingProxyType
from typing import Dict
from typing import Iterator
from typing import List
from typing import Mapping
from typing import Optional
from typing import Tuple

# Guards containing this marker are GL core versions, everything else is an extension
VERSION_MARKER = "_VERSION_"


@dataclass(frozen=True)
class FunctionSignature:
    """Return type and the raw parameter list of a declared function or function pointer"""
    return_type: str

    # Text between the outer parentheses, e.g. "GLenum target, GLuint buffer"
    parameters: str


@dataclass(frozen=True)
class Definition:
    """The metadata of a guarded region in the header, e.g. GL_VERSION_4_5 or GL_ARB_sync"""
    guard: str

    # Extensions bundled into this region, e.g. ARB_sync.
    # Only version regions list them.
    includes: Tuple[str, ...] = ()

    # Direct declarations are keyed by the function name (glClear) and
    # function pointer typedefs by their alias (PFNGLCLEARPROC).
    # Both live in the same map and keep the order they were first seen.
    functions: Mapping[str, FunctionSignature] = field(default_factory=lambda: MappingProxyType({}))


@dataclass
class DefinitionBuilder:
    """Collects the contents of a region while the header is being scanned"""
    guard: str
    includes: List[str] = field(default_factory=list)
    functions: Dict[str, FunctionSignature] = field(default_factory=dict)

    def build(self) -> Definition:
        return Definition(guard=self.guard,
                          includes=tuple(self.includes),
                          functions=MappingProxyType(dict(self.functions)))


class DefinitionTable:
    """Read-only mapping from guard name to its Definition"""

    def __init__(self, definitions: Mapping[str, Definition]):
        self._definitions: Mapping[str, Definition] = MappingProxyType(dict(definitions))

    def get(self, guard: str) -> Optional[Definition]:
        return self._definitions.get(guard)

    def __contains__(self, guard: object) -> bool:
        return guard in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._definitions))

    def version_guards(self) -> List[str]:
        """Returns the guards of the core versions in lexicographical order"""
        return [guard for guard in sorted(self._definitions) if VERSION_MARKER in guard]

    def version_definitions(self) -> List[Definition]:
        return [self._definitions[guard] for guard in self.version_guards()]

    def __repr__(self) -> str:
        return f"DefinitionTable({list(self)!r})"
