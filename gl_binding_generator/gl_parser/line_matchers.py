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

"""This module contains the line shapes recognised in a GL header.

Every matcher takes a single line without its line ending and returns
either None or a record with the captured fields, stripped of whitespace.
"""

from dataclasses import dataclass
from typing import Optional

import re

from gl_binding_generator.gl_parser import types

################################
#                              #
#     Preprocessor Directives  #
#                              #
################################

# Only core versions and ARB extensions open a region we care about
_GUARD_OPEN = re.compile(r"#ifndef\s+(GL_(?:VER|ARB)\w*)")
_CONDITIONAL_OPEN = re.compile(r"^#if")
_CONDITIONAL_CLOSE = re.compile(r"^#endif")


def match_guard_open(line: str) -> Optional[str]:
    """Returns the guard name if the line opens a version or extension region

    e.g. #ifndef GL_VERSION_1_0 => GL_VERSION_1_0
    """
    match = _GUARD_OPEN.search(line)
    if not match:
        return None

    return match.group(1).strip()


def is_conditional_open(line: str) -> bool:
    """#if, #ifdef and #ifndef all start a nested conditional block"""
    return _CONDITIONAL_OPEN.match(line) is not None


def is_conditional_close(line: str) -> bool:
    return _CONDITIONAL_CLOSE.match(line) is not None

################################
#                              #
#        Region Contents       #
#                              #
################################


@dataclass(frozen=True)
class FunctionDeclaration:
    """GLAPI void APIENTRY glClear (GLbitfield mask);"""
    name: str
    signature: types.FunctionSignature


@dataclass(frozen=True)
class FunctionPointerTypedef:
    """typedef void (APIENTRYP PFNGLCLEARPROC) (GLbitfield mask);"""
    alias: str
    signature: types.FunctionSignature


_EXTENSION_COMMENT = re.compile(r"^/\* (ARB_[A-Za-z0-9_]+)")
# The GLAPI and APIENTRY decorations are optional so plain C prototypes
# (void glClear(GLbitfield mask);) are recognised as well.
_FUNCTION_DECLARATION = re.compile(
    r"^\s*(?:GLAPI\s+)?([A-Za-z_].*?)(?:\s*\bAPIENTRY\b|\s|(?<=\*))\s*(gl\w+)\s*\((.+)\)\s*;")
_FUNCTION_POINTER_TYPEDEF = re.compile(r"typedef\s+(.+?)\s*\(APIENTRYP\s+(\w+)\)\s*\((.+)\);")


def match_extension_comment(line: str) -> Optional[str]:
    """Returns the extension name of an origin comment, e.g. /* ARB_sync */ => ARB_sync"""
    match = _EXTENSION_COMMENT.match(line)
    if not match:
        return None

    return match.group(1).strip()


def match_function_declaration(line: str) -> Optional[FunctionDeclaration]:
    match = _FUNCTION_DECLARATION.match(line)
    if not match:
        return None

    return FunctionDeclaration(
        name=match.group(2).strip(),
        signature=types.FunctionSignature(
            return_type=match.group(1).strip(),
            parameters=match.group(3).strip(),
        ))


def match_function_pointer_typedef(line: str) -> Optional[FunctionPointerTypedef]:
    match = _FUNCTION_POINTER_TYPEDEF.search(line)
    if not match:
        return None

    return FunctionPointerTypedef(
        alias=match.group(2).strip(),
        signature=types.FunctionSignature(
            return_type=match.group(1).strip(),
            parameters=match.group(3).strip(),
        ))
