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

"""This module contains the utility functions that make generating c++ code nicer"""

from typing import List

import textwrap


def indent_characters(depth: int = 1) -> str:  # return the correct indentation for a given indent depth
    indent_symbols = "\t"

    ret = ""
    for _ in range(depth):
        ret = ret + indent_symbols

    return ret


def indent_code(code: str, depth: int = 1) -> str:
    if depth <= 0:
        return code

    return indent_code(textwrap.indent(code, indent_characters(1)), depth - 1)


def line_comment(comment: str) -> str:
    return "// " + comment


def ifdef_open(macro: str) -> str:
    return "#ifdef " + macro


def endif() -> str:
    return "#endif"


def doxygen_group_open(name: str) -> List[str]:
    ''' Opens a doxygen member group, ie: /// @name Foo followed by //@{ '''
    return ["/// @name " + name, "//@{"]


def doxygen_group_close() -> str:
    return "//@}"


def create_function_signature(name: str, return_type: str, parameters: str) -> str:
    ''' Create the signature for a function, ie: int fibonacci(int n)

    Parameters are taken verbatim as they appear in a C declaration.
    '''
    return return_type + " " + name + "(" + parameters + ")"


def create_call(function: str, arguments: List[str]) -> str:
    ''' Create a call expression, ie: fibonacci(n - 1) '''
    return function + "(" + ", ".join(arguments) + ")"


def create_c_cast(target_type: str, expression: str) -> str:
    return "(" + target_type + ")" + expression


def create_string_literal(text: str) -> str:
    return '"' + text + '"'


def create_member_declaration(member_type: str, name: str) -> str:
    ''' Create a declaration for a member, ie: int m_nCount; '''
    return member_type + " " + name + ";"


def create_assignment(target: str, expression: str) -> str:
    return target + " = " + expression + ";"


def create_inline_function_definition(name: str,
                                      return_type: str,
                                      parameters: str,
                                      statements: List[str]) -> str:
    ''' Create a one-line definition, ie: int twice(int n) { int r = n * 2; return r; }'''
    body = " ".join(statement + ";" for statement in statements)
    return create_function_signature(name, return_type, parameters) + " { " + body + " }"
