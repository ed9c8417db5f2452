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

"""This module generates the three fragments of the GL context binding"""

import abc

from typing import List

from gl_binding_generator.binding_emitter import naming
from gl_binding_generator.binding_emitter import traversal
from gl_binding_generator.codegen_utils import codegen
from gl_binding_generator.gl_parser import types

PRE_CALL_HOOK = "PRE_GL_CHECK"
POST_CALL_HOOK = "POST_GL_CHECK"
PROC_ADDRESS_RESOLVER = "getProcAddress"

# Local holding the result of a call in the wrapper methods
RESULT_NAME = "r"


class BindingCodeGenerator(metaclass=abc.ABCMeta):
    ''' Abstract base class for generating one fragment of the binding '''
    @abc.abstractmethod
    def function_code(self, function: traversal.BoundFunction) -> str:
        pass

    def section_prologue(self, guard: str) -> List[str]:
        return []

    def section_epilogue(self, guard: str) -> List[str]:
        return []


class PointerDeclarationCodeGenerator(BindingCodeGenerator):
    ''' Declares a function pointer member for every function '''

    def function_code(self, function: traversal.BoundFunction) -> str:
        return codegen.create_member_declaration(naming.function_pointer_type_name(function.name),
                                                 naming.member_name(function.name))


class WrapperMethodCodeGenerator(BindingCodeGenerator):
    ''' Defines an inline method that calls the function pointer between the check hooks '''

    def function_code(self, function: traversal.BoundFunction) -> str:
        signature = function.signature
        call = codegen.create_call(naming.member_name(function.name),
                                   naming.forwarded_arguments(signature.parameters))

        if naming.returns_value(signature.return_type):
            statements = [codegen.create_call(PRE_CALL_HOOK, []),
                          f"{signature.return_type} {RESULT_NAME} = {call}",
                          codegen.create_call(POST_CALL_HOOK, []),
                          f"return {RESULT_NAME}"]
        else:
            statements = [codegen.create_call(PRE_CALL_HOOK, []),
                          call,
                          codegen.create_call(POST_CALL_HOOK, [])]

        return codegen.create_inline_function_definition(naming.method_name(function.name),
                                                         return_type=signature.return_type,
                                                         parameters=signature.parameters,
                                                         statements=statements)

    def section_prologue(self, guard: str) -> List[str]:
        return codegen.doxygen_group_open(f"{guard} functions")

    def section_epilogue(self, guard: str) -> List[str]:
        return [codegen.doxygen_group_close()]


class ProcAddressCodeGenerator(BindingCodeGenerator):
    ''' Resolves every function pointer member at runtime '''

    def function_code(self, function: traversal.BoundFunction) -> str:
        pointer_type = naming.function_pointer_type_name(function.name)
        resolve = codegen.create_call(PROC_ADDRESS_RESOLVER, [codegen.create_string_literal(function.name)])
        return codegen.create_assignment(naming.member_name(function.name),
                                         codegen.create_c_cast(pointer_type, resolve))


def generate_fragment(table: types.DefinitionTable, code_generator: BindingCodeGenerator) -> List[str]:
    """Returns the lines of one fragment, every core version wrapped in its own #ifdef"""
    lines: List[str] = []

    for section in traversal.version_sections(table):
        lines.append(codegen.ifdef_open(section.guard))
        lines.extend(code_generator.section_prologue(section.guard))

        for item in section.items:
            if isinstance(item, traversal.ExtensionMarker):
                code = codegen.line_comment(item.guard)
            else:
                code = code_generator.function_code(item)
            lines.append(codegen.indent_code(code))

        lines.extend(code_generator.section_epilogue(section.guard))
        lines.append(codegen.endif())
        lines.append("")

    return lines


def code_generators() -> List[BindingCodeGenerator]:
    """The fragments in the order they are written out"""
    return [PointerDeclarationCodeGenerator(),
            WrapperMethodCodeGenerator(),
            ProcAddressCodeGenerator()]


def generate_bindings(table: types.DefinitionTable) -> str:
    lines: List[str] = []
    for code_generator in code_generators():
        lines.extend(generate_fragment(table, code_generator))

    return "".join(line + "\n" for line in lines)
