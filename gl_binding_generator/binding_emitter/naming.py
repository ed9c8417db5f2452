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

"""This module derives the names used by the generated binding from GL function names"""

from typing import List

# Every GL entry point starts with this, e.g. glClear
FUNCTION_PREFIX = "gl"

# Extension regions are guarded by GL_ + the name given in the origin comment
EXTENSION_GUARD_PREFIX = "GL_"

MEMBER_PREFIX = "m_p"

VOID_TYPE = "void"


def is_gl_function(name: str) -> bool:
    return name.startswith(FUNCTION_PREFIX)


def function_pointer_type_name(function_name: str) -> str:
    """glClear => PFNGLCLEARPROC"""
    return f"PFN{function_name.upper()}PROC"


def member_name(function_name: str) -> str:
    """glClear => m_pClear"""
    return MEMBER_PREFIX + function_name[len(FUNCTION_PREFIX):]


def method_name(function_name: str) -> str:
    """glBindBuffer => bindBuffer"""
    stripped = function_name[len(FUNCTION_PREFIX):]
    return stripped[0:1].lower() + stripped[1:]


def extension_guard(include: str) -> str:
    """ARB_sync => GL_ARB_sync"""
    return EXTENSION_GUARD_PREFIX + include


def returns_value(return_type: str) -> bool:
    # "void *" is a value, only a plain void is not
    return return_type != VOID_TYPE


def parameter_identifier(parameter: str) -> str:
    """Returns the name of a single C parameter

    e.g.
    GLenum target => target
    const void *data => data
    const GLchar *const*string => string
    GLfloat v[4] => v
    """
    tokens = parameter.split()
    if not tokens:
        return ""

    identifier = tokens[-1].split("*")[-1]
    return identifier.split("[")[0]


def forwarded_arguments(parameters: str) -> List[str]:
    """Returns the argument names to forward a call with the given parameter list"""
    if parameters == VOID_TYPE:
        return []

    return [parameter_identifier(parameter) for parameter in parameters.split(",")]
