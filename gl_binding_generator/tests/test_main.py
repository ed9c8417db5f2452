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

"""This module is responsible for testing the command line of the generator"""

import io

from pathlib import Path

import pytest

from gl_binding_generator import generator
from gl_binding_generator import main

HEADER = """\
#ifndef GL_VERSION_1_0
typedef GLenum (APIENTRYP PFNGLGETERRORPROC) (void);
GLAPI GLenum APIENTRY glGetError (void);
#endif
"""

EXPECTED = """\
#ifdef GL_VERSION_1_0
\tPFNGLGETERRORPROC m_pGetError;
#endif

#ifdef GL_VERSION_1_0
/// @name GL_VERSION_1_0 functions
//@{
\tGLenum getError(void) { PRE_GL_CHECK(); GLenum r = m_pGetError(); POST_GL_CHECK(); return r; }
//@}
#endif

#ifdef GL_VERSION_1_0
\tm_pGetError = (PFNGLGETERRORPROC)getProcAddress("glGetError");
#endif

"""


def write_header(directory: Path, contents: str = HEADER) -> Path:
    header_path = directory / "gl3.h"
    header_path.write_text(contents)
    return header_path


def test_generate_to_stream(tmp_path: Path) -> None:
    """Test that the generator writes all three fragments to the stream"""
    output = io.StringIO()
    generator.generate(write_header(tmp_path), output)

    assert output.getvalue() == EXPECTED


def test_main_writes_stdout(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    """Test a successful run on a header given on the command line"""
    assert main.main([str(write_header(tmp_path))]) == 0
    assert capsys.readouterr().out == EXPECTED


def test_main_reads_default_header(tmp_path: Path, capsys: pytest.CaptureFixture,
                                   monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that gl3.h in the working directory is read without arguments"""
    write_header(tmp_path)
    monkeypatch.chdir(tmp_path)

    assert main.main([]) == 0
    assert capsys.readouterr().out == EXPECTED


def test_main_writes_output_file(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    """Test that --output redirects the generated code into a file"""
    output_path = tmp_path / "GLFunctions.inl"

    assert main.main([str(write_header(tmp_path)), "--output", str(output_path)]) == 0
    assert output_path.read_text() == EXPECTED
    assert capsys.readouterr().out == ""


def test_main_missing_header(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    """Test that an unreadable header fails with a non zero exit status and no output"""
    output_path = tmp_path / "GLFunctions.inl"

    assert main.main([str(tmp_path / "missing.h"), "-o", str(output_path)]) == 1
    assert not output_path.exists()
    assert capsys.readouterr().out == ""


def test_main_empty_header(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    """Test that an empty header succeeds with empty output"""
    assert main.main([str(write_header(tmp_path, ""))]) == 0
    assert capsys.readouterr().out == ""


def test_main_truncated_header(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    """Test that a header ending inside an empty region still succeeds"""
    header_path = write_header(tmp_path, "this is { not a header\n#ifndef GL_VERSION_1_0\n")

    assert main.main([str(header_path)]) == 0
    empty_section = "#ifdef GL_VERSION_1_0\n#endif\n\n"
    empty_group = "#ifdef GL_VERSION_1_0\n/// @name GL_VERSION_1_0 functions\n//@{\n//@}\n#endif\n\n"
    assert capsys.readouterr().out == empty_section + empty_group + empty_section


def test_main_output_file_matches_stdout(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    """Test that non ascii text is written to the output file as it is written to stdout"""
    header_path = tmp_path / "gl3.h"
    header_path.write_text(
        "#ifndef GL_VERSION_1_0\n"
        "typedef void (APIENTRYP PFNGLMIXPROC) (GLfloat mélange);\n"
        "GLAPI void APIENTRY glMix (GLfloat mélange);\n"
        "#endif\n", encoding="utf-8")
    output_path = tmp_path / "GLFunctions.inl"

    assert main.main([str(header_path)]) == 0
    printed = capsys.readouterr().out

    assert main.main([str(header_path), "-o", str(output_path)]) == 0
    written = output_path.read_text(encoding="utf-8")

    assert written == printed
    assert "\tvoid mix(GLfloat mélange) { PRE_GL_CHECK(); m_pMix(mélange); POST_GL_CHECK(); }\n" in written
