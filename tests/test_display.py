### Copyright 2023 National Technology & Engineering Solutions of Sandia,
### LLC (NTESS). Under the terms of Contract DE-NA0003525 with NTESS, the
### U.S. Government retains certain rights in this software.
###
### Redistribution and use in source and binary forms, with or without
### modification, are permitted provided that the following conditions are
### met:
###
### 1. Redistributions of source code must retain the above copyright
###    notice, this list of conditions and the following disclaimer.
###
### 2. Redistributions in binary form must reproduce the above copyright
###    notice, this list of conditions and the following disclaimer in
###    the documentation and/or other materials provided with the
###    distribution.
###
### 3. Neither the name of the copyright holder nor the names of its
###    contributors may be used to endorse or promote products derived
###    from this software without specific prior written permission.
###
### THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS
### “AS IS” AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT
### LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR
### A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT
### HOLDER OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL,
### SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
### LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE,
### DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY
### THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT
### (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE
### OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.

# Test cases for the text snapshot of a matrix.

import os
# Disable Numba JIT compilation
os.environ["NUMBA_DISABLE_JIT"] = "1"

import io

import numpy as np

from sparse_lower import MatrixFormat, SparseMatrix, StorageArguments


EXPECTED_TRIPLET_TEXT = """\
Type       : triplet matrix format
Size       : 3
Values     : [7 1 1 1 3 8]
RowIndexes : [2 0 1 1 1 2]
ColPos     : [1 0 1 1 0 2]"""

EXPECTED_SYMMETRIC_TEXT = """\
Type       : sparse symmetrical matrix
Size       : 3
Values     : [1 3 2 7 8]
RowIndexes : [0 1 1 2 2]
ColPos     : [0 2 4 5]"""


def test_triplet_text(example_matrix):
    assert example_matrix.to_display_string() == EXPECTED_TRIPLET_TEXT
    assert str(example_matrix) == EXPECTED_TRIPLET_TEXT


def test_symmetric_text(example_matrix):
    example_matrix.convert_to(MatrixFormat.SYMMETRIC_COMPRESSED)
    assert example_matrix.to_display_string() == EXPECTED_SYMMETRIC_TEXT


def test_lower_triangular_text(example_matrix):
    example_matrix.convert_to(MatrixFormat.LOWER_TRIANGULAR_COMPRESSED)
    first_line = example_matrix.to_display_string().splitlines()[0]
    assert first_line == "Type       : sparse lower triangular matrix"


def test_display_has_no_side_effects(example_matrix):
    before = (example_matrix.values.tolist(), example_matrix.nnz)
    example_matrix.to_display_string()
    repr(example_matrix)
    assert (example_matrix.values.tolist(), example_matrix.nnz) == before


def test_empty_matrix_text():
    matrix = SparseMatrix(2)
    assert matrix.to_display_string().splitlines()[2:] == [
        "Values     : []",
        "RowIndexes : []",
        "ColPos     : []",
    ]


def test_fractional_values():
    matrix = SparseMatrix(2)
    matrix.put(1, 0, 0.1)
    matrix.put(1, 1, -2.5)
    assert "Values     : [0.1 -2.5]" in matrix.to_display_string()


def test_print_to_stream(example_matrix):
    out = io.StringIO()
    example_matrix.print(out)
    assert out.getvalue() == EXPECTED_TRIPLET_TEXT + "\n"


def test_repr(example_matrix):
    assert repr(example_matrix) == "SparseMatrix(size=3, format=TRIPLET, nnz=6)"


def test_storage_arguments_print():
    out = io.StringIO()
    StorageArguments(value_dtype=np.float32, initial_capacity=8).print(out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "Storage arguments:"
    assert "    Value dtype: float32" in lines
    assert "    Index dtype: int64" in lines
    assert "    Initial triplet capacity: 8" in lines
