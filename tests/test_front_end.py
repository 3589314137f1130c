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

# Test cases for the function-style interface, in particular its
# handling of a matrix reference that was never set.

import os
# Disable Numba JIT compilation
os.environ["NUMBA_DISABLE_JIT"] = "1"

import pytest

import numpy as np

from sparse_lower import MatrixFormat, NilReceiverError, SparseMatrixError, ValidationError
from sparse_lower import front_end


def test_front_end_round_trip(example_entries):
    matrix = front_end.create(3)
    for (row, col, value) in example_entries:
        front_end.put(matrix, row, col, value)
    front_end.convert_to(matrix, MatrixFormat.SYMMETRIC_COMPRESSED)

    np.testing.assert_array_equal(matrix.values, [1, 3, 2, 7, 8])
    assert front_end.to_display_string(matrix).startswith(
        "Type       : sparse symmetrical matrix")


def test_put_on_none():
    with pytest.raises(NilReceiverError, match=r"put: matrix is None"):
        front_end.put(None, 0, 0, 1.0)


def test_put_on_none_with_bad_entry():
    # The missing matrix is reported, not the entry
    with pytest.raises(NilReceiverError):
        front_end.put(None, -1, 5, float("nan"))


def test_convert_on_none():
    with pytest.raises(NilReceiverError, match=r"convert_to"):
        front_end.convert_to(None, MatrixFormat.TRIPLET)


def test_display_on_none():
    with pytest.raises(NilReceiverError):
        front_end.to_display_string(None)


def test_error_hierarchy():
    assert issubclass(NilReceiverError, SparseMatrixError)
    assert issubclass(ValidationError, SparseMatrixError)
    assert issubclass(ValidationError, ValueError)


def test_validation_errors_pass_through():
    matrix = front_end.create(2)
    with pytest.raises(ValidationError):
        front_end.put(matrix, 0, 1, 1.0)
    with pytest.raises(ValidationError):
        front_end.convert_to(matrix, "not a format")
    assert matrix.nnz == 0
