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

"""sparse_lower: sparse symmetric and lower-triangular matrices

A SparseMatrix stores the lower triangle (diagonal included) of a square
matrix.  You build it one entry at a time in triplet format, where
entries can arrive in any order and the same cell can be given more
than once.  Converting to compressed-column format sorts the entries
by column and row, sums repeated cells and drops anything that sums to
zero.

The compressed layout can be read either as a full symmetric matrix
(MatrixFormat.SYMMETRIC_COMPRESSED) or as a lower-triangular matrix
(MatrixFormat.LOWER_TRIANGULAR_COMPRESSED).  Switching between the two
costs nothing.

The names you will most likely use are SparseMatrix, MatrixFormat and
ValidationError.  front_end has function-style wrappers; dense has
conversions to and from ordinary NumPy arrays.
"""

from .containers.arguments import StorageArguments
from .containers.matrix_format import MatrixFormat
from .dense import from_dense, to_dense
from .errors import NilReceiverError, SparseMatrixError, ValidationError
from .sparse_matrix import SparseMatrix

__all__ = ["SparseMatrix", "MatrixFormat", "StorageArguments",
           "SparseMatrixError", "ValidationError", "NilReceiverError",
           "from_dense", "to_dense"]
