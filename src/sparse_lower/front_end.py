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

"""Function-style interface to SparseMatrix

These wrappers exist for callers that hold a matrix reference which may
not have been set yet.  Each one raises NilReceiverError for a None
matrix before doing anything else, then defers to the SparseMatrix
method of the same name.

You'll most likely want:

create() - Make a new empty matrix in triplet format

put() - Add an entry to a triplet matrix

convert_to() - Change storage format
"""

from typing import Optional, Union

from sparse_lower.containers.arguments import StorageArguments
from sparse_lower.containers.matrix_format import MatrixFormat
from sparse_lower.errors import NilReceiverError
from sparse_lower.sparse_matrix import SparseMatrix

__all__ = ["create", "put", "convert_to", "to_display_string"]


def create(size: int,
           arguments: Optional[StorageArguments] = None) -> SparseMatrix:
    """Make a new, empty triplet-format matrix

    Arguments:
        size (int): Number of rows and columns

    Keyword Arguments:
        arguments (StorageArguments): Storage parameters.  Defaults
            to StorageArguments().

    Returns:
        New SparseMatrix
    """
    return SparseMatrix.create(size, arguments)


def put(matrix: Optional[SparseMatrix], row: int, col: int, value: float) -> None:
    """Add one entry to a triplet-format matrix

    See SparseMatrix.put() for the rules.

    Raises:
        NilReceiverError: matrix is None
        ValidationError: the entry or the matrix format is unacceptable
    """
    if matrix is None:
        raise NilReceiverError("put")
    matrix.put(row, col, value)


def convert_to(matrix: Optional[SparseMatrix],
               target: Union[MatrixFormat, int, str]) -> None:
    """Convert a matrix to another storage format in place

    See SparseMatrix.convert_to() for the rules.

    Raises:
        NilReceiverError: matrix is None
        ValidationError: target is not a known format
    """
    if matrix is None:
        raise NilReceiverError("convert_to")
    matrix.convert_to(target)


def to_display_string(matrix: Optional[SparseMatrix]) -> str:
    """Text snapshot of a matrix

    Raises:
        NilReceiverError: matrix is None
    """
    if matrix is None:
        raise NilReceiverError("to_display_string")
    return matrix.to_display_string()
