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

"""Convert a SparseMatrix to and from a dense NumPy array

These are for diagnostics, tests and interchange with code that wants
an ordinary 2D array.  A SparseMatrix only stores its lower triangle;
for the symmetric format we rebuild the upper triangle on the way out.
"""

import functools
from typing import Optional, Tuple

import numpy as np

from sparse_lower.containers.arguments import StorageArguments
from sparse_lower.containers.matrix_format import MatrixFormat
from sparse_lower.errors import ValidationError
from sparse_lower.sparse_matrix import SparseMatrix

__all__ = ["to_dense", "from_dense"]


def _lower_to_full(lower_tri: np.ndarray) -> np.ndarray:
    """Mirror the strictly-lower part of a matrix across the diagonal

    A SYMMETRIC_COMPRESSED matrix only stores cells with col <= row.
    Cell (i, j) above the diagonal is the stored cell (j, i), so the
    upper triangle is the transpose of everything strictly below the
    diagonal.  The diagonal itself is used once, as stored.

    Arguments:
        lower_tri (NumPy array): Square array that is zero above
            the diagonal

    Returns:
        New square array with the same lower triangle and its mirror
        image above the diagonal
    """

    return lower_tri + np.tril(lower_tri, k=-1).T


def _lower_triangle(matrix: SparseMatrix) -> np.ndarray:
    """Scatter the stored entries into a dense lower-triangular array

    Works for every format.  Repeated triplet entries are summed.
    """

    size = max(matrix.size, 0)
    lower = np.zeros(shape=(size, size), dtype=matrix.arguments.value_dtype)
    if matrix.format is MatrixFormat.TRIPLET:
        col_indices = matrix.col_positions
    else:
        col_indices = np.repeat(np.arange(size), np.diff(matrix.col_positions))
    np.add.at(lower, (matrix.row_indices, col_indices), matrix.values)
    return lower


def to_dense(matrix: SparseMatrix) -> np.ndarray:
    """Expand a SparseMatrix into a dense square array

    SYMMETRIC_COMPRESSED matrices come back as the full symmetric
    matrix.  LOWER_TRIANGULAR_COMPRESSED and TRIPLET matrices come back
    lower triangular; a triplet matrix has no symmetric interpretation
    until it is converted.

    Arguments:
        matrix (SparseMatrix): Matrix to expand

    Returns:
        size x size NumPy array
    """

    lower = _lower_triangle(matrix)
    if matrix.format is MatrixFormat.SYMMETRIC_COMPRESSED:
        return _lower_to_full(lower)
    return lower


def from_dense(full_matrix: np.ndarray,
               arguments: Optional[StorageArguments] = None) -> SparseMatrix:
    """Build a triplet-format SparseMatrix from a dense square array

    Only the lower triangle (including the diagonal) is read.  Whatever
    is above the diagonal is ignored, so this works the same for a full
    symmetric matrix and for a lower-triangular one.  Entries are added
    in column-major order, which is the order convert_to() will leave
    them in.

    Arguments:
        full_matrix (NumPy array): Square 2D array

    Keyword Arguments:
        arguments (StorageArguments): Storage parameters for the result

    Returns:
        New SparseMatrix in TRIPLET format

    Raises:
        ValidationError: what you passed is not a square 2D array, or it
            contains NaN or infinite values in the lower triangle
    """

    full_matrix = np.asarray(full_matrix)
    if full_matrix.ndim != 2 or full_matrix.shape[0] != full_matrix.shape[1]:
        raise ValidationError([
            f"from_dense: Input must be a square matrix, not shape {full_matrix.shape}"
        ])

    size = full_matrix.shape[0]
    (col_indices, row_indices) = _lower_triangle_indices_column_major(size)
    values = full_matrix[row_indices, col_indices]
    nonzero = values != 0

    matrix = SparseMatrix(size, arguments)
    for (row, col, value) in zip(row_indices[nonzero], col_indices[nonzero],
                                 values[nonzero]):
        matrix.put(int(row), int(col), float(value))
    return matrix


@functools.cache
def _lower_triangle_indices_column_major(size: int) -> Tuple[np.ndarray, np.ndarray]:
    """Caching version of NumPy triu_indices(), read as the lower triangle

    triu_indices() walks the upper triangle row by row.  Swapping
    its (row, column) pairs gives the lower triangle column by column.

    Arguments:
        size (int): Size of square matrix

    Returns:
        (column_indices, row_indices) for every element on or below
        the diagonal, in column-major order
    """

    return np.triu_indices(size)
