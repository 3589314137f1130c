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

"""Sparse symmetric / lower-triangular matrix

Contents:
    SparseMatrix: The matrix container.  Build it in triplet format
        with put(), then convert_to() a compressed format.

Example:

    >>> matrix = SparseMatrix(3)
    >>> matrix.put(2, 1, 7.0)
    >>> matrix.put(0, 0, 1.0)
    >>> matrix.put(1, 1, 2.0)
    >>> matrix.put(1, 0, 3.0)
    >>> matrix.put(2, 2, 8.0)
    >>> matrix.convert_to(MatrixFormat.SYMMETRIC_COMPRESSED)
    >>> print(matrix)
    Type       : sparse symmetrical matrix
    Size       : 3
    Values     : [1 3 2 7 8]
    RowIndexes : [0 1 1 2 2]
    ColPos     : [0 2 4 5]

A SparseMatrix is not thread-safe.  If more than one thread needs to
touch the same matrix, serialize the calls yourself.
"""

import logging
import sys
from typing import Optional, TextIO, Union

import numpy as np

from sparse_lower.containers.arguments import StorageArguments
from sparse_lower.containers.matrix_format import MatrixFormat
from sparse_lower.containers.storage import CompressedStorage, TripletStorage
from sparse_lower.errors import ValidationError
from sparse_lower import entry_insertion
from sparse_lower import format_conversion

LOGGER = logging.getLogger(__name__)

__all__ = ["SparseMatrix"]


def _format_number(value) -> str:
    """Shortest text that round-trips a number, without a trailing '.0'"""
    if isinstance(value, (np.floating, float)):
        return np.format_float_positional(value, trim="-")
    return str(value)


def _format_array(array: np.ndarray) -> str:
    return "[" + " ".join(_format_number(value) for value in array) + "]"


class SparseMatrix:
    """Square sparse matrix that stores only its lower triangle

    A new matrix starts out empty in triplet format.  Fill it with put(),
    then call convert_to() to get compressed-column storage.  Conversion
    happens in place; there is no second view of the old layout.

    Properties:
        format (MatrixFormat): Current storage format
        size (int): Number of rows (and columns).  Fixed at construction.
        values (NumPy array): Stored non-zero values
        row_indices (NumPy array): Row of each stored value
        col_positions (NumPy array): In triplet format, the column of each
            stored value.  In either compressed format, the size + 1
            column offsets.
        nnz (int): Number of stored values
        arguments (StorageArguments): Storage parameters for this matrix
    """

    def __init__(self, size: int,
                 arguments: Optional[StorageArguments] = None):
        if arguments is None:
            arguments = StorageArguments()
        complaints = arguments.complaints_for(size)
        if complaints:
            raise ValidationError(complaints)
        self._size = size
        self._arguments = arguments
        self._storage: Union[TripletStorage, CompressedStorage] = \
            TripletStorage.empty(arguments.capacity_for(size), arguments)

    @staticmethod
    def create(size: int,
               arguments: Optional[StorageArguments] = None) -> "SparseMatrix":
        """Allocate a new, empty matrix in triplet format

        Any integer size is accepted.  A matrix of size 0 or less is a
        legal container that will reject every entry.

        Arguments:
            size (int): Number of rows and columns

        Keyword Arguments:
            arguments (StorageArguments): Storage parameters.  Defaults
                to StorageArguments().

        Returns:
            New SparseMatrix

        Raises:
            ValidationError: The storage dtypes can't hold a matrix of
                this size.
        """
        return SparseMatrix(size, arguments)

    @property
    def format(self) -> MatrixFormat:
        return format_conversion.storage_format(self._storage)

    @property
    def size(self) -> int:
        return self._size

    @property
    def arguments(self) -> StorageArguments:
        return self._arguments

    @property
    def values(self) -> np.ndarray:
        return self._storage.values

    @property
    def row_indices(self) -> np.ndarray:
        return self._storage.row_indices

    @property
    def col_positions(self) -> np.ndarray:
        if isinstance(self._storage, TripletStorage):
            return self._storage.col_indices
        return self._storage.col_offsets

    @property
    def nnz(self) -> int:
        return self._storage.count

    def put(self, row: int, col: int, value: float) -> None:
        """Add one entry to a triplet-format matrix

        Entries must lie on or below the diagonal (col <= row).  Values
        of exactly zero are accepted and ignored.  Putting the same cell
        more than once is fine: the values are summed when the matrix is
        converted to a compressed format.

        Arguments:
            row (int): Row index, 0 <= row < size
            col (int): Column index, 0 <= col <= row
            value (float): Finite value to store

        Returns:
            None

        Raises:
            ValidationError: The matrix is not in triplet format or the
                entry is unacceptable.  The exception lists every problem
                found.  The matrix is unchanged.
        """

        complaints = entry_insertion.validate_entry(
            self.format, self._size, row, col, value,
            value_dtype=self._arguments.value_dtype)
        if complaints:
            raise ValidationError(complaints)
        entry_insertion.insert_entry(self._storage, row, col, value)

    def convert_to(self, target: Union[MatrixFormat, int, str]) -> None:
        """Convert the matrix to another storage format in place

        Converting triplets to a compressed format sorts the entries,
        sums repeated cells, and drops cells that sum to zero.  Switching
        between the two compressed formats just changes the format tag.
        Converting a compressed matrix back to triplets gives one triplet
        per stored value in column-major order.  Asking for the current
        format does nothing.

        Arguments:
            target (MatrixFormat): Desired format.  The integer value,
                member name or short name ("Ssm", "Sltm", "Tm") also work.

        Returns:
            None

        Raises:
            ValidationError: target is not a known format.  The matrix
                is unchanged.
        """

        target = MatrixFormat.coerce(target)
        LOGGER.debug("Converting size-%d matrix from %s to %s.",
                     self._size, self.format.name, target.name)
        self._storage = format_conversion.convert_storage(
            self._storage, target, self._size, self._arguments)

    def to_display_string(self) -> str:
        """Multi-line text snapshot of the matrix

        Shows the format, size and the three arrays.  Has no effect on
        the matrix.

        Returns:
            String with one line per field, no trailing newline
        """
        return "\n".join([
            f"Type       : {self.format.description}",
            f"Size       : {self._size}",
            f"Values     : {_format_array(self.values)}",
            f"RowIndexes : {_format_array(self.row_indices)}",
            f"ColPos     : {_format_array(self.col_positions)}",
        ])

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return (f"SparseMatrix(size={self._size}, format={self.format.name}, "
                f"nnz={self.nnz})")

    def print(self, out: Optional[TextIO]=None) -> None:
        """Write the display string to some convenient output

        Keyword arguments:
            out (text IO sink): File-like object for output.
                Defaults to sys.stdout.

        Returns:
            None
        """
        if out is None:
            out = sys.stdout
        print(self.to_display_string(), file=out)

    def copy(self) -> "SparseMatrix":
        """Return an independent copy of this matrix

        Returns:
            New SparseMatrix with the same format, size and entries
        """
        duplicate = SparseMatrix.__new__(SparseMatrix)
        duplicate._size = self._size
        duplicate._arguments = self._arguments.deep_copy()
        duplicate._storage = self._storage.deep_copy()
        return duplicate
