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

"""Array payloads behind a SparseMatrix

A SparseMatrix holds exactly one of these at a time:

    TripletStorage: Unordered (row, column, value) entries.  Grows by
        appending.  Duplicate positions are allowed.
    CompressedStorage: Compressed-column layout, tagged with which of
        the two compressed formats it represents.

Keeping the two layouts in separate classes means the column array
always has one meaning per class: one column index per entry for
triplets, an offset table of length size + 1 for compressed storage.
"""

import dataclasses
from typing import Optional

import numpy as np

from sparse_lower.containers.arguments import StorageArguments
from sparse_lower.containers.matrix_format import MatrixFormat


class TripletStorage:
    """Growable parallel arrays of (row, column, value) entries

    The three arrays always have the same length and the same
    capacity.  Only the first ``count`` slots hold entries.

    Properties:
        values (NumPy array): Stored values, in insertion order
        row_indices (NumPy array): Row of each stored value
        col_indices (NumPy array): Column of each stored value
        count (int): Number of stored entries
        capacity (int): Number of entries we can hold before reallocating
    """

    def __init__(self,
                 values: np.ndarray,
                 row_indices: np.ndarray,
                 col_indices: np.ndarray,
                 count: Optional[int] = None):
        assert values.shape[0] == row_indices.shape[0] == col_indices.shape[0], \
            "Triplet arrays must all have the same length."
        self._values = values
        self._row_indices = row_indices
        self._col_indices = col_indices
        if count is None:
            count = values.shape[0]
        self._count = count

    @staticmethod
    def empty(capacity: int,
              arguments: Optional[StorageArguments] = None) -> "TripletStorage":
        """Allocate triplet storage with no entries

        Arguments:
            capacity (int): Number of entries to make room for
            arguments (StorageArguments): dtypes to use.  Defaults
                to StorageArguments().

        Returns:
            New TripletStorage with count == 0
        """
        if arguments is None:
            arguments = StorageArguments()
        capacity = max(1, capacity)
        return TripletStorage(
            values=np.zeros(capacity, dtype=arguments.value_dtype),
            row_indices=np.zeros(capacity, dtype=arguments.index_dtype),
            col_indices=np.zeros(capacity, dtype=arguments.index_dtype),
            count=0)

    @property
    def count(self) -> int:
        return self._count

    @property
    def capacity(self) -> int:
        return self._values.shape[0]

    @property
    def values(self) -> np.ndarray:
        return self._values[:self._count]

    @property
    def row_indices(self) -> np.ndarray:
        return self._row_indices[:self._count]

    @property
    def col_indices(self) -> np.ndarray:
        return self._col_indices[:self._count]

    def append(self, row: int, col: int, value: float) -> None:
        """Add one entry at the end

        No checking happens here.  Validate before you call this.

        Arguments:
            row (int): Row index
            col (int): Column index
            value (float): Value to store

        Returns:
            None
        """
        if self._count == self.capacity:
            self._grow(max(1, 2 * self.capacity))
        self._row_indices[self._count] = row
        self._col_indices[self._count] = col
        self._values[self._count] = value
        self._count += 1

    def reserve(self, capacity: int) -> None:
        """Make sure there is room for at least this many entries

        Existing entries are kept.  Never shrinks.

        Arguments:
            capacity (int): Minimum number of entries to hold

        Returns:
            None
        """
        if capacity > self.capacity:
            self._grow(capacity)

    def _grow(self, new_capacity: int) -> None:
        def resized(array):
            bigger = np.zeros(new_capacity, dtype=array.dtype)
            bigger[:self._count] = array[:self._count]
            return bigger

        self._values = resized(self._values)
        self._row_indices = resized(self._row_indices)
        self._col_indices = resized(self._col_indices)

    def deep_copy(self) -> "TripletStorage":
        """Return an independent copy with the same entries

        Spare capacity is not preserved.
        """
        return TripletStorage(
            values=self.values.copy(),
            row_indices=self.row_indices.copy(),
            col_indices=self.col_indices.copy())


@dataclasses.dataclass
class CompressedStorage:
    """Compressed-column arrays for a symmetric or lower-triangular matrix

    Entries for column k live at positions col_offsets[k] up to (but not
    including) col_offsets[k+1] in ``values`` and ``row_indices``, sorted
    by row.

    Attributes:
        kind (MatrixFormat): SYMMETRIC_COMPRESSED or
            LOWER_TRIANGULAR_COMPRESSED
        values (NumPy array): Non-zero values, column by column
        row_indices (NumPy array): Row of each value
        col_offsets (NumPy array): size + 1 offsets into the other arrays
    """

    kind: MatrixFormat
    values: np.ndarray
    row_indices: np.ndarray
    col_offsets: np.ndarray

    def __post_init__(self):
        assert self.kind.is_compressed, \
            "CompressedStorage needs a compressed format tag."

    @property
    def count(self) -> int:
        return self.values.shape[0]

    def relabel(self, kind: MatrixFormat) -> "CompressedStorage":
        """Same arrays, different compressed format tag

        The two compressed formats share one physical layout, so the
        arrays are passed along without copying.

        Arguments:
            kind (MatrixFormat): New compressed format

        Returns:
            New CompressedStorage sharing this one's arrays
        """
        return CompressedStorage(kind=kind,
                                 values=self.values,
                                 row_indices=self.row_indices,
                                 col_offsets=self.col_offsets)

    def deep_copy(self) -> "CompressedStorage":
        return CompressedStorage(kind=self.kind,
                                 values=self.values.copy(),
                                 row_indices=self.row_indices.copy(),
                                 col_offsets=self.col_offsets.copy())
