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

"""Convert a matrix between triplet and compressed-column storage

The interesting direction is triplet -> compressed.  Triplet entries
arrive in any order and may name the same cell more than once.  The
compressed form has exactly one entry per non-zero cell, grouped by
column and sorted by row inside each column.  Here's how we get there:

1.  Stable sort of all entries by column.
2.  Count entries per column (at position column + 1) and take the
    running sum.  That gives the offset of each column's first entry.
3.  Stable sort by row inside each column's range.
4.  Walk left to right.  Entries for the same cell are now adjacent;
    add each one into the first entry of its run and zero it out.
5.  Keep only non-zero values and rebuild the offset table from the
    survivors.

Duplicates are summed with plain floating-point addition in the order
that falls out of steps 1 and 3.  That order is the original insertion
order, so results are reproducible bit for bit.

The two compressed formats share one physical layout, so converting
between them only changes the format tag.

Going from compressed back to triplet storage expands the offset table
into one column index per entry.  Nothing is mirrored: a symmetric
matrix gives back its stored lower triangle.
"""

import logging
from typing import Optional, Union

import numba
import numpy as np

from sparse_lower.containers.arguments import StorageArguments
from sparse_lower.containers.matrix_format import MatrixFormat
from sparse_lower.containers.storage import CompressedStorage, TripletStorage

LOGGER = logging.getLogger(__name__)

Storage = Union[TripletStorage, CompressedStorage]

__all__ = ["storage_format", "compress_triplets", "expand_to_triplets",
           "convert_storage"]


@numba.njit
def _column_offsets(col_indices: np.ndarray, num_columns: int) -> np.ndarray:
    """Offset of each column's first entry in column-sorted arrays

    Arguments:
        col_indices (NumPy array): Column index of each entry.  Every
            value must be in [0, num_columns).
        num_columns (int): Number of columns in the matrix

    Returns:
        Array of num_columns + 1 offsets.  offsets[0] is 0 and
        offsets[num_columns] is the number of entries.
    """
    offsets = np.zeros(num_columns + 1, dtype=np.int64)
    for column in col_indices:
        offsets[column + 1] += 1
    for k in range(num_columns):
        offsets[k + 1] += offsets[k]
    return offsets


@numba.njit
def _sort_rows_within_columns(row_indices: np.ndarray,
                              values: np.ndarray,
                              col_offsets: np.ndarray) -> None:
    """Stable in-place sort by row inside each column's range"""
    for k in range(col_offsets.shape[0] - 1):
        start = col_offsets[k]
        end = col_offsets[k + 1]
        if end - start < 2:
            continue
        order = np.argsort(row_indices[start:end], kind="mergesort")
        row_indices[start:end] = row_indices[start:end][order]
        values[start:end] = values[start:end][order]


@numba.njit
def _coalesce_duplicates(row_indices: np.ndarray,
                         col_indices: np.ndarray,
                         values: np.ndarray) -> None:
    """Fold repeated cells into the first entry for that cell

    Entries must already be sorted by column, then row.  Each run of
    entries for one cell ends up with the run's total in its first
    slot and zeros everywhere else.
    """
    anchor = 0
    for i in range(1, values.shape[0]):
        if (row_indices[i] == row_indices[anchor]
                and col_indices[i] == col_indices[anchor]):
            values[anchor] += values[i]
            values[i] = 0.0
        else:
            anchor = i


def storage_format(storage: Storage) -> MatrixFormat:
    """Which MatrixFormat a storage payload represents"""
    if isinstance(storage, TripletStorage):
        return MatrixFormat.TRIPLET
    return storage.kind


def compress_triplets(triplets: TripletStorage,
                      size: int,
                      kind: MatrixFormat,
                      arguments: Optional[StorageArguments] = None) -> CompressedStorage:
    """Build compressed-column storage from triplet entries

    The input storage is not modified.  All the work happens on copies
    and the result gets freshly allocated arrays sized to the number of
    surviving entries.

    Arguments:
        triplets (TripletStorage): Entries to compress.  All entries
            must satisfy 0 <= column <= row < size.
        size (int): Number of rows/columns in the matrix
        kind (MatrixFormat): Which compressed format to tag the result with
        arguments (StorageArguments): dtypes for the result.  Defaults
            to StorageArguments().

    Returns:
        New CompressedStorage
    """

    if arguments is None:
        arguments = StorageArguments()
    num_columns = max(size, 0)

    # Step 1: stable sort by column
    column_order = np.argsort(triplets.col_indices, kind="stable")
    col_indices = triplets.col_indices[column_order].astype(np.int64)
    row_indices = triplets.row_indices[column_order].astype(np.int64)
    values = triplets.values[column_order].astype(arguments.value_dtype)

    # Steps 2 and 3: offset table, then sort by row within each column
    col_offsets = _column_offsets(col_indices, num_columns)
    _sort_rows_within_columns(row_indices, values, col_offsets)

    # Step 4: fold duplicate cells together
    _coalesce_duplicates(row_indices, col_indices, values)

    # Steps 5 and 6: drop everything that is now zero
    survivors = values != 0.0
    compacted_columns = col_indices[survivors]
    result = CompressedStorage(
        kind=kind,
        values=values[survivors],
        row_indices=row_indices[survivors].astype(arguments.index_dtype),
        col_offsets=_column_offsets(compacted_columns, num_columns).astype(
            arguments.index_dtype)
    )

    LOGGER.debug("Compressed %d triplet entries into %d stored values (%s).",
                 triplets.count, result.count, kind.name)
    return result


def expand_to_triplets(compressed: CompressedStorage,
                       size: int,
                       arguments: Optional[StorageArguments] = None) -> TripletStorage:
    """Turn compressed-column storage back into triplet entries

    Entries come out in column-major order.  Off-diagonal entries of a
    symmetric matrix are not mirrored; the result holds exactly the
    stored lower triangle, so compressing it again reproduces the
    original arrays.

    Arguments:
        compressed (CompressedStorage): Storage to expand
        size (int): Number of rows/columns in the matrix
        arguments (StorageArguments): dtypes and spare capacity for the
            result.  Defaults to StorageArguments().

    Returns:
        New TripletStorage
    """

    if arguments is None:
        arguments = StorageArguments()
    num_columns = max(size, 0)

    entries_per_column = np.diff(compressed.col_offsets)
    col_indices = np.repeat(np.arange(num_columns, dtype=arguments.index_dtype),
                            entries_per_column)

    triplets = TripletStorage(
        values=compressed.values.astype(arguments.value_dtype),
        row_indices=compressed.row_indices.astype(arguments.index_dtype),
        col_indices=col_indices)
    # Leave room for new entries, same as a freshly created matrix
    triplets.reserve(arguments.capacity_for(size))

    LOGGER.debug("Expanded %d compressed entries (%s) into triplet form.",
                 compressed.count, compressed.kind.name)
    return triplets


def convert_storage(storage: Storage,
                    target: MatrixFormat,
                    size: int,
                    arguments: Optional[StorageArguments] = None) -> Storage:
    """Convert a storage payload to another format

    Cases, in the order we check them:

    1.  Already in the target format: the same object comes back.
    2.  Compressed to the other compressed format: same arrays, new tag.
    3.  Triplet to compressed: run the compression algorithm.
    4.  Compressed to triplet: expand the offset table.

    Arguments:
        storage (TripletStorage or CompressedStorage): Current payload
        target (MatrixFormat): Desired format
        size (int): Number of rows/columns in the matrix
        arguments (StorageArguments): dtypes for any new arrays

    Returns:
        Storage in the target format.  The input is never modified.
    """

    current = storage_format(storage)
    if current is target:
        return storage

    if current.is_compressed and target.is_compressed:
        LOGGER.debug("Relabeling compressed storage from %s to %s.",
                     current.name, target.name)
        return storage.relabel(target)

    if target.is_compressed:
        return compress_triplets(storage, size, target, arguments)

    return expand_to_triplets(storage, size, arguments)
