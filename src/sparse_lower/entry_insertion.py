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

"""Check and store single entries in a triplet-format matrix

Entries are only accepted on or below the diagonal.  An entry above the
diagonal is an error, not something we silently reflect: a caller that
hands us (0, 2) for a lower-triangular matrix has almost certainly
swapped row and column somewhere.

Every check in validate_entry() runs regardless of whether an earlier
one failed.  The caller gets the whole list of problems at once.
"""

import math
import numbers
import operator
from typing import Any, List, Optional

import numpy as np

from sparse_lower.containers.matrix_format import MatrixFormat
from sparse_lower.containers.storage import TripletStorage

__all__ = ["validate_entry", "insert_entry"]


def _as_index(value: Any) -> Optional[int]:
    """Integer value of an index argument, or None if it isn't one

    Anything that implements __index__ counts (Python ints, NumPy
    integers).  Booleans do not.
    """
    if isinstance(value, bool):
        return None
    try:
        return operator.index(value)
    except TypeError:
        return None


def _index_complaints(name: str, value: Any, size: int) -> List[str]:
    index = _as_index(value)
    if index is None:
        return [f"{name} index must be an integer, not {type(value).__name__}"]

    complaints = []
    if index < 0:
        complaints.append(f"{name} index ({index}) is negative")
    if index >= size:
        complaints.append(
            f"{name} index ({index}) is out of range for a matrix of size {size}")
    return complaints


def validate_entry(matrix_format: MatrixFormat,
                   size: int,
                   row: Any,
                   col: Any,
                   value: Any,
                   value_dtype: type = np.float64) -> List[str]:
    """Find every reason an entry can't be stored

    Arguments:
        matrix_format (MatrixFormat): Current format of the matrix
        size (int): Number of rows/columns in the matrix
        row (int): Proposed row index
        col (int): Proposed column index
        value (float): Proposed value

    Keyword Arguments:
        value_dtype (NumPy dtype): dtype of the matrix's values array.
            A value that would become infinite or zero when stored
            in this dtype is rejected.  Defaults to np.float64.

    Returns:
        List of complaints, one per violated condition.  An empty
        list means the entry is acceptable.
    """

    complaints = []
    if matrix_format is not MatrixFormat.TRIPLET:
        complaints.append(
            f"Cannot add entries to a matrix in {matrix_format.description} "
            f"({matrix_format.name}).  Entries can only be added in "
            f"{MatrixFormat.TRIPLET.description}.")

    complaints.extend(_index_complaints("Row", row, size))
    complaints.extend(_index_complaints("Column", col, size))

    row_index = _as_index(row)
    col_index = _as_index(col)
    if row_index is not None and col_index is not None and col_index > row_index:
        complaints.append(
            f"Entry ({row_index}, {col_index}) is above the diagonal.  Only "
            f"entries with column <= row are stored.")

    complaints.extend(_value_complaints(value, value_dtype))
    return complaints


def _value_complaints(value: Any, value_dtype: type) -> List[str]:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return [f"Value must be a real number, not {type(value).__name__}"]

    try:
        as_float = float(value)
    except OverflowError:
        return ["Value is too large to represent as a float"]

    if math.isnan(as_float):
        return ["Value is NaN"]
    if math.isinf(as_float):
        return [f"Value is infinite ({as_float})"]

    # What actually lands in the values array
    with np.errstate(over="ignore", under="ignore"):
        stored = np.array(as_float).astype(value_dtype)
    dtype_name = np.dtype(value_dtype).name
    if not np.isfinite(stored):
        return [f"Value ({as_float}) overflows {dtype_name} storage"]
    if stored == 0 and as_float != 0:
        return [f"Value ({as_float}) underflows to zero in {dtype_name} storage"]
    return []


def insert_entry(storage: TripletStorage,
                 row: int,
                 col: int,
                 value: float) -> bool:
    """Store one already-validated entry

    Zero values are never stored.  Putting a zero is legal and does
    nothing.

    Arguments:
        storage (TripletStorage): Where to put the entry
        row (int): Row index
        col (int): Column index
        value (float): Value

    Returns:
        True if the entry was stored, False if it was a zero
    """
    if value == 0.0:
        return False
    storage.append(operator.index(row), operator.index(col), float(value))
    return True
