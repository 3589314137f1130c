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

"""Containers for matrix storage parameters

StorageArguments holds the knobs that control how a SparseMatrix
allocates its arrays.  None of them change what the matrix means.
"""

import dataclasses
import sys
from typing import List, Optional, TextIO

import numpy as np


@dataclasses.dataclass
class StorageArguments:
    """User-specified storage parameters for a SparseMatrix

    You only need to instantiate this class if the defaults don't
    suit you.  Pass it to SparseMatrix() or front_end.create().
    """
    # dtype for the values array
    value_dtype: type = np.float64
    # dtype for row indices, column indices and column offsets
    index_dtype: type = np.int64
    # How many triplet entries to allocate room for up front?  None
    # means "as many as the matrix has rows".
    initial_capacity: Optional[int] = None

    def capacity_for(self, size: int) -> int:
        """Initial triplet capacity for a matrix of the given size

        Arguments:
            size (int): Number of rows/columns in the matrix

        Returns:
            Number of entries to preallocate.  Always at least 1.
        """
        if self.initial_capacity is not None:
            return max(1, int(self.initial_capacity))
        return max(1, int(size))

    def complaints_for(self, size: int) -> List[str]:
        """Find every reason these dtypes can't hold a matrix of this size

        Values need a floating-point dtype.  Indices need an integer
        dtype wide enough for the largest row index and for the largest
        column offset, which is the number of cells on or below the
        diagonal.

        Arguments:
            size (int): Number of rows/columns in the matrix

        Returns:
            List of complaints.  Empty if the dtypes are usable.
        """

        complaints = []
        value_dtype = np.dtype(self.value_dtype)
        if not np.issubdtype(value_dtype, np.floating):
            complaints.append(
                f"Value dtype must be a floating-point type, not {value_dtype.name}")

        index_dtype = np.dtype(self.index_dtype)
        if not np.issubdtype(index_dtype, np.integer):
            complaints.append(
                f"Index dtype must be an integer type, not {index_dtype.name}")
        else:
            size = max(int(size), 0)
            largest_index = max(size - 1, size * (size + 1) // 2)
            if largest_index > np.iinfo(index_dtype).max:
                complaints.append(
                    f"Index dtype {index_dtype.name} is too small for a matrix "
                    f"of size {size}")
        return complaints

    def print(self, out: Optional[TextIO]=None) -> None:
        """Print parameters to some convenient output

        Keyword arguments:
            out (text IO sink): File-like object for output.
                Defaults to sys.stdout.

        Returns:
            None
        """

        if out is None:
            out = sys.stdout

        def my_log(description, value):
            print(f"    {description}: {value}", file=out)

        print("Storage arguments:", file=out)
        my_log("Value dtype", np.dtype(self.value_dtype).name)
        my_log("Index dtype", np.dtype(self.index_dtype).name)
        my_log("Initial triplet capacity",
               "matrix size" if self.initial_capacity is None
               else self.initial_capacity)

    def shallow_copy(self) -> "StorageArguments":
        """Return a new copy of the storage arguments

        Returns:
            New StorageArguments instance with same contents
        """
        return StorageArguments(
            value_dtype=self.value_dtype,
            index_dtype=self.index_dtype,
            initial_capacity=self.initial_capacity)

    def deep_copy(self) -> "StorageArguments":
        """Return a new copy of the storage arguments

        Returns:
            New StorageArguments instance with same contents
        """
        # All members are scalars or type objects, so there's no
        # difference between a shallow and a deep copy.
        return self.shallow_copy()
