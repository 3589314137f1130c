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

# PyTest fixtures for sparse_lower tests

from typing import List, Tuple

import pytest

import numpy as np

from sparse_lower import SparseMatrix

# (row, column, value) entries for the 3 x 3 example matrix
#
#   [ 1 3 0 ]
#   [ 3 2 7 ]
#   [ 0 7 8 ]
#
# in the order we add them.  Cell (1, 1) is given twice as 1 + 1.
EXAMPLE_ENTRIES = [
    (2, 1, 7.0),
    (0, 0, 1.0),
    (1, 1, 1.0),
    (1, 1, 1.0),
    (1, 0, 3.0),
    (2, 2, 8.0),
]


def lower_triangle_entries(rng: np.random.Generator,
                           size: int,
                           num_entries: int) -> List[Tuple[int, int, float]]:
    """Random (row, column, value) entries on or below the diagonal

    Positions are drawn from a small matrix so that repeats are common.
    Values are small integers (some of them zero) so that sums are exact
    and cancellations happen.
    """
    entries = []
    for _ in range(num_entries):
        row = int(rng.integers(0, size))
        col = int(rng.integers(0, row + 1))
        value = float(rng.integers(-3, 4))
        entries.append((row, col, value))
    return entries


@pytest.fixture(scope="module")
def random_seed():
    """This is the random seed we will use for all of our test computation"""
    return 12345


@pytest.fixture
def rng(random_seed) -> np.random.Generator:
    return np.random.default_rng(random_seed)


@pytest.fixture(scope="module")
def example_size() -> int:
    return 3


@pytest.fixture(scope="module")
def example_entries() -> List[Tuple[int, int, float]]:
    return list(EXAMPLE_ENTRIES)


@pytest.fixture
def example_matrix(example_size, example_entries) -> SparseMatrix:
    """The example matrix in triplet format, not yet converted"""
    matrix = SparseMatrix(example_size)
    for (row, col, value) in example_entries:
        matrix.put(row, col, value)
    return matrix


@pytest.fixture
def example_dense() -> np.ndarray:
    return np.array([
        [1.0, 3.0, 0.0],
        [3.0, 2.0, 7.0],
        [0.0, 7.0, 8.0],
    ])
