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

"""Storage format tags for SparseMatrix

Contents:
    MatrixFormat: Which of the three layouts a matrix is currently in
"""

import enum
from typing import Union

from sparse_lower.errors import ValidationError


class MatrixFormat(enum.IntEnum):
    """Storage layout of a sparse matrix

    Both compressed layouts use the same compressed-column arrays.  They
    differ only in how a caller should read them: SYMMETRIC_COMPRESSED
    means every stored off-diagonal entry (i, j) also stands for (j, i);
    LOWER_TRIANGULAR_COMPRESSED means the upper triangle is zero.

    TRIPLET is the unordered (row, column, value) layout used while
    a matrix is being filled in.
    """

    # Numbering starts at 1 so that a zeroed field never looks like
    # a valid format.
    SYMMETRIC_COMPRESSED = 1
    LOWER_TRIANGULAR_COMPRESSED = 2
    TRIPLET = 3

    @property
    def is_compressed(self) -> bool:
        """True for either compressed-column layout"""
        return self is not MatrixFormat.TRIPLET

    @property
    def short_name(self) -> str:
        return _SHORT_NAMES[self]

    @property
    def description(self) -> str:
        """Human-readable name used in display strings"""
        return _DESCRIPTIONS[self]

    @classmethod
    def coerce(cls, value: Union["MatrixFormat", int, str]) -> "MatrixFormat":
        """Turn a user-supplied format designation into a MatrixFormat

        Accepts a MatrixFormat member, its integer value, its member
        name ("TRIPLET") or its short name ("Tm").  Names are matched
        case-insensitively.

        Arguments:
            value: Format designation

        Returns:
            Matching MatrixFormat member

        Raises:
            ValidationError: value does not name one of the three formats
        """

        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.name.lower(), member.short_name.lower()):
                    return member
        elif isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass

        raise ValidationError([
            f"Unknown matrix format {value!r}.  Expected one of: "
            + ", ".join(member.name for member in cls)
        ])


_SHORT_NAMES = {
    MatrixFormat.SYMMETRIC_COMPRESSED: "Ssm",
    MatrixFormat.LOWER_TRIANGULAR_COMPRESSED: "Sltm",
    MatrixFormat.TRIPLET: "Tm",
}

_DESCRIPTIONS = {
    MatrixFormat.SYMMETRIC_COMPRESSED: "sparse symmetrical matrix",
    MatrixFormat.LOWER_TRIANGULAR_COMPRESSED: "sparse lower triangular matrix",
    MatrixFormat.TRIPLET: "triplet matrix format",
}
