"""Export of real matrices and vectors for exchange with the Java side.

Binary files are big endian (the order Java's DataInputStream reads):

    matrix: int32 rows, int32 cols, rows*cols entries in row order
    vector: int32 length, length entries

Entries are float32 when the source array is single precision and float64
otherwise. The precision is not stored in the file, so readers have to know it.
"""

import os
import struct
from enum import Enum

import numpy as np

from mx_errors import (
    DimensionOverflowError,
    DirectoryNotFoundError,
    InvalidInputError,
    TruncatedFileError,
)

BYTE_ORDER = '>'
INT32_MAX = np.iinfo(np.int32).max

# bool, signed, unsigned, float
_REAL_KINDS = 'biuf'


class Precision(Enum):
    SINGLE = 'f'
    DOUBLE = 'd'

    @property
    def dtype(self) -> np.dtype:
        """Big endian dtype used on disk."""
        return np.dtype(BYTE_ORDER + self.value)

    @property
    def native_dtype(self) -> np.dtype:
        return np.dtype(self.value)

    @property
    def itemsize(self) -> int:
        return self.dtype.itemsize

    @classmethod
    def of(cls, a: np.ndarray) -> 'Precision':
        # float32 in either byte order; everything else is written as double
        if a.dtype.kind == 'f' and a.dtype.itemsize == 4:
            return cls.SINGLE
        return cls.DOUBLE


def int_to_bytes(i: int) -> bytes:
    return struct.pack(BYTE_ORDER + 'i', i)

def int_from_bytes(b: bytes) -> int:
    return struct.unpack(BYTE_ORDER + 'i', b)[0]

def float_to_bytes(f: float, precision=Precision.DOUBLE) -> bytes:
    return struct.pack(BYTE_ORDER + precision.value, f)

def float_from_bytes(b: bytes, precision=Precision.DOUBLE) -> float:
    return struct.unpack(BYTE_ORDER + precision.value, b)[0]


def _real_array(data, message):
    a = np.asarray(data)
    if a.dtype.kind not in _REAL_KINDS:
        raise InvalidInputError(message)
    return a

def _resolve_path(file, folder):
    if folder is None:
        return file
    if not os.path.isdir(folder):
        raise DirectoryNotFoundError('Directory "%s" does not exist.' % folder)
    return os.path.join(folder, file)

def _read_exact(f, n):
    # compare against the file size first, a corrupt header can announce gigabytes
    left = os.fstat(f.fileno()).st_size - f.tell()
    if left < n:
        raise TruncatedFileError(
            'Expected %d more bytes in %s, found only %d' % (n, f.name, max(left, 0)))
    return f.read(n)

def _check_end(f):
    if f.read(1):
        raise InvalidInputError(
            'Unexpected data after the last entry in %s (wrong precision?)' % f.name)

def _format_value(v):
    # sprintf spelling of the non-finite values
    if np.isnan(v):
        return 'NaN'
    if np.isinf(v):
        return 'Inf' if v > 0 else '-Inf'
    return '%.16e' % v


def save_matrix(mat, file, folder=None, precision=None):
    """Stores a real matrix.

    The first 64 bits hold rows and cols as int32, followed by rows*cols
    entries. The entries are always written row after row, whatever the memory
    layout of `mat` is, since the reader stores matrices row-wise.

    If `folder` is given, `file` is a name inside that (existing) directory.
    `precision` defaults to the precision of `mat`.
    """
    X = _real_array(mat, 'Matrix must contain only real values')
    if X.ndim > 2:
        raise InvalidInputError(
            'Matrix must have at most two dimensions, got shape %s' % (X.shape,))
    X = np.atleast_2d(X)

    n, m = X.shape
    if n > INT32_MAX or m > INT32_MAX:
        raise DimensionOverflowError('Cannot save matrix: Dimensions exceed max int32 value.')

    if precision is None:
        precision = Precision.of(X)
    path = _resolve_path(file, folder)

    with open(path, 'wb') as f:
        f.write(int_to_bytes(n) + int_to_bytes(m))
        f.write(X.astype(precision.dtype).tobytes(order='C'))


def save_vector(vec, file, folder=None, precision=None):
    """Stores a real vector: int32 length, then the entries in order.

    Row and column vectors (shape (1, n) or (n, 1)) are accepted as well.
    """
    v = _real_array(vec, 'Vector must contain only real values')
    if v.ndim == 2 and 1 in v.shape:
        v = v.ravel()
    if v.ndim != 1:
        raise InvalidInputError('Vector must be one-dimensional, got shape %s' % (v.shape,))

    s = v.shape[0]
    if s > INT32_MAX:
        raise DimensionOverflowError('Cannot save vector: Dimension exceeds max int32 value.')

    if precision is None:
        precision = Precision.of(v)
    path = _resolve_path(file, folder)

    with open(path, 'wb') as f:
        f.write(int_to_bytes(s))
        f.write(v.astype(precision.dtype).tobytes())


def load_matrix(file, folder=None, precision=Precision.DOUBLE) -> np.ndarray:
    """Reads a file written by save_matrix. Returns a (rows, cols) array."""
    path = _resolve_path(file, folder)
    with open(path, 'rb') as f:
        n = int_from_bytes(_read_exact(f, 4))
        m = int_from_bytes(_read_exact(f, 4))
        if n < 0 or m < 0:
            raise InvalidInputError('Negative matrix dimensions %d x %d in %s' % (n, m, path))
        data = _read_exact(f, n * m * precision.itemsize)
        _check_end(f)

    X = np.frombuffer(data, dtype=precision.dtype).reshape(n, m)
    return X.astype(precision.native_dtype)


def load_vector(file, folder=None, precision=Precision.DOUBLE) -> np.ndarray:
    path = _resolve_path(file, folder)
    with open(path, 'rb') as f:
        s = int_from_bytes(_read_exact(f, 4))
        if s < 0:
            raise InvalidInputError('Negative vector length %d in %s' % (s, path))
        data = _read_exact(f, s * precision.itemsize)
        _check_end(f)

    return np.frombuffer(data, dtype=precision.dtype).astype(precision.native_dtype)


def matrix_to_json(value) -> str:
    """Returns a JSON object with the fields "dim" and "values".

    "dim" is the shape of `value`; "values" holds every entry as %.16e,
    iterating through the array in the order of the dimensions given in "dim",
    i.e. column by column for a plain matrix. Non-finite entries are written
    as NaN, Inf and -Inf.
    """
    value = np.asarray(value)
    dim = ', '.join('%d' % d for d in value.shape)
    values = ', '.join(_format_value(v) for v in value.ravel(order='F'))
    return '{"dim":[%s], "values":[%s]}' % (dim, values)
