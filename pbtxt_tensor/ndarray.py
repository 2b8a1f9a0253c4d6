"""
Construction of shaped arrays from flat value sequences.

There is one constructor per supported rank, from scalars up to 4D arrays.
`to_ndarray` selects the constructor for a shape.
"""

import math
from typing import Sequence

import numpy as np

from pbtxt_tensor.dtypes import DataType, numpy_dtype
from pbtxt_tensor.errors import ShapeMismatchError, UnsupportedRankError

MAX_RANK = 4
"""Highest number of dimensions that arrays can be constructed with."""

Values = Sequence[int] | Sequence[float] | Sequence[bool] | np.ndarray


def _flat_array(shape: tuple[int, ...], values: Values, dtype: DataType):
    data = np.asarray(values, dtype=numpy_dtype(dtype)).reshape(-1)
    if data.size != math.prod(shape):
        raise ShapeMismatchError(shape, data.size)

    # Return arrays in native byte order, whatever order the data used.
    return data.astype(data.dtype.newbyteorder("="), copy=False)


def scalar(value, dtype: DataType) -> np.ndarray:
    """
    Create a 0D array.

    `value` may be a single value or a sequence containing exactly one value.
    """
    return _flat_array((), value, dtype).reshape(())


def array1d(values: Values, dtype: DataType) -> np.ndarray:
    """Create a 1D array. The length is the number of values."""
    data = np.asarray(values, dtype=numpy_dtype(dtype)).reshape(-1)
    return _flat_array((data.size,), data, dtype)


def array2d(shape: tuple[int, int], values: Values, dtype: DataType) -> np.ndarray:
    """Create a 2D array from values in row-major order."""
    return _flat_array(shape, values, dtype).reshape(shape)


def array3d(
    shape: tuple[int, int, int], values: Values, dtype: DataType
) -> np.ndarray:
    """Create a 3D array from values in row-major order."""
    return _flat_array(shape, values, dtype).reshape(shape)


def array4d(
    shape: tuple[int, int, int, int], values: Values, dtype: DataType
) -> np.ndarray:
    """Create a 4D array from values in row-major order."""
    return _flat_array(shape, values, dtype).reshape(shape)


def check_rank(shape: Sequence[int]):
    """Raise `UnsupportedRankError` if `shape` has more than `MAX_RANK` dims."""
    if len(shape) > MAX_RANK:
        raise UnsupportedRankError(len(shape))


def to_ndarray(shape: Sequence[int], values: Values, dtype: DataType) -> np.ndarray:
    """
    Create an array with a given shape, using the constructor for its rank.

    :param shape: Size of each dimension. Empty for a scalar.
    :param values: Elements in row-major order. The count must equal the
        product of `shape`, or 1 for a scalar.
    :param dtype: Element type
    """
    match len(shape):
        case 0:
            return scalar(values, dtype)
        case 1:
            # A 1D array's length comes from the values, so check it here.
            (size,) = shape
            if len(values) != size:
                raise ShapeMismatchError(tuple(shape), len(values))
            return array1d(values, dtype)
        case 2:
            d0, d1 = shape
            return array2d((d0, d1), values, dtype)
        case 3:
            d0, d1, d2 = shape
            return array3d((d0, d1, d2), values, dtype)
        case 4:
            d0, d1, d2, d3 = shape
            return array4d((d0, d1, d2, d3), values, dtype)
        case rank:
            raise UnsupportedRankError(rank)
