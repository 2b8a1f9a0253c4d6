"""Element types of text-format tensors."""

from enum import IntEnum

import numpy as np

from pbtxt_tensor.errors import UnsupportedTypeError


class DataType(IntEnum):
    """
    Tensor element type tags.

    Names and values match the `DataType` enum used by the protobuf
    definitions of exported graphs, so a tag can be looked up using either the
    name that appears in text-format files (eg. `DT_INT32`) or its integer
    value.
    """

    DT_INVALID = 0
    DT_FLOAT = 1
    DT_DOUBLE = 2
    DT_INT32 = 3
    DT_UINT8 = 4
    DT_INT16 = 5
    DT_INT8 = 6
    DT_STRING = 7
    DT_COMPLEX64 = 8
    DT_INT64 = 9
    DT_BOOL = 10
    DT_QINT8 = 11
    DT_QUINT8 = 12
    DT_QINT32 = 13
    DT_BFLOAT16 = 14
    DT_QINT16 = 15
    DT_QUINT16 = 16
    DT_UINT16 = 17
    DT_COMPLEX128 = 18
    DT_HALF = 19
    DT_RESOURCE = 20
    DT_VARIANT = 21
    DT_UINT32 = 22
    DT_UINT64 = 23


SUPPORTED_TYPES = (DataType.DT_INT32, DataType.DT_FLOAT, DataType.DT_BOOL)
"""Element types which can be decoded into arrays."""


def parse_data_type(tag: "DataType | str | int") -> DataType:
    """
    Look up the `DataType` for a type tag.

    :param tag: A `DataType`, a type name such as `"DT_FLOAT"` or an integer
        type value.
    :raise UnsupportedTypeError: If `tag` does not name a known type
    """
    match tag:
        case DataType():
            return tag
        case str():
            try:
                return DataType[tag]
            except KeyError:
                raise UnsupportedTypeError(tag) from None
        case int():
            try:
                return DataType(tag)
            except ValueError:
                raise UnsupportedTypeError(tag) from None
        case _:
            raise UnsupportedTypeError(tag)


def numpy_dtype(dtype: DataType) -> np.dtype:
    """
    Return the NumPy dtype that values of a supported element type are stored as.

    Multi-byte types use little-endian order, which is how raw tensor content
    is encoded.
    """
    match dtype:
        case DataType.DT_INT32:
            return np.dtype("<i4")
        case DataType.DT_FLOAT:
            return np.dtype("<f4")
        case DataType.DT_BOOL:
            return np.dtype(np.bool_)
        case _:
            raise UnsupportedTypeError(dtype.name)


def element_size(dtype: DataType) -> int:
    """Return the size in bytes of one element of a supported type."""
    return numpy_dtype(dtype).itemsize
