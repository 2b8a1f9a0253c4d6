"""Decoding of parsed text-format tensors into NumPy arrays."""

from typing import Any

import numpy as np

from pbtxt_tensor.dtypes import (
    SUPPORTED_TYPES,
    DataType,
    numpy_dtype,
    parse_data_type,
)
from pbtxt_tensor.errors import UnsupportedTypeError
from pbtxt_tensor.ndarray import check_rank, to_ndarray
from pbtxt_tensor.record import TensorRecord
from pbtxt_tensor.unescape import unescape_bytes
from pbtxt_tensor.util import warn_once


def bytes_to_typed(escaped_text: str, dtype: DataType | str | int) -> np.ndarray:
    """
    Decode escaped raw tensor content into a flat array of `dtype` values.

    The unescaped bytes are read as consecutive little-endian 32-bit integers
    for `DT_INT32`, 32-bit IEEE floats for `DT_FLOAT`, or one byte per element
    for `DT_BOOL`, where any nonzero byte is true.

    The caller must ensure that the number of bytes is a multiple of the
    element size. NumPy raises a `ValueError` if it is not.

    :return: A writable array in native byte order
    """
    dtype = parse_data_type(dtype)
    if dtype not in SUPPORTED_TYPES:
        raise UnsupportedTypeError(dtype.name)

    data = unescape_bytes(escaped_text)
    match dtype:
        case DataType.DT_BOOL:
            raw = np.frombuffer(data, dtype=np.uint8)
            return raw != 0
        case _:
            typed = np.frombuffer(data, dtype=numpy_dtype(dtype))
            return typed.astype(typed.dtype.newbyteorder("="))


def _explicit_values(record: TensorRecord, dtype: DataType):
    match dtype:
        case DataType.DT_INT32:
            return record.int_val
        case DataType.DT_FLOAT:
            return record.float_val
        case DataType.DT_BOOL:
            return record.bool_val
        case _:
            raise UnsupportedTypeError(dtype.name)


def tensor_values(record: TensorRecord) -> np.ndarray:
    """
    Return the flat values of a tensor.

    Values listed in the field for the tensor's type (eg. `int_val` for
    `DT_INT32`) take precedence. Otherwise the values are decoded from
    `tensor_content`.
    """
    dtype = parse_data_type(record.dtype)
    values = _explicit_values(record, dtype)

    if len(values):
        if record.tensor_content:
            warn_once(
                f"Ignoring tensor_content of {dtype.name} tensor which also has explicit values"
            )
        return np.asarray(values, dtype=numpy_dtype(dtype))

    if record.tensor_content is None:
        return np.asarray([], dtype=numpy_dtype(dtype))

    return bytes_to_typed(record.tensor_content, dtype)


def tensor_to_array(tensor: TensorRecord | dict[str, Any]) -> np.ndarray:
    """
    Convert a parsed tensor into a NumPy array with the tensor's shape.

    :param tensor: A `TensorRecord`, or the dict produced for a tensor by a
        text-format parser (see `TensorRecord.from_dict`)
    :raise UnsupportedTypeError: If the type is not `DT_INT32`, `DT_FLOAT` or
        `DT_BOOL`
    :raise UnsupportedRankError: If the tensor has more than 4 dimensions
    :raise ShapeMismatchError: If the number of values does not match the shape
    """
    if isinstance(tensor, dict):
        tensor = TensorRecord.from_dict(tensor)

    dtype = parse_data_type(tensor.dtype)
    match dtype:
        case DataType.DT_INT32 | DataType.DT_FLOAT | DataType.DT_BOOL:
            pass
        case _:
            raise UnsupportedTypeError(dtype.name)

    check_rank(tensor.shape)
    values = tensor_values(tensor)
    return to_ndarray(tensor.shape, values, dtype)
