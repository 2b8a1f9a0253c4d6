"""Errors reported while decoding text-format tensors."""

import math


class DecodeError(Exception):
    """Errors when decoding a tensor record into an array."""

    def __init__(self, message: str):
        super().__init__(message)


class UnsupportedTypeError(DecodeError):
    """Decoding failed because the tensor's element type is unsupported."""

    dtype: object
    """The unsupported element type, eg. `"DT_STRING"`"""

    def __init__(self, dtype: object):
        self.dtype = dtype
        super().__init__(f"tensor data type: {dtype} is not supported")


class UnsupportedRankError(DecodeError):
    """Decoding failed because the tensor has too many dimensions."""

    rank: int
    """The number of dimensions of the tensor."""

    def __init__(self, rank: int):
        self.rank = rank
        super().__init__(f"Tensor rank {rank} is not supported. Maximum rank is 4")


class ShapeMismatchError(DecodeError):
    """The number of decoded values does not match the tensor's shape."""

    def __init__(self, shape: tuple[int, ...], size: int):
        self.shape = shape
        self.size = size
        super().__init__(
            f"Tensor of shape {list(shape)} requires {math.prod(shape)} values but got {size}"
        )
