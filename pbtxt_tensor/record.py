from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from pbtxt_tensor.dtypes import DataType


def _as_list(value: Any) -> list:
    """
    Wrap a field value in a list if it is not one already.

    Text-format parsers produce a single value rather than a one-element list
    for repeated fields which only occur once.
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _parse_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.lower() in ("true", "t", "1")
    return bool(value)


@dataclass(frozen=True)
class TensorRecord:
    """
    A parsed tensor, as found in the `value` attribute of constant nodes.

    Values are either given explicitly in the field for the element type
    (`int_val`, `float_val`, `bool_val`) or as packed binary data in
    `tensor_content`, which holds the C-escaped bytes from the text file.
    """

    dtype: DataType | str | int
    """Element type tag, eg. `DataType.DT_INT32` or `"DT_INT32"`."""

    shape: tuple[int, ...] = ()
    """Size of each dimension. Empty for a scalar."""

    int_val: Sequence[int] = field(default_factory=list)
    float_val: Sequence[float] = field(default_factory=list)
    bool_val: Sequence[bool] = field(default_factory=list)

    tensor_content: Optional[str] = None
    """Escaped raw bytes of the tensor, in little-endian order."""

    def __post_init__(self):
        # A single dimension may be given as a plain size.
        if isinstance(self.shape, int):
            object.__setattr__(self, "shape", (self.shape,))
        else:
            object.__setattr__(self, "shape", tuple(self.shape))

    @classmethod
    def from_dict(cls, tensor: dict[str, Any]) -> "TensorRecord":
        """
        Create a record from the dict that a text-format parser produces.

        The expected layout is::

            {
                "dtype": "DT_INT32",
                "tensor_shape": {"dim": [{"size": 2}, {"size": 3}]},
                "int_val": [1, 2, 3, 4, 5, 6],
            }

        with `tensor_content` in place of the `*_val` fields for packed data.
        A `dim` that occurs once may be a single dict rather than a list.
        """
        dims = _as_list((tensor.get("tensor_shape") or {}).get("dim"))
        shape = tuple(int(dim.get("size", 0)) for dim in dims)

        return cls(
            dtype=tensor.get("dtype", DataType.DT_INVALID),
            shape=shape,
            int_val=_as_list(tensor.get("int_val")),
            float_val=_as_list(tensor.get("float_val")),
            bool_val=[_parse_bool(v) for v in _as_list(tensor.get("bool_val"))],
            tensor_content=tensor.get("tensor_content"),
        )
