from pbtxt_tensor.dtypes import DataType
from pbtxt_tensor.record import TensorRecord


class TestTensorRecord:
    def test_shape_is_normalized_to_tuple(self):
        assert TensorRecord(dtype="DT_INT32", shape=[2, 3]).shape == (2, 3)
        assert TensorRecord(dtype="DT_INT32", shape=4).shape == (4,)
        assert TensorRecord(dtype="DT_INT32").shape == ()

    def test_from_dict(self):
        record = TensorRecord.from_dict(
            {
                "dtype": "DT_INT32",
                "tensor_shape": {"dim": [{"size": 2}, {"size": 3}]},
                "int_val": [1, 2, 3, 4, 5, 6],
            }
        )
        assert record.dtype == "DT_INT32"
        assert record.shape == (2, 3)
        assert record.int_val == [1, 2, 3, 4, 5, 6]
        assert record.float_val == []
        assert record.tensor_content is None

    def test_from_dict_with_single_dim(self):
        record = TensorRecord.from_dict(
            {
                "dtype": "DT_FLOAT",
                "tensor_shape": {"dim": {"size": 4}},
                "tensor_content": r"\000\000\200?",
            }
        )
        assert record.shape == (4,)
        assert record.tensor_content == r"\000\000\200?"

    def test_from_dict_scalar(self):
        record = TensorRecord.from_dict(
            {"dtype": "DT_INT32", "tensor_shape": {}, "int_val": 7}
        )
        assert record.shape == ()
        assert record.int_val == [7]

        record = TensorRecord.from_dict({"dtype": "DT_INT32", "int_val": 7})
        assert record.shape == ()

    def test_from_dict_dim_without_size(self):
        record = TensorRecord.from_dict(
            {"dtype": "DT_INT32", "tensor_shape": {"dim": [{}, {"size": 2}]}}
        )
        assert record.shape == (0, 2)

    def test_from_dict_bool_values(self):
        record = TensorRecord.from_dict(
            {"dtype": "DT_BOOL", "bool_val": [True, "false", "true", 0]}
        )
        assert record.bool_val == [True, False, True, False]

    def test_from_dict_missing_dtype(self):
        assert TensorRecord.from_dict({}).dtype == DataType.DT_INVALID
