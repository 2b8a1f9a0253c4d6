#!/usr/bin/env python

from argparse import ArgumentParser
import json
import sys

import numpy as np

from pbtxt_tensor.decoder import tensor_to_array
from pbtxt_tensor.errors import DecodeError


def tensor_json(x: np.ndarray):
    """
    Convert an array to a JSON-serializable representation.

    The format is `{ "data": [elements...], "shape": [dims...] }`.
    """
    return {"data": x.flatten().tolist(), "shape": list(x.shape)}


def read_records(path: str) -> tuple[list[dict], bool]:
    """
    Load parsed tensor records from a JSON file.

    The file contains either a single tensor dict, in the layout accepted by
    `TensorRecord.from_dict`, or a list of them.

    :return: The records and whether the file contained a list
    """
    with open(path) as fp:
        content = json.load(fp)
    if isinstance(content, list):
        return content, True
    return [content], False


def main():
    parser = ArgumentParser(
        description="Decode text-format tensors, stored as JSON, into arrays."
    )
    parser.add_argument("tensors", help="JSON file containing parsed tensors")
    parser.add_argument(
        "-o", "--output", help="Write decoded tensors to this JSON file"
    )
    parser.add_argument(
        "--print-values",
        action="store_true",
        help="Print the values of each tensor",
    )
    args = parser.parse_args()

    records, is_list = read_records(args.tensors)

    arrays = []
    for i, record in enumerate(records):
        try:
            array = tensor_to_array(record)
        except DecodeError as ex:
            print(f"Failed to decode tensor {i}: {ex}", file=sys.stderr)
            sys.exit(1)

        print(f"Tensor {i}: dtype {array.dtype.name} shape {list(array.shape)}")
        if args.print_values:
            print(array)
        arrays.append(array)

    if args.output:
        output = [tensor_json(x) for x in arrays]
        with open(args.output, "w") as fp:
            json.dump(output if is_list else output[0], fp)


if __name__ == "__main__":
    main()
