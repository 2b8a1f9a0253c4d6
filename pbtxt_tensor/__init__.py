"""Decode tensors from text-format graph files into NumPy arrays."""
