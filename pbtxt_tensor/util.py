import sys


EMITTED_WARNINGS: set[str] = set()


def warn_once(msg: str):
    """
    Emit a warning if not already emitted.

    This is used to reduce output noise if the same problem arises many times
    when decoding the tensors of a graph.
    """
    if msg in EMITTED_WARNINGS:
        return
    EMITTED_WARNINGS.add(msg)
    print(f"WARNING: {msg}", file=sys.stderr)


def reset_warnings():
    """Forget which warnings have been emitted, so they can be emitted again."""
    EMITTED_WARNINGS.clear()
