"""Byte-string mixing for combining externally supplied random bytes."""

from __future__ import annotations

BytesLike = bytes | bytearray | memoryview


def xor_strings(first: BytesLike, second: BytesLike) -> bytes:
    """XOR two byte strings, cycling the shorter one.

    The result has the length of the longer operand; byte ``i`` is
    ``first[i % len(first)] ^ second[i % len(second)]``. An empty operand is
    the identity, so ``xor_strings(b"foo", b"") == b"foo"``.

    Args
    ------
        first (bytes-like): First operand.
        second (bytes-like): Second operand.

    Returns
    -------
        bytes: The mixed byte string.

    Raises
    ------
        TypeError: If either operand is a ``str``.
    """
    if isinstance(first, str) or isinstance(second, str):
        msg = "xor_strings operates on bytes; encode text before mixing"
        raise TypeError(msg)

    a = bytes(first)
    b = bytes(second)
    if not a:
        return b
    if not b:
        return a

    size = max(len(a), len(b))
    return bytes(a[i % len(a)] ^ b[i % len(b)] for i in range(size))
