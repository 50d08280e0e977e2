# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

"""
Longest common prefix of two strings, and of any number of strings.

Whenever the prefix is a whole input, that very object is returned. Partial
prefixes are slices, which CPython copies.
"""

from typing import Iterable, Optional

from lcp.constraints import ensure, is_text


def longest_common_prefix(a: str, b: str) -> str:
    """Find the longest common prefix between two strings.

    This returns a `str`, which can be the empty string `""` if there is no
    common prefix. If one string is a prefix of the other, the shorter one is
    returned as is. If both are equally long and equal, `b` is returned.
    """
    ensure(is_text(a), TypeError, f"expected str, got {type(a).__name__}")
    ensure(is_text(b), TypeError, f"expected str, got {type(b).__name__}")

    if a is b:
        return a

    for i, (ac, bc) in enumerate(zip(a, b)):
        if ac != bc:
            return a[:i]

    if len(a) < len(b):
        return a
    else:
        return b


def longest_common_prefix_in(items: Iterable[str]) -> Optional[str]:
    """Find the longest common prefix in an iterable.

    This returns `None` if `items` is empty. Otherwise, it returns a `str`
    (including the empty string `""` if there is no common prefix). Once the
    running prefix is empty, no further items are consumed.
    """
    it = iter(items)

    try:
        lcp = next(it)
    except StopIteration:
        return None

    ensure(is_text(lcp), TypeError, f"expected str, got {type(lcp).__name__}")

    for cur in it:
        lcp = longest_common_prefix(lcp, cur)

        if not lcp:
            return lcp

    return lcp
