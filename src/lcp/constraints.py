# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

"""
This file intends to provide (1) a simple replacement for raw `assert`s and (2) functions for commonly used constraints.
"""

from typing import Any, Optional


def is_text(x: Any) -> bool:
    return isinstance(x, str)


def ensure(
    condition: bool,
    exctype: type[Exception] = ValueError,
    msg: Optional[str] = None,
) -> None:
    if not condition:
        if msg:
            msg = "Constraint violation: " + msg
        else:
            msg = "Constraint violation"

        raise exctype(msg)
