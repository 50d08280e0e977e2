# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

from lcp.prefix import longest_common_prefix, longest_common_prefix_in

__version_info__ = 0, 1, 0
__version__ = ".".join(map(str, __version_info__))

__all__ = ["longest_common_prefix", "longest_common_prefix_in"]
