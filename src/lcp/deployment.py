# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

import logging
import os
from typing import Any, Literal, Mapping

from pydantic.dataclasses import dataclass as validated_dataclass

logging.basicConfig(format="%(levelname)s:%(name)s: %(message)s")

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


@validated_dataclass(frozen=True)
class Settings:
    placeholder: str = "<empty>"
    log_level: LogLevel = "WARNING"


def load_settings(environ: Mapping[str, str]) -> Settings:
    """Reads LCP_* variables; anything unset keeps its default."""
    kwargs: dict[str, Any] = dict()

    if "LCP_PLACEHOLDER" in environ:
        kwargs["placeholder"] = environ["LCP_PLACEHOLDER"]

    if "LCP_LOG_LEVEL" in environ:
        kwargs["log_level"] = environ["LCP_LOG_LEVEL"].upper()

    return Settings(**kwargs)


SETTINGS: Settings = load_settings(os.environ)
LOGGER: Any = logging.getLogger("lcp")
LOGGER.setLevel(SETTINGS.log_level)
