"""Shared helpers for Bridge Scorecard."""

# Bridge Scorecard
# Copyright (C) 2025  Bridge Scorecard developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ROOT_LOGGER_NAME = "bridgescorecard"


def setup_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Get a module logger wired to the package's shared handler.

    The stream handler is attached once, to the package root logger, so
    every module logger created here propagates to the same output.

    Args:
        name: Logger name, normally the calling module's ``__name__``
        level: Level for the package root logger on first setup

    Returns:
        Configured logger instance
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(level)
    return logging.getLogger(name)


__all__ = ["setup_logger", "LOG_FORMAT"]
