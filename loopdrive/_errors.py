# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Exceptions raised by loopdrive drivers and aggregates.
"""


class DriverError(Exception):
    """Base class for all loopdrive errors."""


class ConfigError(DriverError, ValueError):
    """
    A driver or aggregate was constructed with invalid arguments.

    Always raised at construction time, never from ``pull``.
    """


class OverPullError(DriverError, RuntimeError):
    """A driver was pulled again after it reported ``DONE``."""

    def __init__(self, driver):
        self.driver = driver
        super().__init__(
            f"{type(driver).__name__} was pulled after reporting DONE; "
            "call reset() before pulling again"
        )


__all__ = ["ConfigError", "DriverError", "OverPullError"]
