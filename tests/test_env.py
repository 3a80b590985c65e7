# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

import logging
import os
from unittest.mock import patch

import pytest

from loopdrive import chain, configure_logging, cycle, nest, range_stepper
from loopdrive._env import get_log_level, get_timing_kind


@pytest.fixture
def package_logger():
    logger = logging.getLogger("loopdrive")
    level = logger.level
    yield logger
    logger.setLevel(level)


class TestEnvironment:
    @patch.dict(os.environ, {"LOOPDRIVE_LOG_LEVEL": "debug"})
    def test_log_level_from_environment(self):
        assert get_log_level() == logging.DEBUG

    @patch.dict(os.environ, {"LOOPDRIVE_LOG_LEVEL": "chatty"})
    def test_unknown_log_level_falls_back(self):
        assert get_log_level() == logging.WARNING

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        assert get_log_level() == logging.WARNING
        assert get_timing_kind() == "real"


class TestConfigureLogging:
    def test_sets_level(self, package_logger):
        logger = configure_logging("INFO")
        assert logger is package_logger
        assert logger.level == logging.INFO

    def test_installs_a_single_handler(self, package_logger):
        configure_logging(logging.DEBUG)
        count = len(package_logger.handlers)
        configure_logging(logging.ERROR)
        assert len(package_logger.handlers) == count
        assert package_logger.level == logging.ERROR

    @patch.dict(os.environ, {"LOOPDRIVE_LOG_LEVEL": "ERROR"})
    def test_level_defaults_to_environment(self, package_logger):
        assert configure_logging().level == logging.ERROR


class TestDebugRecords:
    def test_cycle_wrap_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="loopdrive")
        cycle(range_stepper(0, 2)).take(3)
        assert "wrapped" in caplog.text

    def test_carry_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="loopdrive")
        nest([(0, 2), (0, 2)]).take(3)
        assert "carry into level 0" in caplog.text

    def test_empty_chain_source_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="loopdrive")
        list(chain([[], [1]]))
        assert "skipping empty source #0" in caplog.text

    def test_ordinary_ticks_are_quiet(self, caplog):
        caplog.set_level(logging.DEBUG, logger="loopdrive")
        list(range_stepper(0, 100))
        assert caplog.records == []
