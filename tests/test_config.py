from __future__ import annotations

import importlib.util
import logging
import os
import unittest
from unittest import mock


JAX_AVAILABLE = importlib.util.find_spec("jax") is not None


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for headtail imports")
class EnvironmentConfigTests(unittest.TestCase):
    def test_env_int_parses_and_clamps(self) -> None:
        from headtail.config import env_int

        cases = [
            ({}, 256),
            ({"HEADTAIL_TEST_INT": "32"}, 32),
            ({"HEADTAIL_TEST_INT": "0"}, 1),
            ({"HEADTAIL_TEST_INT": "-5"}, 1),
            ({"HEADTAIL_TEST_INT": "lots"}, 256),
            ({"HEADTAIL_TEST_INT": ""}, 256),
        ]
        for env, expected in cases:
            with self.subTest(env=env):
                with mock.patch.dict(os.environ, env, clear=False):
                    if not env:
                        os.environ.pop("HEADTAIL_TEST_INT", None)
                    self.assertEqual(env_int("HEADTAIL_TEST_INT", 256), expected)

    def test_env_log_level_falls_back_on_unknown_names(self) -> None:
        from headtail.config import env_log_level

        cases = [
            ("debug", logging.DEBUG),
            ("ERROR", logging.ERROR),
            ("verbose", logging.WARNING),
            ("", logging.WARNING),
        ]
        for raw, expected in cases:
            with self.subTest(raw=raw):
                with mock.patch.dict(os.environ, {"HEADTAIL_LOG_LEVEL": raw}):
                    self.assertEqual(env_log_level(), expected)

    def test_env_disabled_only_for_one(self) -> None:
        from headtail.config import env_disabled

        for raw, expected in (("1", True), ("0", False), ("yes", False)):
            with self.subTest(raw=raw):
                with mock.patch.dict(os.environ, {"HEADTAIL_TEST_SWITCH": raw}):
                    self.assertIs(env_disabled("HEADTAIL_TEST_SWITCH"), expected)


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for headtail imports")
class LoggerSetupTests(unittest.TestCase):
    def test_module_loggers_share_the_package_handler(self) -> None:
        from headtail.logger import setup_logger

        package = setup_logger()
        child = setup_logger("headtail.arrays")
        self.assertEqual(len(package.handlers), 1)
        self.assertFalse(package.propagate)
        self.assertEqual(child.handlers, [])
        self.assertTrue(child.propagate)
        self.assertIs(child.parent, package)

    def test_unknown_explicit_level_defaults_to_warning(self) -> None:
        from headtail.logger import setup_logger

        name = "headtail_config_test_logger"
        logger = setup_logger(name, level="chatty")
        try:
            self.assertEqual(logger.level, logging.WARNING)
        finally:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)


if __name__ == "__main__":
    unittest.main()
