import os
import unittest
from unittest import TestCase, mock

from src.keystride.infrastructure import _config
from src.keystride.infrastructure._config import (
    ENV_DEBUG_CHECKS,
    debug_checks,
    debug_checks_enabled,
    set_debug_checks,
)


class TestEnvFlag(TestCase):
    def test_unset_is_false(self):
        """An unset variable should leave debug checks off."""
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertFalse(_config._env_flag(ENV_DEBUG_CHECKS))

    def test_false_spellings(self):
        """Values "0", empty and "false" should read as off."""
        for value in ("0", "", "false", "False", "FALSE"):
            with mock.patch.dict(os.environ, {ENV_DEBUG_CHECKS: value}):
                self.assertFalse(_config._env_flag(ENV_DEBUG_CHECKS), value)

    def test_true_values(self):
        """Any other value should read as on."""
        for value in ("1", "true", "yes"):
            with mock.patch.dict(os.environ, {ENV_DEBUG_CHECKS: value}):
                self.assertTrue(_config._env_flag(ENV_DEBUG_CHECKS), value)


class TestDebugChecksSwitch(TestCase):
    def setUp(self) -> None:
        self._saved = debug_checks_enabled()

    def tearDown(self) -> None:
        set_debug_checks(self._saved)

    def test_set_returns_previous(self):
        """set_debug_checks() should return the previous value."""
        set_debug_checks(False)
        self.assertFalse(set_debug_checks(True))
        self.assertTrue(debug_checks_enabled())
        self.assertTrue(set_debug_checks(False))
        self.assertFalse(debug_checks_enabled())

    def test_context_manager_restores(self):
        """debug_checks() should restore the previous value on exit."""
        set_debug_checks(False)
        with debug_checks():
            self.assertTrue(debug_checks_enabled())
        self.assertFalse(debug_checks_enabled())

    def test_context_manager_restores_on_error(self):
        """debug_checks() should restore the previous value when the block raises."""
        set_debug_checks(True)
        with self.assertRaises(KeyError):
            with debug_checks(False):
                self.assertFalse(debug_checks_enabled())
                raise KeyError("boom")
        self.assertTrue(debug_checks_enabled())

    def test_toggle_is_logged(self):
        """Changing the switch should emit a debug record."""
        set_debug_checks(False)
        with self.assertLogs(_config.logger, level="DEBUG") as logs:
            set_debug_checks(True)
        self.assertIn("debug checks enabled", logs.output[0])


if __name__ == "__main__":
    unittest.main()
