import logging
import os
import tempfile
import unittest

from logging_config import configured_level, setup_logging, LOGS_DIR


class TestLoggingConfig(unittest.TestCase):
    def test_setup_logging_creates_rotating_and_stream_handlers(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            log_file = f"{tmpdir}/test.log"

            logger = setup_logging(name="test_logger", log_file=log_file)

            self.assertIsInstance(logger, logging.Logger)
            self.assertEqual(logger.name, "test_logger")
            self.assertEqual(len(logger.handlers), 2)

            logger.info("hello")
            for h in logger.handlers:
                h.flush()

            with open(log_file, "r", encoding="utf-8") as f:
                self.assertIn("hello", f.read())

            for h in list(logger.handlers):
                h.close()
                logger.removeHandler(h)

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging(name="test_repeat")
        logger = setup_logging(name="test_repeat")
        self.assertEqual(len(logger.handlers), 2)

    def test_default_log_goes_to_logs_dir(self):
        logger = setup_logging(name="test_default_dir")
        file_handler = [h for h in logger.handlers if hasattr(h, "baseFilename")][0]
        self.assertIn(os.sep + "logs" + os.sep, file_handler.baseFilename)
        self.assertTrue(file_handler.baseFilename.endswith("mountain_huts.log"))

    def test_relative_path_with_dirs_stripped(self):
        """A relative path like 'subdir/foo.log' should be stripped to 'foo.log' in logs/."""
        logger = setup_logging(name="test_strip_dirs", log_file="subdir/foo.log")
        file_handler = [h for h in logger.handlers if hasattr(h, "baseFilename")][0]
        self.assertEqual(file_handler.baseFilename, os.path.join(LOGS_DIR, "foo.log"))

    def test_level_is_applied(self):
        logger = setup_logging(name="test_level", level=logging.DEBUG)
        self.assertEqual(logger.level, logging.DEBUG)

    def test_default_level_comes_from_settings(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            settings_path = os.path.join(tmpdir, "settings.toml")
            with open(settings_path, "w", encoding="utf-8") as f:
                f.write("[env]\nlog_level = \"WARNING\"\n")
            logger = setup_logging(name="test_settings_level", settings_path=settings_path)
            self.assertEqual(logger.level, logging.WARNING)
            self.assertEqual(configured_level(settings_path), "WARNING")

    def test_default_level_without_settings_is_info(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            missing = os.path.join(tmpdir, "settings.toml")
            logger = setup_logging(name="test_no_settings", settings_path=missing)
            self.assertEqual(logger.level, logging.INFO)


if __name__ == "__main__":
    unittest.main()
