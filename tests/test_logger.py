import io
import logging
import unittest

from hidato.utils.logger import ROOT_LOGGER, configure_logging, get_logger


class LoggerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.package_logger = logging.getLogger(ROOT_LOGGER)
        self._saved_handlers = list(self.package_logger.handlers)
        self._saved_level = self.package_logger.level

    def tearDown(self) -> None:
        for handler in list(self.package_logger.handlers):
            self.package_logger.removeHandler(handler)
        for handler in self._saved_handlers:
            self.package_logger.addHandler(handler)
        self.package_logger.setLevel(self._saved_level)

    def test_root_handlers_are_left_alone(self) -> None:
        root = logging.getLogger()
        marker = logging.NullHandler()
        root.addHandler(marker)
        try:
            configure_logging(logging.DEBUG, stream=io.StringIO())
            self.assertIn(marker, root.handlers)
        finally:
            root.removeHandler(marker)

    def test_reconfiguring_keeps_a_single_handler(self) -> None:
        configure_logging(logging.INFO, stream=io.StringIO())
        logger = configure_logging(logging.WARNING, stream=io.StringIO())
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.WARNING)

    def test_records_use_package_format(self) -> None:
        stream = io.StringIO()
        configure_logging(logging.INFO, stream=stream)
        get_logger("hidato.engine.solver").info("solved in %d nodes", 7)
        self.assertIn("| INFO    | hidato.engine.solver | solved in 7 nodes", stream.getvalue())

    def test_names_outside_the_tree_are_prefixed(self) -> None:
        self.assertEqual(get_logger("tools").name, "hidato.tools")
        self.assertEqual(get_logger("hidato.engine").name, "hidato.engine")
        self.assertEqual(get_logger().name, ROOT_LOGGER)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
