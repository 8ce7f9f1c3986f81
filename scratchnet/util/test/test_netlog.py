import io
import unittest

from scratchnet.util import netlog


class TestNetlog(unittest.TestCase):

    def setUp(self):
        self.screen = io.StringIO()
        self.log = netlog.setup_logging("test_netlog", level="INFO", stream=self.screen)
        netlog.clear_debug_log()

    def tearDown(self):
        netlog.set_screen_level("INFO")

    def test_screen_gets_info_and_above(self):
        self.log.debug("quiet message")
        self.log.info("loud message")
        self.assertNotIn("quiet message", self.screen.getvalue())
        self.assertIn("| loud message", self.screen.getvalue())

    def test_debug_log_gets_everything(self):
        self.log.debug("quiet message")
        self.log.info("loud message")
        text = netlog.get_debug_log()
        self.assertIn("quiet message", text)
        self.assertIn("loud message", text)
        self.assertIn("DEBUG", text)

    def test_clear_debug_log(self):
        self.log.info("old message")
        netlog.clear_debug_log()
        self.log.info("new message")
        self.assertNotIn("old message", netlog.get_debug_log())
        self.assertIn("new message", netlog.get_debug_log())

    def test_set_screen_level(self):
        netlog.set_screen_level("DEBUG")
        self.log.debug("quiet message")
        netlog.set_screen_level("WARNING")
        self.log.info("loud message")
        self.assertIn("quiet message", self.screen.getvalue())
        self.assertNotIn("loud message", self.screen.getvalue())

    def test_setup_replaces_handlers(self):
        log = netlog.setup_logging("test_netlog", level="INFO", stream=self.screen)
        self.assertEqual(len(log.handlers), 2)


if __name__ == "__main__":
    unittest.main()
