import io
import logging
import unittest

import mimetree.log


class TestLog(unittest.TestCase):

    def setUp(self):
        self.level = logging.getLogger().level

    def tearDown(self):
        logging.getLogger().setLevel(self.level)

    def test_init_stream(self):
        stream = io.StringIO()
        handler = mimetree.log.init(procname = "test", level = "DEBUG", stream = stream)
        try:
            logging.getLogger("mimetree.tests").debug("part %s", "1.2")
        finally:
            logging.getLogger().removeHandler(handler)
        output = stream.getvalue()
        self.assertIn("test[", output)
        self.assertIn("DEBUG: mimetree.tests: part 1.2", output)
