import os
import tempfile
import logging
import unittest

from raypick import config


test_data = {
    'tempdir': tempfile.gettempdir(),
    'nonexistent_file': 'an_unlikely_name_for_a_file.yml',
    }


class TestConfig(unittest.TestCase):

    file_name = None

    @classmethod
    def setUpClass(cls):
        logging.disable()
        with tempfile.NamedTemporaryFile(
                delete=False, mode="w+", suffix=".yml") as f:
            cls.file_name = f.name
            f.file.write(cls.get_reference_data())

    @classmethod
    def tearDownClass(cls):
        logging.disable(logging.NOTSET)
        if os.path.exists(cls.file_name):
            os.remove(cls.file_name)

    def setUp(self):
        self.cfgs = config.open(self.file_name)

    def tearDown(self):
        del(self.cfgs)

    @classmethod
    def get_reference_data(cls):
        raise NotImplementedError
