"""
Unit tests for the configuration and logging helpers.
"""
import logging
import unittest

import numpy as np

import gpreg
import gpreg.num as gnp
from gpreg import config


class TestConfig(unittest.TestCase):

    def setUp(self):
        self.precision = config.get_config().precision
        self.level = config.get_logger().level

    def tearDown(self):
        config.set_precision(self.precision)
        config.set_log_level(self.level)

    def test_backend(self):
        self.assertEqual(config.get_backend(), "numpy")
        self.assertEqual(gnp._gpreg_backend_, "numpy")
        with self.assertRaises(ValueError):
            config.set_backend("torch")

    def test_dtype(self):
        dtype = np.dtype(config.get_config().dtype)
        self.assertEqual(gnp.zeros(3).dtype, dtype)
        self.assertEqual(gnp.array([1, 2]).dtype, dtype)
        self.assertEqual(gnp.randn(2).dtype, dtype)

    def test_version(self):
        self.assertEqual(config.get_config().version, gpreg.__version__)

    def test_precision(self):
        config.set_precision(6)
        self.assertEqual(config.get_config().precision, 6)
        for digits in (0, -3):
            with self.assertRaises(ValueError):
                config.set_precision(digits)
        self.assertEqual(config.get_config().precision, 6)

    def test_update(self):
        cfg = config.get_config()
        self.assertIs(cfg.update(precision=12), cfg)
        self.assertEqual(cfg.precision, 12)
        with self.assertRaises(AttributeError):
            cfg.update(no_such_key=1)

    def test_caches(self):
        cfg = config.get_config()
        cfg.caches["a"] = 1
        cfg.caches["b"] = 2
        config.clear_caches("a")
        self.assertEqual(list(cfg.caches), ["b"])
        config.clear_caches()
        self.assertEqual(cfg.caches, {})

    def test_logger(self):
        logger = config.get_logger()
        self.assertEqual(logger.name, "gpreg")
        config.set_log_level(logging.DEBUG)
        self.assertEqual(logger.level, logging.DEBUG)

    def test_rebuild_is_logged(self):
        config.set_log_level(logging.DEBUG)
        gp = gpreg.GaussianProcess(1, "CovSEiso")
        gp.add_pattern([0.0], 1.0)
        with self.assertLogs("gpreg", level="DEBUG") as cm:
            gp.predict([0.5])
        self.assertTrue(any("n=1" in line for line in cm.output))


if __name__ == "__main__":
    unittest.main()
