"""
Unit tests for the kernel factory.
"""
import unittest

from gpreg.errors import UnknownKernel
from gpreg.kernel import (
    create,
    list_kernels,
    register_kernel,
    CovSEiso,
    CovSum,
    CovNoise,
)


class TestCreate(unittest.TestCase):

    def test_atomic(self):
        covf = create(2, "CovSEiso")
        self.assertIsInstance(covf, CovSEiso)
        self.assertEqual(covf.input_dim, 2)

    def test_compound_ignores_whitespace(self):
        covf = create(3, "  CovSum ( CovSEiso,\tCovNoise) ")
        self.assertIsInstance(covf, CovSum)
        self.assertIsInstance(covf.first, CovSEiso)
        self.assertIsInstance(covf.second, CovNoise)
        self.assertEqual(covf.param_dim, 3)
        self.assertEqual(covf.to_string(), "CovSum(CovSEiso, CovNoise)")

    def test_to_string_round_trip(self):
        specs = [
            "CovSEard",
            "CovProd(CovSEard, CovLinearone)",
            "CovSum(CovProd(CovPeriodic, CovSEiso), CovSum(CovRQiso, CovNoise))",
        ]
        for spec in specs:
            covf = create(2, spec)
            self.assertEqual(covf.to_string(), spec)
            again = create(2, covf.to_string())
            self.assertEqual(again.to_string(), spec)
            self.assertEqual(again.param_dim, covf.param_dim)

    def test_list_kernels(self):
        names = list_kernels()
        for name in ("CovSEiso", "CovNoise", "CovSum", "CovProd", "CovMatern5iso"):
            self.assertIn(name, names)

    def test_unknown_kernels(self):
        bad = [
            "",
            "CovFoo",
            "CovSum(CovSEiso, CovFoo)",
            "CovSum",
            "CovSum(CovSEiso)",
            "CovSum(CovSEiso, CovNoise, CovNoise)",
            "CovSEiso(CovNoise, CovNoise)",
            "CovSum(CovSEiso, CovNoise",
            "CovSum(CovSEiso, CovNoise))",
            "CovSum(CovSEiso,)",
        ]
        for spec in bad:
            with self.assertRaises(UnknownKernel, msg=spec):
                create(1, spec)

    def test_unknown_kernel_is_value_error(self):
        with self.assertRaises(ValueError):
            create(1, "CovFoo")

    def test_register_kernel(self):

        @register_kernel
        class CovConstant(CovSEiso):
            name = "CovTestConstant"

            def get(self, x1, x2):
                return 1.0

        covf = create(1, "CovSum(CovTestConstant, CovNoise)")
        self.assertEqual(covf.to_string(), "CovSum(CovTestConstant, CovNoise)")

    def test_register_rejects_non_kernels(self):
        with self.assertRaises(TypeError):
            register_kernel(object)


if __name__ == "__main__":
    unittest.main()
