"""
Unit tests for the covariance functions.
"""
import math
import unittest

import gpreg.num as gnp
from gpreg.errors import InvalidParameter
from gpreg.kernel import (
    create,
    CovSEiso,
    CovSEard,
    CovNoise,
    CovLinearone,
    CovSum,
    CovProd,
)

SPECS = [
    "CovSEiso",
    "CovSEard",
    "CovMatern3iso",
    "CovMatern5iso",
    "CovRQiso",
    "CovPeriodic",
    "CovLinearard",
    "CovLinearone",
    "CovNoise",
    "CovSum(CovSEard, CovNoise)",
    "CovProd(CovMatern5iso, CovLinearone)",
    "CovSum(CovProd(CovPeriodic, CovSEiso), CovRQiso)",
]


# ----------------------------------------------------------------------
# Helper
# ----------------------------------------------------------------------
def make_kernels(d=3, seed=0):
    gnp.set_seed(seed)
    kernels = []
    for spec in SPECS:
        covf = create(d, spec)
        covf.set_loghyper(0.4 * gnp.randn(covf.param_dim))
        kernels.append(covf)
    return kernels


def make_points(d=3, seed=1):
    gnp.set_seed(seed)
    return gnp.randn(d), gnp.randn(d)


def finite_diff_grad(covf, x1, x2):
    p0 = covf.get_loghyper()

    def f(p):
        covf.set_loghyper(p)
        return covf.get(x1, x2)

    g = gnp.grad(f)(p0)
    covf.set_loghyper(p0)
    return g


# ======================================================================
#                           Test cases
# ======================================================================
def test_symmetry():
    x1, x2 = make_points()
    for covf in make_kernels():
        assert covf.get(x1, x2) == covf.get(x2, x1), covf.to_string()


def test_gradients_match_finite_differences():
    x1, x2 = make_points()
    for covf in make_kernels():
        for a, b in [(x1, x2), (x1, x1)]:
            g = covf.grad(a, b)
            assert g.shape == (covf.param_dim,), covf.to_string()
            g_fd = finite_diff_grad(covf, a, b)
            assert gnp.allclose(g, g_fd, rtol=1e-5, atol=1e-8), (
                covf.to_string(),
                g,
                g_fd,
            )


def test_param_dims():
    d = 4
    expected = {
        "CovSEiso": 2,
        "CovSEard": d + 1,
        "CovMatern3iso": 2,
        "CovMatern5iso": 2,
        "CovRQiso": 3,
        "CovPeriodic": 3,
        "CovLinearard": d,
        "CovLinearone": 1,
        "CovNoise": 1,
        "CovSum(CovSEard, CovNoise)": d + 2,
    }
    for spec, param_dim in expected.items():
        covf = create(d, spec)
        assert covf.param_dim == param_dim, spec
        assert covf.input_dim == d
        assert gnp.allclose(covf.get_loghyper(), gnp.zeros(param_dim))


def test_seiso_values():
    covf = CovSEiso(1)
    ell, sf = 0.5, 2.0
    covf.set_loghyper([math.log(ell), math.log(sf)])
    x1, x2 = gnp.array([0.0]), gnp.array([1.0])
    expected = sf**2 * math.exp(-0.5 * 1.0 / ell**2)
    assert math.isclose(covf.get(x1, x2), expected, rel_tol=1e-12)
    assert math.isclose(covf.get(x1, x1), sf**2, rel_tol=1e-12)


def test_seard_reduces_to_seiso():
    x1, x2 = make_points(d=2)
    iso = CovSEiso(2)
    ard = CovSEard(2)
    iso.set_loghyper([0.3, -0.2])
    ard.set_loghyper([0.3, 0.3, -0.2])
    assert math.isclose(iso.get(x1, x2), ard.get(x1, x2), rel_tol=1e-12)


def test_noise_uses_identity():
    covf = CovNoise(2)
    covf.set_loghyper([math.log(0.1)])
    x = gnp.array([1.0, 2.0])
    same_values = gnp.array([1.0, 2.0])
    assert math.isclose(covf.get(x, x), 0.01, rel_tol=1e-12)
    assert covf.get(x, same_values) == 0.0
    assert gnp.allclose(covf.grad(x, same_values), gnp.zeros(1))


def test_linearone_values():
    covf = CovLinearone(2)
    covf.set_loghyper([math.log(2.0)])
    x1, x2 = gnp.array([1.0, 2.0]), gnp.array([3.0, -1.0])
    assert math.isclose(covf.get(x1, x2), (1.0 + 1.0) / 4.0, rel_tol=1e-12)


def test_compound_values():
    a, b = make_points(d=2)
    se = CovSEiso(2)
    lin = CovLinearone(2)
    s = CovSum(CovSEiso(2), CovLinearone(2))
    p = CovProd(CovSEiso(2), CovLinearone(2))
    s.set_loghyper([0.1, 0.2, 0.3])
    p.set_loghyper([0.1, 0.2, 0.3])
    se.set_loghyper([0.1, 0.2])
    lin.set_loghyper([0.3])
    assert math.isclose(s.get(a, b), se.get(a, b) + lin.get(a, b), rel_tol=1e-12)
    assert math.isclose(p.get(a, b), se.get(a, b) * lin.get(a, b), rel_tol=1e-12)


class TestLogHyper(unittest.TestCase):

    def test_set_and_get(self):
        covf = CovSEard(2)
        self.assertTrue(covf.set_loghyper([0.1, 0.2, 0.3]))
        self.assertTrue(gnp.allclose(covf.get_loghyper(), [0.1, 0.2, 0.3]))

    def test_get_returns_snapshot(self):
        covf = CovSEiso(1)
        p = covf.get_loghyper()
        p[0] = 5.0
        self.assertEqual(covf.get_loghyper()[0], 0.0)

    def test_caller_array_not_aliased(self):
        covf = CovSEiso(1)
        p = gnp.array([0.5, 0.5])
        covf.set_loghyper(p)
        p[0] = 3.0
        self.assertEqual(covf.get_loghyper()[0], 0.5)

    def test_wrong_length_rejected(self):
        covf = CovSEiso(1)
        covf.set_loghyper([0.5, -0.5])
        x1, x2 = gnp.array([0.0]), gnp.array([0.7])
        before = covf.get(x1, x2)
        for p in ([1.0], [1.0, 2.0, 3.0], [[1.0, 2.0]]):
            with self.assertRaises(InvalidParameter):
                covf.set_loghyper(p)
        self.assertTrue(gnp.allclose(covf.get_loghyper(), [0.5, -0.5]))
        self.assertEqual(covf.get(x1, x2), before)

    def test_compound_forwards_slices(self):
        first, second = CovSEiso(1), CovNoise(1)
        covf = CovSum(first, second)
        covf.set_loghyper([0.1, 0.2, 0.3])
        self.assertTrue(gnp.allclose(first.get_loghyper(), [0.1, 0.2]))
        self.assertTrue(gnp.allclose(second.get_loghyper(), [0.3]))
        self.assertTrue(gnp.allclose(covf.get_loghyper(), [0.1, 0.2, 0.3]))

    def test_compound_wrong_length_leaves_children(self):
        first, second = CovSEiso(1), CovNoise(1)
        covf = CovProd(first, second)
        covf.set_loghyper([0.1, 0.2, 0.3])
        with self.assertRaises(InvalidParameter):
            covf.set_loghyper([1.0, 1.0])
        self.assertTrue(gnp.allclose(covf.get_loghyper(), [0.1, 0.2, 0.3]))

    def test_overflow_rejected(self):
        x1, x2 = gnp.array([0.0]), gnp.array([0.7])
        for covf, p in [
            (CovSEiso(1), [0.0, 400.0]),
            (CovSEiso(1), [800.0, 0.0]),
            (CovNoise(1), [400.0]),
            (CovLinearone(1), [-400.0]),
        ]:
            before = covf.get(x1, x2), covf.get(x1, x1)
            with self.assertRaises(OverflowError):
                covf.set_loghyper(p)
            self.assertTrue(gnp.allclose(covf.get_loghyper(), gnp.zeros(len(p))))
            self.assertEqual((covf.get(x1, x2), covf.get(x1, x1)), before)

    def test_compound_overflow_rolls_back_both_children(self):
        x1, x2 = gnp.array([0.0]), gnp.array([0.7])
        for p in ([0.1, 0.2, 0.3, 400.0], [0.1, 400.0, 0.3, 0.4]):
            first, second = CovSEiso(1), CovSEiso(1)
            covf = CovProd(first, second)
            covf.set_loghyper([0.5, 0.5, -0.5, -0.5])
            before = covf.get(x1, x2)
            with self.assertRaises(OverflowError):
                covf.set_loghyper(p)
            self.assertTrue(gnp.allclose(first.get_loghyper(), [0.5, 0.5]))
            self.assertTrue(gnp.allclose(second.get_loghyper(), [-0.5, -0.5]))
            self.assertEqual(covf.get(x1, x2), before)

    def test_non_numeric_rejected(self):
        for covf in (CovSEiso(1), CovSum(CovSEiso(1), CovNoise(1))):
            p0 = 0.25 * gnp.array(range(covf.param_dim))
            covf.set_loghyper(p0)
            p = ["a"] * covf.param_dim
            with self.assertRaises(ValueError):
                covf.set_loghyper(p)
            self.assertTrue(gnp.allclose(covf.get_loghyper(), p0))

    def test_compound_input_dim_mismatch(self):
        with self.assertRaises(ValueError):
            CovSum(CovSEiso(1), CovNoise(2))

    def test_invalid_input_dim(self):
        for d in (0, -1, 1.5):
            with self.assertRaises(ValueError):
                CovSEiso(d)


if __name__ == "__main__":
    unittest.main()
