"""
Smoke tests for the plotting helpers.
"""
import matplotlib

matplotlib.use("Agg")

import math
import pytest

import gpreg.num as gnp
from gpreg import GaussianProcess
from gpreg.misc import plotutils


def make_gp():
    gp = GaussianProcess(1, "CovSum(CovSEiso, CovNoise)")
    gp.set_parameters([0.0, 0.0, math.log(0.1)])
    gp.add_patterns([[0.0], [1.0], [2.0]], [0.0, 0.8, 0.9])
    return gp


@pytest.mark.parametrize("colorscheme", ["default", "simple", "bw"])
def test_plotgp(colorscheme):
    xt = gnp.linspace(-1.0, 3.0, 50)
    zpm, zpv = make_gp().predict_batch(xt, compute_variance=True)
    fig = plotutils.Figure(isinteractive=False)
    fig.plotgp(xt, zpm, zpv, colorscheme=colorscheme)
    fig.plotdata([0.0, 1.0, 2.0], [0.0, 0.8, 0.9])
    fig.legend()
    assert len(fig.ax.lines) >= 2
    fig.close()


def test_plotgp_unknown_colorscheme():
    fig = plotutils.Figure(isinteractive=False)
    with pytest.raises(ValueError):
        fig.plotgp([0.0, 1.0], [0.0, 0.0], [1.0, 1.0], colorscheme="neon")
    fig.close()


def test_plotgp_negative_variance():
    fig = plotutils.Figure(isinteractive=False)
    fig.plotgp([0.0, 1.0], [0.0, 0.0], [-1e-12, 1.0])
    fig.close()


def test_plot_posterior():
    fig = plotutils.plot_posterior(make_gp(), gnp.linspace(-1.0, 3.0, 30))
    assert fig.ax.get_xlabel() == "x"
    fig.close()


def test_plot_posterior_requires_1d():
    gp = GaussianProcess(2, "CovSEiso")
    with pytest.raises(ValueError):
        plotutils.plot_posterior(gp, [[0.0, 0.0]])


def test_plot_loo():
    gp = make_gp()
    zloo, sigma2loo, _ = gp.loo()
    fig = plotutils.plot_loo(gp.sampleset.targets(), zloo, sigma2loo)
    fig.close()
