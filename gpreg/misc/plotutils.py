# gpreg/misc/plotutils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Plotting helpers for one-dimensional posteriors and LOO diagnostics.

Components
----------
Figure
    Thin wrapper around a single-axes matplotlib figure, with
    `plotgp` drawing a posterior mean and its coverage intervals.

plot_posterior(gp, xt)
    Posterior of a one-dimensional GaussianProcess on a grid.

plot_loo(zi, zloom, zloov)
    Leave-one-out predictions against observed values.
"""
import sys
import numpy as np
import scipy.stats as stats
import matplotlib.pyplot as plt
from matplotlib import interactive

# fill colors, from the widest interval to the narrowest
_COLORSCHEMES = {
    "default": dict(mean="#F2404C", fill=["#F2F2F2", "#D8D8D8", "#BFBFBF"], alpha=0.8),
    "simple": dict(mean="#F2404C", fill=["#BFBFBF"], alpha=0.8),
    "bw": dict(mean="#000000", fill=["#F2F2F2"], alpha=0.0, bounds="#000000"),
}


def _running_interpreter():
    return hasattr(sys, "ps1") or bool(sys.flags.interactive)


class Figure:
    """Single-axes figure.

    Attributes
    ----------
    fig : matplotlib.figure.Figure
    ax : matplotlib.axes.Axes
    """

    def __init__(self, isinteractive=True, boxoff=True, **kargs):
        if isinteractive and _running_interpreter():
            interactive(True)
        self.fig = plt.figure(**kargs)
        self.ax = self.fig.add_subplot(1, 1, 1)
        if boxoff:
            self.set_boxoff()

    def set_boxoff(self):
        for side in ("right", "top"):
            self.ax.spines[side].set_visible(False)
        self.ax.tick_params(direction="in")

    def show(self, grid=None, legend=None, legend_fontsize=None, xlim=None):
        if grid:
            self.grid()
        if legend:
            self.legend(**({} if legend_fontsize is None else {"fontsize": legend_fontsize}))
        if xlim is not None:
            self.xlim(xlim)
        plt.show()

    def close(self):
        plt.close(self.fig)

    def plot(self, x, z, *args, **kargs):
        self.ax.plot(x, z, *args, **kargs)

    def plotdata(self, x, z, label="data"):
        self.ax.plot(x, z, "rs", markerfacecolor="none", markersize=6, label=label)

    def xylabels(self, sx="", sy=""):
        self.ax.set_xlabel(sx)
        self.ax.set_ylabel(sy)

    def title(self, s):
        self.ax.set_title(s)

    def legend(self, **kwargs):
        self.ax.legend(**kwargs)

    def grid(self, visible=True, linestyle=(0, (1, 5)), linewidth=0.5, **kwargs):
        self.ax.grid(visible, linestyle=linestyle, linewidth=linewidth, **kwargs)

    def xlim(self, new_limits=None):
        if new_limits is not None:
            self.ax.set_xlim(new_limits)
        return self.ax.get_xlim()

    def plotgp(
        self,
        x,
        mean,
        variance,
        colorscheme="default",
        mean_label="posterior mean",
        ci=(0.95, 0.99, 0.999),
    ):
        """Posterior mean and coverage intervals.

        Parameters
        ----------
        x, mean, variance : array_like, shape (m,)
            Prediction points, posterior means and variances. Negative
            variances are drawn as zero.
        colorscheme : {"default", "simple", "bw"}
            "default" draws every interval in `ci`, the two others only
            the first one.
        ci : sequence of float
            Coverage levels.
        """
        if colorscheme not in _COLORSCHEMES:
            raise ValueError(f"unknown colorscheme '{colorscheme}'")
        scheme = _COLORSCHEMES[colorscheme]

        x = np.asarray(x, dtype=float).ravel()
        mean = np.asarray(mean, dtype=float).ravel()
        std = np.sqrt(np.maximum(np.asarray(variance, dtype=float).ravel(), 0.0))

        levels = sorted(ci[: len(scheme["fill"])], reverse=True)

        self.ax.plot(x, mean, scheme["mean"], linewidth=2.0, label=mean_label)
        for level, color in zip(levels, scheme["fill"]):
            delta = stats.norm.ppf((1.0 + level) / 2.0)
            upper = mean + delta * std
            lower = mean - delta * std
            self.ax.fill(
                np.hstack((x, x[::-1])),
                np.hstack((upper, lower[::-1])),
                color=color,
                alpha=scheme["alpha"],
                linewidth=0.5,
                label=f"CI {100 * level:g}%",
            )
            if "bounds" in scheme:
                for bound in (upper, lower):
                    self.ax.plot(
                        x, bound, color=scheme["bounds"], linestyle="dashed",
                        dashes=(10, 8), linewidth=0.5,
                    )


def plot_posterior(gp, xt, fig=None, show=False):
    """Plot the posterior of a one-dimensional GaussianProcess on xt.

    Parameters
    ----------
    gp : gpreg.GaussianProcess
        Model with input_dim 1.
    xt : array_like, shape (m,) or (m, 1)
    fig : Figure, optional
        Figure to draw on; a new one is created otherwise.
    show : bool

    Returns
    -------
    Figure
    """
    if gp.input_dim != 1:
        raise ValueError("plot_posterior requires a one-dimensional model")
    xt = np.asarray(xt, dtype=float).reshape(-1)
    zpm, zpv = gp.predict_batch(xt, compute_variance=True)
    if zpv is None:
        zpv = np.zeros_like(zpm)
    if fig is None:
        fig = Figure(isinteractive=show)
    fig.plotgp(xt, zpm, zpv)
    if len(gp) > 0:
        fig.plotdata(gp.sampleset.inputs()[:, 0], gp.sampleset.targets())
    fig.xylabels("x", "z")
    if show:
        fig.show(grid=True, legend=True, legend_fontsize=9)
    return fig


def plot_loo(zi, zloom, zloov, show=False):
    """LOO predictions with 95% intervals against observed values."""
    fig = Figure(isinteractive=show)
    fig.ax.errorbar(zi, zloom, 1.96 * np.sqrt(zloov), fmt="ko", ls="None")
    fig.xylabels("true values", "predicted")
    fig.title("LOO predictions with 95% coverage intervals")
    (xmin, xmax), (ymin, ymax) = fig.ax.get_xlim(), fig.ax.get_ylim()
    lo, hi = min(xmin, ymin), max(xmax, ymax)
    fig.ax.plot([lo, hi], [lo, hi], "--")
    fig.grid()
    if show:
        fig.show()
    return fig
