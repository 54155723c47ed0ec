'''GP regression in 1D, with noisy evaluations

A squared exponential kernel plus a noise term is fitted to a few
noisy evaluations of a smooth function; the posterior mean and
coverage intervals are drawn on a regular grid.

----
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
----
'''
import math
import numpy as np
import gpreg as gp
from gpreg.misc import plotutils

## -- dataset


def f(x):
    return np.sin(3.0 * x) + 0.5 * x


def generate_data(noise_std):
    '''
    Data generation
    (xt, zt): target
    (xi, zi): input dataset
    '''
    nt = 200
    xt = np.linspace(-1.0, 2.0, nt)
    zt = f(xt)

    ind = [10, 45, 100, 130, 131, 133, 160, 190]
    xi = xt[ind]
    zi = zt[ind] + noise_std * np.random.randn(len(ind))

    return xt, zt, xi, zi


noise_std = 1e-1
xt, zt, xi, zi = generate_data(noise_std)

## -- model specification

model = gp.GaussianProcess(1, "CovSum(CovSEiso, CovNoise)")
model.set_parameters([
    math.log(0.4),  # log(ell)
    math.log(1.0),  # log(sigma_f)
    math.log(noise_std)])  # log(sigma_n)

for x, z in zip(xi, zi):
    model.add_pattern([x], z)

print(model)

## -- prediction

zpm, zpv = model.predict_batch(xt, compute_variance=True, zero_neg_variances=True)

## -- visualization

fig = plotutils.Figure(isinteractive=True)
fig.plot(xt, zt, 'C0', linestyle=(0, (5, 5)), linewidth=1)
fig.plotdata(xi, zi)
fig.plotgp(xt, zpm, zpv)
fig.xylabels('x', 'z')
fig.show(grid=True, legend=True, legend_fontsize=9)

## -- leave-one-out

zloo, sigma2loo, eloo = model.loo()
plotutils.plot_loo(zi, zloo, sigma2loo, show=True)
