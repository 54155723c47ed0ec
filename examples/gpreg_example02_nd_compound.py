'''GP regression in 3D with a compound covariance function

The covariance function is built from its textual form, and the
prediction error on a test set is compared with the posterior
standard deviation.

----
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
----
'''
import math
import numpy as np
import gpreg as gp

## -- dataset

dim = 3
ni = 60
nt = 200


def f(x):
    return np.sin(x[:, 0]) * np.cos(0.5 * x[:, 1]) + 0.3 * x[:, 2]


np.random.seed(0)
xi = np.random.uniform(-2.0, 2.0, (ni, dim))
zi = f(xi) + 0.05 * np.random.randn(ni)
xt = np.random.uniform(-2.0, 2.0, (nt, dim))
zt = f(xt)

## -- model specification

spec = "CovSum(CovProd(CovSEard, CovLinearone), CovNoise)"
covf = gp.kernel.create(dim, spec)
print(f"{covf.to_string()}: {covf.param_dim} log-hyperparameters")

model = gp.GaussianProcess(dim, covf)
model.set_parameters(
    [math.log(1.0), math.log(2.0), math.log(3.0),  # log(ell_i)
     math.log(1.0),  # log(sigma_f)
     math.log(1.0),  # log(t)
     math.log(0.05)])  # log(sigma_n)
model.add_patterns(xi, zi)

## -- prediction

zpm, zpv = model.predict_batch(xt, compute_variance=True, zero_neg_variances=True)

rmse = np.sqrt(np.mean((zpm - zt) ** 2))
print(f"test RMSE: {rmse:.4f}")
print(f"mean posterior standard deviation: {np.mean(np.sqrt(zpv)):.4f}")

zloo, sigma2loo, eloo = model.loo()
print(f"LOO RMSE: {np.sqrt(np.mean(eloo ** 2)):.4f}")
