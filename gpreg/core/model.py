# gpreg/core/model.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Gaussian Process regression engine.
"""
import warnings
import gpreg.num as gnp
from gpreg.config import get_logger
from gpreg.errors import InvalidParameter, NumericalError
from gpreg.kernel import CovarianceFunction, factory

from . import kriging
from . import utils
from .sampleset import SampleSet

_logger = get_logger()


class GaussianProcess:
    """Gaussian Process (GP) regression with a zero prior mean.

    The model owns a covariance function and a set of training
    samples. The Cholesky factorization of the kernel matrix and the
    weights alpha = K^{-1} y are computed lazily: any change of the
    samples or of the hyperparameters marks them as stale, and the next
    prediction rebuilds them from scratch (O(n^3) for n samples).
    Predictions against an unchanged model reuse the factorization.

    A GaussianProcess is not safe for concurrent use; callers sharing
    one between threads must serialize access to it.

    Attributes
    ----------
    input_dim : int
        Dimensionality of the input vectors.
    covf : CovarianceFunction
        The covariance function. Change its hyperparameters through
        `set_parameters` so that the cache is invalidated.
    sampleset : SampleSet
        Training samples in insertion order.

    Examples
    --------
    >>> import gpreg
    >>> gp = gpreg.GaussianProcess(1, "CovSum(CovSEiso, CovNoise)")
    >>> gp.set_parameters([0.0, 0.0, -2.3])
    >>> for x, y in [(0.0, 0.0), (1.0, 0.8), (2.0, 0.9)]:
    ...     gp.add_pattern([x], y)
    >>> mean, var = gp.predict([1.5], compute_variance=True)
    """

    def __init__(self, input_dim, covf):
        """
        Parameters
        ----------
        input_dim : int
            Dimensionality of the input vectors.
        covf : CovarianceFunction or str
            Covariance function instance, or a textual specification
            resolved by `gpreg.kernel.create`.
        """
        if isinstance(covf, str):
            covf = factory.create(input_dim, covf)
        if not isinstance(covf, CovarianceFunction):
            raise TypeError("covf must be a CovarianceFunction or a kernel specification")
        if covf.input_dim != input_dim:
            raise InvalidParameter("covariance function input", input_dim, covf.input_dim)
        self.input_dim = covf.input_dim
        self.covf = covf
        self.sampleset = SampleSet(self.input_dim)
        self._L = None
        self._alpha = None
        self._dirty = True

    def __repr__(self):
        return f"<gpreg.core.GaussianProcess object> {hex(id(self))}"

    def __str__(self):
        return (
            f"GP Model:\n"
            f"  Input Dimension: {self.input_dim}\n"
            f"  Covariance Function: {self.covf.to_string()}\n"
            f"  Log-hyperparameters: {self.covf.get_loghyper()}\n"
            f"  Samples: {len(self.sampleset)}"
        )

    def __len__(self):
        return len(self.sampleset)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def param_dim(self):
        return self.covf.param_dim

    def get_param_dim(self):
        return self.covf.param_dim

    def get_sampleset_size(self):
        return len(self.sampleset)

    def get_loghyper(self):
        return self.covf.get_loghyper()

    @property
    def is_dirty(self):
        """True when the next prediction will rebuild the factorization."""
        return self._dirty

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def add_pattern(self, x, y):
        """Append the training sample (x, y).

        Parameters
        ----------
        x : array_like, shape (input_dim,)
        y : float

        Raises
        ------
        InvalidParameter
            If x does not have length input_dim. Nothing is added.
        """
        self.sampleset.append(x, y)
        self._dirty = True

    def add_patterns(self, xi, zi):
        """Append several samples, given as an (n, input_dim) array and n targets.

        Either all rows are added or, if one is invalid, none.
        """
        xi = utils.ensure_input_matrix(xi, self.input_dim, "input vectors")
        zi = gnp.asarray(zi, dtype=gnp.float64).reshape(-1)
        if zi.shape[0] != xi.shape[0]:
            raise InvalidParameter("target vector", xi.shape[0], zi.shape[0])
        for x, y in zip(xi, zi):
            self.sampleset.append(x, y)
        if xi.shape[0] > 0:
            self._dirty = True

    def set_parameters(self, p):
        """Set the log-hyperparameters of the covariance function.

        Parameters
        ----------
        p : array_like, shape (param_dim,)

        Raises
        ------
        InvalidParameter
            If p does not have length param_dim.
        ValueError, OverflowError
            If p is not numeric or overflows a derived hyperparameter.

        On error the hyperparameters are left unchanged and the cached
        factorization stays valid.
        """
        self.covf.set_loghyper(p)
        self._dirty = True

    set_params = set_parameters

    # ------------------------------------------------------------------
    # Prediction
    # ------------------------------------------------------------------
    def _update(self):
        """Rebuild the factorization and alpha if they are stale."""
        if not self._dirty:
            return
        n = len(self.sampleset)
        _logger.debug("Rebuilding kernel matrix factorization (n=%d)", n)
        xi = [s.x for s in self.sampleset]
        try:
            L, alpha = kriging.factorize(self.covf, xi, self.sampleset.targets())
        except NumericalError:
            _logger.warning(
                "Cholesky factorization failed for %s with loghyper=%s (n=%d)",
                self.covf.to_string(),
                self.covf.get_loghyper(),
                n,
            )
            raise
        self._L = L
        self._alpha = alpha
        self._dirty = False

    def predict(self, x, compute_variance=False, zero_neg_variances=False):
        """Posterior mean and variance at a single point x.

        Parameters
        ----------
        x : array_like, shape (input_dim,)
            Prediction point.
        compute_variance : bool, optional
            Whether to compute the posterior variance, by default False.
        zero_neg_variances : bool, optional
            Whether to replace a negative posterior variance with zero, by
            default False. Negative variances can occur due to numerical
            errors; otherwise the raw value is returned and a
            RuntimeWarning is issued.

        Returns
        -------
        mean : float
            Posterior mean.
        variance : float or None
            Posterior variance, None if not requested or if the model
            has no training samples.

        Raises
        ------
        InvalidParameter
            If x does not have length input_dim.
        NumericalError
            If the kernel matrix is not positive definite. The model
            stays stale, so that a later call with corrected
            hyperparameters retries the factorization.

        Notes
        -----
        Without training samples, the prior mean 0.0 is returned and no
        variance is computed; callers needing the prior variance can use
        `covf.get(x, x)`.
        """
        x = utils.ensure_input_vector(x, self.input_dim, "prediction point")
        if len(self.sampleset) == 0:
            return 0.0, None
        self._update()
        xi = [s.x for s in self.sampleset]
        mean, variance = kriging.posterior(
            self.covf, self._L, self._alpha, xi, x, compute_variance
        )
        if variance is not None and variance < 0.0:
            if zero_neg_variances:
                variance = 0.0
            else:
                warnings.warn(
                    "Negative variance detected. Consider adding a noise term.",
                    RuntimeWarning,
                )
        return mean, variance

    def predict_batch(self, xt, compute_variance=False, zero_neg_variances=False):
        """Posterior means and variances at the rows of xt.

        Parameters
        ----------
        xt : array_like, shape (m, input_dim)
            Prediction points. A 1D array is read as m points when
            input_dim is 1.
        compute_variance : bool, optional
        zero_neg_variances : bool, optional
            See `predict`.

        Returns
        -------
        zt_mean : gnp.array, shape (m,)
        zt_var : gnp.array, shape (m,) or None
        """
        xt = utils.ensure_input_matrix(xt, self.input_dim)
        m = xt.shape[0]
        zt_mean = gnp.zeros(m)
        if len(self.sampleset) == 0:
            return zt_mean, None
        self._update()
        xi = [s.x for s in self.sampleset]
        zt_var = gnp.zeros(m) if compute_variance else None
        for t in range(m):
            x = gnp.copy(xt[t])
            zt_mean[t], var = kriging.posterior(
                self.covf, self._L, self._alpha, xi, x, compute_variance
            )
            if compute_variance:
                zt_var[t] = var
        if compute_variance and gnp.any(zt_var < 0.0):
            if zero_neg_variances:
                zt_var = gnp.maximum(zt_var, 0.0)
            else:
                warnings.warn(
                    "Negative variances detected. Consider adding a noise term.",
                    RuntimeWarning,
                )
        return zt_mean, zt_var

    def loo(self):
        """Leave-one-out predictions by virtual cross-validation.

        Uses the cached factorization, rebuilding it if needed.

        Returns
        -------
        zloo : gnp.array, shape (n,)
            Prediction of each target from all the other samples.
        sigma2loo : gnp.array, shape (n,)
            Variance of the leave-one-out predictions.
        eloo : gnp.array, shape (n,)
            Leave-one-out prediction errors.

        Raises
        ------
        ValueError
            If the model has no training samples.
        """
        if len(self.sampleset) == 0:
            raise ValueError("leave-one-out requires at least one sample")
        self._update()
        return kriging.loo(self._L, self._alpha, self.sampleset.targets())
