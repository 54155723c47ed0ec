# gpreg/config.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import os
import logging

# Read version from VERSION file
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(os.path.abspath(_version_file), "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"

_SUPPORTED_BACKENDS = ("numpy",)


def _level_from_env(default=logging.WARNING):
    level = os.environ.get("GPREG_LOG_LEVEL")
    if level is None:
        return default
    if level.isdigit():
        return int(level)
    return logging.getLevelName(level.upper())


class _GPRegConfig:
    def __init__(self):
        self.version = __version__
        self.backend = None
        self.dtype = float
        self.precision = 10  # significant digits written by gpreg.io
        self.caches = {}
        # logger lives in config
        self.logger = logging.getLogger("gpreg")
        if not self.logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.logger.addHandler(h)
        self.logger.setLevel(_level_from_env())

    def __str__(self):
        return (
            f"GPRegConfig("
            f"version={self.version}, "
            f"backend={self.backend}, "
            f"dtype={self.dtype}, "
            f"precision={self.precision}, "
            f"caches={list(self.caches.keys())})"
        )

    def __repr__(self):
        return (
            f"<GPRegConfig "
            f"version={self.version!r}, "
            f"backend={self.backend!r}, "
            f"dtype={self.dtype!r}, "
            f"precision={self.precision!r}, "
            f"caches={list(self.caches.keys())}>"
        )

    def update(self, **kwargs):
        for k, v in kwargs.items():
            if not hasattr(self, k):
                raise AttributeError(f"unknown configuration key '{k}'")
            setattr(self, k, v)
        return self

    def clear_caches(self, name=None):
        if name is None:
            self.caches.clear()
        else:
            self.caches.pop(name, None)


_config = _GPRegConfig()


def get_config():
    return _config


def _detect_backend():
    env = os.environ.get("GPREG_BACKEND")
    if env is None:
        return "numpy"
    if env not in _SUPPORTED_BACKENDS:
        raise RuntimeError(
            f"GPREG_BACKEND={env!r} is not supported; "
            f"choose one of {_SUPPORTED_BACKENDS}."
        )
    return env


def init_backend():
    """Idempotent. Detect and store backend, set env for downstream imports."""
    if _config.backend is None:
        backend = _detect_backend()
        _config.backend = backend
        os.environ["GPREG_BACKEND"] = backend
    return _config.backend


def set_backend(backend: str):
    """Force a backend before importing gpreg.num."""
    if backend not in _SUPPORTED_BACKENDS:
        raise ValueError(f"backend must be one of {_SUPPORTED_BACKENDS}")
    _config.backend = backend
    os.environ["GPREG_BACKEND"] = backend


def get_backend():
    """Return current backend; triggers detection if not set."""
    return _config.backend or init_backend()


def set_precision(digits: int):
    """Set the number of significant digits used when writing models."""
    digits = int(digits)
    if digits < 1:
        raise ValueError("precision must be a positive number of digits")
    _config.precision = digits


def clear_caches(name=None):
    _config.clear_caches(name)


def get_logger():
    return _config.logger


def set_log_level(level):
    _config.logger.setLevel(level)
