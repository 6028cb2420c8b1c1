"""Atomic Test Kit: inline soft assertions for runnable examples."""

from atomictest.assertions import (
    CapturedException,
    ComparisonResult,
    Trace,
    capture,
    eq,
    neq,
    trace,
)
from atomictest.config import ERROR_TAG, KitConfig, configure, get_config, load_config
from atomictest.formatter import render

__all__ = [
    "ERROR_TAG",
    "CapturedException",
    "ComparisonResult",
    "KitConfig",
    "Trace",
    "capture",
    "configure",
    "eq",
    "get_config",
    "load_config",
    "neq",
    "render",
    "trace",
]

__version__ = "0.1.0"
