"""Fitting, evaluation, distance estimation and classification of implicit conic curves."""

__version__ = "0.1.0"
__all__ = ["cli", "conic", "fitter", "solver"]