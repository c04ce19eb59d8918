"""Plotting of fitted models, their samples and residuals."""

from .plotters import FitVisualizer

__all__ = ['FitVisualizer']
