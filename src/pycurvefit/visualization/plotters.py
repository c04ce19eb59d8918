import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.gridspec import GridSpec

from pycurvefit.core.fitted_model import FittedModel
from pycurvefit.data.constants import NumericalConstants

logger = logging.getLogger(__name__)


class FitVisualizer:
    """Handles visualization of fitted models and their residuals."""

    COLORS = {
        'data': '#1f77b4',
        'model': '#d62728',
        'residual': '#2ca02c',
        'zero': '#7f7f7f',
    }

    # --- Constructor ---
    def __init__(self, plot_directory: Union[str, Path]) -> None:
        self.plot_directory = Path(plot_directory)
        self.setup_style()
        logger.debug("FitVisualizer initialized with output directory: %s", self.plot_directory)

    @staticmethod
    def setup_style() -> None:
        plt.rcParams.update({
            'font.size': 10,
            'font.family': 'sans-serif',
            'font.sans-serif': ['DejaVu Sans', 'Arial', 'Helvetica', 'Liberation Sans'],
            'axes.titlesize': 12,
            'axes.labelsize': 10,
            'xtick.labelsize': 9,
            'ytick.labelsize': 9,
            'legend.fontsize': 9,
            'figure.titlesize': 14,
            'axes.grid': True,
            'grid.alpha': 0.3,
            'grid.linestyle': '--',
            'axes.axisbelow': True,
            'figure.facecolor': 'white',
            'axes.facecolor': 'white',
            'savefig.facecolor': 'white',
            'savefig.edgecolor': 'none',
        })

    # --- Public API Methods ---
    def plot_model(self, model: FittedModel,
                   num_points: int = NumericalConstants.DEFAULT_VISUALIZATION_POINTS,
                   filename: Optional[str] = None) -> Path:
        """
        Plot the samples, the model on a dense grid and the residuals at the samples.
        Args:
            model: Model to plot
            num_points: Number of evaluation points for the model curve
            filename: Output file name (default: ``<name>_<method>_<timestamp>.png``)
        Returns:
            Path of the saved PNG file
        """
        logger.info("Visualizing model: %s (method: %s)", model.name, model.method)
        self.plot_directory.mkdir(parents=True, exist_ok=True)
        if filename is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            filename = f"{model.name.replace(' ', '_')}_{model.method}_{timestamp}.png"
        filepath = self.plot_directory / filename
        fig = plt.figure(figsize=(10, 8))
        try:
            if model.method == "bilinear":
                ax = fig.add_subplot(1, 1, 1)
                self._plot_grid(ax, model, num_points)
            else:
                gs = GridSpec(2, 1, figure=fig, height_ratios=[3, 1], hspace=0.3)
                ax = fig.add_subplot(gs[0, 0])
                ax_res = fig.add_subplot(gs[1, 0], sharex=ax)
                if model.method == "vector":
                    self._plot_vector(ax, ax_res, model, num_points)
                else:
                    self._plot_curve(ax, ax_res, model, num_points)
            title = f"{model.name} ({model.method})"
            if model.metrics is not None:
                title += f"\n{model.metrics}"
            fig.suptitle(title, fontsize=14, fontweight='bold')
            fig.savefig(str(filepath), dpi=150, bbox_inches="tight", facecolor='white', edgecolor='none')
            logger.info("Model plot saved as %s", filepath)
            return filepath
        except Exception as e:
            logger.error("Unexpected error visualizing model '%s': %s", model.name, e, exc_info=True)
            raise ValueError(f"Unexpected error visualizing model {model.name}: {e}") from e
        finally:
            plt.close(fig)
            logger.debug("Figure closed and memory cleaned up")

    # --- Internal Methods ---
    @staticmethod
    def _padded_range(values: np.ndarray, num_points: int, log_scale: bool = False) -> np.ndarray:
        lower, upper = float(np.min(values)), float(np.max(values))
        if log_scale:
            factor = 1.0 + NumericalConstants.RANGE_PADDING_FACTOR
            return np.geomspace(lower / factor, upper * factor, num_points)
        padding = (upper - lower) * NumericalConstants.RANGE_PADDING_FACTOR
        if padding == 0:
            padding = max(abs(lower) * NumericalConstants.RANGE_PADDING_FACTOR, 1.0)
        return np.linspace(lower - padding, upper + padding, num_points)

    def _plot_curve(self, ax, ax_res, model: FittedModel, num_points: int) -> None:
        log_scale = model.method == "log_linear"
        dense_x = self._padded_range(model.x, num_points, log_scale)
        dense_y = np.asarray(model.evaluate(dense_x), dtype=np.float64)
        residuals = model.y - np.asarray(model.evaluate(model.x), dtype=np.float64)
        ax.plot(dense_x, dense_y, color=self.COLORS['model'], linewidth=2, label=f'{model.method} model')
        ax.scatter(model.x, model.y, color=self.COLORS['data'], s=25, zorder=3, label='samples')
        ax.set_ylabel("y", fontweight='bold')
        ax.legend(loc='best', framealpha=0.9)
        self._plot_residuals(ax_res, model.x, residuals)
        if log_scale:
            ax.set_xscale('log')

    def _plot_vector(self, ax, ax_res, model: FittedModel, num_points: int) -> None:
        dense_x = self._padded_range(model.x, num_points)
        dense_y = model.evaluate(dense_x)
        residuals = model.y - model.evaluate(model.x)
        for d in range(model.y.shape[1]):
            line, = ax.plot(dense_x, dense_y[:, d], linewidth=2, label=f'component {d}')
            ax.scatter(model.x, model.y[:, d], color=line.get_color(), s=25, zorder=3)
            ax_res.scatter(model.x, residuals[:, d], color=line.get_color(), s=15)
        ax.set_ylabel("components", fontweight='bold')
        ax.legend(loc='best', framealpha=0.9)
        ax_res.axhline(0.0, color=self.COLORS['zero'], linestyle='--', linewidth=1)
        ax_res.set_xlabel("x", fontweight='bold')
        ax_res.set_ylabel("residual", fontweight='bold')

    def _plot_residuals(self, ax_res, x: np.ndarray, residuals: np.ndarray) -> None:
        ax_res.axhline(0.0, color=self.COLORS['zero'], linestyle='--', linewidth=1)
        ax_res.vlines(x, 0.0, residuals, color=self.COLORS['residual'], linewidth=1)
        ax_res.scatter(x, residuals, color=self.COLORS['residual'], s=15)
        ax_res.set_xlabel("x", fontweight='bold')
        ax_res.set_ylabel("residual", fontweight='bold')

    def _plot_grid(self, ax, model: FittedModel, num_points: int) -> None:
        """One curve along the y axis per grid row."""
        dense_y = self._padded_range(model.y, num_points)
        for i, xi in enumerate(model.x):
            values = model.evaluate(np.full_like(dense_y, xi), dense_y)
            line, = ax.plot(dense_y, values, linewidth=1.5, label=f'x = {xi:g}')
            ax.scatter(model.y, model.table[i], color=line.get_color(), s=20, zorder=3)
        ax.set_xlabel("y", fontweight='bold')
        ax.set_ylabel("table value", fontweight='bold')
        ax.legend(loc='best', framealpha=0.9)
