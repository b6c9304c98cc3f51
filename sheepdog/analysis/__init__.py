"""
Analysis module for plotting simulation results.
"""

from .plotting import plot_run_summary

__all__ = ['plot_run_summary']
