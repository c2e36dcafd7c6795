"""
Reports package for the Hunger Games simulation.
"""

from .report_generator import ReportGenerator

__all__ = ['ReportGenerator']
