"""Service modules"""
from .reporter import PositionReporter

__all__ = ["PositionReporter"]
