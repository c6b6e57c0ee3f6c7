"""Utility helpers for logging, configuration, and common routines."""

from .logger import configure_logging, get_logger

__all__ = ["get_logger", "configure_logging"]
