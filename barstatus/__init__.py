"""Readers of system information and a layout for window-manager status lines."""

__version__ = "0.1.0"