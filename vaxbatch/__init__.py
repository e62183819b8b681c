"""Tracking of vaccine batches and the inoculations given from them, driven by text commands."""

__version__ = "0.1.0"