"""Provision a personal Linux terminal environment."""

__version__ = "0.1.0"
