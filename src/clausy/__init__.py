"""Clausy the Cloud: water a row of plants until they all bloom."""

__version__ = "0.1.0"
