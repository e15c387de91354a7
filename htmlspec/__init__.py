"""Catalog of HTML elements, their content categories, permitted children and typed attributes."""

__version__ = "0.1.0"