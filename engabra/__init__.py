"""Geometric algebra in three dimensions: entity types, products, involutions and text I/O."""

__version__ = "0.2.1"