"""Wireframe viewer for height-map files: parsing, projection, rendering and a pygame window."""

__version__ = "0.1.0"