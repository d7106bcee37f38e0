"""Parsers for the HEADER and TABLES sections of DXF drawings, working on tags."""

__version__ = "0.1.0"

__all__ = ["header", "layer", "linetype", "style", "tables", "tags"]