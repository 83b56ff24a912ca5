"""Abstract syntax tree for C--, with a source printer, a Python code generator and a string pool."""

__version__ = "0.1.0"
__all__ = ["nodes", "strpool", "printer", "pygen"]