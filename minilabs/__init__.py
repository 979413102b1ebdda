"""Small teaching programs: a mark-and-sweep collector, declaration and expression parsers, and a fixed-slot account store."""

__version__ = "0.1.0"