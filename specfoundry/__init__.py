"""SpecFoundry engineering formula library."""

__version__ = "1.0.0"
