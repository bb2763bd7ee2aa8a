"""Square matrices of floats with arithmetic operators, powers, minors and determinants."""

__version__ = "0.1.0"
__all__ = ["matrix", "demo"]