"""Interpreter for the .lo scripting language: evaluator, function executor and line interpreter."""

__version__ = "0.1.0"
__all__ = ["__version__"]