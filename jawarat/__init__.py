"""Audit HS256 JSON Web Tokens for weak signing secrets."""

__version__ = "1.0.0"
__all__ = ["__version__"]