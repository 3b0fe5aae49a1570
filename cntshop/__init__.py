"""The Continente supermarket category catalogue, its lookup and its rendering."""

__version__ = "0.1.0"
__all__ = ["__version__"]