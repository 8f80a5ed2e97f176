"""Double Dodge: a two-player arcade game about dodging creatures, with a pygame window."""

__version__ = "0.1.0"
__all__ = ["__version__"]