"""mdrun - run markdown code blocks by their heading"""

from ._version import __version__

__all__ = ["__version__"]
