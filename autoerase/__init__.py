"""Synapse User Auto Erase: removes inactive accounts from a Synapse homeserver."""

from autoerase.version import __version__

__all__ = ["__version__"]
