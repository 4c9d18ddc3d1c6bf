"""Homeserver administration adapters."""

from autoerase.adapters.base import BaseAdminAdapter
from autoerase.adapters.synapse_adapter import SynapseAdminAdapter

__all__ = ["BaseAdminAdapter", "SynapseAdminAdapter"]
