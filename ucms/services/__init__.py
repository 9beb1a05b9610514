"""
Services module containing the registry and its initial dataset.
"""

from .registry_service import RegistryService
from .bootstrap import seed_initial_data

__all__ = [
    "RegistryService",
    "seed_initial_data",
]
