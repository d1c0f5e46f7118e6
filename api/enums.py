"""
Shared Enums

Single source of truth for enums used across database models, API schemas,
and business logic.
"""

from enum import Enum


class StorageSource(str, Enum):
    """
    Where transaction records are kept

    - MONGO: MongoDB collection, survives restarts
    - MEMORY: process-local list, cleared on restart
    """

    MONGO = "mongo"
    MEMORY = "memory"
