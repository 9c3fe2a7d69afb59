"""
Collaborators supplied by the host ledger
"""

from .context import BlockHeight, ChainContext
from .patents import PatentOwnership, InMemoryPatentRegistry

__all__ = [
    "BlockHeight",
    "ChainContext",
    "PatentOwnership",
    "InMemoryPatentRegistry",
]
