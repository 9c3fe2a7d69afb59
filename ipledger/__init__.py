"""
Permissioned ledger of patent-infringement disputes and IP attorney verification
"""

from .ledger import IPLedger

__all__ = ["IPLedger"]
