"""
Execution context supplied by the host ledger
Identity comparisons and the current block height
"""

from typing import Optional
import structlog

logger = structlog.get_logger()


class BlockHeight:
    """
    Current ledger height
    The registries only read it; the host decides when a new block starts
    """

    def __init__(self, start: int = 0):
        if start < 0:
            raise ValueError("Block height cannot be negative")
        self._height = start

    @property
    def current(self) -> int:
        return self._height

    def advance(self, blocks: int = 1) -> int:
        """Move to a later block and return the new height"""
        if blocks < 1:
            raise ValueError("Height can only move forward")
        self._height += blocks
        return self._height


class ChainContext:
    """
    Identity and height oracle for ledger operations
    Never verifies signatures, only compares identities it is given
    """

    def __init__(self, contract_owner: str, height: Optional[BlockHeight] = None):
        """
        Args:
            contract_owner: The single privileged identity
            height: Height source (starts at 0 if not given)
        """
        if not contract_owner:
            raise ValueError("Contract owner identity is required")
        self.contract_owner = contract_owner
        self.height = height or BlockHeight()
        logger.info("Chain context created", contract_owner=contract_owner, height=self.height.current)

    @property
    def block_height(self) -> int:
        return self.height.current

    def is_owner(self, principal: str) -> bool:
        return principal == self.contract_owner
