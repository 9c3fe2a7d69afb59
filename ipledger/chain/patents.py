"""
Patent ownership collaborator
The case registry asks it whether a reporter actually holds the patent
"""

from typing import Dict, Protocol, Optional
import structlog

logger = structlog.get_logger()


class PatentOwnership(Protocol):
    """Anything that can answer whether a principal owns a patent"""

    def owns_patent(self, principal: str, patent_id: int) -> bool:
        ...


class InMemoryPatentRegistry:
    """
    Patent ownership table for standalone hosts and tests
    Maps patent ID to its owning principal
    """

    def __init__(self, owners: Optional[Dict[int, str]] = None):
        self._owners: Dict[int, str] = dict(owners or {})

    def record_owner(self, patent_id: int, principal: str) -> None:
        """Record (or transfer) ownership of a patent"""
        if patent_id < 0:
            raise ValueError("Patent ID cannot be negative")
        previous = self._owners.get(patent_id)
        self._owners[patent_id] = principal
        logger.info("Patent owner recorded", patent_id=patent_id, owner=principal, previous_owner=previous)

    def owner_of(self, patent_id: int) -> Optional[str]:
        return self._owners.get(patent_id)

    def owns_patent(self, principal: str, patent_id: int) -> bool:
        return self._owners.get(patent_id) == principal
