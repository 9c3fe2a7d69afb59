"""
Patent dispute ledger
Wires the attorney registry and the case components over one shared state
"""

from typing import Optional

import structlog

from ipledger.chain.context import BlockHeight, ChainContext
from ipledger.chain.patents import InMemoryPatentRegistry, PatentOwnership
from ipledger.governance.policy_engine import PolicyEngine
from ipledger.registry import (
    AttorneyRegistry,
    CaseRegistry,
    EnforcementLog,
    EvidenceLedger,
    LedgerState,
    SettlementLedger,
)

logger = structlog.get_logger()


class IPLedger:
    """
    All registries of one ledger instance

    Components share a single LedgerState, so every mutating call on any of
    them is serialized under the same write lock.
    """

    def __init__(
        self,
        policy_engine: Optional[PolicyEngine] = None,
        chain: Optional[ChainContext] = None,
        patents: Optional[PatentOwnership] = None,
    ):
        """
        Initialize the ledger

        Args:
            policy_engine: PolicyEngine instance (creates new if None)
            chain: Identity/height context (built from policy if None)
            patents: Patent-ownership collaborator (empty in-memory table if None)
        """
        self.policy_engine = policy_engine or PolicyEngine()
        self.chain = chain or ChainContext(
            contract_owner=self.policy_engine.get_contract_owner(),
            height=BlockHeight(self.policy_engine.get_genesis_height()),
        )
        self.patents = patents if patents is not None else InMemoryPatentRegistry()
        self.state = LedgerState()

        self.attorneys = AttorneyRegistry(self.state, self.chain, self.policy_engine)
        self.cases = CaseRegistry(self.state, self.chain, self.policy_engine, self.patents)
        self.evidence = EvidenceLedger(self.state, self.chain, self.policy_engine)
        self.enforcement = EnforcementLog(self.state, self.chain, self.policy_engine)
        self.settlements = SettlementLedger(self.state, self.chain, self.policy_engine)

        logger.info(
            "Ledger initialized",
            contract_owner=self.chain.contract_owner,
            height=self.chain.block_height,
            policy_version=self.policy_engine.get_policy_version(),
        )
