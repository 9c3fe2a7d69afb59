"""
Shared fixtures for ledger tests
"""

import pytest

from ipledger.chain.context import BlockHeight, ChainContext
from ipledger.chain.patents import InMemoryPatentRegistry
from ipledger.governance.policy_engine import PolicyEngine
from ipledger.ledger import IPLedger

OWNER = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
PATENT_HOLDER = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"
INFRINGER = "ST2JHG361ZXG51QTKY2NQCVBPPRRE2KZB1HR05NNC"
OUTSIDER = "ST3AM1A56AK2C1XAFJ4115ZSV26EB49BVQ10MGCS0"

PATENT_ID = 1


@pytest.fixture
def policy_engine():
    """Create PolicyEngine instance from the repository policy file"""
    return PolicyEngine()


@pytest.fixture
def patents():
    """Patent table where PATENT_HOLDER owns patent 1"""
    return InMemoryPatentRegistry({PATENT_ID: PATENT_HOLDER})


@pytest.fixture
def ledger(policy_engine, patents):
    """Fresh ledger at height 1000 owned by OWNER"""
    chain = ChainContext(contract_owner=OWNER, height=BlockHeight(1000))
    return IPLedger(policy_engine=policy_engine, chain=chain, patents=patents)


@pytest.fixture
def case_id(ledger):
    """A reported case of PATENT_HOLDER against INFRINGER"""
    result = ledger.cases.report_infringement(
        PATENT_HOLDER,
        PATENT_ID,
        INFRINGER,
        "Unauthorized use of patented technology",
        "high",
        1_000_000,
    )
    return result.unwrap()
