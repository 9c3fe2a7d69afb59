"""
Demo script for the patent dispute ledger
Walks one dispute from report to executed settlement, then the attorney registry
"""

from ipledger.chain.context import BlockHeight, ChainContext
from ipledger.chain.patents import InMemoryPatentRegistry
from ipledger.governance.policy_engine import PolicyEngine
from ipledger.ledger import IPLedger
from ipledger.models import Result

PATENT_HOLDER = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"
INFRINGER = "ST2JHG361ZXG51QTKY2NQCVBPPRRE2KZB1HR05NNC"
OUTSIDER = "ST3AM1A56AK2C1XAFJ4115ZSV26EB49BVQ10MGCS0"


def print_section(title: str):
    """Print formatted section header"""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def print_result(label: str, result: Result):
    print(f"  {label:<40} -> {result.to_wire()}")


def build_ledger() -> IPLedger:
    policy_engine = PolicyEngine()
    chain = ChainContext(
        contract_owner=policy_engine.get_contract_owner(),
        height=BlockHeight(policy_engine.get_genesis_height()),
    )
    patents = InMemoryPatentRegistry({1: PATENT_HOLDER})
    return IPLedger(policy_engine=policy_engine, chain=chain, patents=patents)


def demo_dispute_lifecycle(ledger: IPLedger):
    """Demo 1: Report, evidence, enforcement and bilateral settlement"""
    print_section("Demo 1: Dispute Lifecycle")
    owner = ledger.chain.contract_owner

    result = ledger.cases.report_infringement(
        PATENT_HOLDER, 1, INFRINGER, "Unauthorized use of patented technology", "high", 1_000_000
    )
    print_result("Patent holder reports infringement", result)
    case_id = result.unwrap()
    print_result("Outsider reports same patent", ledger.cases.report_infringement(
        OUTSIDER, 1, INFRINGER, "Not my patent", "low", 1
    ))

    ledger.chain.height.advance()
    result = ledger.evidence.submit_evidence(
        PATENT_HOLDER, case_id, "documentation", "Product comparison showing infringement"
    )
    print_result("Patent holder submits evidence", result)
    evidence_id = result.unwrap()
    print_result("Owner verifies evidence", ledger.evidence.verify_evidence(owner, case_id, evidence_id))

    ledger.chain.height.advance()
    print_result("Patent holder sends cease-and-desist",
                 ledger.enforcement.initiate_enforcement(PATENT_HOLDER, case_id, "cease-and-desist"))

    ledger.chain.height.advance()
    print_result("Patent holder proposes 500,000", ledger.settlements.propose_settlement(
        PATENT_HOLDER, case_id, 500_000, "Licensing agreement with ongoing royalties"
    ))
    print_result("Infringer accepts", ledger.settlements.accept_settlement(INFRINGER, case_id))
    print(f"  Resolved after one acceptance: {ledger.cases.is_resolved(case_id)}")

    ledger.chain.height.advance()
    print_result("Patent holder accepts", ledger.settlements.accept_settlement(PATENT_HOLDER, case_id))

    case = ledger.cases.get_case(case_id)
    print(f"\n  Case {case_id} status: {case.status} (resolved at height {case.resolution_date})")
    print("\n  Audit trail:")
    for entry in ledger.cases.audit_trail(case_id):
        print(f"    #{entry.sequence} h={entry.height} {entry.action} by {entry.caller}")


def demo_attorney_registry(ledger: IPLedger):
    """Demo 2: Attorney registration and owner verification"""
    print_section("Demo 2: Attorney Registry")
    owner = ledger.chain.contract_owner

    print_result("Register John Doe", ledger.attorneys.register(
        OUTSIDER, "John Doe", "Patent Attorney", "BAR123456"
    ))
    print_result("Register John Doe again", ledger.attorneys.register(
        OUTSIDER, "John Doe", "Patent Attorney", "BAR123456"
    ))
    print_result("Non-owner verifies", ledger.attorneys.verify(OUTSIDER, 1))
    print_result("Owner verifies", ledger.attorneys.verify(owner, 1))
    print_result("Owner verifies unknown attorney", ledger.attorneys.verify(owner, 9))
    print(f"\n  Attorney 1 verified: {ledger.attorneys.is_verified(1)}")
    print(f"  Total attorneys: {ledger.attorneys.total_attorneys()}")


def main():
    ledger = build_ledger()
    demo_dispute_lifecycle(ledger)
    demo_attorney_registry(ledger)
    print_section("Demo Complete")


if __name__ == "__main__":
    main()
