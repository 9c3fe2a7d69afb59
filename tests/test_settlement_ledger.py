"""
Tests for the Settlement Ledger
Verifies two-party agreement, execution and re-proposal policy
"""

import pytest

from ipledger.models import CaseStatus, ErrorCode

from conftest import OWNER, PATENT_HOLDER, INFRINGER, OUTSIDER

TERMS = "Licensing agreement with ongoing royalties"


@pytest.fixture
def proposed(ledger, case_id):
    """Case with a 500,000 settlement proposed by the patent holder"""
    ledger.settlements.propose_settlement(PATENT_HOLDER, case_id, 500_000, TERMS).unwrap()
    return case_id


class TestSettlementProposal:
    """Test suite for propose_settlement"""

    def test_propose_settlement(self, ledger, case_id):
        result = ledger.settlements.propose_settlement(PATENT_HOLDER, case_id, 500_000, TERMS)
        assert result.to_wire() == {"ok": True}

        settlement = ledger.settlements.get_settlement(case_id)
        assert settlement.settlement_amount == 500_000
        assert settlement.terms == TERMS
        assert settlement.proposed_by == PATENT_HOLDER
        assert settlement.proposal_date == 1000
        assert settlement.agreed_by_infringer is False
        assert settlement.agreed_by_patent_holder is False
        assert settlement.settlement_date is None
        assert ledger.cases.get_case(case_id).status == CaseStatus.SETTLEMENT_PROPOSED

    def test_both_parties_can_propose(self, ledger, case_id):
        assert ledger.settlements.propose_settlement(PATENT_HOLDER, case_id, 500_000, TERMS).is_ok
        assert ledger.settlements.propose_settlement(INFRINGER, case_id, 250_000, "One-time payment").is_ok
        assert ledger.settlements.get_settlement(case_id).proposed_by == INFRINGER

    def test_unauthorized_proposal(self, ledger, case_id):
        for caller in (OWNER, OUTSIDER):
            result = ledger.settlements.propose_settlement(caller, case_id, 1, TERMS)
            assert result.to_wire() == {"error": 100}
        assert ledger.settlements.get_settlement(case_id) is None

    def test_missing_case(self, ledger):
        result = ledger.settlements.propose_settlement(PATENT_HOLDER, 8, 1, TERMS)
        assert result.error == ErrorCode.CASE_NOT_FOUND

    def test_negative_amount(self, ledger, case_id):
        result = ledger.settlements.propose_settlement(PATENT_HOLDER, case_id, -5, TERMS)
        assert result.error == ErrorCode.INVALID_INPUT

    def test_reproposal_resets_agreement(self, ledger, proposed):
        ledger.settlements.accept_settlement(INFRINGER, proposed)
        assert ledger.settlements.get_settlement(proposed).agreed_by_infringer is True

        ledger.settlements.propose_settlement(PATENT_HOLDER, proposed, 600_000, TERMS)
        settlement = ledger.settlements.get_settlement(proposed)
        assert settlement.settlement_amount == 600_000
        assert settlement.agreed_by_infringer is False
        assert settlement.agreed_by_patent_holder is False

        # Holder alone does not resolve the new proposal
        ledger.settlements.accept_settlement(PATENT_HOLDER, proposed)
        assert not ledger.cases.is_resolved(proposed)


class TestSettlementAcceptance:
    """Test suite for accept_settlement"""

    def test_single_acceptance_does_not_resolve(self, ledger, proposed):
        assert ledger.settlements.accept_settlement(INFRINGER, proposed).to_wire() == {"ok": True}

        settlement = ledger.settlements.get_settlement(proposed)
        assert settlement.agreed_by_infringer is True
        assert settlement.agreed_by_patent_holder is False
        assert settlement.settlement_date is None
        assert ledger.cases.get_case(proposed).status == CaseStatus.SETTLEMENT_PROPOSED
        assert ledger.cases.is_resolved(proposed) is False

    @pytest.mark.parametrize("first,second", [(INFRINGER, PATENT_HOLDER), (PATENT_HOLDER, INFRINGER)])
    def test_both_acceptances_execute(self, ledger, proposed, first, second):
        ledger.settlements.accept_settlement(first, proposed)
        ledger.chain.height.advance(7)
        ledger.settlements.accept_settlement(second, proposed)

        settlement = ledger.settlements.get_settlement(proposed)
        case = ledger.cases.get_case(proposed)
        assert settlement.is_fully_agreed()
        assert settlement.settlement_date == 1007
        assert case.status == CaseStatus.RESOLVED
        assert case.resolution_date == 1007
        assert ledger.cases.is_resolved(proposed)

    def test_unauthorized_acceptance(self, ledger, proposed):
        for caller in (OWNER, OUTSIDER):
            assert ledger.settlements.accept_settlement(caller, proposed).to_wire() == {"error": 100}
        settlement = ledger.settlements.get_settlement(proposed)
        assert not settlement.agreed_by_infringer
        assert not settlement.agreed_by_patent_holder

    def test_no_proposal(self, ledger, case_id):
        assert ledger.settlements.accept_settlement(INFRINGER, case_id).error == ErrorCode.SETTLEMENT_NOT_FOUND

    def test_missing_case(self, ledger):
        assert ledger.settlements.accept_settlement(INFRINGER, 11).error == ErrorCode.CASE_NOT_FOUND

    def test_double_acceptance(self, ledger, proposed):
        ledger.settlements.accept_settlement(INFRINGER, proposed)
        result = ledger.settlements.accept_settlement(INFRINGER, proposed)
        assert result.error == ErrorCode.ALREADY_AGREED
        assert ledger.cases.get_case(proposed).status == CaseStatus.SETTLEMENT_PROPOSED

    def test_resolved_case_is_final(self, ledger, proposed):
        ledger.settlements.accept_settlement(INFRINGER, proposed)
        ledger.settlements.accept_settlement(PATENT_HOLDER, proposed)

        assert ledger.settlements.accept_settlement(INFRINGER, proposed).error == ErrorCode.INVALID_STATUS
        result = ledger.settlements.propose_settlement(INFRINGER, proposed, 1, "Reopen")
        assert result.error == ErrorCode.INVALID_STATUS
        assert ledger.settlements.get_settlement(proposed).settlement_amount == 500_000

    def test_settlement_overrides_enforcement(self, ledger, case_id):
        ledger.enforcement.initiate_enforcement(PATENT_HOLDER, case_id, "litigation")
        ledger.settlements.propose_settlement(INFRINGER, case_id, 100, TERMS)
        ledger.settlements.accept_settlement(INFRINGER, case_id)
        ledger.settlements.accept_settlement(PATENT_HOLDER, case_id)
        assert ledger.cases.get_case(case_id).status == CaseStatus.RESOLVED


class TestDisputeLifecycle:
    """End-to-end dispute from report to executed settlement"""

    def test_full_lifecycle(self, ledger):
        cases = ledger.cases

        case_id = cases.report_infringement(
            PATENT_HOLDER, 1, INFRINGER, "Unauthorized use of patented technology", "high", 1_000_000
        ).unwrap()
        assert case_id == 1
        assert cases.get_case(1).status == CaseStatus.REPORTED

        ledger.chain.height.advance()
        evidence_id = ledger.evidence.submit_evidence(
            PATENT_HOLDER, case_id, "documentation", "Product comparison showing infringement"
        ).unwrap()
        assert evidence_id == 1001
        assert cases.get_case(1).status == CaseStatus.EVIDENCE_SUBMITTED

        ledger.chain.height.advance()
        assert ledger.evidence.verify_evidence(OWNER, case_id, evidence_id).unwrap() is True
        assert ledger.evidence.get_evidence(case_id, evidence_id).verified is True

        ledger.chain.height.advance()
        assert ledger.enforcement.initiate_enforcement(PATENT_HOLDER, case_id, "cease-and-desist").unwrap()
        assert cases.get_case(1).status == CaseStatus.ENFORCEMENT_INITIATED

        ledger.chain.height.advance()
        assert ledger.settlements.propose_settlement(PATENT_HOLDER, case_id, 500_000, TERMS).unwrap()
        settlement = ledger.settlements.get_settlement(case_id)
        assert cases.get_case(1).status == CaseStatus.SETTLEMENT_PROPOSED
        assert not settlement.agreed_by_infringer and not settlement.agreed_by_patent_holder

        ledger.chain.height.advance()
        assert ledger.settlements.accept_settlement(INFRINGER, case_id).unwrap()
        assert settlement.agreed_by_infringer is True
        assert cases.get_case(1).status == CaseStatus.SETTLEMENT_PROPOSED

        ledger.chain.height.advance()
        assert ledger.settlements.accept_settlement(PATENT_HOLDER, case_id).unwrap()
        assert settlement.agreed_by_patent_holder is True
        case = cases.get_case(1)
        assert case.status == CaseStatus.RESOLVED
        assert case.resolution_date == 1006
        assert settlement.settlement_date == 1006
        assert cases.is_resolved(1)

        # report, evidence, verify, enforce, propose, accept x2, execute
        assert len(cases.audit_trail(case_id)) == 8
