"""
Tests for the Evidence Ledger
"""

from ipledger.models import CaseStatus, ErrorCode, EvidenceType

from conftest import OWNER, PATENT_HOLDER, INFRINGER, OUTSIDER


def submit(ledger, case_id, caller=PATENT_HOLDER, evidence_type="documentation"):
    return ledger.evidence.submit_evidence(
        caller, case_id, evidence_type, "Product comparison showing infringement"
    )


class TestEvidenceSubmission:
    """Test suite for submit_evidence"""

    def test_reporter_submits_evidence(self, ledger, case_id):
        result = submit(ledger, case_id)
        assert result.to_wire() == {"ok": 1000}

        evidence = ledger.evidence.get_evidence(case_id, 1000)
        assert evidence.evidence_type == EvidenceType.DOCUMENTATION
        assert evidence.submitted_by == PATENT_HOLDER
        assert evidence.submission_date == 1000
        assert evidence.verified is False
        assert ledger.cases.get_case(case_id).status == CaseStatus.EVIDENCE_SUBMITTED

    def test_infringer_submits_evidence(self, ledger, case_id):
        ledger.chain.height.advance()
        result = submit(ledger, case_id, caller=INFRINGER, evidence_type="testimony")
        assert result.to_wire() == {"ok": 1001}

    def test_third_party_cannot_submit(self, ledger, case_id):
        for caller in (OUTSIDER, OWNER):
            assert submit(ledger, case_id, caller=caller).to_wire() == {"error": 100}
        assert ledger.evidence.list_evidence(case_id) == []
        assert ledger.cases.get_case(case_id).status == CaseStatus.REPORTED

    def test_missing_case(self, ledger):
        assert submit(ledger, 77).error == ErrorCode.CASE_NOT_FOUND

    def test_invalid_evidence_type(self, ledger, case_id):
        assert submit(ledger, case_id, evidence_type="rumour").error == ErrorCode.INVALID_INPUT

    def test_same_height_submissions_get_distinct_ids(self, ledger, case_id):
        first = submit(ledger, case_id).ok
        second = submit(ledger, case_id, caller=INFRINGER).ok
        third = submit(ledger, case_id, evidence_type="technical-analysis").ok
        assert (first, second, third) == (1000, 1001, 1002)

    def test_ids_follow_height_after_a_gap(self, ledger, case_id):
        submit(ledger, case_id)
        ledger.chain.height.advance(50)
        assert submit(ledger, case_id).ok == 1050

    def test_ids_unique_across_cases(self, ledger, case_id):
        other_case = ledger.cases.report_infringement(
            PATENT_HOLDER, 1, OUTSIDER, "Second dispute", "low", 5
        ).ok
        a = submit(ledger, case_id).ok
        b = submit(ledger, other_case).ok
        assert a != b
        assert ledger.evidence.get_evidence(case_id, b) is None

    def test_later_evidence_keeps_advanced_status(self, ledger, case_id):
        ledger.enforcement.initiate_enforcement(PATENT_HOLDER, case_id, "litigation")
        assert submit(ledger, case_id).is_ok
        assert ledger.cases.get_case(case_id).status == CaseStatus.ENFORCEMENT_INITIATED

    def test_no_evidence_after_resolution(self, ledger, case_id):
        ledger.cases.update_case_status(OWNER, case_id, "dismissed")
        assert submit(ledger, case_id).error == ErrorCode.INVALID_STATUS

    def test_list_evidence_in_submission_order(self, ledger, case_id):
        submit(ledger, case_id)
        ledger.chain.height.advance(3)
        submit(ledger, case_id, caller=INFRINGER)
        ids = [e.evidence_id for e in ledger.evidence.list_evidence(case_id)]
        assert ids == [1000, 1003]


class TestEvidenceVerification:
    """Test suite for verify_evidence"""

    def test_owner_verifies_evidence(self, ledger, case_id):
        evidence_id = submit(ledger, case_id).ok
        assert ledger.evidence.verify_evidence(OWNER, case_id, evidence_id).to_wire() == {"ok": True}
        assert ledger.evidence.get_evidence(case_id, evidence_id).verified is True

    def test_owner_can_unverify(self, ledger, case_id):
        evidence_id = submit(ledger, case_id).ok
        ledger.evidence.verify_evidence(OWNER, case_id, evidence_id)
        ledger.evidence.verify_evidence(OWNER, case_id, evidence_id, False)
        assert ledger.evidence.get_evidence(case_id, evidence_id).verified is False

    def test_non_owner_cannot_verify(self, ledger, case_id):
        evidence_id = submit(ledger, case_id).ok
        for caller in (PATENT_HOLDER, INFRINGER, OUTSIDER):
            result = ledger.evidence.verify_evidence(caller, case_id, evidence_id)
            assert result.to_wire() == {"error": 100}
        assert ledger.evidence.get_evidence(case_id, evidence_id).verified is False

    def test_non_owner_gets_unauthorized_for_missing_evidence(self, ledger, case_id):
        assert ledger.evidence.verify_evidence(OUTSIDER, case_id, 5).error == ErrorCode.UNAUTHORIZED

    def test_missing_evidence(self, ledger, case_id):
        assert ledger.evidence.verify_evidence(OWNER, case_id, 1234).error == ErrorCode.EVIDENCE_NOT_FOUND

    def test_evidence_on_wrong_case(self, ledger, case_id):
        evidence_id = submit(ledger, case_id).ok
        assert ledger.evidence.verify_evidence(OWNER, case_id + 1, evidence_id).error == ErrorCode.EVIDENCE_NOT_FOUND
