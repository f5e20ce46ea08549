# This project was developed with assistance from AI tools.
"""Tests for the application completeness evaluator."""

import pytest
from loan_db.enums import DocumentStatus, DocumentType, LoanType

from loan_documents.errors import NotFoundError
from loan_documents.services.completeness import CompletenessEvaluator, summarize_completeness
from loan_documents.services.requirements import DocumentRequirements

from .factories import make_mock_application, make_mock_document, make_mock_uow

_REQS = DocumentRequirements.from_mapping(
    {
        "_default": ["INCOME_PROOF", "CREDIT_HISTORY"],
        "SECOND_HOME": ["INCOME_PROOF", "FIRST_HOME_DEED"],
    }
)


# ---------------------------------------------------------------------------
# summarize_completeness
# ---------------------------------------------------------------------------


def test_no_documents_is_incomplete():
    app = make_mock_application(loan_type=LoanType.SECOND_HOME)
    result = summarize_completeness(app, [], _REQS)

    assert result.complete is False
    assert result.missing_types == [DocumentType.INCOME_PROOF, DocumentType.FIRST_HOME_DEED]
    assert result.required_count == 2
    assert result.approved_count == 0
    assert all(r.document_id is None for r in result.requirements)


def test_all_required_approved_is_complete():
    app = make_mock_application(loan_type=LoanType.SECOND_HOME)
    docs = [
        make_mock_document(id=1, document_type=DocumentType.INCOME_PROOF,
                           status=DocumentStatus.APPROVED),
        make_mock_document(id=2, document_type=DocumentType.FIRST_HOME_DEED,
                           status=DocumentStatus.APPROVED),
    ]
    result = summarize_completeness(app, docs, _REQS)

    assert result.complete is True
    assert result.missing_types == []
    assert result.approved_count == 2


def test_pending_and_rejected_do_not_count():
    app = make_mock_application(loan_type=LoanType.SECOND_HOME)
    docs = [
        make_mock_document(id=1, document_type=DocumentType.INCOME_PROOF,
                           status=DocumentStatus.APPROVED),
        make_mock_document(id=2, document_type=DocumentType.FIRST_HOME_DEED,
                           status=DocumentStatus.REJECTED),
    ]
    result = summarize_completeness(app, docs, _REQS)

    assert result.complete is False
    assert result.missing_types == [DocumentType.FIRST_HOME_DEED]
    deed = result.requirements[1]
    assert deed.is_approved is False
    assert deed.document_id == 2
    assert deed.status == DocumentStatus.REJECTED


def test_approved_document_reported_over_later_pending():
    app = make_mock_application(loan_type=LoanType.SECOND_HOME)
    docs = [
        make_mock_document(id=1, document_type=DocumentType.INCOME_PROOF,
                           status=DocumentStatus.APPROVED),
        make_mock_document(id=2, document_type=DocumentType.INCOME_PROOF,
                           status=DocumentStatus.PENDING),
    ]
    result = summarize_completeness(app, docs, _REQS)

    income = result.requirements[0]
    assert income.is_approved is True
    assert income.document_id == 1


def test_extra_documents_are_ignored():
    app = make_mock_application(loan_type=None)
    docs = [
        make_mock_document(id=1, document_type=DocumentType.INCOME_PROOF,
                           status=DocumentStatus.APPROVED),
        make_mock_document(id=2, document_type=DocumentType.CREDIT_HISTORY,
                           status=DocumentStatus.APPROVED),
        make_mock_document(id=3, document_type=DocumentType.BUSINESS_PLAN,
                           status=DocumentStatus.PENDING),
    ]
    result = summarize_completeness(app, docs, _REQS)

    assert result.complete is True
    assert [r.document_type for r in result.requirements] == [
        DocumentType.INCOME_PROOF,
        DocumentType.CREDIT_HISTORY,
    ]


def test_labels_are_human_readable():
    app = make_mock_application(loan_type=LoanType.SECOND_HOME)
    result = summarize_completeness(app, [], _REQS)
    assert [r.label for r in result.requirements] == ["Proof of Income", "First Home Deed"]


def test_no_requirements_is_trivially_complete():
    reqs = DocumentRequirements.from_mapping({"_default": []})
    result = summarize_completeness(make_mock_application(), [], reqs)
    assert result.complete is True
    assert result.required_count == 0


# ---------------------------------------------------------------------------
# CompletenessEvaluator
# ---------------------------------------------------------------------------


async def test_evaluate_loads_documents_for_application():
    app = make_mock_application(id=7, loan_type=LoanType.FIRST_HOME)
    docs = [
        make_mock_document(id=1, application_id=7, document_type=DocumentType.INCOME_PROOF,
                           status=DocumentStatus.APPROVED),
    ]
    uow = make_mock_uow(application=app, documents=docs)

    result = await CompletenessEvaluator(uow, _REQS).evaluate(7)

    uow.applications.find_by_id.assert_awaited_once_with(7)
    uow.documents.find_by_application_id.assert_awaited_once_with(7)
    assert result.application_id == 7
    assert result.loan_type == LoanType.FIRST_HOME
    assert result.missing_types == [DocumentType.CREDIT_HISTORY]


async def test_evaluate_unknown_application_raises_not_found():
    uow = make_mock_uow(application=None)

    with pytest.raises(NotFoundError, match="Application 9999 not found"):
        await CompletenessEvaluator(uow, _REQS).evaluate(9999)
    uow.documents.find_by_application_id.assert_not_awaited()


async def test_evaluate_application_completeness_alias():
    uow = make_mock_uow(application=make_mock_application())
    evaluator = CompletenessEvaluator(uow, _REQS)

    result = await evaluator.evaluate_application_completeness(1)

    assert result.complete is False
