import pytest

from discount_editor.constants import ErrorMessages
from discount_editor.services.discount_form.results import (
    SubmissionError,
    SubmissionResult,
    extract_remote_errors,
)


@pytest.mark.unit
def test_extract_prefers_top_level_errors() -> None:
    body = {
        "errors": [{"message": "Title required"}, {"message": "Access denied"}],
        "data": {"discountUpdate": {"userErrors": [{"message": "ignored"}]}},
    }

    errors = extract_remote_errors(body)

    assert [error.message for error in errors] == ["Title required", "Access denied"]


@pytest.mark.unit
def test_extract_reads_user_errors_with_field_path() -> None:
    body = {
        "data": {
            "discountCodeAppUpdate": {
                "userErrors": [{"message": "Code must be unique", "field": ["codeAppDiscount", "code"]}],
            },
        },
    }

    errors = extract_remote_errors(body)

    assert errors == [SubmissionError(message="Code must be unique", field=("codeAppDiscount", "code"))]


@pytest.mark.unit
def test_extract_falls_back_to_any_mutation_with_user_errors() -> None:
    body = {"data": {"discountCodeDelete": {"userErrors": ["Discount not found"]}}}

    assert extract_remote_errors(body) == [SubmissionError(message="Discount not found")]


@pytest.mark.unit
@pytest.mark.parametrize(
    "body",
    [
        {},
        {"data": None},
        {"data": {"discountUpdate": {"userErrors": []}}},
        {"errors": []},
    ],
)
def test_extract_returns_empty_list_without_errors(body) -> None:
    assert extract_remote_errors(body) == []


@pytest.mark.unit
def test_extract_handles_blank_messages() -> None:
    errors = extract_remote_errors({"errors": "Internal error"})
    blank = extract_remote_errors({"errors": [{"message": ""}]})

    assert errors == [SubmissionError(message="Internal error")]
    assert blank == [SubmissionError(message=ErrorMessages.REMOTE_REJECTED)]


@pytest.mark.unit
def test_submission_result_to_dict() -> None:
    ok = SubmissionResult.ok()
    failed = SubmissionResult.fail([SubmissionError(message="Title required", field=("title",))])

    assert ok.success is True
    assert ok.to_dict() == {"status": "success"}
    assert failed.success is False
    assert failed.messages == ["Title required"]
    assert failed.to_dict() == {"status": "fail", "errors": [{"message": "Title required", "field": ["title"]}]}
