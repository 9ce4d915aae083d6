"""Result / PagedResult contracts."""

import pytest

from officeops.domain.common.result import ErrorType, PagedResult, Result


def test_success_round_trip():
    assert Result.success(42).value == 42
    assert Result.success(42).is_success


def test_failure_round_trip():
    result = Result.failure("boom")

    assert result.error == "boom"
    assert result.is_failure
    assert result.error_type is ErrorType.VALIDATION


def test_value_on_failure_is_rejected():
    with pytest.raises(ValueError, match="boom"):
        Result.failure("boom").value


def test_not_found_is_distinguishable():
    assert Result.not_found("missing").error_type is ErrorType.NOT_FOUND


def test_payload_free_variants():
    assert Result.ok().is_success
    assert Result.ok().value is None
    assert Result.fail("nope", ErrorType.PERSISTENCE).error_type is ErrorType.PERSISTENCE


def test_cannot_be_both():
    with pytest.raises(ValueError):
        Result(is_success=True, error="both")
    with pytest.raises(ValueError):
        Result(is_success=False)


def test_to_dict_envelope():
    assert Result.success("x").to_dict() == {"success": True, "value": "x", "error": None}
    assert Result.failure("bad").to_dict() == {"success": False, "value": None, "error": "bad"}


class TestPagedResult:
    def test_metadata(self):
        page = PagedResult(items=[1, 2], total_count=5, page=2, page_size=2)

        assert page.total_pages == 3
        assert page.has_next_page
        assert page.has_previous_page

    def test_last_page(self):
        page = PagedResult(items=[5], total_count=5, page=3, page_size=2)

        assert not page.has_next_page

    def test_empty(self):
        page = PagedResult(items=[], total_count=0, page=1, page_size=10)

        assert page.total_pages == 0
        assert not page.has_next_page
        assert not page.has_previous_page
