"""Value objects: validation at construction, explicit create() factories."""

import pytest

from officeops.domain.common.result import ErrorType
from officeops.domain.exceptions import DomainValidationError
from officeops.domain.value_objects import TodoDescription, TodoId, TodoTitle, UserId


class TestTodoTitle:
    def test_stores_trimmed_value(self):
        assert TodoTitle("  Buy milk  ").value == "Buy milk"

    def test_equality_is_structural(self):
        assert TodoTitle("Buy milk") == TodoTitle("Buy milk ")
        assert TodoTitle("Buy milk") != TodoTitle("Buy bread")

    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_rejects_empty(self, raw):
        with pytest.raises(DomainValidationError, match="cannot be null or empty"):
            TodoTitle(raw)

    def test_rejects_over_200_characters(self):
        TodoTitle("x" * 200)
        with pytest.raises(DomainValidationError, match="cannot exceed 200"):
            TodoTitle("x" * 201)

    def test_is_immutable(self):
        title = TodoTitle("Buy milk")
        with pytest.raises(AttributeError):
            title.value = "Other"

    def test_create_returns_failure_instead_of_raising(self):
        result = TodoTitle.create("")

        assert result.is_failure
        assert result.error_type is ErrorType.VALIDATION
        assert "cannot be null or empty" in result.error

    def test_create_success(self):
        assert TodoTitle.create("Buy milk").value == TodoTitle("Buy milk")


class TestTodoDescription:
    def test_rejects_over_1000_characters(self):
        TodoDescription("d" * 1000)
        with pytest.raises(DomainValidationError, match="cannot exceed 1000"):
            TodoDescription("d" * 1001)

    @pytest.mark.parametrize("raw", [None, "", "   ", "\n\t"])
    def test_create_maps_missing_to_none(self, raw):
        result = TodoDescription.create(raw)

        assert result.is_success
        assert result.value is None

    def test_create_failure(self):
        assert TodoDescription.create("d" * 1001).is_failure


class TestUserId:
    def test_rejects_blank(self):
        with pytest.raises(DomainValidationError):
            UserId("  ")

    def test_create_failure(self):
        assert UserId.create("").is_failure


class TestTodoId:
    def test_unassigned_sentinel(self):
        assert not TodoId.unassigned().is_assigned
        assert TodoId(7).is_assigned

    def test_rejects_negative(self):
        with pytest.raises(ValueError):
            TodoId(-1)

    def test_rejects_non_int(self):
        with pytest.raises(TypeError):
            TodoId("7")
