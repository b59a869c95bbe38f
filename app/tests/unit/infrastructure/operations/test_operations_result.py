"""Unit tests for OperationResult and OperationStatus in infrastructure."""

import pytest
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus


@pytest.mark.unit
class TestOperationStatus:
    def test_values(self):
        assert OperationStatus.SUCCESS.value == "success"
        assert OperationStatus.TRANSIENT_ERROR.value == "transient_error"
        assert OperationStatus.PERMANENT_ERROR.value == "permanent_error"
        assert OperationStatus.UNAUTHORIZED.value == "unauthorized"
        assert OperationStatus.NOT_FOUND.value == "not_found"


@pytest.mark.unit
class TestOperationResultFactories:
    def test_success_factory_minimal(self):
        result = OperationResult.success()
        assert result.status == OperationStatus.SUCCESS
        assert result.message == "ok"
        assert result.is_success

    def test_success_factory_with_data(self):
        data = {"TranslatedText": "Hello"}
        result = OperationResult.success(data=data, message="translated")
        assert result.data == data
        assert result.message == "translated"

    def test_transient_error(self):
        result = OperationResult.transient_error("timeout", error_code="TIMEOUT")
        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "TIMEOUT"
        assert not result.is_success

    def test_permanent_error(self):
        result = OperationResult.permanent_error("bad request")
        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code is None

    def test_error_with_data(self):
        result = OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            "HTTP 401",
            error_code="HTTP_401",
            data={"status_code": 401},
        )
        assert result.status == OperationStatus.UNAUTHORIZED
        assert result.data == {"status_code": 401}
        assert not result.is_success
