"""
Unit tests for exception classes and unified_exception_handler.

不需要数据库，纯 Python 测试：
1. BaseAppException 默认值
2. 各子类的默认 type / code / http_status
3. 构造时覆盖 code / http_status
4. detail 可选
5. unified_exception_handler 把异常转成正确的 JsonResponse
"""
import json
import pytest
from rest_framework.exceptions import ParseError, NotAuthenticated

from patientor.exceptions import (
    BaseAppException,
    NotFoundError,
    ValidationError,
)
from patientor.exception_handler import unified_exception_handler


# -------------------------------------------------------------------
# Exception classes
# -------------------------------------------------------------------

class TestBaseAppException:

    def test_defaults(self):
        exc = BaseAppException('something broke')
        assert exc.message == 'something broke'
        assert exc.type == 'error'
        assert exc.code == 'UNKNOWN_ERROR'
        assert exc.http_status == 500
        assert exc.detail is None

    def test_override_code_and_status(self):
        exc = BaseAppException('bad', code='CUSTOM_CODE', http_status=418)
        assert exc.code == 'CUSTOM_CODE'
        assert exc.http_status == 418

    def test_detail_preserved(self):
        exc = BaseAppException('bad', detail={'key': 'value'})
        assert exc.detail == {'key': 'value'}


class TestValidationError:

    def test_defaults(self):
        exc = ValidationError('bad input')
        assert exc.type == 'validation_error'
        assert exc.code == 'VALIDATION_ERROR'
        assert exc.http_status == 400
        assert exc.field is None
        assert exc.detail is None

    def test_field_and_reason(self):
        exc = ValidationError('Incorrect or missing date', field='date', code='INVALID_FIELD')
        assert exc.field == 'date'
        assert exc.reason == 'Incorrect or missing date'
        assert exc.detail == {'field': 'date'}
        assert exc.code == 'INVALID_FIELD'
        assert exc.http_status == 400  # status 没变

    def test_explicit_detail_wins(self):
        exc = ValidationError('bad', field='type', detail={'field': 'type', 'known_types': []})
        assert exc.detail['known_types'] == []


class TestNotFoundError:

    def test_defaults(self):
        exc = NotFoundError()
        assert exc.type == 'not_found'
        assert exc.code == 'PATIENT_NOT_FOUND'
        assert exc.http_status == 404
        assert exc.message == 'Patient not found'

    def test_id_in_detail(self):
        exc = NotFoundError(id='abc')
        assert exc.id == 'abc'
        assert exc.detail == {'id': 'abc'}


# -------------------------------------------------------------------
# unified_exception_handler
# -------------------------------------------------------------------

class TestUnifiedExceptionHandler:

    def test_validation_error_returns_400(self):
        response = unified_exception_handler(ValidationError('Invalid healthCheckRating', field='healthCheckRating'), {})

        assert response.status_code == 400
        body = json.loads(response.content)
        assert body['type'] == 'validation_error'
        assert body['message'] == 'Invalid healthCheckRating'
        assert body['detail']['field'] == 'healthCheckRating'

    def test_not_found_returns_404(self):
        response = unified_exception_handler(NotFoundError(id='missing'), {})

        assert response.status_code == 404
        body = json.loads(response.content)
        assert body['type'] == 'not_found'
        assert body['code'] == 'PATIENT_NOT_FOUND'
        assert body['detail']['id'] == 'missing'

    def test_no_detail_field_when_none(self):
        response = unified_exception_handler(ValidationError('bad input'), {})

        body = json.loads(response.content)
        assert 'detail' not in body

    def test_parse_error_becomes_validation_error(self):
        response = unified_exception_handler(ParseError('JSON parse error'), {})

        assert response.status_code == 400
        body = json.loads(response.content)
        assert body['type'] == 'validation_error'
        assert body['code'] == 'VALIDATION_ERROR'

    def test_other_drf_errors_use_default_handler(self):
        response = unified_exception_handler(NotAuthenticated(), {})
        assert response.status_code == 401

    def test_non_app_exception_not_handled(self):
        """非 BaseAppException 的异常交给 DRF 默认处理，DRF 返回 None 让它冒泡。"""
        assert unified_exception_handler(RuntimeError('unexpected'), {}) is None
