"""
统一异常体系。

所有业务异常继承 BaseAppException，包含：
- type:        错误类型标识（validation_error / not_found）
- code:        业务错误码（MISSING_FIELD / UNKNOWN_ENTRY_TYPE / PATIENT_NOT_FOUND / ...）
- message:     人类可读的描述
- detail:      可选的附加信息（dict / list / None）
- http_status: HTTP 状态码

intake / services 只负责 raise，exception_handler 统一捕获并格式化响应。
"""


class BaseAppException(Exception):
    """所有业务异常的基类。"""

    type = 'error'
    code = 'UNKNOWN_ERROR'
    http_status = 500

    def __init__(self, message, code=None, detail=None, http_status=None):
        self.message = message
        if code is not None:
            self.code = code
        if http_status is not None:
            self.http_status = http_status
        self.detail = detail
        super().__init__(message)


class ValidationError(BaseAppException):
    """
    输入校验失败。intake 层抛出，400。

    field 指出出错的字段（嵌套字段用点号，例如 "discharge.date"），
    reason 就是 message 本身。
    """

    type = 'validation_error'
    code = 'VALIDATION_ERROR'
    http_status = 400

    def __init__(self, message, field=None, code=None, detail=None, http_status=None):
        self.field = field
        if detail is None and field is not None:
            detail = {'field': field}
        super().__init__(message, code=code, detail=detail, http_status=http_status)

    @property
    def reason(self):
        return self.message


class NotFoundError(BaseAppException):
    """引用的患者不存在。services 层抛出，404。"""

    type = 'not_found'
    code = 'PATIENT_NOT_FOUND'
    http_status = 404

    def __init__(self, message='Patient not found', id=None, code=None, detail=None, http_status=None):
        self.id = id
        if detail is None and id is not None:
            detail = {'id': id}
        super().__init__(message, code=code, detail=detail, http_status=http_status)
