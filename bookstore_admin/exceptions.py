"""
业务异常定义
"""
import sqlite3


class AdminError(Exception):
    """基础异常类"""

    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str, status_code: int = None, code: str = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code
        super().__init__(message)


class NotFoundError(AdminError):
    """记录未找到异常"""
    status_code = 404
    code = "NOT_FOUND"


class ConflictError(AdminError):
    """唯一键冲突异常"""
    status_code = 409
    code = "CONFLICT"


class ValidationError(AdminError):
    """数据约束校验失败"""
    status_code = 400
    code = "VALIDATION_ERROR"


class TransientError(AdminError):
    """存储暂时不可用"""
    status_code = 503
    code = "SERVICE_UNAVAILABLE"


class AuthError(AdminError):
    """未认证或权限不足"""
    status_code = 401
    code = "UNAUTHORIZED"


class OrderNotFoundError(NotFoundError):
    """订单未找到异常"""
    pass


class BookNotFoundError(NotFoundError):
    """书籍未找到异常"""
    pass


_TRANSIENT_MARKERS = ("locked", "busy", "unable to open")


def translate_error(exc: Exception, message: str) -> AdminError:
    """把底层异常归类为带状态码的业务异常，message 为对外展示的固定文案"""
    if isinstance(exc, AdminError):
        return exc

    if isinstance(exc, sqlite3.IntegrityError):
        if "UNIQUE" in str(exc).upper():
            return ConflictError(message)
        return ValidationError(message)

    if isinstance(exc, sqlite3.OperationalError):
        text = str(exc).lower()
        if any(marker in text for marker in _TRANSIENT_MARKERS):
            return TransientError(message)

    return AdminError(message)
