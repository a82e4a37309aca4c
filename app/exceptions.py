class InkwellException(Exception):
    """Inkwell 系统基础异常类"""
    def __init__(self, message, code=500, payload=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.payload = payload

    def to_dict(self):
        rv = dict(self.payload or ())
        rv['message'] = self.message
        rv['code'] = self.code
        rv['success'] = False
        return rv

class ValidationError(InkwellException):
    """请求参数验证错误"""
    def __init__(self, message="Invalid data", payload=None):
        super().__init__(message, code=400, payload=payload)

class ContentNotFound(InkwellException):
    """内容不存在 (或已被软删除)"""
    def __init__(self, content_id, payload=None):
        super().__init__(f"Content {content_id} not found", code=404, payload=payload)
        self.content_id = content_id
