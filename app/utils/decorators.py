from functools import wraps
from flask import abort
from flask_login import current_user

def admin_required(f):
    """
    检查用户是否可以管理内容 (需放在 login_required 之后)
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated or not current_user.can_manage_content:
            abort(403)
        return f(*args, **kwargs)
    return decorated_function
