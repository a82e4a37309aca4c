# 按照依赖顺序导入
from .base import BaseModel
from .auth import User, Role
from .content import Content, Tag, ContentTag
from .search import SearchDocument
