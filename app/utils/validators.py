"""
表单验证器
"""
from wtforms.validators import ValidationError
import re

SLUG_PATTERN = re.compile(r'^[a-z0-9]+(?:-[a-z0-9]+)*$')

def validate_slug(form, field):
    """验证 slug 格式：小写字母、数字，用连字符分隔"""
    if field.data and not SLUG_PATTERN.match(field.data):
        raise ValidationError('Slug may only contain lowercase letters, digits and hyphens.')

def slugify(text):
    """把任意标题转换成 slug"""
    slug = re.sub(r'[^a-z0-9]+', '-', (text or '').lower()).strip('-')
    return slug or 'untitled'
