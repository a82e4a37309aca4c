from app.exceptions import ContentNotFound
from app.extensions import db
from app.models.content import Content, Tag

# 表单可选字段的缺省值
FORM_DEFAULTS = {
    'description': '',
    'body': '',
    'metadata': {},
    'tags': [],
}

# update_content 可直接赋值的标量字段
EDITABLE_FIELDS = ('title', 'description', 'slug', 'body', 'type', 'status')


def merge_metadata(existing, submitted):
    """
    合并元数据。
    普通内容直接使用提交的元数据；带 externalSource 标记的导入内容以现有元数据为底，
    提交的键覆盖同名键，现有键一个都不丢。
    """
    merged = dict(submitted or {})
    existing = existing or {}
    if existing.get(Content.EXTERNAL_SOURCE_KEY):
        merged = dict(existing)
        merged.update(submitted or {})
    return merged


def to_form_data(content):
    """把内容记录整理为表单预填充数据，缺省字段取 FORM_DEFAULTS"""
    return {
        'title': content.title,
        'description': content.description or FORM_DEFAULTS['description'],
        'slug': content.slug,
        'body': content.body or FORM_DEFAULTS['body'],
        'type': content.type,
        'status': content.status,
        'metadata': dict(content.meta_data or FORM_DEFAULTS['metadata']),
        'tags': [tag.id for tag in content.tags] or list(FORM_DEFAULTS['tags']),
    }


class ContentService:
    @staticmethod
    def get_content_by_id(content_id):
        """按 ID 获取内容，软删除的记录视为不存在"""
        return Content.query.filter_by(id=content_id, is_deleted=False).first()

    @staticmethod
    def list_contents(status=None, content_type=None, page=1, per_page=20):
        """后台内容列表 (最新在前)"""
        query = Content.query.filter_by(is_deleted=False)
        if status:
            query = query.filter_by(status=status)
        if content_type:
            query = query.filter_by(type=content_type)
        return query.order_by(Content.created_at.desc(), Content.id.desc()).paginate(
            page=page, per_page=per_page, error_out=False
        )

    @staticmethod
    def create_content(fields: dict) -> Content:
        """新建内容"""
        try:
            content = Content(status=Content.STATUS_DRAFT, meta_data={})
            ContentService._apply_fields(content, fields)
            db.session.add(content)
            db.session.commit()
            return content
        except Exception:
            db.session.rollback()
            raise

    @staticmethod
    def update_content(content_id, fields: dict) -> None:
        """
        更新内容 (后写覆盖)
        :param fields: 表单字段，metadata 整体替换，tags 为标签 ID 列表
        """
        try:
            content = Content.query.filter_by(id=content_id, is_deleted=False).first()
            if content is None:
                raise ContentNotFound(content_id)
            ContentService._apply_fields(content, fields)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

    @staticmethod
    def delete_content(content_id) -> bool:
        """软删除内容"""
        content = ContentService.get_content_by_id(content_id)
        if content is None:
            return False
        content.delete(soft=True)
        return True

    @staticmethod
    def _apply_fields(content, fields):
        for name in EDITABLE_FIELDS:
            if name in fields:
                setattr(content, name, fields[name])
        if 'metadata' in fields:
            content.meta_data = dict(fields['metadata'] or {})
        if 'tags' in fields:
            tag_ids = [int(t) for t in (fields['tags'] or [])]
            found = {tag.id: tag for tag in Tag.query.filter(Tag.id.in_(tag_ids)).all()} if tag_ids else {}
            # 保持提交顺序，未知的标签 ID 直接忽略
            content.assign_tags([found[t] for t in dict.fromkeys(tag_ids) if t in found])
