from app.extensions import db
from app.models.content import Tag


class TagService:
    @staticmethod
    def get_all_tags():
        """标签目录，按显示名排序"""
        return Tag.query.filter_by(is_deleted=False).order_by(Tag.name, Tag.id).all()

    @staticmethod
    def get_or_create(slug: str, name: str = None) -> Tag:
        tag = Tag.query.filter_by(slug=slug).first()
        if tag is None:
            tag = Tag(slug=slug, name=name or slug)
            db.session.add(tag)
            db.session.commit()
        return tag
