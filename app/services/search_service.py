"""
搜索索引服务
索引只保存已发布内容：draft 必须不在索引里，published 必须在且字段最新。
"""
import json

from flask import current_app
from sqlalchemy import String, cast, or_

from app.extensions import db
from app.models.content import Content
from app.models.search import SearchDocument


def build_document(content: Content) -> dict:
    """从内容记录生成搜索文档"""
    return {
        'id': content.id,
        'title': content.title,
        'description': content.description,
        'tags': [tag.slug for tag in content.tags],
        'type': content.type,
        'created_at': content.created_at.isoformat() if content.created_at else None,
        'likes': content.likes,
        'saves': content.saves,
    }


class SearchService:
    @staticmethod
    def update(content_id, document: dict) -> None:
        """写入或覆盖索引条目 (upsert)"""
        try:
            doc = SearchDocument.query.filter_by(content_id=content_id).first()
            if doc is None:
                doc = SearchDocument(content_id=content_id)
                db.session.add(doc)
            doc.title = document.get('title')
            doc.description = document.get('description')
            doc.tags = list(document.get('tags') or [])
            doc.type = document.get('type')
            doc.content_created_at = document.get('created_at')
            doc.likes = document.get('likes') or 0
            doc.saves = document.get('saves') or 0
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

    @staticmethod
    def remove(content_id) -> None:
        """删除索引条目，不存在时什么也不做"""
        try:
            SearchDocument.query.filter_by(content_id=content_id).delete()
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

    @staticmethod
    def sync(content: Content) -> None:
        """按内容当前状态同步索引"""
        if content.status == Content.STATUS_DRAFT:
            SearchService.remove(content.id)
            current_app.logger.info(f'search: removed content {content.id} (draft)')
        elif content.status == Content.STATUS_PUBLISHED:
            SearchService.update(content.id, build_document(content))
            current_app.logger.info(f'search: indexed content {content.id}')
        else:
            # 其他状态 (如 archived) 不动索引
            current_app.logger.debug(f'search: no index action for status {content.status!r}')

    @staticmethod
    def search(query=None, content_type=None, tag=None, limit=20):
        """
        检索索引
        :param query: 标题/描述模糊匹配 (不区分大小写)
        :param tag: 标签 slug 精确过滤
        """
        q = SearchDocument.query
        if query:
            pattern = f'%{query}%'
            q = q.filter(or_(SearchDocument.title.ilike(pattern),
                             SearchDocument.description.ilike(pattern)))
        if content_type:
            q = q.filter_by(type=content_type)
        if tag:
            # JSON 列按文本匹配带引号的元素，SQLite 与 PostgreSQL 通用
            q = q.filter(cast(SearchDocument.tags, String).contains(json.dumps(tag), autoescape=True))
        docs = q.order_by(SearchDocument.likes.desc(), SearchDocument.content_id.desc()).limit(limit).all()
        return [d.to_dict() for d in docs]

    @staticmethod
    def reindex_all() -> int:
        """清空并按已发布内容重建索引，返回写入条数"""
        try:
            SearchDocument.query.delete()
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        published = Content.query.filter_by(status=Content.STATUS_PUBLISHED, is_deleted=False).all()
        for content in published:
            SearchService.update(content.id, build_document(content))
        return len(published)
