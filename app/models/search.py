from datetime import datetime
from app.extensions import db

class SearchDocument(db.Model):
    """
    搜索索引文档：已发布内容的反范式快照。
    不继承 BaseModel：索引条目只有存在/不存在，不做软删除。
    """
    __tablename__ = 'search_documents'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    content_id = db.Column(db.Integer, unique=True, index=True, nullable=False)

    title = db.Column(db.String(200))
    description = db.Column(db.Text)
    tags = db.Column(db.JSON, default=list) # 标签 slug 列表
    type = db.Column(db.String(32), index=True)
    content_created_at = db.Column(db.String(32)) # ISO 时间字符串
    likes = db.Column(db.Integer, default=0)
    saves = db.Column(db.Integer, default=0)

    indexed_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.content_id,
            'title': self.title,
            'description': self.description,
            'tags': list(self.tags or []),
            'type': self.type,
            'created_at': self.content_created_at,
            'likes': self.likes,
            'saves': self.saves,
        }
