from datetime import datetime
from app.extensions import db

class BaseModel(db.Model):
    """
    Inkwell 模型基类
    包含：ID主键, 创建时间, 更新时间, 软删除逻辑, 序列化方法
    """
    __abstract__ = True

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # 软删除标记
    is_deleted = db.Column(db.Boolean, default=False, index=True)

    def save(self):
        """保存到数据库"""
        db.session.add(self)
        db.session.commit()

    def delete(self, soft=True):
        """删除数据（默认软删除）"""
        if soft:
            self.is_deleted = True
            self.save()
        else:
            db.session.delete(self)
            db.session.commit()

    def to_dict(self):
        """
        通用序列化方法：将模型转换为字典，便于 API 返回 JSON。
        使用映射属性名而不是列名 (Content.meta_data 的列名是 metadata)。
        """
        data = {}
        for attr in self.__mapper__.column_attrs:
            if attr.key.startswith('_'):
                continue
            val = getattr(self, attr.key)
            if isinstance(val, datetime):
                data[attr.key] = val.isoformat()
            else:
                data[attr.key] = val
        return data
