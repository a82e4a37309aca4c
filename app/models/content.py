from app.extensions import db
from .base import BaseModel

class ContentTag(db.Model):
    """内容 <-> 标签 关联，position 保存提交时的标签顺序"""
    __tablename__ = 'cms_content_tags'

    content_id = db.Column(db.Integer, db.ForeignKey('cms_contents.id'), primary_key=True)
    tag_id = db.Column(db.Integer, db.ForeignKey('cms_tags.id'), primary_key=True)
    position = db.Column(db.Integer, nullable=False, default=0)

    tag = db.relationship('Tag')

class Tag(BaseModel):
    """内容标签 (只读目录，由 TagService 维护)"""
    __tablename__ = 'cms_tags'

    slug = db.Column(db.String(64), unique=True, index=True)
    name = db.Column(db.String(64)) # 显示名

    def __repr__(self):
        return f'<Tag {self.slug}>'

class Content(BaseModel):
    """内容记录 (文章/页面/视频/链接)"""
    __tablename__ = 'cms_contents'

    STATUS_DRAFT = 'draft'
    STATUS_PUBLISHED = 'published'
    STATUS_ARCHIVED = 'archived'
    STATUSES = (STATUS_DRAFT, STATUS_PUBLISHED, STATUS_ARCHIVED)

    TYPES = ('article', 'page', 'video', 'link')

    # 导入内容的来源标记，编辑时必须保留
    EXTERNAL_SOURCE_KEY = 'externalSource'

    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text)
    slug = db.Column(db.String(200), unique=True, index=True, nullable=False)
    body = db.Column(db.Text)
    type = db.Column(db.String(32), default='article', index=True)
    status = db.Column(db.String(20), default=STATUS_DRAFT, index=True)

    # 列名为 metadata，属性名避开 SQLAlchemy 的保留字
    meta_data = db.Column('metadata', db.JSON, default=dict)

    likes = db.Column(db.Integer, default=0)
    saves = db.Column(db.Integer, default=0)

    # 写入走 tag_links (assign_tags)，读取用只读的 tags
    tag_links = db.relationship('ContentTag', order_by='ContentTag.position',
                                cascade='all, delete-orphan')
    tags = db.relationship('Tag', secondary='cms_content_tags',
                           order_by='ContentTag.position', viewonly=True)

    def assign_tags(self, tags):
        """按给定顺序替换标签，已有关联原地更新 position"""
        links = {link.tag_id: link for link in self.tag_links}
        ordered = []
        for position, tag in enumerate(tags):
            link = links.get(tag.id)
            if link is None:
                link = ContentTag(tag=tag)
            link.position = position
            ordered.append(link)
        self.tag_links = ordered

    @property
    def is_imported(self):
        return bool((self.meta_data or {}).get(self.EXTERNAL_SOURCE_KEY))

    @property
    def tag_slugs(self):
        return [tag.slug for tag in self.tags]

    def __repr__(self):
        return f'<Content {self.id} {self.slug}>'
