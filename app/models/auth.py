from datetime import datetime
from flask_login import UserMixin
from werkzeug.security import generate_password_hash, check_password_hash
from app.extensions import db
from .base import BaseModel

class Role(BaseModel):
    """角色"""
    __tablename__ = 'auth_roles'
    name = db.Column(db.String(64), unique=True)
    is_admin = db.Column(db.Boolean, default=False)

    users = db.relationship('User', backref='role', lazy='dynamic')

    def __repr__(self):
        return f'<Role {self.name}>'

class User(UserMixin, BaseModel):
    """后台用户"""
    __tablename__ = 'auth_users'
    email = db.Column(db.String(128), unique=True, index=True)
    username = db.Column(db.String(64), index=True)
    password_hash = db.Column(db.String(256))

    is_active_user = db.Column(db.Boolean, default=True) # 封号开关
    is_admin = db.Column(db.Boolean, default=False)
    last_login = db.Column(db.DateTime)

    role_id = db.Column(db.Integer, db.ForeignKey('auth_roles.id'))

    @property
    def password(self):
        raise AttributeError('password is not a readable attribute')

    @password.setter
    def password(self, password):
        self.password_hash = generate_password_hash(password)

    def verify_password(self, password):
        return check_password_hash(self.password_hash, password)

    def touch_login(self):
        self.last_login = datetime.utcnow()
        db.session.commit()

    @property
    def can_manage_content(self):
        """管理员或管理员角色才能进入内容后台"""
        if self.is_admin:
            return True
        return bool(self.role and self.role.is_admin)

    # Flask-Login 必须属性覆盖
    @property
    def is_active(self):
        return bool(self.is_active_user) and not self.is_deleted

    def __repr__(self):
        return f'<User {self.email}>'
