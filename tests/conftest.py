"""全局测试 fixtures：内存 SQLite + 已登录的管理员客户端。"""
import itertools
import os

import pytest

os.environ.setdefault("SECRET_KEY", "test-secret-key")

from app import create_app
from app.extensions import db
from app.models import Content, Role, Tag, User

ADMIN_EMAIL = "admin@inkwell.io"
ADMIN_PASSWORD = "admin-pass"


@pytest.fixture(scope="function")
def app():
    """创建测试应用实例，整个测试期间保持应用上下文。"""
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture(scope="function")
def client(app):
    return app.test_client()


@pytest.fixture(scope="function")
def admin_user(app):
    role = Role(name="Admin", is_admin=True)
    user = User(username="admin", email=ADMIN_EMAIL, password=ADMIN_PASSWORD, role=role)
    db.session.add_all([role, user])
    db.session.commit()
    return user


@pytest.fixture(scope="function")
def admin_client(client, admin_user):
    """通过登录接口建立会话的管理员客户端。"""
    response = client.post("/auth/login", data={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 302
    return client


@pytest.fixture(scope="function")
def make_tag(app):
    def _make(slug, name=None):
        tag = Tag(slug=slug, name=name or slug.title())
        db.session.add(tag)
        db.session.commit()
        return tag

    return _make


@pytest.fixture(scope="function")
def make_content(app):
    counter = itertools.count(1)

    def _make(**overrides):
        n = next(counter)
        fields = {
            "title": f"Content {n}",
            "slug": f"content-{n}",
            "type": "article",
            "status": Content.STATUS_DRAFT,
            "meta_data": {},
        }
        fields.update(overrides)
        tags = fields.pop("tags", [])
        content = Content(**fields)
        content.assign_tags(tags)
        db.session.add(content)
        db.session.commit()
        return content

    return _make
