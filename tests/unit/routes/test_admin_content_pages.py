from unittest.mock import patch

import pytest

from app.extensions import db
from app.models import Role, User
from app.models.content import Content
from app.models.search import SearchDocument
from app.services.search_service import SearchService


@pytest.mark.unit
def test_admin_requires_login(client) -> None:
    response = client.get("/admin/content")

    assert response.status_code == 302
    assert "/auth/login" in response.headers["Location"]


@pytest.mark.unit
def test_non_admin_is_forbidden(client) -> None:
    role = Role(name="Editor", is_admin=False)
    user = User(username="ed", email="ed@inkwell.io", password="secret", role=role)
    db.session.add_all([role, user])
    db.session.commit()
    client.post("/auth/login", data={"email": "ed@inkwell.io", "password": "secret"})

    response = client.get("/admin/content")

    assert response.status_code == 403


@pytest.mark.unit
def test_login_rejects_bad_password(client, admin_user) -> None:
    response = client.post("/auth/login", data={"email": admin_user.email, "password": "wrong"},
                           follow_redirects=True)

    assert b"Invalid credentials." in response.data


@pytest.mark.unit
def test_content_list_filters_by_status(admin_client, make_content) -> None:
    make_content(title="Live one", status="published")
    make_content(title="Hidden draft", status="draft")

    response = admin_client.get("/admin/content?status=published")

    assert response.status_code == 200
    assert b"Live one" in response.data
    assert b"Hidden draft" not in response.data


@pytest.mark.unit
def test_create_published_content_is_indexed(admin_client, make_tag) -> None:
    tag = make_tag("howto", "How-to")

    response = admin_client.post("/admin/content/new", data={
        "title": "Brand new",
        "slug": "brand-new",
        "type": "article",
        "status": "published",
        "metadata": '{"series": "basics"}',
        "tags": [tag.id],
    })

    content = Content.query.filter_by(slug="brand-new").one()
    assert response.status_code == 302
    assert response.headers["Location"].endswith(f"/admin/content/{content.id}")
    assert content.meta_data == {"series": "basics"}
    doc = SearchDocument.query.filter_by(content_id=content.id).one()
    assert doc.to_dict()["tags"] == ["howto"]


@pytest.mark.unit
def test_create_rejects_duplicate_slug(admin_client, make_content) -> None:
    make_content(slug="dupe")

    response = admin_client.post("/admin/content/new", data={
        "title": "Again",
        "slug": "dupe",
        "type": "article",
        "status": "draft",
    })

    assert response.status_code == 200
    assert b"Slug is already in use." in response.data
    assert Content.query.filter_by(slug="dupe").count() == 1


@pytest.mark.unit
def test_delete_soft_deletes_and_unindexes(admin_client, make_content) -> None:
    content = make_content(status="published")
    SearchService.sync(content)

    response = admin_client.post(f"/admin/content/{content.id}/delete")

    assert response.status_code == 303
    assert response.headers["Location"].endswith("/admin/content")
    assert content.is_deleted is True
    assert SearchDocument.query.count() == 0
    assert admin_client.get(f"/admin/content/{content.id}").status_code == 303


@pytest.mark.unit
def test_delete_survives_index_failure(admin_client, make_content, caplog) -> None:
    content = make_content(status="published")
    SearchService.sync(content)

    with patch.object(SearchService, "remove", side_effect=RuntimeError("index offline")):
        response = admin_client.post(f"/admin/content/{content.id}/delete")

    assert response.status_code == 303
    assert content.is_deleted is True
    assert "index offline" in caplog.text

    listing = admin_client.get("/admin/content")
    assert b"the search index could not be updated" in listing.data
