import pytest

from app.services.search_service import SearchService


@pytest.mark.unit
def test_search_returns_index_documents(client, make_content, make_tag) -> None:
    tag = make_tag("flask", "Flask")
    published = make_content(title="Flask forms", status="published", tags=[tag])
    draft = make_content(title="Flask drafts", status="draft")
    SearchService.sync(published)
    SearchService.sync(draft)

    response = client.get("/search?q=flask")

    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    assert payload["count"] == 1
    assert payload["results"][0]["id"] == published.id
    assert payload["results"][0]["tags"] == ["flask"]


@pytest.mark.unit
def test_search_rejects_unknown_type(client) -> None:
    response = client.get("/search?type=podcast")

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["success"] is False
    assert "podcast" in payload["message"]
    assert "article" in payload["allowed"]
