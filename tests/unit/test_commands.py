import pytest

from app.models.content import Content
from app.models.search import SearchDocument


@pytest.mark.unit
def test_seed_builds_consistent_index(app) -> None:
    runner = app.test_cli_runner()

    result = runner.invoke(args=["seed", "--count", "9"])

    assert result.exit_code == 0, result.output
    assert Content.query.count() == 9
    published = Content.query.filter_by(status=Content.STATUS_PUBLISHED).count()
    assert SearchDocument.query.count() == published
    # 每三条里有一条导入内容
    assert sum(1 for c in Content.query.all() if c.is_imported) == 3


@pytest.mark.unit
def test_reindex_and_status(app, make_content) -> None:
    make_content(status="published")
    make_content(status="draft")
    runner = app.test_cli_runner()

    before = runner.invoke(args=["status"])
    assert "out of sync" in before.output

    result = runner.invoke(args=["reindex"])
    assert result.exit_code == 0
    assert "Indexed 1 published contents." in result.output

    after = runner.invoke(args=["status"])
    assert "in sync" in after.output
