import pytest


@pytest.fixture
def posts_dir(tmp_path):
    directory = tmp_path / "_posts"
    directory.mkdir()
    return directory


@pytest.fixture
def write_post(posts_dir):
    def _write(slug, title="A post", date="2024-01-01", body="Some *text*.\n", raw=None):
        if raw is None:
            raw = f"---\ntitle: {title}\ndate: {date}\n---\n{body}"
        path = posts_dir / f"{slug}.md"
        path.write_text(raw, encoding="utf-8")
        return path
    return _write
