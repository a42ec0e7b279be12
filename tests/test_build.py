import pytest

from blog import build, config
from blog.errors import MetadataParseError


def test_build_writes_index_and_posts(tmp_path, posts_dir, write_post):
    write_post("older", title="Older", date="2024-01-01")
    write_post("newer", title="Tom & Jerry", date="2024-03-01", body="Hello **there**.\n")
    output_dir = tmp_path / "out"

    written = build.build(posts_dir, output_dir)

    assert written == [
        output_dir / "posts" / "newer.html",
        output_dir / "posts" / "older.html",
        output_dir / "index.html",
    ]
    index = (output_dir / "index.html").read_text(encoding="utf-8")
    assert "<h1>robowager&#x27;s blog</h1>" in index
    assert config.SITE_DESCRIPTION in index
    assert '<a href="posts/newer.html">2024-03-01: Tom &amp; Jerry</a>' in index
    assert index.index("newer.html") < index.index("older.html")

    page = (output_dir / "posts" / "newer.html").read_text(encoding="utf-8")
    assert "<title>Tom &amp; Jerry</title>" in page
    assert "<p>2024-03-01</p>" in page
    assert "<strong>there</strong>" in page
    assert '<a href="../index.html">Home</a>' in page


def test_post_body_placeholders_are_left_alone(tmp_path, posts_dir, write_post):
    write_post("meta", title="Meta", body="Write `{{title}}` in the template.\n")
    build.build(posts_dir, tmp_path / "out")

    page = (tmp_path / "out" / "posts" / "meta.html").read_text(encoding="utf-8")
    assert "<code>{{title}}</code>" in page


def test_build_propagates_errors(tmp_path, posts_dir, write_post):
    write_post("good")
    write_post("untitled", raw="---\ndate: 2024-01-01\n---\nbody\n")
    with pytest.raises(MetadataParseError):
        build.build(posts_dir, tmp_path / "out")


def test_main_exits_nonzero_on_failure(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "POSTS_DIR", tmp_path / "missing")
    monkeypatch.setattr(config, "OUTPUT_DIR", tmp_path / "out")
    with pytest.raises(SystemExit) as excinfo:
        build.main()
    assert excinfo.value.code == 1


def test_main_builds_configured_site(monkeypatch, tmp_path, posts_dir, write_post):
    write_post("hello")
    monkeypatch.setattr(config, "POSTS_DIR", posts_dir)
    monkeypatch.setattr(config, "OUTPUT_DIR", tmp_path / "out")

    build.main()

    assert (tmp_path / "out" / "posts" / "hello.html").is_file()
    assert (tmp_path / "out" / "index.html").is_file()


def test_main_exits_nonzero_on_undecodable_post(monkeypatch, tmp_path, posts_dir):
    (posts_dir / "latin1.md").write_bytes(
        "---\ntitle: Café\ndate: 2024-01-01\n---\n".encode("latin-1")
    )
    monkeypatch.setattr(config, "POSTS_DIR", posts_dir)
    monkeypatch.setattr(config, "OUTPUT_DIR", tmp_path / "out")
    with pytest.raises(SystemExit) as excinfo:
        build.main()
    assert excinfo.value.code == 1


def test_build_reads_each_template_once(monkeypatch, tmp_path, posts_dir, write_post):
    for slug in ("a", "b", "c"):
        write_post(slug)
    loaded = []
    real_load = build._load_template

    def counting_load(path):
        loaded.append(path.name)
        return real_load(path)

    monkeypatch.setattr(build, "_load_template", counting_load)
    build.build(posts_dir, tmp_path / "out")

    assert sorted(loaded) == ["index_template.html", "post_template.html"]


def test_rebuild_drops_pages_of_deleted_posts(tmp_path, posts_dir, write_post):
    output_dir = tmp_path / "out"
    write_post("keep")
    gone = write_post("gone")
    build.build(posts_dir, output_dir)
    assert (output_dir / "posts" / "gone.html").is_file()

    gone.unlink()
    build.build(posts_dir, output_dir)

    assert sorted(p.name for p in (output_dir / "posts").iterdir()) == ["keep.html"]
    assert "gone.html" not in (output_dir / "index.html").read_text(encoding="utf-8")
