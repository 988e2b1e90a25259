import pytest

from mdblog.repos.posts_repo import FilePostsRepo


def test_path_for_uses_slug_and_md_suffix(repo, posts_dir):
    assert repo.path_for("hello") == posts_dir / "hello.md"


def test_list_slugs_ignores_non_markdown_and_sorts(repo, posts_dir):
    (posts_dir / "b.md").write_text("b")
    (posts_dir / "a.md").write_text("a")
    (posts_dir / "notes.txt").write_text("x")
    (posts_dir / "folder.md").mkdir()

    assert repo.list_slugs() == ["a", "b"]


def test_list_slugs_raises_when_directory_missing(tmp_path):
    repo = FilePostsRepo(tmp_path / "missing")

    with pytest.raises(OSError):
        repo.list_slugs()


def test_read_all_returns_slug_text_pairs(repo, posts_dir):
    (posts_dir / "one.md").write_text("first", encoding="utf-8")
    (posts_dir / "two.md").write_text("second", encoding="utf-8")

    assert repo.read_all() == [("one", "first"), ("two", "second")]


def test_read_all_skips_undecodable_files(repo, posts_dir):
    (posts_dir / "good.md").write_text("ok", encoding="utf-8")
    (posts_dir / "bad.md").write_bytes(b"\xff\xfe\xfa")

    assert repo.read_all() == [("good", "ok")]


def test_create_is_exclusive(repo, posts_dir):
    repo.create("post", "one")

    with pytest.raises(FileExistsError):
        repo.create("post", "two")
    assert (posts_dir / "post.md").read_text(encoding="utf-8") == "one"


def test_create_makes_missing_directory(tmp_path):
    repo = FilePostsRepo(tmp_path / "new" / "posts")

    repo.create("first", "hello")

    assert (tmp_path / "new" / "posts" / "first.md").read_text(encoding="utf-8") == "hello"


def test_write_overwrites_and_delete_removes(repo, posts_dir):
    repo.create("post", "one")
    repo.write("post", "two")
    assert repo.read("post") == "two"
    assert repo.exists("post") is True

    repo.delete("post")

    assert repo.exists("post") is False
    with pytest.raises(FileNotFoundError):
        repo.delete("post")


def test_exists_is_false_for_name_too_long_for_filesystem(repo):
    assert repo.exists("a" * 300) is False
