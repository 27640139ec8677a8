"""Tests for LocalFilesystem."""

from git_updater.upgrader.filesystem import LocalFilesystem


def test_move_directory(tmp_path):
    source = tmp_path / "src"
    source.mkdir()
    (source / "a.txt").write_text("a")

    assert LocalFilesystem().move(source, tmp_path / "dest")
    assert (tmp_path / "dest" / "a.txt").read_text() == "a"
    assert not source.exists()


def test_move_refuses_existing_dest_without_overwrite(tmp_path):
    source = tmp_path / "src"
    dest = tmp_path / "dest"
    source.mkdir()
    dest.mkdir()

    assert not LocalFilesystem().move(source, dest)
    assert source.exists()


def test_move_overwrites_existing_dest(tmp_path):
    source = tmp_path / "src"
    dest = tmp_path / "dest"
    source.mkdir()
    (source / "new.txt").write_text("new")
    dest.mkdir()
    (dest / "old.txt").write_text("old")

    assert LocalFilesystem().move(source, dest, overwrite=True)
    assert (dest / "new.txt").exists()
    assert not (dest / "old.txt").exists()
    assert sorted(p.name for p in tmp_path.iterdir()) == ["dest"]


def test_move_missing_source(tmp_path):
    assert not LocalFilesystem().move(tmp_path / "missing", tmp_path / "dest")


def test_failed_overwrite_restores_dest(tmp_path, monkeypatch):
    source = tmp_path / "src"
    dest = tmp_path / "dest"
    source.mkdir()
    dest.mkdir()
    (dest / "old.txt").write_text("old")

    import git_updater.upgrader.filesystem as filesystem

    real_rename = filesystem.os.rename

    def rename(src, dst):
        if str(src) == str(source):
            raise OSError("device busy")
        real_rename(src, dst)

    monkeypatch.setattr(filesystem.os, "rename", rename)

    assert not LocalFilesystem().move(source, dest, overwrite=True)
    assert (dest / "old.txt").read_text() == "old"
    assert source.exists()
    assert sorted(p.name for p in tmp_path.iterdir()) == ["dest", "src"]


def test_failed_restore_returns_false(tmp_path, monkeypatch):
    source = tmp_path / "src"
    dest = tmp_path / "dest"
    source.mkdir()
    dest.mkdir()

    import git_updater.upgrader.filesystem as filesystem

    real_rename = filesystem.os.rename

    def rename(src, dst):
        # Setting the destination aside works; every later rename fails.
        if str(src) == str(dest):
            real_rename(src, dst)
            return
        raise OSError("device busy")

    monkeypatch.setattr(filesystem.os, "rename", rename)

    assert LocalFilesystem().move(source, dest, overwrite=True) is False
    assert source.exists()
