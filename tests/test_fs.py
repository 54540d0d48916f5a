import os

import pytest

from cckit import fs


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _write(path, content="test content"):
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(content)


def test_separator():
    sep = fs.get_separator()
    assert len(sep) == 1
    assert sep == ("\\" if os.name == "nt" else "/")


def test_path_exists(workdir):
    assert fs.exists(fs.get_current_directory())
    assert not fs.exists("non_existent_path_12345")


def test_file_detection(workdir):
    _write("temp_test_file.txt")
    assert fs.exists("temp_test_file.txt")
    assert fs.is_regular_file("temp_test_file.txt")
    assert not fs.is_directory("temp_test_file.txt")
    current = fs.get_current_directory()
    assert fs.is_directory(current)
    assert not fs.is_regular_file(current)


def test_file_name_base_suffix():
    assert fs.get_file_name("/path/to/file.txt") == "file.txt"
    assert fs.get_file_name("C:\\path\\to\\file.txt") == "file.txt"
    assert fs.get_file_base("/path/to/file.txt") == "file"
    assert fs.get_file_suffix("/path/to/file.txt") == ".txt"
    assert fs.get_file_suffix("/path/to/file") == ""


def test_suffix_edge_cases():
    assert fs.get_file_suffix(".bashrc") == ""
    assert fs.get_file_base(".bashrc") == ".bashrc"
    assert fs.get_file_suffix("archive.tar.gz") == ".gz"
    assert fs.get_file_base("archive.tar.gz") == "archive.tar"
    assert fs.get_file_name("/path/to/dir/") == ""


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/path/to/file.txt", "/path/to"),
        ("\\path\\to\\file.txt", "/path/to"),
        ("/path/to/dir/", "/path/to/dir/"),
        ("\\path\\to\\dir\\", "/path/to/dir/"),
    ],
)
def test_directory_path(workdir, path, expected):
    assert fs.get_directory_path(path) == expected


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/path/to/file.txt", "to"),
        ("\\path\\to\\file.txt", "to"),
        ("/path/to/dir/", "dir"),
        ("\\path\\to\\dir\\", "dir"),
        ("file.txt", "."),
    ],
)
def test_directory_name(workdir, path, expected):
    assert fs.get_directory_name(path) == expected


def test_directory_path_relative_and_normalized(workdir):
    assert fs.get_directory_path("file.txt") == "."
    assert fs.get_directory_path("a/./b/../c/") == "a/c/"
    assert fs.get_directory_path("a/b/../c.txt") == "a"


def test_directory_path_existing_dir_without_slash(workdir):
    os.mkdir("real_dir")
    assert fs.get_directory_path("real_dir") == "real_dir"
    assert fs.get_directory_name("real_dir") == "real_dir"


def test_directory_path_empty_raises():
    with pytest.raises(ValueError):
        fs.get_directory_path("")


def test_parent_path():
    assert fs.get_parent_path("/path/to/file.txt") == "/path/to"
    assert fs.get_parent_path("\\path\\to\\file.txt") == "/path/to"
    assert fs.get_parent_path("/") == "/"
    assert fs.get_parent_path("file.txt") == ""
    assert fs.get_parent_path("/file.txt") == "/"


def test_current_directory(workdir):
    current = fs.get_current_directory()
    assert current
    assert fs.exists(current)
    assert fs.is_directory(current)
    assert "\\" not in current


def test_absolute_path(workdir):
    absolute = fs.get_absolute_path(".")
    assert os.path.isabs(absolute)
    assert fs.exists(absolute)
    current = fs.get_current_directory()
    assert fs.get_absolute_path(current) == current
    assert fs.get_absolute_path("x.txt") == current + "/x.txt"


def test_generic_path():
    assert fs.get_generic_path("/path/to/file.txt") == "/path/to/file.txt"
    generic = fs.get_generic_path("C:\\path\\to\\file.txt")
    assert generic == "C:/path/to/file.txt"


def test_file_operations(workdir):
    _write("test_source.txt", "This is test content for file operations.")
    size = fs.get_file_size("test_source.txt")
    assert size == len("This is test content for file operations.")
    assert fs.copy_file("test_source.txt", "test_destination.txt")
    assert fs.exists("test_destination.txt")
    assert fs.get_file_size("test_destination.txt") == size
    assert fs.remove_file("test_destination.txt")
    assert not fs.exists("test_destination.txt")


def test_copy_file_overwrites(workdir):
    _write("a.txt", "new content")
    _write("b.txt", "old")
    assert fs.copy_file("a.txt", "b.txt")
    with open("b.txt", encoding="utf-8") as handle:
        assert handle.read() == "new content"


def test_copy_file_creates_parent(workdir):
    _write("src.txt", "abc")
    assert not fs.copy_file("src.txt", "deep/nested/dst.txt")
    assert fs.copy_file("src.txt", "deep/nested/dst.txt", True)
    assert fs.get_file_size("deep/nested/dst.txt") == 3


def test_copy_missing_source_fails(workdir):
    assert not fs.copy_file("missing.txt", "dst.txt")
    assert not fs.exists("dst.txt")


def test_directory_operations(workdir):
    assert fs.create_directory("test_directory")
    assert fs.is_directory("test_directory")
    assert fs.ensure_path_exists("test_directory/nested/deep")
    assert fs.exists("test_directory/nested/deep")
    _write("test_directory/test.txt")
    files = fs.list_files("test_directory")
    assert files == ["test_directory/test.txt"]
    assert fs.list_files("test_directory", {".txt"}) == ["test_directory/test.txt"]
    assert not fs.remove_directory("test_directory")
    assert fs.remove_directory_all("test_directory")
    assert not fs.exists("test_directory")


def test_create_directory_existing_returns_false(workdir):
    assert fs.create_directory("d")
    assert not fs.create_directory("d")


def test_remove_empty_directory(workdir):
    os.mkdir("empty")
    assert fs.remove_directory("empty")
    assert not fs.exists("empty")
    assert not fs.remove_directory_all("empty")


def test_ensure_path_exists(workdir):
    deep = "ensure_test/level1/level2/level3"
    assert fs.ensure_path_exists(deep)
    assert fs.is_directory(deep)
    assert fs.ensure_path_exists(deep)


def test_ensure_path_exists_on_file_fails(workdir):
    _write("plain.txt")
    assert not fs.ensure_path_exists("plain.txt")


def test_list_files_with_filters(workdir):
    assert fs.create_directory("list_test")
    for name in ["file1.txt", "file2.txt", "file1.cpp", "file2.hpp", "data.json"]:
        _write(f"list_test/{name}", "test")
    os.mkdir("list_test/subdir")
    assert len(fs.list_files("list_test")) == 5
    assert fs.list_files("list_test", {".txt"}) == [
        "list_test/file1.txt",
        "list_test/file2.txt",
    ]
    assert len(fs.list_files("list_test", {".txt", ".cpp", ".hpp"})) == 4
    assert fs.list_files("list_test/", {".json"}) == ["list_test/data.json"]
    assert fs.list_files("list_test", {".txt,.json"}) == [
        "list_test/data.json",
        "list_test/file1.txt",
        "list_test/file2.txt",
    ]


def test_list_files_missing_folder(workdir):
    assert fs.list_files("no_such_folder") == []


def test_edge_cases(workdir):
    assert not fs.exists("")
    assert fs.exists(".")
    assert fs.exists("..")
    assert fs.get_file_size("non_existent_file_12345.txt") is None
    assert not fs.remove_file("non_existent_file_12345.txt")


def test_file_size_of_directory_is_none(workdir):
    os.mkdir("d")
    assert fs.get_file_size("d") is None


def test_many_files_listing_and_cleanup(workdir):
    assert fs.ensure_path_exists("perf_test_listing")
    for i in range(200):
        _write(f"perf_test_listing/file_{i}.txt", f"test content {i}")
    assert len(fs.list_files("perf_test_listing")) == 200
    assert len(fs.list_files("perf_test_listing", {".txt"})) == 200
    assert all(fs.exists(p) for p in fs.list_files("perf_test_listing"))
    assert fs.remove_directory_all("perf_test_listing")
    assert not fs.exists("perf_test_listing")


def test_many_copies_keep_size(workdir):
    assert fs.ensure_path_exists("perf_test_copy")
    _write("perf_test_copy/source.txt", "This is test data. " * 500)
    size = fs.get_file_size("perf_test_copy/source.txt")
    assert size == len("This is test data. ") * 500
    for i in range(20):
        assert fs.copy_file("perf_test_copy/source.txt", f"perf_test_copy/copy_{i}.txt")
    sizes = {fs.get_file_size(p) for p in fs.list_files("perf_test_copy")}
    assert sizes == {size}


def test_path_operations_over_many_paths():
    for i in range(100):
        path = f"/path/to/directory/file_{i}.txt"
        assert fs.get_file_name(path) == f"file_{i}.txt"
        assert fs.get_file_base(path) == f"file_{i}"
        assert fs.get_file_suffix(path) == ".txt"


def test_nested_directory_creation(workdir):
    for i in range(20):
        assert fs.create_directory(f"perf_test_dirs/dir_{i}")
    assert len(os.listdir("perf_test_dirs")) == 20
    assert fs.remove_directory_all("perf_test_dirs")
    for i in range(20):
        assert fs.ensure_path_exists(f"perf_test_dirs/level1_{i}/level2/level3")
    assert fs.is_directory("perf_test_dirs/level1_19/level2/level3")
    assert fs.remove_directory_all("perf_test_dirs")