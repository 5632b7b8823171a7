import subprocess
from pathlib import Path
from unittest import mock

import pytest

from promptparts.dotnet import (
    DotNetFile,
    FileType,
    check_directory_for_global_json,
    estimate_dotnet_version,
    get_dotnet_file_type,
    get_latest_sdk_from_cli,
    get_local_dotnet_files,
    get_pinned_sdk_version,
    get_pinned_sdk_version_from_file,
    get_version_from_cli,
    try_find_nearby_global_json,
)

PINNED = '{"sdk": {"version": "1.2.3"}}'


def _completed(returncode=0, stdout=b""):
    return subprocess.CompletedProcess(args=["dotnet"], returncode=returncode, stdout=stdout)


def test_should_parse_version_from_global_json():
    json_text = """
        {
            "sdk": {
                "version": "1.2.3"
            }
        }
    """
    assert get_pinned_sdk_version(json_text) == "v1.2.3"


def test_should_ignore_empty_global_json():
    assert get_pinned_sdk_version("{}") is None


@pytest.mark.parametrize(
    "text",
    ["not json", "[]", '{"sdk": "1.0"}', '{"sdk": {"version": 3}}', '{"sdk": {}}'],
)
def test_invalid_pinning_gives_none(text):
    assert get_pinned_sdk_version(text) is None


def test_pinned_version_from_file(tmp_path):
    path = tmp_path / "global.json"
    path.write_text(PINNED, encoding="utf-8")
    assert get_pinned_sdk_version_from_file(path) == "v1.2.3"


def test_pinned_version_from_missing_file(tmp_path):
    assert get_pinned_sdk_version_from_file(tmp_path / "global.json") is None


@pytest.mark.parametrize(
    "name, expected",
    [
        ("global.json", FileType.GLOBAL_JSON),
        ("GLOBAL.JSON", FileType.GLOBAL_JSON),
        ("project.json", FileType.PROJECT_JSON),
        ("app.sln", FileType.SOLUTION_FILE),
        ("app.SLN", FileType.SOLUTION_FILE),
        ("app.csproj", FileType.PROJECT_FILE),
        ("app.fsproj", FileType.PROJECT_FILE),
        ("app.xproj", FileType.PROJECT_FILE),
        ("readme.md", None),
        ("package.json", None),
    ],
)
def test_get_dotnet_file_type(name, expected):
    assert get_dotnet_file_type(Path("/some/dir") / name) is expected


def test_get_local_dotnet_files(tmp_path):
    (tmp_path / "app.csproj").write_text("", encoding="utf-8")
    (tmp_path / "global.json").write_text(PINNED, encoding="utf-8")
    (tmp_path / "notes.txt").write_text("", encoding="utf-8")
    files = get_local_dotnet_files(tmp_path)
    found = {(f.path.name, f.file_type) for f in files}
    assert found == {
        ("app.csproj", FileType.PROJECT_FILE),
        ("global.json", FileType.GLOBAL_JSON),
    }


def test_get_local_dotnet_files_missing_directory(tmp_path):
    with pytest.raises(OSError):
        get_local_dotnet_files(tmp_path / "missing")


def test_check_directory_for_global_json(tmp_path):
    assert check_directory_for_global_json(tmp_path) is None
    (tmp_path / "global.json").write_text(PINNED, encoding="utf-8")
    assert check_directory_for_global_json(tmp_path) == "v1.2.3"


def test_nearby_global_json_in_parent(tmp_path):
    child = tmp_path / "project"
    child.mkdir()
    (tmp_path / "global.json").write_text(PINNED, encoding="utf-8")
    assert try_find_nearby_global_json(child, None) == "v1.2.3"


def test_nearby_global_json_in_repo_root(tmp_path):
    nested = tmp_path / "src" / "project"
    nested.mkdir(parents=True)
    (tmp_path / "global.json").write_text(PINNED, encoding="utf-8")
    assert try_find_nearby_global_json(nested, tmp_path) == "v1.2.3"


def test_parent_above_repo_root_is_not_scanned(tmp_path):
    repo = tmp_path / "repo"
    repo.mkdir()
    (tmp_path / "global.json").write_text(PINNED, encoding="utf-8")
    assert try_find_nearby_global_json(repo, repo) is None


def test_estimate_prefers_global_json(tmp_path):
    global_json = tmp_path / "global.json"
    global_json.write_text('{"sdk": {"version": "3.1.100"}}', encoding="utf-8")
    files = [
        DotNetFile(tmp_path / "app.csproj", FileType.PROJECT_FILE),
        DotNetFile(global_json, FileType.GLOBAL_JSON),
    ]
    with mock.patch("promptparts.dotnet.subprocess.run") as run:
        assert estimate_dotnet_version(files, tmp_path, None) == "v3.1.100"
        assert run.call_count == 0


def test_estimate_with_no_files(tmp_path):
    assert estimate_dotnet_version([], tmp_path, None) is None


def test_estimate_solution_uses_cli(tmp_path):
    files = [DotNetFile(tmp_path / "app.sln", FileType.SOLUTION_FILE)]
    output = b"2.2.401 [/usr/share/dotnet/sdk]\n3.0.100 [/usr/share/dotnet/sdk]\n"
    with mock.patch("promptparts.dotnet.subprocess.run", return_value=_completed(0, output)):
        assert estimate_dotnet_version(files, tmp_path, None) == "v3.0.100"


def test_estimate_project_uses_nearby_global_json(tmp_path):
    child = tmp_path / "project"
    child.mkdir()
    (tmp_path / "global.json").write_text(PINNED, encoding="utf-8")
    files = [DotNetFile(child / "app.csproj", FileType.PROJECT_FILE)]
    with mock.patch("promptparts.dotnet.subprocess.run") as run:
        assert estimate_dotnet_version(files, child, None) == "v1.2.3"
        assert run.call_count == 0


def test_latest_sdk_from_cli():
    output = b"2.1.0 [/usr/share/dotnet/sdk]\n3.0.100 [/usr/share/dotnet/sdk]\n\n"
    with mock.patch("promptparts.dotnet.subprocess.run", return_value=_completed(0, output)):
        assert get_latest_sdk_from_cli() == "v3.0.100"


def test_latest_sdk_unparseable_output():
    with mock.patch("promptparts.dotnet.subprocess.run", return_value=_completed(0, b"garbage\n")):
        assert get_latest_sdk_from_cli() is None


def test_latest_sdk_falls_back_to_version():
    responses = [_completed(1, b""), _completed(0, b"2.1.500\n")]
    with mock.patch("promptparts.dotnet.subprocess.run", side_effect=responses) as run:
        assert get_latest_sdk_from_cli() == "v2.1.500"
        assert run.call_args_list[1].args[0] == ["dotnet", "--version"]


def test_latest_sdk_missing_binary():
    with mock.patch("promptparts.dotnet.subprocess.run", side_effect=FileNotFoundError):
        assert get_latest_sdk_from_cli() is None


def test_version_from_cli():
    with mock.patch("promptparts.dotnet.subprocess.run", return_value=_completed(0, b" 3.0.100 \n")):
        assert get_version_from_cli() == "v3.0.100"


def test_version_from_cli_missing_binary():
    with mock.patch("promptparts.dotnet.subprocess.run", side_effect=FileNotFoundError):
        assert get_version_from_cli() is None