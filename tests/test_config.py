from pathlib import Path

import pytest

from project_showcase.config import ConfigError, ProjectConfig, load_projects


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_load_json_projects_in_order(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "projects.json",
        '{"projects": [{"owner": "psf", "repo": "requests"}, {"owner": "pallets", "repo": "jinja"}]}',
    )

    projects = load_projects(path)

    assert projects == [ProjectConfig("psf", "requests"), ProjectConfig("pallets", "jinja")]
    assert projects[0].full_name == "psf/requests"


def test_load_yaml_list(tmp_path: Path) -> None:
    path = _write(tmp_path, "projects.yml", "- owner: yaml\n  repo: pyyaml\n")

    assert load_projects(path) == [ProjectConfig("yaml", "pyyaml")]


def test_empty_projects_list_is_allowed(tmp_path: Path) -> None:
    path = _write(tmp_path, "projects.json", '{"projects": []}')

    assert load_projects(path) == []


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="does not exist"):
        load_projects(tmp_path / "nope.json")


def test_unparseable_file_raises(tmp_path: Path) -> None:
    path = _write(tmp_path, "projects.json", '{"projects": [')

    with pytest.raises(ConfigError, match="not valid"):
        load_projects(path)


def test_missing_projects_key_raises(tmp_path: Path) -> None:
    path = _write(tmp_path, "projects.json", '{"repos": []}')

    with pytest.raises(ConfigError, match="projects"):
        load_projects(path)


@pytest.mark.parametrize(
    "entry",
    ['"psf/requests"', '{"owner": "psf"}', '{"owner": "", "repo": "requests"}'],
)
def test_malformed_entry_aborts_whole_file(tmp_path: Path, entry: str) -> None:
    path = _write(tmp_path, "projects.json", f'{{"projects": [{{"owner": "a", "repo": "b"}}, {entry}]}}')

    with pytest.raises(ConfigError, match="#2"):
        load_projects(path)


def test_tab_indented_json(tmp_path: Path) -> None:
    text = '{\n\t"projects": [\n\t\t{\n\t\t\t"owner": "psf",\n\t\t\t"repo": "requests"\n\t\t}\n\t]\n}\n'
    path = _write(tmp_path, "projects.json", text)

    assert load_projects(path) == [ProjectConfig("psf", "requests")]


def test_yaml_file_with_invalid_syntax(tmp_path: Path) -> None:
    path = _write(tmp_path, "projects.yaml", "projects: [\n")

    with pytest.raises(ConfigError, match="not valid YAML"):
        load_projects(path)


@pytest.mark.parametrize("value", ["on", "no", "123", "[a]"])
def test_non_string_yaml_values_are_rejected(tmp_path: Path, value: str) -> None:
    path = _write(tmp_path, "projects.yml", f"- owner: acme\n  repo: {value}\n")

    with pytest.raises(ConfigError, match="`repo` must be a string"):
        load_projects(path)


def test_quoted_yaml_values_are_kept_verbatim(tmp_path: Path) -> None:
    path = _write(tmp_path, "projects.yml", '- owner: acme\n  repo: "on"\n')

    assert load_projects(path) == [ProjectConfig("acme", "on")]


def test_non_string_json_value_is_rejected(tmp_path: Path) -> None:
    path = _write(tmp_path, "projects.json", '{"projects": [{"owner": "acme", "repo": 42}]}')

    with pytest.raises(ConfigError, match="`repo` must be a string, got int"):
        load_projects(path)
