from pathlib import Path

try:
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - py310 fallback
    import tomli as tomllib


def _pyproject() -> dict:
    pyproject_path = Path(__file__).resolve().parents[1] / "pyproject.toml"
    return tomllib.loads(pyproject_path.read_text(encoding="utf-8"))


def test_pyproject_setuptools_src_layout():
    data = _pyproject()

    setuptools = data.get("tool", {}).get("setuptools", {})
    assert setuptools.get("package-dir") == {"": "src"}
    assert setuptools.get("packages", {}).get("find", {}).get("where") == ["src"]


def test_pyproject_declares_cli_entry_point():
    scripts = _pyproject()["project"]["scripts"]
    assert scripts["rcdesign"] == "rcdesign.cli:main"
