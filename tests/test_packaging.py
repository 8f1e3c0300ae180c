from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

_REPO_ROOT = Path(__file__).resolve().parents[1]


def test_every_src_package_is_declared():
    config = tomllib.loads((_REPO_ROOT / "pyproject.toml").read_text(encoding="utf-8"))
    declared = set(config["tool"]["setuptools"]["packages"])

    on_disk = {"src"} | {
        ".".join(p.parent.relative_to(_REPO_ROOT).parts)
        for p in (_REPO_ROOT / "src").rglob("__init__.py")
    }
    assert declared == on_disk


def test_app_module_is_declared():
    config = tomllib.loads((_REPO_ROOT / "pyproject.toml").read_text(encoding="utf-8"))
    assert config["tool"]["setuptools"]["py-modules"] == ["streamlit_app"]
