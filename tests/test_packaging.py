from pathlib import Path

_PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


def test_package_metadata_does_not_ship_design_documents() -> None:
    text = _PYPROJECT.read_text()

    assert "readme" not in text
    assert 'keytempo = "main:main"' in text
