"""Verify package imports work correctly."""


def test_import_jiramark() -> None:
    """Test that jiramark can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import jiramark

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert jiramark.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from jiramark import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_names_resolve() -> None:
    """Everything in __all__ is importable from the package root."""
    import jiramark

    for name in jiramark.__all__:
        assert hasattr(jiramark, name), name
