"""Basic tests for the flatenv package."""


def test_import_flatenv():
    """Test that flatenv can be imported."""
    import flatenv

    assert hasattr(flatenv, "__version__")
    assert flatenv.__version__ == "1.0.0"


def test_version_format():
    """Test that version follows semver format."""
    import flatenv

    parts = flatenv.__version__.split(".")
    assert len(parts) == 3
    assert all(p.isdigit() for p in parts)


def test_top_level_exports():
    import flatenv

    for name in flatenv.__all__:
        assert hasattr(flatenv, name), name
