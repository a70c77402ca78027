"""Basic tests for layerenv package."""


def test_import_layerenv():
    """Test that layerenv can be imported."""
    import layerenv

    assert hasattr(layerenv, "__version__")
    assert layerenv.__version__ == "1.0.0"


def test_version_format():
    """Test that version follows semver format."""
    import layerenv

    parts = layerenv.__version__.split(".")
    assert len(parts) == 3
    assert all(p.isdigit() for p in parts)


def test_public_api():
    """Test the main entry points are exported."""
    import layerenv

    for name in ("EnvStore", "Parser", "MergeEngine", "LoadSettings", "LayerEnvError"):
        assert name in layerenv.__all__
