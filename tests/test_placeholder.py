"""Placeholder test verifying package import."""


def test_import() -> None:
    """Verify top-level package is importable."""
    import axtree

    assert axtree.__version__ is not None
    assert axtree.__version__ == "0.1.0"
