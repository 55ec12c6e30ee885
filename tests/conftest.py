"""
Pytest configuration.

For shared test utilities (SQLite engine, seed helpers), see tests/__init__.py
"""


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )
