"""
Configuration for performance tests
"""

import pytest


def pytest_configure(config):
    """Configure pytest for performance tests"""
    config.addinivalue_line(
        "markers", "performance: mark test as performance benchmark"
    )


def pytest_collection_modifyitems(config, items):
    """Add the performance marker to everything under performance/"""
    for item in items:
        if "performance" in str(item.fspath):
            item.add_marker(pytest.mark.performance)


@pytest.fixture(scope="session")
def performance_config():
    """Deliberately loose floors so slow CI machines still pass"""
    return {
        "min_renders_per_sec": 2000,
        "min_glog_renders_per_sec": 2000,
        "min_compiles_per_sec": 500,
    }
