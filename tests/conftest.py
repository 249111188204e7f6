"""
Test configuration for the MRZ test suite.
"""

import pytest

from marty_mrz import MRZParser, MRZParserConfig

# Fixed reference year so century inference is deterministic
REFERENCE_YEAR = 2024


# Collection settings
def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "mrz" in str(item.fspath) or "mrz" in item.name.lower():
            item.add_marker(pytest.mark.mrz)


@pytest.fixture
def reference_year():
    return REFERENCE_YEAR


@pytest.fixture
def config(reference_year):
    """Parser configuration pinned to the test reference year."""
    return MRZParserConfig(reference_year=reference_year)


@pytest.fixture
def parser(config):
    return MRZParser(config)
