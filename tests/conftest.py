"""Shared fixtures for the GST engine test suite."""

import pytest

from hsn_lookup import HSNLookup


@pytest.fixture
def maharashtra_gstin() -> str:
    return "27AAAAA0000A1Z5"


@pytest.fixture
def karnataka_gstin() -> str:
    return "29BBBBB1111B1Z3"


@pytest.fixture
def two_line_items():
    """Two rows at 18%: 2 x 500, and 1 x 1000 less 15% discount."""
    return [
        {"name": "Consulting", "quantity": 2, "unitPrice": 500, "discount": 0, "gstRate": 18},
        {"name": "Design", "quantity": 1, "unitPrice": 1000, "discount": 15, "gstRate": 18},
    ]


@pytest.fixture(scope="session")
def hsn_lookup():
    return HSNLookup(csv_path="")
