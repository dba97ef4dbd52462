import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fake_store import FakeDocumentStore


@pytest.fixture
def seeded_store():
    """Five documents with distinct creation order and two tied scores."""
    return FakeDocumentStore([
        {"_id": 1, "name": "alice", "score": 10, "createdAt": 1},
        {"_id": 2, "name": "bob", "score": 20, "createdAt": 2},
        {"_id": 3, "name": "carol", "score": 10, "createdAt": 3},
        {"_id": 4, "name": "dave", "score": 30, "createdAt": 4},
        {"_id": 5, "name": "erin", "score": 20, "createdAt": 5},
    ])
