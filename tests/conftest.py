import pytest

from eightpuzzle.domains.puzzle8 import GOAL
from eightpuzzle.search.bfs import bfs_distances


@pytest.fixture(scope="session")
def distances():
    """Exact distance to GOAL for every arrangement of its parity class."""
    return bfs_distances(GOAL)
