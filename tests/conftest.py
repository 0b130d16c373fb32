import pytest


class Reiterable:
    """Re-iterable but neither sized nor indexable."""

    def __init__(self, n):
        self.n = n
        self.walks = 0

    def __iter__(self):
        self.walks += 1
        return iter(range(self.n))


@pytest.fixture
def reiterable():
    return Reiterable
