"""
Shared test data and helpers.
"""

WORDS = ["crane", "stone", "plumb", "ghost", "train", "adieu", "shame"]
CANDIDATES = ["crane"]


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


def write_lines(path, lines):
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(path)
