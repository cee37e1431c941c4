class SequentialNameGenerator:
    """Deterministic replacement for random_string."""

    def __init__(self) -> None:
        self.calls: list[int] = []

    def __call__(self, length: int) -> str:
        self.calls.append(length)
        return f"{len(self.calls):0{length}d}"
