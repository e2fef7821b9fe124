class OutputBuffer:
    """Bounded list of already-wrapped output lines, oldest first."""

    def __init__(self, capacity: int, width: int):
        self.capacity = capacity
        self.width = width
        self.lines: list[str] = []

    def _wrap(self, line: str) -> list[str]:
        # Hard wrap; a cell is kept free at the right edge
        size = max(1, self.width - 1)
        if not line:
            return [""]
        return [line[i:i + size] for i in range(0, len(line), size)]

    def append(self, message: str) -> list[str]:
        """Add a message and evict the oldest lines beyond capacity.

        Returns the wrapped lines that were added.
        """
        added = []
        for line in message.split("\n"):
            added.extend(self._wrap(line))
        self.lines.extend(added)
        if len(self.lines) > self.capacity:
            self.lines = self.lines[len(self.lines) - self.capacity:]
        return added
