"""Expanded folders (transient, never persisted)"""


class ExpansionState:
    """Set of full directory paths currently expanded"""

    def __init__(self):
        self._expanded: set[str] = set()

    @property
    def expanded(self) -> frozenset[str]:
        return frozenset(self._expanded)

    def is_expanded(self, path: str) -> bool:
        return path in self._expanded

    def toggle(self, path: str) -> bool:
        """Flip membership of ``path``, return True if now expanded"""
        if path in self._expanded:
            self._expanded.discard(path)
            return False
        self._expanded.add(path)
        return True

    def collapse_all(self):
        self._expanded.clear()
