"""Selected files: local cache of the persistent selection store"""
import logging
from typing import Callable

from treemirror.utils.errors import SelectionLoadFailure, SelectionMutationFailure

logger = logging.getLogger(__name__)

SelectionCallback = Callable[[list[str]], None]


class SelectionManager:
    """Set of selected full paths kept in step with the backing store.

    Toggles call the store first and update the local set only after the
    call resolves; on failure nothing changes locally. Subscribers receive
    the full selection list (in selection order) after each change.
    """

    def __init__(self, api):
        self.api = api
        # dict used as an insertion-ordered set
        self._selected: dict[str, None] = {}
        self._subscribers: list[SelectionCallback] = []
        # Per-path request counter; only the latest toggle of a path may
        # update the local set
        self._requests: dict[str, int] = {}

    @property
    def selected(self) -> list[str]:
        return list(self._selected)

    def is_selected(self, path: str) -> bool:
        return path in self._selected

    def subscribe(self, callback: SelectionCallback) -> Callable[[], None]:
        """Register a selection-change subscriber, return an unsubscribe function"""
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    async def initialize(self):
        """Replace the local selection with the backing store's contents"""
        try:
            files = await self.api.list_selected_files()
        except Exception as e:
            self._selected = {}
            raise SelectionLoadFailure(f"Failed to load selected files: {e}") from e

        self._selected = dict.fromkeys(files)
        logger.info(f"Loaded {len(self._selected)} selected files")

    async def toggle(self, path: str) -> bool:
        """Add or remove ``path`` from the selection.

        Returns the new membership. Raises SelectionMutationFailure if the
        backing store call fails.
        """
        request_id = self._requests.get(path, 0) + 1
        self._requests[path] = request_id
        selecting = path not in self._selected

        try:
            if selecting:
                await self.api.add_selected_file(path)
            else:
                await self.api.remove_selected_file(path)
        except Exception as e:
            action = "select" if selecting else "deselect"
            raise SelectionMutationFailure(f"Failed to {action} {path}: {e}", path) from e

        if self._requests.get(path) != request_id:
            logger.debug(f"Superseded toggle for {path} ignored")
            return path in self._selected

        if selecting:
            self._selected[path] = None
        else:
            self._selected.pop(path, None)

        self._notify()
        return selecting

    def _notify(self):
        selection = self.selected
        for callback in list(self._subscribers):
            try:
                callback(list(selection))
            except Exception as e:
                logger.error(f"Selection subscriber failed: {e}")
