"""File tree controller: host-facing surface over snapshot, selection and expansion"""
import asyncio
import logging
from typing import Callable, Optional

from treemirror.config import Settings
from treemirror.models.schemas import FileStatus, TreeRow
from treemirror.services.expansion import ExpansionState
from treemirror.services.selection import SelectionCallback, SelectionManager
from treemirror.services.snapshot_store import SnapshotState, SnapshotStore
from treemirror.ui.tree_rows import build_rows
from treemirror.utils.errors import AppError, StatusFetchFailure
from treemirror.utils.timing import timed

logger = logging.getLogger(__name__)


class FileTreeController:
    """Mirror of a remote directory tree with status overlay and selection.

    The snapshot, the selection and the expansion state are independent
    stores keyed by full path strings; they are only combined in ``rows()``.
    Failures are logged and reported through the boolean result, the view
    simply does not change.
    """

    def __init__(self, api, root_path: str, settings: Optional[Settings] = None):
        self.api = api
        self.root_path = root_path
        self.settings = settings or Settings()
        self.separator = self.settings.path_separator

        self.store = SnapshotStore(api, separator=self.separator)
        self.selection = SelectionManager(api)
        self.expansion = ExpansionState()

    async def mount(self):
        """Initial load of tree and selection"""
        await asyncio.gather(self.load_tree(), self.load_selection())

    async def load_tree(self, root_path: Optional[str] = None) -> bool:
        """(Re)load the snapshot, switching root when ``root_path`` is given.

        ``self.root_path`` only moves to the new root once its tree is loaded.
        """
        target = root_path if root_path is not None else self.root_path
        with timed("load_file_tree", path=target):
            try:
                loaded = await self.store.load(target)
            except AppError as e:
                logger.error(f"Error loading file tree: {e}")
                return False
            if loaded:
                self.root_path = target
            return loaded

    async def load_selection(self) -> bool:
        with timed("load_selected_files"):
            try:
                await self.selection.initialize()
                return True
            except AppError as e:
                logger.error(f"Error loading selected files: {e}")
                return False

    async def update_file_statuses(self, paths: list[str]) -> bool:
        """Refresh status of ``paths`` and merge it into the current snapshot"""
        logger.debug(f"update_file_statuses: {paths}")
        with timed("update_file_statuses", path_count=len(paths)):
            root_path = self.store.root_path
            if root_path is None:
                logger.debug("No tree loaded, skipping status update")
                return False
            if self.store.state is SnapshotState.LOADING:
                logger.debug("Tree load in flight, skipping status update")
                return False
            version = self.store.version
            try:
                statuses = await self._fetch_statuses(root_path, paths)
            except StatusFetchFailure as e:
                logger.error(f"Error updating file statuses: {e}")
                return False

            return self.store.apply_overlay(statuses, version=version)

    async def _fetch_statuses(self, root_path: str, paths: list[str]) -> list[FileStatus]:
        try:
            raw = await self.api.get_files_status(root_path, paths)
            return [FileStatus.model_validate(item) for item in raw]
        except Exception as e:
            raise StatusFetchFailure(f"Failed to fetch statuses for {len(paths)} paths: {e}") from e

    def toggle_folder(self, path: str) -> bool:
        with timed("toggle_folder", path=path):
            return self.expansion.toggle(path)

    async def toggle_selection(self, path: str) -> bool:
        """Toggle selection of ``path``; False if the backing store call failed"""
        with timed("toggle_file_selection", path=path):
            try:
                await self.selection.toggle(path)
                return True
            except AppError as e:
                logger.error(f"Error toggling file selection: {e}")
                return False

    def subscribe_selection(self, callback: SelectionCallback) -> Callable[[], None]:
        return self.selection.subscribe(callback)

    def rows(self) -> list[TreeRow]:
        if self.store.root_path is None:
            return []
        return build_rows(
            self.store.snapshot,
            self.store.root_path,
            set(self.selection.selected),
            self.expansion.expanded,
            separator=self.separator,
        )
