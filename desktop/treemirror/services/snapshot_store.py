"""Snapshot store: current tree snapshot and its load lifecycle"""
import logging
from enum import Enum
from typing import Optional, Sequence

from treemirror.models.schemas import FileNode, FileStatus
from treemirror.services.status_overlay import merge_statuses
from treemirror.utils.errors import LoadFailure

logger = logging.getLogger(__name__)


class SnapshotState(str, Enum):
    EMPTY = "empty"
    LOADING = "loading"
    LOADED = "loaded"


class SnapshotStore:
    """Holds the immutable tree snapshot for one root path.

    Loads replace the snapshot wholesale; overlay merges replace it with a
    structurally updated copy. ``version`` changes every time a load commits
    a new snapshot, so work started against an older snapshot can be
    recognised and dropped. Loads in flight are ordered by a separate
    sequence number; only the most recently started one may commit.
    """

    def __init__(self, api, separator: str = "/"):
        self.api = api
        self.separator = separator
        self._snapshot: Optional[FileNode] = None
        self._root_path: Optional[str] = None
        self._state = SnapshotState.EMPTY
        self._version = 0
        self._load_seq = 0

    @property
    def snapshot(self) -> Optional[FileNode]:
        return self._snapshot

    @property
    def root_path(self) -> Optional[str]:
        return self._root_path

    @property
    def state(self) -> SnapshotState:
        return self._state

    @property
    def version(self) -> int:
        return self._version

    async def load(self, root_path: str) -> bool:
        """Fetch a full snapshot for ``root_path`` and replace the current one.

        Returns False when a newer load superseded this one while it was in
        flight (also when that superseded load failed). Raises LoadFailure if
        the scan fails; the previous snapshot is kept in that case.
        """
        self._load_seq += 1
        seq = self._load_seq
        self._state = SnapshotState.LOADING
        logger.info(f"Loading tree: {root_path}")

        try:
            raw = await self.api.get_file_tree_structure(root_path)
            tree = FileNode.model_validate(raw)
        except Exception as e:
            if seq != self._load_seq:
                logger.debug(f"Superseded tree load for {root_path} failed: {e}")
                return False
            self._state = SnapshotState.LOADED if self._snapshot else SnapshotState.EMPTY
            raise LoadFailure(f"Failed to load tree {root_path}: {e}") from e

        if seq != self._load_seq:
            logger.debug(f"Dropping superseded tree load for {root_path}")
            return False

        self._snapshot = tree
        self._root_path = root_path
        self._version += 1
        self._state = SnapshotState.LOADED
        logger.info(f"Tree loaded: {root_path} ({len(tree.children or [])} top-level entries)")
        return True

    def apply_overlay(
        self, statuses: Sequence[FileStatus], version: Optional[int] = None
    ) -> bool:
        """Merge status records into the current snapshot.

        No-op when nothing is loaded, or when ``version`` no longer matches
        the snapshot the statuses were fetched for. A load in flight will
        replace the snapshot anyway, so merges are skipped meanwhile.
        """
        if self._snapshot is None or self._root_path is None:
            return False
        if self._state is SnapshotState.LOADING:
            logger.debug("Dropping overlay while a tree load is in flight")
            return False
        if version is not None and version != self._version:
            logger.debug(f"Dropping stale overlay (version {version}, current {self._version})")
            return False

        self._snapshot = merge_statuses(
            self._snapshot, statuses, self._root_path, self.separator
        )
        return True
