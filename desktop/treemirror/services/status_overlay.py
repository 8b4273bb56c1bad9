"""Status overlay merge: apply status records to a tree snapshot without reload"""
import logging
from typing import Sequence

from treemirror.models.schemas import FileNode, FileStatus

logger = logging.getLogger(__name__)


def _build_lookup(
    statuses: Sequence[FileStatus], root_path: str, separator: str
) -> dict[str, FileStatus]:
    """Index records by every full path they can match.

    Each record is reachable both by its own path (already absolute) and by
    ``root_path + separator + path`` (root-relative). ``setdefault`` keeps the
    first record in list order for a given full path.
    """
    lookup: dict[str, FileStatus] = {}
    for status in statuses:
        lookup.setdefault(status.path, status)
        lookup.setdefault(root_path + separator + status.path, status)
    return lookup


def merge_statuses(
    root: FileNode,
    statuses: Sequence[FileStatus],
    root_path: str,
    separator: str = "/",
) -> FileNode:
    """Return a new tree with matching nodes' status fields replaced.

    The root's own name is never matched; its children are evaluated with
    ``root_path`` as prefix. A matched node is not descended into. Subtrees
    with no match are returned as the same objects.
    """
    if not statuses or not root.children:
        return root

    lookup = _build_lookup(statuses, root_path, separator)
    matched: set[int] = set()

    def merge_node(node: FileNode, prefix: str) -> FileNode:
        full_path = prefix + separator + node.name
        status = lookup.get(full_path)
        if status is not None:
            matched.add(id(status))
            return node.model_copy(
                update={
                    "git_status": status.git_status,
                    "has_dvc_file": status.has_dvc_file,
                }
            )

        if node.children:
            children = [merge_node(child, full_path) for child in node.children]
            if all(new is old for new, old in zip(children, node.children)):
                return node
            return node.model_copy(update={"children": children})

        return node

    children = [merge_node(child, root_path) for child in root.children]

    unmatched = sum(1 for s in statuses if id(s) not in matched)
    if unmatched:
        logger.debug(f"{unmatched} status record(s) matched no node under {root_path}")

    if all(new is old for new, old in zip(children, root.children)):
        return root
    return root.model_copy(update={"children": children})
