"""Visible tree rows built from snapshot, selection and expansion state"""
from typing import AbstractSet, Container, Optional

from treemirror.models.schemas import (
    STATUS_INDICATORS,
    VIEWER_ROUTES,
    FileNode,
    GitStatus,
    StatusIndicator,
    TreeRow,
    ViewerLink,
)

HIDDEN_PREFIX = "."
SIZE_UNITS = ["B", "KB", "MB", "GB", "TB"]


def format_size(num_bytes: int) -> str:
    """Human-readable size with binary scaling, e.g. 1536 -> '1.5 KB'"""
    if num_bytes == 0:
        return "0 B"

    unit = 0
    while unit < len(SIZE_UNITS) - 1 and num_bytes >= 1024 ** (unit + 1):
        unit += 1

    value = f"{num_bytes / 1024 ** unit:.2f}".rstrip("0").rstrip(".")
    return f"{value} {SIZE_UNITS[unit]}"


def status_indicator(status: Optional[str]) -> Optional[StatusIndicator]:
    """Indicator for a git status; unknown or empty status has none"""
    try:
        key = GitStatus(status)
    except ValueError:
        return None
    return STATUS_INDICATORS[key]


def viewer_link(node: FileNode, full_path: str) -> Optional[ViewerLink]:
    if node.is_directory:
        return None
    name = node.name.lower()
    for ext, route in VIEWER_ROUTES.items():
        if name.endswith(ext):
            return ViewerLink(route=route, path=full_path)
    return None


def build_rows(
    root: Optional[FileNode],
    root_path: str,
    selected: Container[str],
    expanded: AbstractSet[str],
    separator: str = "/",
) -> list[TreeRow]:
    """Walk the snapshot and emit rows for every visible node.

    The root itself is never emitted. Hidden entries are dropped with their
    subtree; a directory's children appear only while it is expanded.
    """
    rows: list[TreeRow] = []
    if root is None or not root.children:
        return rows

    def visit(node: FileNode, prefix: str, depth: int):
        if node.name.startswith(HIDDEN_PREFIX):
            return

        full_path = prefix + separator + node.name
        is_expanded = full_path in expanded

        rows.append(
            TreeRow(
                path=full_path,
                name=node.name,
                depth=depth,
                is_directory=node.is_directory,
                is_selected=full_path in selected,
                is_expanded=is_expanded if node.is_directory else None,
                git_status=node.git_status,
                status_indicator=status_indicator(node.git_status),
                is_dvc_tracked=node.has_dvc_file,
                size_label=format_size(node.size),
                link=viewer_link(node, full_path),
            )
        )

        if node.is_directory and is_expanded and node.children:
            for child in node.children:
                visit(child, full_path, depth + 1)

    for child in root.children:
        visit(child, root_path, 0)

    return rows


def render_row_text(row: TreeRow) -> str:
    """Plain-text rendering of a row for terminal output"""
    checkbox = "[x]" if row.is_selected else "[ ]"
    if row.is_directory:
        marker = "v" if row.is_expanded else ">"
    else:
        marker = " "
    parts = [f"{'  ' * row.depth}{checkbox} {marker} {row.name}"]
    if row.is_dvc_tracked:
        parts.append("(D)")
    if row.status_indicator:
        parts.append(f"[{row.status_indicator.title}]")
    if row.link:
        parts.append(f"-> {row.link.route}")
    parts.append(row.size_label)
    return " ".join(parts)
