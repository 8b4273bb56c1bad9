"""Pydantic schemas"""
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, model_validator


class GitStatus(str, Enum):
    """Version-control states reported by the status engine"""

    UNTRACKED = "untracked"
    MODIFIED = "modified"
    STAGED = "staged"
    DELETED = "deleted"
    PUSHED = "pushed"
    PARTIALLY_STAGED = "partially_staged"
    CONFLICT = "conflict"


# ========== Tree entities ==========
class FileNode(BaseModel):
    """One entry of the scanned directory tree.

    ``name`` is a single path segment; the full path of a node is built by
    joining the tree root path with the names of its ancestors and its own.
    """

    name: str
    size: int = Field(default=0, ge=0)
    is_directory: bool = False
    children: Optional[list["FileNode"]] = None
    has_dvc_file: bool = False
    git_status: str = ""

    class Config:
        frozen = True
        from_attributes = True

    @model_validator(mode="after")
    def check_children(self) -> "FileNode":
        if self.children is not None and not self.is_directory:
            raise ValueError(f"File node '{self.name}' cannot have children")
        return self


class FileStatus(BaseModel):
    """Status record for a single path, consumed once by the overlay merge.

    ``path`` is either the node's absolute full path or a path relative to
    the tree root.
    """

    path: str
    git_status: str = ""
    has_dvc_file: bool = False


# ========== View entities ==========
class StatusIndicator(BaseModel):
    icon: str
    color: str
    title: str

    class Config:
        frozen = True


class ViewerLink(BaseModel):
    """Navigation target for files opened in a dedicated viewer"""

    route: str
    path: str


class TreeRow(BaseModel):
    """Single renderable row of the visible tree"""

    path: str
    name: str
    depth: int = 0
    is_directory: bool = False
    is_selected: bool = False
    is_expanded: Optional[bool] = None  # directories only
    git_status: str = ""
    status_indicator: Optional[StatusIndicator] = None
    is_dvc_tracked: bool = False
    size_label: str = "0 B"
    link: Optional[ViewerLink] = None


# Иконки статусов; PUSHED намеренно без индикатора
STATUS_INDICATORS: dict[GitStatus, Optional[StatusIndicator]] = {
    GitStatus.UNTRACKED: StatusIndicator(icon="plus-circle", color="#eab308", title="Untracked"),
    GitStatus.MODIFIED: StatusIndicator(icon="circle-dot", color="#f97316", title="Modified"),
    GitStatus.STAGED: StatusIndicator(icon="check-circle", color="#22c55e", title="Staged"),
    GitStatus.DELETED: StatusIndicator(icon="circle-dashed", color="#ef4444", title="Deleted"),
    GitStatus.PUSHED: None,
    GitStatus.PARTIALLY_STAGED: StatusIndicator(
        icon="circle-dot", color="#3b82f6", title="Partially Staged"
    ),
    GitStatus.CONFLICT: StatusIndicator(icon="circle-dot", color="#ef4444", title="Conflict"),
}

# Расширения файлов, открываемых во встроенных просмотрщиках
VIEWER_ROUTES: dict[str, str] = {
    ".dcm": "/dicom-viewer",
    ".nii": "/nifti-viewer",
    ".nii.gz": "/nifti-viewer",
}
