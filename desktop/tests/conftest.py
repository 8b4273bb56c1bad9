"""Shared fixtures"""
import pytest
from treemirror.models.schemas import FileNode

ROOT = "/repo"


@pytest.fixture
def sample_tree_data():
    """Raw scan payload as returned by the tree service"""
    return {
        "name": ROOT,
        "size": 4196,
        "is_directory": True,
        "has_dvc_file": False,
        "git_status": "",
        "children": [
            {"name": "a.txt", "size": 100, "is_directory": False, "has_dvc_file": False, "git_status": ""},
            {
                "name": "sub",
                "size": 2048,
                "is_directory": True,
                "has_dvc_file": False,
                "git_status": "",
                "children": [
                    {"name": "b.txt", "size": 2048, "is_directory": False, "has_dvc_file": False, "git_status": ""},
                ],
            },
            {
                "name": ".git",
                "size": 1024,
                "is_directory": True,
                "has_dvc_file": False,
                "git_status": "",
                "children": [
                    {"name": "config", "size": 1024, "is_directory": False, "has_dvc_file": False, "git_status": ""},
                ],
            },
            {"name": "scan.DCM", "size": 1536, "is_directory": False, "has_dvc_file": True, "git_status": ""},
            {"name": "brain.nii.gz", "size": 0, "is_directory": False, "has_dvc_file": False, "git_status": ""},
        ],
    }


@pytest.fixture
def sample_tree(sample_tree_data):
    return FileNode.model_validate(sample_tree_data)
