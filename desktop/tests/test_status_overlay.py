"""Test status overlay merge"""
from treemirror.models.schemas import FileNode, FileStatus
from treemirror.services.status_overlay import merge_statuses

ROOT = "/repo"


def find(tree: FileNode, *names: str) -> FileNode:
    node = tree
    for name in names:
        node = next(c for c in node.children if c.name == name)
    return node


class TestMergeStatuses:
    def test_empty_list_leaves_tree_unchanged(self, sample_tree):
        """Merging nothing returns an equal tree"""
        merged = merge_statuses(sample_tree, [], ROOT)
        assert merged == sample_tree

    def test_relative_path_match(self, sample_tree):
        merged = merge_statuses(
            sample_tree, [FileStatus(path="a.txt", git_status="modified")], ROOT
        )
        assert find(merged, "a.txt").git_status == "modified"

    def test_absolute_path_match(self, sample_tree):
        merged = merge_statuses(
            sample_tree,
            [FileStatus(path="/repo/sub/b.txt", git_status="staged", has_dvc_file=True)],
            ROOT,
        )
        b = find(merged, "sub", "b.txt")
        assert b.git_status == "staged"
        assert b.has_dvc_file is True

    def test_nested_relative_path_match(self, sample_tree):
        merged = merge_statuses(
            sample_tree, [FileStatus(path="sub/b.txt", git_status="untracked")], ROOT
        )
        assert find(merged, "sub", "b.txt").git_status == "untracked"
        assert find(merged, "sub").git_status == ""

    def test_siblings_untouched(self, sample_tree):
        """Only the matched node changes; unrelated subtrees keep identity"""
        merged = merge_statuses(
            sample_tree, [FileStatus(path="a.txt", git_status="modified")], ROOT
        )
        assert merged is not sample_tree
        assert find(merged, "sub") is find(sample_tree, "sub")
        assert find(merged, "scan.DCM") is find(sample_tree, "scan.DCM")
        assert find(merged, "scan.DCM").has_dvc_file is True
        assert sample_tree.children[0].git_status == ""

    def test_path_to_updated_descendant_copied(self, sample_tree):
        merged = merge_statuses(
            sample_tree, [FileStatus(path="sub/b.txt", git_status="deleted")], ROOT
        )
        assert find(merged, "sub") is not find(sample_tree, "sub")
        assert find(merged, "a.txt") is find(sample_tree, "a.txt")

    def test_first_match_wins(self, sample_tree):
        statuses = [
            FileStatus(path="a.txt", git_status="modified"),
            FileStatus(path="/repo/a.txt", git_status="staged", has_dvc_file=True),
        ]
        merged = merge_statuses(sample_tree, statuses, ROOT)
        a = find(merged, "a.txt")
        assert a.git_status == "modified"
        assert a.has_dvc_file is False

    def test_first_match_wins_reverse_order(self, sample_tree):
        statuses = [
            FileStatus(path="/repo/a.txt", git_status="staged"),
            FileStatus(path="a.txt", git_status="modified"),
        ]
        merged = merge_statuses(sample_tree, statuses, ROOT)
        assert find(merged, "a.txt").git_status == "staged"

    def test_matched_directory_not_descended(self, sample_tree):
        """A directory match stops the walk; descendants need their own records"""
        statuses = [
            FileStatus(path="sub", git_status="modified"),
            FileStatus(path="sub/b.txt", git_status="staged"),
        ]
        merged = merge_statuses(sample_tree, statuses, ROOT)
        sub = find(merged, "sub")
        assert sub.git_status == "modified"
        assert sub.children[0].git_status == ""

    def test_unmatched_record_ignored(self, sample_tree):
        merged = merge_statuses(
            sample_tree, [FileStatus(path="missing.txt", git_status="modified")], ROOT
        )
        assert merged is sample_tree

    def test_no_normalization(self, sample_tree):
        """Matching is exact: trailing separators and case are not folded"""
        statuses = [
            FileStatus(path="sub/", git_status="modified"),
            FileStatus(path="A.TXT", git_status="modified"),
        ]
        merged = merge_statuses(sample_tree, statuses, ROOT)
        assert merged is sample_tree

    def test_root_name_not_matched(self, sample_tree):
        merged = merge_statuses(
            sample_tree, [FileStatus(path=ROOT, git_status="modified")], ROOT
        )
        assert merged.git_status == ""

    def test_hidden_entries_still_merged(self, sample_tree):
        merged = merge_statuses(
            sample_tree, [FileStatus(path=".git/config", git_status="modified")], ROOT
        )
        assert find(merged, ".git", "config").git_status == "modified"

    def test_custom_separator(self):
        tree = FileNode(
            name="C:",
            is_directory=True,
            children=[FileNode(name="dir", is_directory=True, children=[FileNode(name="f.txt")])],
        )
        merged = merge_statuses(
            tree, [FileStatus(path="dir\\f.txt", git_status="modified")], "C:", separator="\\"
        )
        assert merged.children[0].children[0].git_status == "modified"
