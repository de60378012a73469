from hypothesis import given
from hypothesis import strategies as st

from solvebox.folders import delete_duplicate_folders, remove_subfolders

folder_lists = st.lists(
    st.lists(st.sampled_from("ab"), min_size=1, max_size=3).map(lambda s: "/" + "/".join(s)),
    max_size=8,
)


def _has_ancestor(path, present):
    parts = path.split("/")
    return any("/".join(parts[:i]) in present for i in range(1, len(parts)))


def _is_subsequence(short, long):
    it = iter(long)
    return all(item in it for item in short)


def test_remove_subfolders_example():
    folders = ["/a", "/a/b", "/c/d", "/c/d/e", "/c/f"]
    assert remove_subfolders(folders) == ["/a", "/c/d", "/c/f"]


def test_remove_subfolders_name_prefix_is_not_parent():
    folders = ["/a/b/c", "/a/b/ca", "/a/b/d"]
    assert remove_subfolders(folders) == folders


@given(folder_lists)
def test_remove_subfolders_invariants(folders):
    present = set(folders)
    result = remove_subfolders(folders)
    kept = set(result)
    assert kept <= present
    assert _is_subsequence(result, folders)
    assert all(path in kept for path in folders if path.count("/") == 1)
    assert all(not _has_ancestor(path, present) for path in result)
    assert len(result) == sum(1 for path in folders if path in kept)
    removed = [path for path in folders if path not in kept]
    assert all(_has_ancestor(path, present) for path in removed)


def test_delete_duplicate_folders_example():
    paths = [["a"], ["c"], ["d"], ["a", "b"], ["c", "b"], ["d", "a"]]
    assert sorted(delete_duplicate_folders(paths)) == [["d"], ["d", "a"]]


def test_delete_duplicate_folders_without_duplicates_keeps_all():
    paths = [["a"], ["a", "b"], ["c"]]
    assert sorted(delete_duplicate_folders(paths)) == sorted(paths)


def test_delete_duplicate_folders_twin_trees_vanish():
    paths = [["x"], ["x", "y"], ["z"], ["z", "y"]]
    assert delete_duplicate_folders(paths) == []


@given(st.lists(st.lists(st.sampled_from("abc"), min_size=1, max_size=3), max_size=8))
def test_delete_duplicate_folders_result_is_prefix_closed(raw):
    paths = sorted({tuple(p[:i]) for p in raw for i in range(1, len(p) + 1)})
    result = delete_duplicate_folders([list(p) for p in paths])
    kept = {tuple(p) for p in result}
    assert len(kept) == len(result)
    assert kept <= set(paths)
    assert all(len(p) == 1 or p[:-1] in kept for p in kept)