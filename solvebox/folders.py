"""Folder-path routines: dropping sub-folders and duplicate folder trees."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field


def remove_subfolders(folders: Sequence[str]) -> list[str]:
    """Keep, in order, the folders that have no ancestor folder in the list."""
    present = set(folders)

    def has_ancestor(path: str) -> bool:
        prefix = path
        while prefix:
            cut = prefix.rfind("/")
            if cut < 0:
                return False
            prefix = prefix[:cut]
            if prefix in present:
                return True
        return False

    return [path for path in folders if not has_ancestor(path)]


@dataclass
class _Folder:
    children: dict[str, _Folder] = field(default_factory=dict)
    signature: str = ""


def _sign(node: _Folder, counts: Counter[str]) -> None:
    if not node.children:
        node.signature = ""
        return
    parts = []
    for name, child in node.children.items():
        _sign(child, counts)
        parts.append(f"{name}({child.signature})")
    node.signature = "".join(sorted(parts))
    counts[node.signature] += 1


def delete_duplicate_folders(paths: Sequence[Sequence[str]]) -> list[list[str]]:
    """Delete every folder whose non-empty subtree is identical to another's; return the rest."""
    root = _Folder()
    for path in paths:
        node = root
        for name in path:
            node = node.children.setdefault(name, _Folder())

    counts: Counter[str] = Counter()
    _sign(root, counts)

    kept: list[list[str]] = []

    def keep(name: str, node: _Folder, prefix: list[str]) -> None:
        if node.children and counts[node.signature] >= 2:
            return
        path = prefix + [name]
        kept.append(path)
        for child_name, child in sorted(node.children.items()):
            keep(child_name, child, path)

    for name, child in sorted(root.children.items()):
        keep(name, child, [])
    return kept