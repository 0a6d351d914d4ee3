# SPDX-License-Identifier: MIT

# File nodes: a source or target file which may or may not exist yet,
# and the timestamp comparison used to skip redundant regeneration

from __future__ import annotations

import pathlib
from enum import Enum


class NodeStatus(Enum):
    UpToDate = "uptodate"
    OutOfDate = "outofdate"


class FileNode:
    """A file system node, representing a possible file.

    Note that FileNode objects may or may not exist in the file system
    at the time this is called, for example if the node represents
    generated source that has not been written yet."""

    path: pathlib.Path
    dependencies: list[FileNode]

    def __init__(
        self, path: pathlib.Path | str, dependencies: list[FileNode] | None = None
    ):
        self.path = pathlib.Path(path)
        self.dependencies = list(dependencies or [])

    def mtime(self) -> float | None:
        """Last modification time in seconds, or None if the file is missing."""
        try:
            return self.path.stat().st_mtime
        except (OSError, ValueError):
            return None

    def status(self) -> NodeStatus:
        """Compare this node's timestamp against its dependencies.

        The node is up to date only when it and every dependency exist
        and no dependency was modified after it. Equal timestamps count
        as up to date.
        """
        own = self.mtime()
        if own is None:
            return NodeStatus.OutOfDate
        for dep in self.dependencies:
            dep_time = dep.mtime()
            if dep_time is None or dep_time > own:
                return NodeStatus.OutOfDate
        return NodeStatus.UpToDate

    def is_up_to_date(self) -> bool:
        return self.status() is NodeStatus.UpToDate

    def __repr__(self) -> str:
        return f"FileNode({str(self.path)!r})"
