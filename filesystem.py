"""In-memory directory tree with a current working directory.

Paths are '/'-separated. A path starting with '/' is absolute and is
resolved from the root; anything else is resolved from the current
directory. '..' moves to the parent (the root is its own parent) and
'.' stays in place.
"""

from dataclasses import dataclass, field

SEP = "/"


class FilesystemError(Exception):
    """Base error for filesystem operations."""
    pass


class WalkError(FilesystemError):
    """A path segment does not resolve to an existing directory."""

    def __init__(self, path: str, segment: str):
        super().__init__(f"walk failed: {segment} in {path}")
        self.path = path
        self.segment = segment


class DuplicateDirError(FilesystemError):
    """The directory to create already exists."""

    def __init__(self, path: str):
        super().__init__(f"directory exists: {path}")
        self.path = path


def split_path(path: str) -> list[str]:
    """Split a path into its non-empty segments."""
    return [p for p in path.split(SEP) if p]


def is_absolute(path: str) -> bool:
    return path.startswith(SEP)


@dataclass(eq=False)
class Node:
    """A directory entry in the tree."""
    name: str
    path: str
    is_dir: bool = True
    children: dict[str, "Node"] = field(default_factory=dict)
    parent: "Node | None" = field(default=None, repr=False)

    def root(self) -> "Node":
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def child(self, name: str) -> "Node | None":
        return self.children.get(name)

    def walk(self, path: str) -> "Node":
        """Resolve path starting at this node. Raises WalkError if a segment is missing."""
        node = self.root() if is_absolute(path) else self
        return node._walk_segments(split_path(path), path)

    def _walk_segments(self, segments: list[str], path: str) -> "Node":
        node = self
        for segment in segments:
            if segment == "..":
                if node.parent is not None:
                    node = node.parent
            elif segment == ".":
                continue
            else:
                child = node.children.get(segment)
                if child is None or not child.is_dir:
                    raise WalkError(path, segment)
                node = child
        return node

    def _make_child(self, name: str) -> "Node":
        if name in self.children:
            raise DuplicateDirError(self.children[name].path)
        path = self.path + name if self.path == SEP else self.path + SEP + name
        node = Node(name=name, path=path, parent=self)
        self.children[name] = node
        return node


class Filesystem:
    """A directory tree owning its root and tracking the working directory."""

    def __init__(self):
        self.root = Node(name=SEP, path=SEP)
        self.current_dir = self.root

    def _start(self, path: str) -> Node:
        return self.root if is_absolute(path) else self.current_dir

    def print_working_directory(self) -> str:
        return self.current_dir.path

    pwd = print_working_directory

    def create_dir(self, path: str) -> Node:
        """Create the directory named by the last segment of path.

        The segments before it must resolve to an existing directory,
        otherwise WalkError is raised. DuplicateDirError is raised if the
        directory already exists.
        """
        segments = split_path(path)
        parent = self._start(path)._walk_segments(segments[:-1], path)
        if not segments or segments[-1] in (".", ".."):
            # The target is an existing directory: the start node, '.' or '..'
            target = parent._walk_segments(segments[-1:], path)
            raise DuplicateDirError(target.path)
        return parent._make_child(segments[-1])

    def change_dir(self, path: str) -> Node:
        """Make the directory at path the current directory.

        On WalkError the current directory is left unchanged.
        """
        self.current_dir = self.current_dir.walk(path)
        return self.current_dir

    def list_dir(self, path: str = "") -> list[str]:
        """Return sorted child names of the directory at path."""
        node = self.current_dir.walk(path)
        return sorted(node.children)

    def exists(self, path: str) -> bool:
        try:
            self.current_dir.walk(path)
        except WalkError:
            return False
        return True
