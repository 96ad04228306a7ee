"""Path utilities for the virtual filesystem.

Paths are plain strings: absolute, '/'-separated, no trailing slash except the
root itself, and no empty, '.' or '..' segments once normalized.
"""

SEPARATOR = "/"
ROOT = "/"


def split_segments(path: str) -> list[str]:
    """Split a path on '/' and drop empty segments."""
    return [s for s in path.split(SEPARATOR) if s]


def resolve(current_dir: str, token: str) -> str:
    """Resolve a user-supplied token against the current directory.

    Never fails: '..' above the root is a no-op and any other segment is kept
    verbatim, so the result may simply not exist in the tree.
    """
    combined = token if token.startswith(SEPARATOR) else f"{current_dir}{SEPARATOR}{token}"
    stack: list[str] = []
    for segment in split_segments(combined):
        if segment == ".":
            continue
        if segment == "..":
            if stack:
                stack.pop()
            continue
        stack.append(segment)
    return SEPARATOR + SEPARATOR.join(stack)


def join(parent: str, name: str) -> str:
    """Path of a direct child named `name` under the folder at `parent`."""
    if parent == ROOT:
        return ROOT + name
    return f"{parent}{SEPARATOR}{name}"
