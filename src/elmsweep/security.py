"""
Path validation for elmsweep.

Keeps every directory a project declares inside the project root.
"""

from pathlib import Path
from typing import Union

from .exceptions import InvalidPathError


class PathValidator:
    """
    Resolves project-relative paths and checks they stay inside the root.

    Prevents:
    - Directory traversal through ``..`` segments
    - Symlinks whose target escapes the root
    """

    def __init__(self, root_dir: Union[str, Path]):
        """
        Initialize path validator.

        Args:
            root_dir: Root directory that paths must be within
        """
        self.root_dir = Path(root_dir).resolve()

    def resolve(self, path: Union[str, Path]) -> Path:
        """
        Resolve ``path`` against the root directory.

        Args:
            path: Absolute path, or path relative to the root

        Returns:
            Resolved absolute path

        Raises:
            InvalidPathError: If the path cannot be resolved
        """
        try:
            return (self.root_dir / path).resolve()
        except (OSError, RuntimeError) as e:
            raise InvalidPathError(Path(path), f"Cannot resolve path: {e}")

    def is_within_root(self, path: Union[str, Path]) -> bool:
        """
        Check whether ``path`` resolves to a location inside the root.

        Args:
            path: Absolute path, or path relative to the root

        Returns:
            True if the resolved path is the root or below it
        """
        try:
            resolved = self.resolve(path)
        except InvalidPathError:
            return False
        return resolved.is_relative_to(self.root_dir)
