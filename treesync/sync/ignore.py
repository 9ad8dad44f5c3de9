# treesync Ignore Matcher
# gitignore-style path predicate compiled with pathspec

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path, PurePath

import pathspec

# Signature of any object usable as an ignore predicate: (path, is_dir) -> accepted
PathPredicate = Callable[[Path, bool], bool]


class IgnoreMatcher:
    """
    Compiled ignore rules.

    Paths are matched relative to whichever configured root contains them,
    so an entry and its mirror under the other root share the same verdict.
    Paths outside every root are matched as given.
    """

    def __init__(self, rules: Iterable[str] = (), roots: Iterable[Path] = ()):
        """
        Initialize matcher.

        Args:
            rules: Ordered pattern lines in .gitignore syntax.
            roots: Roots that relative matching is anchored at.
        """
        self.rules = [line.rstrip("\r\n") for line in rules]
        self.roots = [Path(r) for r in roots]
        self._spec = pathspec.GitIgnoreSpec.from_lines(self.rules)

    def relative_name(self, path: str | PurePath) -> str:
        """Name a path the way rules see it: relative, forward slashes."""
        candidate = PurePath(path)
        for root in self.roots:
            try:
                return candidate.relative_to(root).as_posix()
            except ValueError:
                continue
        return candidate.as_posix().lstrip("/")

    def accepts(self, path: str | PurePath, is_dir: bool = False) -> bool:
        """
        Check whether a path survives the ignore rules.

        Args:
            path: Absolute or relative path.
            is_dir: Whether the path names a directory (enables trailing-slash rules).

        Returns:
            False if the last matching rule ignores the path, True otherwise.
        """
        name = self.relative_name(path)
        if name in ("", "."):
            return True

        if is_dir or str(path).endswith("/"):
            name = name.rstrip("/") + "/"

        return not self._spec.match_file(name)

    def __call__(self, path: Path, is_dir: bool = False) -> bool:
        return self.accepts(path, is_dir)
