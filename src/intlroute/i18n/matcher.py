"""Path matcher — which requests reach the locale engine at all.

API endpoints and static assets have no localized variants, so the
default matcher skips them::

    matcher = PathMatcher()
    matcher("/about")          # True
    matcher("/api/users")      # False
    matcher("/favicon.ico")    # False
"""

from collections.abc import Iterable


class PathMatcher:
    """Predicate over request paths.

    *exclude* lists path prefixes matched on segment boundaries
    (``/api`` skips ``/api`` and ``/api/x`` but not ``/apix``).
    With *skip_files*, paths whose last segment contains a dot are
    skipped too.
    """

    __slots__ = ("exclude", "skip_files")

    def __init__(
        self,
        exclude: Iterable[str] = ("/api", "/_static"),
        *,
        skip_files: bool = True,
    ) -> None:
        self.exclude = tuple("/" + prefix.strip("/") for prefix in exclude)
        self.skip_files = skip_files

    def __call__(self, path: str) -> bool:
        for prefix in self.exclude:
            if path == prefix or path.startswith(f"{prefix}/"):
                return False
        if self.skip_files:
            last = path.rstrip("/").rsplit("/", 1)[-1]
            if "." in last:
                return False
        return True

    def __repr__(self) -> str:
        return f"PathMatcher(exclude={self.exclude!r}, skip_files={self.skip_files!r})"
