"""Filtering of changed files by comma-separated glob patterns."""

from fnmatch import fnmatch


def parse_patterns(patterns: str | None) -> list[str]:
    """Split a comma-separated pattern string into a list of non-empty patterns."""
    if not patterns:
        return []
    return [pattern.strip() for pattern in patterns.split(",") if pattern.strip()]


def matches_any(filename: str, patterns: list[str]) -> bool:
    """Check whether a filename matches any of the given glob patterns."""
    return any(fnmatch(filename, pattern) for pattern in patterns)


def filter_files(filenames: list[str], ignored_files: str = "", src_files: str = "") -> list[str]:
    """Filter changed files using ignore and source patterns.

    Args:
        filenames: Paths of the changed files, relative to the repository root.
        ignored_files: Comma-separated globs of files to leave out. Takes precedence over ``src_files``.
        src_files: Comma-separated globs of files to keep. When empty every file not ignored is kept.

    Returns:
        The kept filenames, in their original order.
    """
    ignored = parse_patterns(ignored_files)
    sources = parse_patterns(src_files)
    kept: list[str] = []
    for filename in filenames:
        if matches_any(filename, ignored):
            continue
        if sources and not matches_any(filename, sources):
            continue
        kept.append(filename)
    return kept
