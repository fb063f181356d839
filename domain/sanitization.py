"""
Input sanitization utilities.

Part of REC-3: Safe download filenames and search query cleanup

Both sanitizers are written as explicit character-class predicates. This
module has no dependencies on models or services to avoid circular imports.
"""

import string

_ALNUM = frozenset(string.ascii_letters + string.digits)

# Characters kept verbatim in search queries; everything else becomes a space.
_QUERY_CHARS = _ALNUM | {"."}

# Characters allowed in download filenames.
_FILENAME_CHARS = _ALNUM | {"_", "-", "."}

DEFAULT_EXTENSION = ".txt"


def sanitize_query(value: str) -> str:
    """
    Clean a free-text search query.

    Every character outside ``[0-9a-zA-Z\\s.]`` becomes a space, then runs
    of whitespace collapse into a single space.

    Args:
        value: Raw query string from the client

    Returns:
        Sanitized query (may keep one leading/trailing space)
    """
    out = []
    for ch in value or "":
        if ch in _QUERY_CHARS:
            out.append(ch)
        elif out and out[-1] == " ":
            continue
        else:
            # Blanks and unsafe characters both collapse into one space.
            out.append(" ")
    return "".join(out)


def split_terms(value: str) -> list[str]:
    """Split a sanitized query into non-empty terms."""
    return value.split()


def _posix_basename(path: str) -> str:
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


def _clean(value: str) -> str:
    out = []
    for ch in value:
        if ch not in _FILENAME_CHARS:
            ch = "-"
        if ch == "-" and out and out[-1] == "-":
            continue
        out.append(ch)
    return "".join(out).strip("-")


def _has_extension(name: str) -> bool:
    _, dot, ext = name.rpartition(".")
    return bool(dot) and bool(ext) and all(ch in _ALNUM for ch in ext)


def safe_filename(host: str, path: str) -> str:
    """
    Build a filesystem-safe download filename from a URL's host and path.

    The name is ``<host>-<last path segment>`` with unsafe characters
    replaced by ``-``, repeated dashes collapsed and edge dashes trimmed.
    ``.txt`` is appended when the last path segment has no extension.
    An empty path contributes nothing and trailing dots are dropped.

    Examples:
        >>> safe_filename("a.b", "/c")
        'a.b-c.txt'
        >>> safe_filename("example.com", "/static/app.js")
        'example.com-app.js'

    Args:
        host: URL host, including any port
        path: URL path

    Returns:
        Sanitized basename
    """
    segment = _posix_basename(path)
    if segment in (".", "/"):
        segment = ""
    name = _clean(f"{host}-{segment}").rstrip(".-")
    if not _has_extension(_clean(segment)):
        name += DEFAULT_EXTENSION
    return name
