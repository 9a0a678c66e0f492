"""
String based path helpers.

Resource paths may come from Windows project files or from the local file
system, so both '/' and '\\' are accepted as directory separators and the
separator style of the input is kept on output.
"""

import re
from typing import Iterator, List, Optional, Tuple

SEPARATORS = ('/', '\\')

_SEGMENT_PATTERN = re.compile(r'[^\\/]+')


def _last_separator(path: str) -> int:
    return max(path.rfind('/'), path.rfind('\\'))


def _is_root(path: str) -> bool:
    """Check for '/', '\\', 'C:', 'C:\\' and friends."""
    if path in SEPARATORS:
        return True
    return bool(re.match(r'^[A-Za-z]:[\\/]?$', path))


def separator_for(path: str) -> str:
    """
    Guess the separator used by a path.

    Args:
        path: File or directory path

    Returns:
        '\\' for Windows style paths, '/' otherwise
    """
    if '\\' in path and '/' not in path:
        return '\\'
    return '/'


def directory_name(path: str) -> Optional[str]:
    """
    Return the directory part of a path.

    Examples:
        'a/b/c.resx' -> 'a/b'
        'c.resx'     -> ''
        '/c.resx'    -> '/'
        '/'          -> None

    Args:
        path: File path

    Returns:
        Directory path, '' for a bare file name, None when the path is empty
        or already a root
    """
    if not path or _is_root(path):
        return None

    index = _last_separator(path)
    if index < 0:
        return ''

    head = path[:index]
    if not head:
        return path[0]
    if re.match(r'^[A-Za-z]:$', head):
        return path[:index + 1]
    return head


def file_name(path: str) -> str:
    """Return the last component of a path."""
    return path[_last_separator(path) + 1:]


def split_extension(name: str) -> Tuple[str, str]:
    """
    Split the last extension off a file name.

    Examples:
        'View.fr.resx' -> ('View.fr', '.resx')
        'View'         -> ('View', '')

    Returns:
        Tuple of (name without extension, extension including the dot)
    """
    index = name.rfind('.')
    if index < 0:
        return name, ''
    return name[:index], name[index:]


def extension_of(path: str) -> str:
    """Return the extension of the file a path points to, including the dot."""
    return split_extension(file_name(path))[1]


def file_name_without_extension(path: str) -> str:
    return split_extension(file_name(path))[0]


def iter_segments(path: str) -> Iterator[Tuple[str, int, int]]:
    """
    Iterate over the non-empty segments of a path from left to right.

    Yields:
        Tuples of (segment, start offset, end offset)
    """
    for match in _SEGMENT_PATTERN.finditer(path):
        yield match.group(0), match.start(), match.end()


def segments(path: str) -> List[str]:
    return [segment for segment, _, _ in iter_segments(path)]


def trim_separators(path: str, leading: bool = False) -> str:
    """
    Strip separators from the end (and optionally the start) of a path.

    A root such as '/' or 'C:\\' is kept intact.
    """
    if _is_root(path):
        return path
    trimmed = path.rstrip('/\\')
    if leading:
        trimmed = trimmed.lstrip('/\\')
    if not trimmed and path and not leading:
        return path[0]
    if re.match(r'^[A-Za-z]:$', trimmed):
        return path[:3]
    return trimmed


def join(separator: str, *parts: str) -> str:
    """
    Join path parts, skipping empty ones.

    Args:
        separator: Separator placed between parts
        *parts: Path parts

    Returns:
        Joined path
    """
    result = ''
    for part in parts:
        if not part:
            continue
        if not result:
            result = part
        elif result.endswith(SEPARATORS):
            result += part
        else:
            result += separator + part
    return result
