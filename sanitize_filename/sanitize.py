"""Filename sanitization.

Turns an arbitrary string into a name that is safe to create on POSIX and
Windows filesystems. Illegal characters, control characters, dot-only names,
Windows device names and Windows trailing periods/spaces are replaced, then
the result is capped at 255 characters.
"""

import re
import sys
from dataclasses import dataclass, field
from typing import Optional

MAX_LENGTH = 255

_ILLEGAL_RE = re.compile(r'[/?<>\\:*|"]')
_CONTROL_RE = re.compile(r"[\x00-\x1f\x80-\x9f]")
# "." and ".." (and "../../" once the slashes are gone) are dots only
_RESERVED_RE = re.compile(r"^\.+$")
# Trailing periods/spaces are stripped later, so "con " is still "con"
_WINDOWS_RESERVED_RE = re.compile(
    r"^(?:con|prn|aux|nul|com[1-9]|lpt[1-9])(?=\.|[. ]*$)", re.IGNORECASE
)


def is_windows_host() -> bool:
    """True when running on Windows."""
    return sys.platform == "win32"


@dataclass(frozen=True)
class Options:
    """Sanitization options.

    Attributes:
        truncate: Cap the result at 255 characters.
        windows: Also apply Windows device-name and trailing-character rules.
            Defaults to the host platform.
        replacement: Text substituted for every removed character or name.
    """

    truncate: bool = True
    windows: bool = field(default_factory=is_windows_host)
    replacement: str = ""


def _replace(pattern: re.Pattern, name: str, replacement: str, count: int = 0) -> str:
    # A callable keeps backslashes in the replacement literal
    return pattern.sub(lambda _match: replacement, name, count=count)


def sanitize(name: str) -> str:
    """Sanitize a filename with default options."""
    return sanitize_with_options(name, Options())


def sanitize_with_options(name: str, options: Optional[Options] = None) -> str:
    """Sanitize a filename.

    Every stage runs once, so a replacement containing illegal characters is
    left as is.

    Args:
        name: Candidate filename, may be empty.
        options: Options to apply; defaults to ``Options()``.

    Returns:
        The sanitized name, possibly empty.
    """
    if options is None:
        options = Options()
    replacement = options.replacement

    name = _replace(_ILLEGAL_RE, name, replacement)
    name = _replace(_CONTROL_RE, name, replacement)
    name = _replace(_RESERVED_RE, name, replacement, count=1)

    if options.windows:
        name = _replace(_WINDOWS_RESERVED_RE, name, replacement, count=1)

        # Windows doesn't allow trailing periods/spaces.
        stripped = name.rstrip(". ")
        name = stripped + replacement * (len(name) - len(stripped))

    if options.truncate:
        name = name[:MAX_LENGTH]

    return name
