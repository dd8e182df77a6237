"""
Exception hierarchy for netrcparse.

Every failure raised by the loader or the parser derives from `NetrcError`,
so callers that only care about success can catch one class while library
users can still branch on the specific kind:

- UnsafePermissionsError: file mode grants group/other bits
- NetrcIOError: file missing, unreadable, or not valid UTF-8
- NetrcParseError: structural violations of the token grammar
    - InvalidTokenError
    - NoMachineSpecifiedError
    - NoValueForTokenError
- UnsupportedPlatformError: host cannot report POSIX permission bits
"""

from pathlib import Path


class NetrcError(Exception):
    """Base class for all netrc loading and parsing failures."""


class UnsafePermissionsError(NetrcError):
    """The credential file is group or world readable, writable or executable."""

    def __init__(self, path: Path | str, mode: int) -> None:
        self.path: Path = Path(path)
        self.mode: int = mode
        super().__init__(
            f"{self.path} has unsafe permissions {oct(mode)}: "
            "the file must be readable and/or writable by its owner only"
        )


class NetrcIOError(NetrcError):
    """The credential file could not be stat'ed or read."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path: Path = Path(path)
        self.reason: str = reason
        super().__init__(f"Could not read {self.path}: {reason}")


class NetrcParseError(NetrcError):
    """Base class for token grammar violations."""


class InvalidTokenError(NetrcParseError):
    """A value token appeared before any keyword."""

    def __init__(self, word: str) -> None:
        self.word: str = word
        super().__init__(f"Invalid token '{word}': expected a keyword such as 'machine'")


class NoMachineSpecifiedError(NetrcParseError):
    """A field keyword appeared before any 'machine' keyword."""

    def __init__(self) -> None:
        super().__init__("No machine specified before login, password, account or macdef")


class NoValueForTokenError(NetrcParseError):
    """A keyword was the last token in the file."""

    def __init__(self, keyword: str) -> None:
        self.keyword: str = keyword
        super().__init__(f"No value for token '{keyword}'")


class UnsupportedPlatformError(NetrcError):
    """The host platform has no POSIX permission bits to check."""

    def __init__(self, platform: str) -> None:
        self.platform: str = platform
        super().__init__(f"Unsupported platform '{platform}': POSIX file permissions required")
