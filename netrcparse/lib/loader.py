"""
Permission-checked loading of .netrc files.

The loader stats the credential file, refuses it if any group or other
permission bit is set, reads it as UTF-8 text, and hands the content to the
parser. Filesystem access goes through a `FileAccess` object so callers and
tests can substitute their own.

Example:
    table: MachineTable = {}
    netrc_load(Path.home() / ".netrc", table)
"""

import stat
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable
from netrcparse.config.settings import appsettings, PERMISSION_MASK_DEFAULT
from netrcparse.lib.errors import NetrcIOError, UnsafePermissionsError
from netrcparse.lib.log import LOG
from netrcparse.lib.parser import content_parse
from netrcparse.models.dataModel import MachineTable


@runtime_checkable
class FileAccess(Protocol):
    """Protocol for the file operations the loader needs.

    Implementations raise OSError (or UnicodeDecodeError from `text_read`)
    on failure; the loader converts these into NetrcIOError.
    """

    def mode_get(self, path: Path) -> int:
        """Return the st_mode of `path`."""
        ...

    def text_read(self, path: Path) -> str:
        """Return the full contents of `path` decoded as UTF-8."""
        ...


class LocalFileAccess:
    """FileAccess backed by the local filesystem."""

    def mode_get(self, path: Path) -> int:
        return path.stat().st_mode

    def text_read(self, path: Path) -> str:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()


def permissions_check(
    path: Path, access: FileAccess, ok_mask: int = PERMISSION_MASK_DEFAULT
) -> int:
    """Verify that `path` carries no permission bits outside `ok_mask`.

    Args:
        path: Credential file
        access: File access capability
        ok_mask: Permitted bits, owner read/write by default

    Returns:
        int: The file's permission bits

    Raises:
        UnsafePermissionsError: If any bit outside `ok_mask` is set
        NetrcIOError: If the file cannot be stat'ed
    """
    try:
        mode: int = stat.S_IMODE(access.mode_get(path))
    except OSError as e:
        LOG(f"Could not stat {path}: {e}")
        raise NetrcIOError(path, e.strerror or str(e)) from e

    if mode | ok_mask != ok_mask:
        LOG(f"{path} has mode {oct(mode)}, allowed {oct(ok_mask)}")
        raise UnsafePermissionsError(path, mode)
    return mode


def file_read(path: Path, access: FileAccess) -> str:
    """Read the whole credential file as text.

    Raises:
        NetrcIOError: If the file is unreadable or not valid UTF-8
    """
    try:
        return access.text_read(path)
    except OSError as e:
        LOG(f"Could not read {path}: {e}")
        raise NetrcIOError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        LOG(f"{path} is not valid UTF-8")
        raise NetrcIOError(path, "file is not valid UTF-8") from e


def netrc_load(
    path: Path,
    table: MachineTable,
    access: Optional[FileAccess] = None,
    ok_mask: Optional[int] = None,
) -> MachineTable:
    """Check, read and parse the credential file at `path` into `table`.

    Args:
        path: Credential file
        table: Accumulator passed through to the parser
        access: File access capability; local filesystem when omitted
        ok_mask: Permitted permission bits; `appsettings.permission_mask` when omitted

    Returns:
        MachineTable: `table`, populated

    Raises:
        NetrcError: Any permission, I/O or parse failure
    """
    if access is None:
        access = LocalFileAccess()
    if ok_mask is None:
        ok_mask = appsettings.permission_mask

    mode: int = permissions_check(path, access, ok_mask)
    LOG(f"Loading {path} (mode {oct(mode)})")
    content: str = file_read(path, access)
    return content_parse(content, table)
