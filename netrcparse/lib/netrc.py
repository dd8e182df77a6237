"""
Owning object for a parsed .netrc file.

`Netrc` resolves the credential file path, loads it through the
permission-checking loader, and answers lookups by machine name.

Example:
    netrc = Netrc("/tmp/netrc")
    record = netrc["mymachine"]
    if record:
        print(record.login, record.password)
"""

from pathlib import Path
from typing import Iterator, Optional
from rich.console import Console
from netrcparse.config.settings import appsettings
from netrcparse.lib.loader import FileAccess, LocalFileAccess, netrc_load
from netrcparse.lib.log import LOG
from netrcparse.models.dataModel import MachineRecord, MachineTable

console: Console = Console()


class Netrc:
    """Parsed contents of one .netrc file.

    Attributes:
        netrcFile: Resolved path to the credential file
        machines: Machine name to record mapping from the latest load
        access: File access capability used by the loader

    Note:
        If a load fails partway through parsing, `machines` keeps the entries
        folded before the failing token.
    """

    def __init__(
        self,
        path: Optional[Path | str] = None,
        *,
        access: Optional[FileAccess] = None,
        autoload: bool = True,
    ) -> None:
        """Resolve the path and, by default, load the file.

        Args:
            path: Credential file; `appsettings.netrc_file` when omitted
            access: File access capability; local filesystem when omitted
            autoload: Load immediately

        Raises:
            NetrcError: If autoload is set and loading fails
        """
        self.netrcFile: Path = Path(path) if path is not None else appsettings.netrc_file
        self.access: FileAccess = access if access is not None else LocalFileAccess()
        self.machines: MachineTable = {}
        if autoload:
            self.load()

    @classmethod
    def from_args(cls, arguments: list[str], **kwargs) -> "Netrc":
        """Construct from command-line style arguments; the first, if any, is the path."""
        path: Optional[str] = arguments[0] if arguments else None
        return cls(path, **kwargs)

    def load(self) -> MachineTable:
        """Discard the current table and rebuild it from the file.

        Returns:
            MachineTable: The new table

        Raises:
            NetrcError: Any permission, I/O or parse failure
        """
        self.machines = {}
        LOG(f"Loading machines from {self.netrcFile}")
        return netrc_load(self.netrcFile, self.machines, self.access)

    reload = load

    def run(self) -> None:
        """Load the file and confirm it parsed."""
        self.load()
        console.print(".netrc file parsed without error")

    def get(self, name: str) -> Optional[MachineRecord]:
        return self.machines.get(name)

    def __getitem__(self, name: str) -> Optional[MachineRecord]:
        return self.machines.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.machines

    def __iter__(self) -> Iterator[str]:
        return iter(self.machines)

    def __len__(self) -> int:
        return len(self.machines)

    def __repr__(self) -> str:
        return f"Netrc(netrcFile={str(self.netrcFile)!r}, machines={len(self.machines)})"
