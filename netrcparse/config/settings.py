"""
settings.py

This module provides application configuration management for netrcparse.

Features:
- Centralized application configuration using Pydantic settings
- The default `.netrc` location and the permission mask the loader enforces
- Environment overrides with the NETRC_ prefix

Usage:
Import appsettings for application configuration values.
"""

from pathlib import Path
from typing import Final
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Owner read/write only
PERMISSION_MASK_DEFAULT: Final[int] = 0o600


def netrcFile_default() -> Path:
    """
    Resolve the default credential file for the invoking user.

    Returns:
        Path: ~/.netrc
    """
    return Path.home() / ".netrc"


class App(BaseSettings):
    """
    Application settings model.

    Settings can be overridden through environment variables with NETRC_ prefix,
    e.g. `NETRC_NETRC_FILE=/tmp/netrc` or `NETRC_BEQUIET=true`.

    Attributes:
        beQuiet: Suppress detailed logging output
        detailedOutput: List every parsed machine name after a CLI run
        netrc_file: Credential file used when no explicit path is given
        permission_mask: Permission bits a credential file may carry; strings
            (including NETRC_PERMISSION_MASK) are read as octal, e.g. "0600"
    """

    beQuiet: bool = False
    detailedOutput: bool = False

    netrc_file: Path = Field(default_factory=netrcFile_default)
    permission_mask: int = PERMISSION_MASK_DEFAULT

    model_config = SettingsConfigDict(
        env_prefix="NETRC_",  # Environment variables with this prefix override settings
        case_sensitive=False,  # Allow case-insensitive environment variables
        extra="allow",
    )

    @field_validator("netrc_file")
    @classmethod
    def netrcFile_expand(cls, value: Path) -> Path:
        """Expand a leading ~ in a configured path."""
        return value.expanduser()

    @field_validator("permission_mask", mode="before")
    @classmethod
    def permissionMask_parse(cls, value: object) -> object:
        """Read string masks, as environment values arrive, as octal: 600, 0600 or 0o600."""
        if isinstance(value, str):
            try:
                return int(value.strip(), 8)
            except ValueError:
                raise ValueError(f"Invalid octal permission mask: {value!r}")
        return value

    @field_validator("permission_mask")
    @classmethod
    def permissionMask_validate(cls, value: int) -> int:
        """Reject masks that are not plain permission bits."""
        if value < 0 or value > 0o777:
            raise ValueError(f"Invalid permission mask: {oct(value)}")
        return value


# Create the application settings instance
appsettings: Final[App] = App()
