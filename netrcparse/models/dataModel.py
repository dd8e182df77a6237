"""
dataModel.py

This module defines the data models used throughout netrcparse.
Records leverage Pydantic for validation and type safety.

Features:
- Enum of the keyword tokens recognised in a .netrc file
- The per-machine credential record, with an auxiliary property bag
- The machine table type returned by the parser

Usage:
Import these models to build and query parsed credential data.
"""

from enum import Enum
from typing import Dict, Optional
from pydantic import BaseModel, Field


class NetrcToken(Enum):
    """
    Keyword tokens of the .netrc grammar.

    The value of each member is its exact (case-sensitive) spelling.
    """

    MACHINE = "machine"
    LOGIN = "login"
    PASSWORD = "password"
    ACCOUNT = "account"
    MACDEF = "macdef"

    @classmethod
    def keyword_match(cls, word: str) -> Optional["NetrcToken"]:
        """Return the keyword spelled exactly by `word`, or None for a value token."""
        try:
            return cls(word)
        except ValueError:
            return None

    @property
    def is_field(self) -> bool:
        """True for keywords that bind a value on the current machine record."""
        return self is not NetrcToken.MACHINE


class MachineRecord(BaseModel):
    """
    Credentials stored for one machine in a .netrc file.

    Attributes:
        name: Machine name, the unique key in the machine table
        login: Login name, if given
        password: Password, possibly several words joined by single spaces
        account: Account password, if given
        macdef: Macro definition body; stored, never executed
        properties: Auxiliary string properties; not populated by the parser
    """

    name: str = Field(..., description="Machine name.")
    login: Optional[str] = Field(default=None, description="Login name.")
    password: Optional[str] = Field(default=None, description="Password.")
    account: Optional[str] = Field(default=None, description="Account password.")
    macdef: Optional[str] = Field(default=None, description="Macro definition body.")
    properties: Dict[str, str] = Field(
        default_factory=dict, description="Auxiliary named properties."
    )

    @property
    def machine(self) -> str:
        """Alias for `name`."""
        return self.name

    def field_get(self, token: NetrcToken) -> Optional[str]:
        """Read the value field named by a field keyword.

        Raises:
            ValueError: If `token` is MACHINE, which names the record itself
        """
        if not token.is_field:
            raise ValueError(f"'{token.value}' is not a field keyword")
        return getattr(self, token.value)

    def field_set(self, token: NetrcToken, value: str) -> None:
        """Write the value field named by a field keyword, replacing any current value."""
        if not token.is_field:
            raise ValueError(f"'{token.value}' is not a field keyword")
        setattr(self, token.value, value)

    def property_get(self, key: str) -> Optional[str]:
        """Look up an auxiliary property, None if absent."""
        return self.properties.get(key)

    def property_set(self, key: str, value: Optional[str]) -> None:
        """Set an auxiliary property; a value of None removes it."""
        if value is None:
            self.properties.pop(key, None)
        else:
            self.properties[key] = value

    def __repr__(self) -> str:
        """Mask the password so records can be logged and printed safely."""
        password: Optional[str] = "****" if self.password is not None else None
        return (
            f"MachineRecord(name={self.name!r}, login={self.login!r}, "
            f"password={password!r}, account={self.account!r}, "
            f"macdef={self.macdef!r})"
        )

    __str__ = __repr__


MachineTable = Dict[str, MachineRecord]
