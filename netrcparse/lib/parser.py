"""
Fold a .netrc token stream into a machine table.

The parser is a small state machine carrying two registers: the most recent
keyword seen, and the name of the current machine. A keyword consumes the
token right after it as its value. Any further non-keyword tokens extend the
active field, joined by single spaces, which is how unquoted passphrases such
as `password I am Frank` are captured:

    machine myothertest
        login frank
        password I am Frank and I use passphr@ze$!!

yields `password == "I am Frank and I use passphr@ze$!!"`.

Known limitation: a value word that spells a keyword (a password of "login")
is read as that keyword. There is no escaping mechanism. Repeating a field
keyword whose field is already set appends the keyword itself, so
`login a login b` yields `"a login b"`.

The table being built is passed in by the caller and mutated in place, so
entries folded before a parse error remain visible to the caller.
"""

from typing import Optional
from netrcparse.lib.log import LOG
from netrcparse.lib.tokenizer import tokens_split
from netrcparse.lib.errors import (
    InvalidTokenError,
    NoMachineSpecifiedError,
    NoValueForTokenError,
)
from netrcparse.models.dataModel import MachineRecord, MachineTable, NetrcToken


def value_next(tokens: list[str], i: int, keyword: NetrcToken) -> str:
    """Return the token following the keyword at position `i`.

    Raises:
        NoValueForTokenError: If the keyword is the last token
    """
    if i + 1 >= len(tokens):
        LOG(f"Keyword '{keyword.value}' at token {i} has no value")
        raise NoValueForTokenError(keyword.value)
    return tokens[i + 1]


def machines_fold(tokens: list[str], table: MachineTable) -> MachineTable:
    """Fold tokens left to right into `table`.

    Args:
        tokens: Output of `tokens_split`
        table: Accumulator, mutated in place

    Returns:
        MachineTable: The same `table` object

    Raises:
        InvalidTokenError: A value token precedes every keyword
        NoMachineSpecifiedError: A field keyword precedes every 'machine'
        NoValueForTokenError: A keyword is the final token
    """
    current_token: Optional[NetrcToken] = None
    current_machine: Optional[str] = None
    i: int = 0

    while i < len(tokens):
        word: str = tokens[i]
        keyword: Optional[NetrcToken] = NetrcToken.keyword_match(word)
        if keyword is not None:
            current_token = keyword

        if current_token is None:
            LOG(f"Token {i} precedes any keyword")
            raise InvalidTokenError(word)

        if current_token is NetrcToken.MACHINE:
            # Stray words after a machine name are ignored
            if keyword is not None:
                current_machine = value_next(tokens, i, current_token)
                if current_machine in table:
                    LOG(f"Machine '{current_machine}' redeclared; replacing entry")
                table[current_machine] = MachineRecord(name=current_machine)
                i += 1
        else:
            if current_machine is None:
                LOG(f"Keyword '{current_token.value}' precedes any machine")
                raise NoMachineSpecifiedError()
            record: MachineRecord = table[current_machine]
            existing: Optional[str] = record.field_get(current_token)
            # Once set, every token reaching the field extends it, keyword spellings included
            if existing is not None:
                record.field_set(current_token, f"{existing} {word}")
            else:
                record.field_set(current_token, value_next(tokens, i, current_token))
                i += 1

        i += 1

    return table


def content_parse(content: str, table: Optional[MachineTable] = None) -> MachineTable:
    """Tokenize and fold .netrc content.

    Args:
        content: Full text of a .netrc file
        table: Optional accumulator; a new dict is used when omitted

    Returns:
        MachineTable: Mapping of machine name to record
    """
    if table is None:
        table = {}
    tokens: list[str] = tokens_split(content)
    LOG(f"Folding {len(tokens)} tokens")
    machines_fold(tokens, table)
    LOG(f"Parsed {len(table)} machine(s)")
    return table
