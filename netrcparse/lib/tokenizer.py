"""
Whitespace tokenizer for .netrc content.

A token is a maximal run of non-whitespace characters. There is no comment
syntax and no quoting: '#' and quote characters are ordinary content, so a
password such as `pa#ss"word` survives intact.
"""


def tokens_split(content: str) -> list[str]:
    """Split raw file content into its ordered, non-empty tokens.

    Args:
        content: Full text of a .netrc file

    Returns:
        list[str]: Tokens in file order; empty for blank content

    Example:
        >>> tokens_split("machine m\\n  login joe\\n")
        ['machine', 'm', 'login', 'joe']
    """
    return content.split()
