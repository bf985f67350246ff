"""
Rules for where the name of a command ends and its parameters begin.

Command names are two characters, except for a fixed set of single
character mnemonics whose name is directly followed by a parameter, such
as the font command in "^A0N,28,28" (name "A", parameters "0N,28,28").
"""

from _fluentzpl.tokenizer.token_kind import Mark

ONE_CHARACTER_MNEMONICS = {
    Mark.CARET: frozenset({"A"}),
    Mark.TILDE: frozenset(),
}


def name_length(mark, lookahead):
    """
    :param mark: The Mark (or mark character) preceding the command name.
    :param lookahead: Up to two characters following the mark.
    :returns: 1 if the command has a one character name, otherwise 2.
    """
    if lookahead[:1] in ONE_CHARACTER_MNEMONICS[Mark(mark)]:
        return 1
    return 2
