"""
Command Parser Module

Turns an input line into words and splits a word sequence into the
two halves of a pipeline.

Quoting rules:
- Words are separated by runs of delimiter characters
  (space, tab, carriage return, line feed, bell).
- A double quote opens a quoted region; delimiters inside it are part
  of the word. The next double quote closes it and must be followed by
  a delimiter or the end of the line.
- Quote characters are not part of the resulting word.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from jshell.exceptions import (
    EmptySideError,
    ExpectedDelimiterAfterQuoteError,
    UnterminatedQuoteError,
)


DELIMITERS = frozenset(' \t\r\n\a')
QUOTE = '"'
PIPE = '|'


@dataclass(frozen=True)
class Pipeline:
    """The two argument sequences on either side of a pipe."""
    left: Tuple[str, ...]
    right: Tuple[str, ...]


def is_delimiter(char: str) -> bool:
    return char in DELIMITERS


def tokenize(line: str) -> List[str]:
    """
    Split a line into words.
    
    Args:
        line: Raw input line
    
    Returns:
        List of words; empty for a blank line
    
    Raises:
        UnterminatedQuoteError: If the line ends inside quotes
        ExpectedDelimiterAfterQuoteError: If a closing quote is followed
            by anything other than a delimiter
    
    Example:
        >>> tokenize('echo "a b" c')
        ['echo', 'a b', 'c']
    """
    tokens: List[str] = []
    current: List[str] = []
    in_quotes = False
    quote_start = 0
    
    for i, char in enumerate(line):
        if char == QUOTE:
            if not in_quotes:
                in_quotes = True
                quote_start = i
                continue
            
            if i + 1 < len(line) and not is_delimiter(line[i + 1]):
                raise ExpectedDelimiterAfterQuoteError(line, i + 1)
            
            in_quotes = False
            if current:
                tokens.append(''.join(current))
                current = []
            continue
        
        if in_quotes or not is_delimiter(char):
            current.append(char)
        elif current:
            tokens.append(''.join(current))
            current = []
    
    if in_quotes:
        raise UnterminatedQuoteError(line, quote_start)
    
    if current:
        tokens.append(''.join(current))
    
    return tokens


def is_pipe_token(token: str) -> bool:
    """True for any word that starts with the pipe symbol."""
    return token.startswith(PIPE)


def find_pipe_tokens(tokens: Sequence[str]) -> List[int]:
    """Indices of every word that starts with the pipe symbol."""
    return [i for i, token in enumerate(tokens) if is_pipe_token(token)]


def split_pipeline(tokens: Sequence[str]) -> Pipeline:
    """
    Split a word sequence at its last standalone pipe word.
    
    The pipe word itself belongs to neither side.
    
    Raises:
        EmptySideError: If there is no standalone pipe, or either side
            would be empty
    
    Example:
        >>> split_pipeline(['a', '|', 'b'])
        Pipeline(left=('a',), right=('b',))
    """
    split_at = -1
    for i, token in enumerate(tokens):
        if token == PIPE:
            split_at = i
    
    if split_at < 0:
        raise EmptySideError('right', list(tokens))
    
    left = tuple(tokens[:split_at])
    right = tuple(tokens[split_at + 1:])
    
    if not left:
        raise EmptySideError('left', list(tokens))
    if not right:
        raise EmptySideError('right', list(tokens))
    
    return Pipeline(left=left, right=right)
