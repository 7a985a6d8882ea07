"""
Parse Exceptions

Errors detected while turning an input line into words (ParseError) and
while checking the placement of the pipe separator (CommandSyntaxError).
Both are reported to the user; the shell then reads the next line.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any

from .shell_exceptions import ShellException


class ParseError(ShellException):
    """
    Base exception for tokenizer errors.
    
    Attributes:
        message: Human-readable error description
        line: The input line that failed to parse
        position: Character index where the problem was detected
        error_code: Numeric error code for programmatic handling
    """
    
    def __init__(
        self,
        message: str,
        line: str = "",
        position: Optional[int] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = dict(context or {})
        if position is not None:
            ctx["position"] = position
        super().__init__(message, error_code=error_code or 3000, context=ctx)
        self.line = line
        self.position = position


class UnterminatedQuoteError(ParseError):
    """
    End of input reached inside a double-quoted region.
    
    Example:
        >>> raise UnterminatedQuoteError('echo "abc', position=5)
    """
    
    def __init__(self, line: str, position: int) -> None:
        super().__init__(
            message="Parsing ended unexpectedly: unterminated quote.",
            line=line,
            position=position,
            error_code=3001
        )


class ExpectedDelimiterAfterQuoteError(ParseError):
    """
    A closing quote was followed by something other than a delimiter.
    
    Example:
        >>> raise ExpectedDelimiterAfterQuoteError('echo "a"b', position=7)
    """
    
    def __init__(self, line: str, position: int) -> None:
        super().__init__(
            message="Expected delimiter after end quote.",
            line=line,
            position=position,
            error_code=3002
        )


class CommandSyntaxError(ShellException):
    """
    Base exception for misuse of the pipe separator.
    
    Attributes:
        message: Human-readable error description
        tokens: The word sequence that was rejected
        error_code: Numeric error code for programmatic handling
    """
    
    def __init__(
        self,
        message: str,
        tokens: Optional[list[str]] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message, error_code=error_code or 3100, context=context)
        self.tokens = list(tokens or [])
    
    def __str__(self) -> str:
        return f"[Error {self.error_code}] {self.message}"


class EmptySideError(CommandSyntaxError):
    """One side of a pipeline has no command."""
    
    def __init__(self, side: str, tokens: Optional[list[str]] = None) -> None:
        super().__init__(
            message=f"Syntax error for '|': {side} command is empty.",
            tokens=tokens,
            error_code=3101,
            context={"side": side}
        )
        self.side = side


class MisplacedPipeError(CommandSyntaxError):
    """The pipe symbol starts the line or is glued to other text."""
    
    def __init__(
        self,
        index: int,
        tokens: Optional[list[str]] = None
    ) -> None:
        super().__init__(
            message="Syntax error for '|'.",
            tokens=tokens,
            error_code=3102,
            context={"index": index}
        )
        self.index = index


class MissingRightCommandError(CommandSyntaxError):
    """The pipe symbol is the last word on the line."""
    
    def __init__(self, tokens: Optional[list[str]] = None) -> None:
        super().__init__(
            message="Right command expected for piping.",
            tokens=tokens,
            error_code=3103
        )


class TooManyPipesError(CommandSyntaxError):
    """More than one pipe symbol; only two-stage pipelines are supported."""
    
    def __init__(self, count: int, tokens: Optional[list[str]] = None) -> None:
        super().__init__(
            message=(
                f"Syntax error for '|': found {count} pipes, "
                "only piping between 2 programs is supported."
            ),
            tokens=tokens,
            error_code=3104,
            context={"count": count}
        )
        self.count = count
