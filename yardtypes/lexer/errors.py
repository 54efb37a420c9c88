"""
Error handling for the yardtypes lexer and parser.

There is a single error kind, ``TypeSyntaxError``.  It carries a
``Diagnostic`` with the message, the location in the annotation string and
optional help text, so documentation tools can show a useful message to the
author of a malformed type annotation.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base class for diagnostics (errors, warnings, info)."""
    message: str
    location: SourceLocation
    severity: str
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        code = f"[{self.code}] " if self.code else ""
        result = f"{severity_prefix}: {code}{self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class TypeSyntaxError(Exception):
    """
    Exception raised when a type annotation cannot be tokenized or parsed.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    @property
    def position(self) -> int:
        """0-based scan position where the error was detected."""
        return self.diagnostic.location.offset

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


ERROR_CODES = {
    "L001": "Invalid character",
    "P001": "Duplicate type name",
    "P002": "Expecting type name",
    "P003": "Mismatched closing token",
    "P004": "Unclosed collection",
    "P005": "Duplicate collection suffix",
    "P006": "Collections nested too deeply",
}


def create_invalid_character_error(char: str, location: SourceLocation) -> TypeSyntaxError:
    """Create an error for a character no token pattern accepts."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in a type annotation."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return TypeSyntaxError(
        message=f"invalid character at '{char}'",
        location=location,
        code="L001",
        help_text=help_text,
        suggestions=[
            "Type names may only contain word characters and '::'",
            "Use '#name' for an object that responds to a method",
        ]
    )
