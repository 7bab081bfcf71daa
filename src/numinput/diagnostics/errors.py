"""numinput exception hierarchy with structured diagnostics.

All exceptions may carry a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ParseStage


class NumberInputError(Exception):
    """Base exception for all numinput errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize NumberInputError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ConfigurationError(NumberInputError):
    """Unsupported locale/style/currency/unit combination.

    Raised only while building a LocaleProfile. Once a profile exists,
    parsing and formatting never raise it.
    """


class NumberParseError(NumberInputError):
    """Text could not be parsed into a number.

    Never raised by the codec: parse_decimal() returns it in its error tuple
    and parse() reduces it to None.

    Attributes:
        input_value: The string that failed to parse
        locale_code: The locale of the profile used for parsing
        stage: Parser stage that rejected the input

    Example:
        >>> result, errors = parse_decimal(profile, "1,23,4")
        >>> errors[0].stage
        <ParseStage.GROUPING: 'grouping'>
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        locale_code: str = "",
        stage: ParseStage = ParseStage.GRAMMAR,
    ) -> None:
        """Initialize NumberParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The string that failed to parse
            locale_code: The locale used for parsing
            stage: Parser stage that rejected the input
        """
        super().__init__(message)
        self.input_value = input_value
        self.locale_code = locale_code
        self.stage = stage
