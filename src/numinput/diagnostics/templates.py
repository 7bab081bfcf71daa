"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def locale_unknown(locale_code: str, reason: str) -> Diagnostic:
        """Locale identifier is unknown to CLDR or malformed.

        Args:
            locale_code: The locale identifier as given by the caller
            reason: Message of the underlying Babel error

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use a BCP-47 or POSIX identifier such as 'en-US' or 'de_DE'",
        )

    @staticmethod
    def option_invalid(name: str, value: object, allowed: tuple[str, ...]) -> Diagnostic:
        """Enumerated option has a value outside its allowed set.

        Args:
            name: Option name (e.g., "style", "unit_display")
            value: The value as given by the caller
            allowed: Accepted values

        Returns:
            Diagnostic for OPTION_INVALID
        """
        msg = f"Invalid {name} {value!r}"
        return Diagnostic(
            code=DiagnosticCode.OPTION_INVALID,
            message=msg,
            hint=f"Use one of: {', '.join(allowed)}",
        )

    @staticmethod
    def currency_required() -> Diagnostic:
        """Currency style requested without a currency code.

        Returns:
            Diagnostic for CURRENCY_REQUIRED
        """
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_REQUIRED,
            message="Currency style requires a currency code",
            hint="Pass currency='EUR' (or another ISO 4217 code)",
        )

    @staticmethod
    def currency_unknown(currency: str) -> Diagnostic:
        """Currency code is not a known ISO 4217 code.

        Args:
            currency: The currency code as given by the caller

        Returns:
            Diagnostic for CURRENCY_UNKNOWN
        """
        msg = f"Unknown currency code '{currency}'"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_UNKNOWN,
            message=msg,
            hint="Use an ISO 4217 code such as EUR or USD",
        )

    @staticmethod
    def unit_required() -> Diagnostic:
        """Unit style requested without a unit identifier.

        Returns:
            Diagnostic for UNIT_REQUIRED
        """
        return Diagnostic(
            code=DiagnosticCode.UNIT_REQUIRED,
            message="Unit style requires a unit identifier",
            hint="Pass unit='kilometer' (or another CLDR unit)",
        )

    @staticmethod
    def unit_unknown(unit: str, locale_code: str) -> Diagnostic:
        """Unit identifier has no CLDR pattern for the locale.

        Args:
            unit: The unit identifier as given by the caller
            locale_code: The locale the unit was looked up in

        Returns:
            Diagnostic for UNIT_UNKNOWN
        """
        msg = f"Unknown unit '{unit}' for locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.UNIT_UNKNOWN,
            message=msg,
            hint="Use a CLDR unit identifier such as 'kilometer' or 'digital-gigabit'",
        )

    @staticmethod
    def precision_invalid(precision: object) -> Diagnostic:
        """Precision is negative or not an integer/FractionBounds.

        Args:
            precision: The precision value as given by the caller

        Returns:
            Diagnostic for PRECISION_INVALID
        """
        msg = f"Invalid precision {precision!r}"
        return Diagnostic(
            code=DiagnosticCode.PRECISION_INVALID,
            message=msg,
            hint="Use a non-negative integer or FractionBounds(minimum, maximum)",
        )

    @staticmethod
    def numbering_system_unsupported(numbering_system: str, locale_code: str) -> Diagnostic:
        """Numbering system is unknown or has no symbols for the locale.

        Args:
            numbering_system: The numbering system requested
            locale_code: The locale the numbering system was looked up in

        Returns:
            Diagnostic for NUMBERING_SYSTEM_UNSUPPORTED
        """
        msg = f"Numbering system '{numbering_system}' is not supported for locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.NUMBERING_SYSTEM_UNSUPPORTED,
            message=msg,
            hint="Use 'default', 'latn', or a numeric system the locale defines",
        )

    @staticmethod
    def parse_input_empty(locale_code: str) -> Diagnostic:
        """Nothing to parse.

        Args:
            locale_code: The locale of the parsing profile

        Returns:
            Diagnostic for PARSE_INPUT_EMPTY
        """
        msg = f"Empty input for locale '{locale_code}'"
        return Diagnostic(code=DiagnosticCode.PARSE_INPUT_EMPTY, message=msg)

    @staticmethod
    def parse_grammar_mismatch(value: str, locale_code: str) -> Diagnostic:
        """Input is not an integer run with an optional fraction.

        Args:
            value: The input string that failed to parse
            locale_code: The locale of the parsing profile

        Returns:
            Diagnostic for PARSE_GRAMMAR_MISMATCH
        """
        msg = f"Failed to parse number '{value}' for locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_GRAMMAR_MISMATCH,
            message=msg,
            hint="Check that the number format matches the locale's conventions",
        )

    @staticmethod
    def parse_grouping_invalid(value: str, locale_code: str, expected: str) -> Diagnostic:
        """Grouping separators are misplaced for the locale.

        Args:
            value: The input string that failed to parse
            locale_code: The locale of the parsing profile
            expected: Canonical grouped rendering of the integer part

        Returns:
            Diagnostic for PARSE_GROUPING_INVALID
        """
        msg = f"Misplaced grouping separator in '{value}' for locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_GROUPING_INVALID,
            message=msg,
            hint=f"Group the integer part as '{expected}' or omit grouping separators",
        )
