"""Validated configuration for number parsing and display messages."""
import locale

from pydantic import BaseModel, ConfigDict, Field, model_validator


class NumberFormat(BaseModel):
    """
    Decimal and group separators of a number notation.

    The default has no group separator: commas are only dropped as thousands
    separators when a caller passes a format that declares them.

    Used by the second, locale-aware parse attempt. The ambient locale is never
    read implicitly: callers pass a NumberFormat, built with from_locale() when
    they want the process locale.
    """

    model_config = ConfigDict(frozen=True)

    decimal_separator: str = Field(default=".", min_length=1, max_length=1, description="Decimal mark")
    group_separator: str = Field(default="", max_length=1, description="Thousands separator, empty if none")

    @model_validator(mode="after")
    def separators_must_differ(self) -> "NumberFormat":
        """Ensure the decimal mark cannot be mistaken for a group separator."""
        if self.decimal_separator == self.group_separator:
            raise ValueError("decimal_separator and group_separator must differ")
        return self

    @classmethod
    def from_locale(cls) -> "NumberFormat":
        """
        Build a NumberFormat from the current process locale.

        :return: Separators reported by locale.localeconv()
        :rtype: NumberFormat
        """
        conv = locale.localeconv()
        decimal_separator: str = conv.get("decimal_point") or "."
        group_separator: str = conv.get("thousands_sep") or ""
        # Some locales report multi-byte grouping, or reuse the decimal mark
        if len(group_separator) > 1 or group_separator == decimal_separator:
            group_separator = ""
        return cls(decimal_separator=decimal_separator, group_separator=group_separator)


INVARIANT_FORMAT = NumberFormat()


class DisplayMessages(BaseModel):
    """User-facing strings shown by the controller."""

    model_config = ConfigDict(frozen=True)

    idle: str = Field(default="Enter values before calculating.", description="Shown before the first computation")
    ready: str = Field(default="Ready.", description="Shown after the form is cleared")
    invalid_input: str = Field(
        default="Invalid input {operand}: {detail}",
        description="Template for an operand that could not be parsed",
    )
    empty_input: str = Field(default="empty", description="Detail used for an empty operand")
    division_by_zero: str = Field(default="Error: division by zero", description="Shown when dividing by zero")
    calculation_error: str = Field(default="Calculation error", description="Shown on unexpected arithmetic errors")
