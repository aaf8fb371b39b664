"""Parse operand text typed in the form into numbers."""
import math
import re
from typing import Optional

from form_calculator.common.config import INVARIANT_FORMAT, NumberFormat
from form_calculator.common.models import ParsedNumber, ParseErrorKind, ParseFailure, ParseResult


# Optional sign, digits with an optional single dot, optional exponent
INVARIANT_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class NumberParser:
    """
    Turn raw operand text into a float without raising.

    Algorithm:
        1. Trim whitespace, reject empty text
        2. Replace every comma with a dot and parse with the invariant grammar
        3. Otherwise parse the trimmed, non-normalized text with the given NumberFormat
        4. Otherwise report the text as unparseable

    Examples:
        - "3,5" and "3.5" both parse to 3.5
        - "1.234,5" parses to 1234.5 with NumberFormat(decimal_separator=",", group_separator=".")
    """

    @staticmethod
    def normalize(text: str) -> str:
        """
        Replace every comma with a dot, so both decimal notations are accepted.

        :param str text: Trimmed operand text

        :return: Normalized text
        :rtype: str
        """
        return text.replace(",", ".")

    @staticmethod
    def parse_invariant(text: str) -> Optional[float]:
        """
        Parse text using the locale-independent number grammar.

        Python-only spellings accepted by float() such as "inf", "nan" or "1_000" are rejected,
        as are literals too large for a float such as "1e999".

        :param str text: Candidate number

        :return: Finite parsed value, or None if the text does not match the grammar
        :rtype: Optional[float]
        """
        if not INVARIANT_NUMBER.fullmatch(text):
            return None
        value: float = float(text)
        if not math.isfinite(value):
            return None
        return value

    @staticmethod
    def parse_localized(text: str, number_format: NumberFormat) -> Optional[float]:
        """
        Parse text written with the separators of a given number format.

        :param str text: Trimmed, non-normalized operand text
        :param NumberFormat number_format: Separators to accept

        :return: Parsed value, or None if the text is not a number in that format
        :rtype: Optional[float]
        """
        candidate: str = text
        if number_format.group_separator:
            candidate = candidate.replace(number_format.group_separator, "")
        candidate = candidate.replace(number_format.decimal_separator, ".")
        return NumberParser.parse_invariant(candidate)

    @staticmethod
    def parse(raw: str, number_format: NumberFormat = INVARIANT_FORMAT) -> ParseResult:
        """
        Parse one operand.

        :param str raw: Text as typed by the user
        :param NumberFormat number_format: Separators used by the fallback attempt

        :return: ParsedNumber on success, ParseFailure otherwise
        :rtype: ParseResult
        """
        text: str = raw.strip()
        if not text:
            return ParseFailure(kind=ParseErrorKind.EMPTY_INPUT, raw=raw, detail=raw)

        value: Optional[float] = NumberParser.parse_invariant(NumberParser.normalize(text))
        if value is None:
            value = NumberParser.parse_localized(text, number_format)
        if value is None:
            return ParseFailure(kind=ParseErrorKind.UNPARSEABLE, raw=raw, detail=f"“{text}”")

        return ParsedNumber(value=value)
