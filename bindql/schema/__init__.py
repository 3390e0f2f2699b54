"""bindQL schema layer: parsed templates and connection options."""
from bindql.schema.options import ConnectionOptions, ConnectionTarget
from bindql.schema.pattern import (
    DEFAULT_CONDITION_PATTERN,
    DEFAULT_VALUE_PATTERN,
    FieldToken,
    OperatorToken,
    Pattern,
    TextToken,
    Token,
    ValueToken,
)

__all__ = [
    "ConnectionOptions",
    "ConnectionTarget",
    "DEFAULT_CONDITION_PATTERN",
    "DEFAULT_VALUE_PATTERN",
    "FieldToken",
    "OperatorToken",
    "Pattern",
    "TextToken",
    "Token",
    "ValueToken",
]
