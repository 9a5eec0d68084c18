"""
Placeholder translation between the builder's `?` markers and driver styles.

Builders always emit positional `?` markers. Drivers differ:

    sqlite      ?      (qmark, used as-is)
    postgresql  %s     (format; literal `%` must be doubled)

Translation tokenizes the SQL once so that markers inside string literals and
quoted identifiers are left untouched.
"""
import re
from dataclasses import dataclass
from enum import Enum, auto

# =============================================================================
# Data Structures
# =============================================================================


class TokenType(Enum):
    """Token types identified during SQL parsing."""
    SQL_TEXT = auto()
    STRING_LITERAL = auto()
    QMARK = auto()
    PERCENT = auto()


@dataclass(slots=True)
class Token:
    """Token from SQL parsing."""
    type: TokenType
    text: str
    start: int
    end: int


_TOKENIZE = re.compile(r"""
    (?P<string>'(?:[^']|'')*'|"(?:[^"]|"")*")
    |(?P<qmark>\?)
    |(?P<percent>%)
""", re.VERBOSE)


# =============================================================================
# Core Functions
# =============================================================================

def tokenize_sql(sql: str) -> list[Token]:
    """Parse SQL into tokens in a single pass.

    Parameters
        sql: SQL query string

    Returns
        List of tokens preserving all SQL text
    """
    tokens = []
    last_end = 0

    for match in _TOKENIZE.finditer(sql):
        start, end = match.span()

        if start > last_end:
            tokens.append(Token(
                type=TokenType.SQL_TEXT,
                text=sql[last_end:start],
                start=last_end,
                end=start
            ))

        if match.group('string'):
            ttype = TokenType.STRING_LITERAL
        elif match.group('qmark'):
            ttype = TokenType.QMARK
        else:
            ttype = TokenType.PERCENT

        tokens.append(Token(type=ttype, text=match.group(0), start=start, end=end))
        last_end = end

    if last_end < len(sql):
        tokens.append(Token(
            type=TokenType.SQL_TEXT,
            text=sql[last_end:],
            start=last_end,
            end=len(sql)
        ))

    return tokens


def standardize_placeholders(sql: str, dialect: str = 'sqlite') -> str:
    """Convert `?` markers to the placeholder style of a dialect.

    Parameters
        sql: SQL query string using `?` markers
        dialect: Database dialect ('sqlite' or 'postgresql')

    Returns
        SQL ready for the driver's paramstyle

    Raises
        ValueError: If dialect is unsupported
    """
    if not sql or dialect == 'sqlite':
        return sql

    if dialect != 'postgresql':
        raise ValueError(f'Unknown dialect: {dialect}')

    if '?' not in sql and '%' not in sql:
        return sql

    result = []
    for token in tokenize_sql(sql):
        if token.type == TokenType.QMARK:
            result.append('%s')
        elif token.type == TokenType.PERCENT:
            result.append('%%')
        elif token.type == TokenType.STRING_LITERAL:
            result.append(token.text.replace('%', '%%'))
        else:
            result.append(token.text)
    return ''.join(result)