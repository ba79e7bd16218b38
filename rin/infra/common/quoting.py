"""SQL quoting utilities.

Identifiers use standard double-quote escaping and literals use single-quote
escaping. Quoting keeps reserved characters in table and schema names from
breaking the statement; it is not a substitute for trusting the
configuration source.
"""


def quote_identifier(name: str) -> str:
    """
    Quote a SQL identifier (table or schema name).

    Examples:
        >>> quote_identifier("events")
        '"events"'
        >>> quote_identifier('my"table')
        '"my""table"'
    """
    escaped = name.replace('"', '""')
    return f'"{escaped}"'


def quote_literal(value: str) -> str:
    """
    Quote a SQL string literal.

    Examples:
        >>> quote_literal("O'Brien")
        "'O''Brien'"
    """
    escaped = value.replace("'", "''")
    return f"'{escaped}'"


def qualify_table(table: str, schema: str = "") -> str:
    """
    Create a qualified table identifier with optional schema prefix.

    Schema and table are quoted independently and joined with a dot.

    Examples:
        >>> qualify_table("t")
        '"t"'
        >>> qualify_table("t", schema="s")
        '"s"."t"'
    """
    quoted_table = quote_identifier(table)
    if schema:
        return f"{quote_identifier(schema)}.{quoted_table}"
    return quoted_table
