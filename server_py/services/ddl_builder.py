"""Builders for the ALTER TABLE statements behind the column editor.

Statements are composed with ``psycopg2.sql``: schema, table and column names
are always quoted identifiers and text defaults are quoted literals. Column
types and non-text defaults are SQL fragments supplied by the administrator;
types are checked against a conservative pattern first.
"""
import re
from dataclasses import dataclass
from typing import List, Optional, Union

from psycopg2 import sql

from utils.exceptions import ValidationError


TEXT_TYPES = {"text", "varchar", "char", "character", "character varying"}
VARCHAR_TYPES = {"varchar", "character varying"}
BOOLEAN_TYPES = {"boolean", "bool"}
BOOLEAN_TRUE_TEXTS = ("true", "t", "1", "yes", "y", "on")

_TYPE_PATTERN = re.compile(
    r"^[a-z_][a-z0-9_ ]*(\(\s*\d+\s*(,\s*\d+\s*)?\))?(\[\])*$"
)
# Arrays keep their brackets, so ``text[]`` is not a text type
_MODIFIER_SUFFIX = re.compile(r"\s*\([^)]*\)$")

DefaultValue = Optional[Union[str, int, float, bool]]


@dataclass
class ColumnSpec:
    """Type, nullability and default requested for a column."""
    type: str
    default_value: DefaultValue = None
    max_length: Optional[Union[int, str]] = None
    allow_null: bool = False


def normalize_type_name(type_name: str) -> str:
    """Lower-case a type name and collapse inner whitespace."""
    return " ".join(type_name.split()).lower()


def parse_max_length(max_length: Union[int, str]) -> int:
    """Parse a VARCHAR length, which must be a positive integer."""
    if isinstance(max_length, bool):
        raise ValidationError(f"Invalid max length: {max_length}")
    try:
        length = int(str(max_length).strip())
    except ValueError:
        raise ValidationError(f"Invalid max length: {max_length}")
    if length <= 0:
        raise ValidationError(f"Max length must be positive: {max_length}")
    return length


def resolve_column_type(type_name: str, max_length: Optional[Union[int, str]] = None) -> str:
    """Return the SQL type for a column, e.g. ``VARCHAR(40)`` or ``INTEGER``."""
    base = normalize_type_name(type_name)
    if not _TYPE_PATTERN.match(base):
        raise ValidationError(f"Invalid column type: {type_name}")
    if base in VARCHAR_TYPES and max_length not in (None, ""):
        return f"VARCHAR({parse_max_length(max_length)})"
    return base.upper()


def base_type_name(type_name: str) -> str:
    """Type name without its length or precision, e.g. ``varchar(20)`` -> ``varchar``."""
    return _MODIFIER_SUFFIX.sub("", normalize_type_name(type_name))


def is_text_type(type_name: str) -> bool:
    return base_type_name(type_name) in TEXT_TYPES


def is_boolean_type(type_name: str) -> bool:
    return base_type_name(type_name) in BOOLEAN_TYPES


def default_expression(type_name: str, default_value: DefaultValue) -> Optional[sql.Composable]:
    """Render a column default, or None when no default was given.

    Text-like columns get a quoted string literal; every other type takes the
    value as an SQL expression (``0``, ``now()``, ``true``...).
    """
    if default_value is None or default_value == "":
        return None
    if isinstance(default_value, bool):
        default_value = "true" if default_value else "false"
    text = str(default_value)
    if is_text_type(type_name):
        return sql.Literal(text)
    return sql.SQL(text)


def _table(schema: str, table: str) -> sql.Identifier:
    return sql.Identifier(schema, table)


def _null_clause(allow_null: bool) -> sql.SQL:
    return sql.SQL("NULL") if allow_null else sql.SQL("NOT NULL")


def build_add_column(schema: str, table: str, name: str, spec: ColumnSpec) -> sql.Composed:
    """ALTER TABLE ... ADD COLUMN with type, nullability and optional default."""
    column_type = resolve_column_type(spec.type, spec.max_length)
    statement = sql.SQL("ALTER TABLE {table} ADD COLUMN {column} {type} {null}").format(
        table=_table(schema, table),
        column=sql.Identifier(name),
        type=sql.SQL(column_type),
        null=_null_clause(spec.allow_null),
    )
    default = default_expression(spec.type, spec.default_value)
    if default is not None:
        statement = statement + sql.SQL(" DEFAULT ") + default
    return statement


def build_drop_column(schema: str, table: str, column: str) -> sql.Composed:
    return sql.SQL("ALTER TABLE {table} DROP COLUMN {column}").format(
        table=_table(schema, table),
        column=sql.Identifier(column),
    )


def build_edit_column(
    schema: str,
    table: str,
    old_name: str,
    new_name: str,
    spec: ColumnSpec,
) -> List[sql.Composed]:
    """Statements that rename and redefine a column, to run in one transaction.

    Order: rename (only when the name changes), type change, nullability,
    default.
    """
    column_type = resolve_column_type(spec.type, spec.max_length)
    target = _table(schema, table)
    column = sql.Identifier(new_name)
    statements = []

    if old_name != new_name:
        statements.append(
            sql.SQL("ALTER TABLE {table} RENAME COLUMN {old} TO {new}").format(
                table=target,
                old=sql.Identifier(old_name),
                new=column,
            )
        )

    if is_boolean_type(spec.type):
        statements.append(
            sql.SQL(
                "ALTER TABLE {table} ALTER COLUMN {column} TYPE BOOLEAN USING "
                "CASE WHEN lower({column}::text) IN ({truthy}) THEN true ELSE false END"
            ).format(
                table=target,
                column=column,
                truthy=sql.SQL(", ").join(sql.Literal(t) for t in BOOLEAN_TRUE_TEXTS),
            )
        )
    else:
        statements.append(
            sql.SQL("ALTER TABLE {table} ALTER COLUMN {column} TYPE {type} USING {column}::{type}").format(
                table=target,
                column=column,
                type=sql.SQL(column_type),
            )
        )

    nullability = "DROP NOT NULL" if spec.allow_null else "SET NOT NULL"
    statements.append(
        sql.SQL("ALTER TABLE {table} ALTER COLUMN {column} " + nullability).format(
            table=target,
            column=column,
        )
    )

    default = default_expression(spec.type, spec.default_value)
    if default is None:
        statements.append(
            sql.SQL("ALTER TABLE {table} ALTER COLUMN {column} DROP DEFAULT").format(
                table=target,
                column=column,
            )
        )
    else:
        statements.append(
            sql.SQL("ALTER TABLE {table} ALTER COLUMN {column} SET DEFAULT {default}").format(
                table=target,
                column=column,
                default=default,
            )
        )

    return statements
