"""
DataTable filters - named row transformations.
Each filter takes the rows followed by its parameters and returns new rows.
"""

import re
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from models.errors import InvalidFilterError
from models.site_summary import parse_float
from utils.logger import logger


Rows = List[Dict[str, Any]]

# Share of the column total under which rows are considered low population
MINIMUM_SIGNIFICANT_PERCENTAGE = 0.02


def _sort_key(value: Any):
    if isinstance(value, bool) or value is None:
        return (0, float(bool(value)), '')
    if isinstance(value, (int, float)):
        return (0, float(value), '')
    number = parse_float(value)
    if number == number:  # not NaN, e.g. '45%'
        return (0, number, '')
    return (1, 0.0, str(value).lower())


def sort_rows(rows: Rows, column: str, order: str = 'desc') -> Rows:
    """Sort rows on a column; ties keep their order."""
    if not column:
        return list(rows)
    return sorted(
        rows,
        key=lambda row: _sort_key(row.get(column)),
        reverse=(order or 'desc').lower() != 'asc',
    )


def limit_rows(rows: Rows, offset: int = 0, limit: Optional[int] = None) -> Rows:
    """Keep ``limit`` rows starting at ``offset``; no limit or -1 keeps the rest."""
    offset = max(int(offset or 0), 0)
    if limit is None or int(limit) < 0:
        return rows[offset:]
    return rows[offset:offset + int(limit)]


def pattern_rows(rows: Rows, column: str, pattern: str) -> Rows:
    """Keep rows whose column matches a case insensitive pattern."""
    if not pattern:
        return list(rows)
    try:
        regex = re.compile(pattern, re.IGNORECASE)
    except re.error:
        regex = re.compile(re.escape(pattern), re.IGNORECASE)
    return [row for row in rows if regex.search(str(row.get(column, '')))]


def _number(value: Any) -> float:
    number = parse_float(value)
    return number if number == number else 0.0


def exclude_low_population_rows(rows: Rows, column: str,
                                minimum_value: Optional[float] = None) -> Rows:
    """
    Drop rows whose column is under a minimum value.

    Without a minimum (None or 0), 2% of the column total is used.
    """
    if not column:
        return list(rows)
    if not minimum_value:
        total = sum(_number(row.get(column)) for row in rows)
        minimum_value = total * MINIMUM_SIGNIFICANT_PERCENTAGE
    return [row for row in rows if _number(row.get(column)) >= float(minimum_value)]


def delete_columns(rows: Rows, columns: Union[str, Iterable[str]]) -> Rows:
    """Remove columns from every row."""
    if isinstance(columns, str):
        columns = [column.strip() for column in columns.split(',')]
    columns = set(columns)
    return [{key: value for key, value in row.items() if key not in columns} for row in rows]


def add_column(rows: Rows, column: str, callback: Callable[[Dict[str, Any]], Any]) -> Rows:
    """Add a column computed from each row."""
    return [dict(row, **{column: callback(row)}) for row in rows]


FILTERS: Dict[str, Callable[..., Rows]] = {
    'Sort': sort_rows,
    'Limit': limit_rows,
    'Pattern': pattern_rows,
    'ExcludeLowPopulation': exclude_low_population_rows,
    'ColumnDelete': delete_columns,
    'AddColumn': add_column,
}


def run_filter(rows: Rows, name_or_callable: Union[str, Callable], parameters: List[Any]) -> Rows:
    """
    Apply one filter.

    Args:
        rows: Input rows
        name_or_callable: Registered filter name or callable
        parameters: Parameters passed after the rows

    Returns:
        Filtered rows

    Raises:
        InvalidFilterError: If the name is not registered
    """
    if isinstance(name_or_callable, str):
        if name_or_callable not in FILTERS:
            raise InvalidFilterError(f"Unknown filter: {name_or_callable}")
        func = FILTERS[name_or_callable]
        label = name_or_callable
    else:
        func = name_or_callable
        label = getattr(func, '__name__', repr(func))

    result = func(rows, *parameters)
    logger.debug(f"Filter {label}: {len(rows)} -> {len(result)} rows")
    return result
