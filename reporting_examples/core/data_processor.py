"""
Data-processing utilities: statistics, filtering, grouping, sorting and
schema validation over lists of values or records.
"""

import asyncio
import inspect
import json
import logging
from collections import Counter
from typing import Any, Callable, Dict, List, Mapping, Optional

from reporting_examples.core.calculator import float_fallback
from reporting_examples.core.errors import (
    InvalidValue,
    NotAFunction,
    NotAnArray,
    NotANumber,
)

logger = logging.getLogger(__name__)

_MISSING = object()

CONDITIONS = ("greater", "less", "equal")
TRANSFORMS = ("double", "square", "increment")


def _require_list(data: Any, message: str = "Data must be an array") -> None:
    if not isinstance(data, list):
        raise NotAnArray(message)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _field(item: Any, key: Optional[str], default: Any = None) -> Any:
    if key is None:
        return item
    if isinstance(item, Mapping):
        return item.get(key, default)
    return getattr(item, key, default)


def group_key(value: Any) -> str:
    """String form of a grouping value, spelled the way JSON and JavaScript spell it."""
    if value is _MISSING:
        return "undefined"
    if value is None or isinstance(value, bool):
        return json.dumps(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _strict_equal(left: Any, right: Any) -> bool:
    if isinstance(left, bool) != isinstance(right, bool):
        return False
    return left == right


def json_type(value: Any) -> str:
    """
    Runtime type name of a decoded JSON value: string, number, boolean or object.

    Arrays and null report ``"object"``, like JavaScript's ``typeof``.
    """
    if value is None:
        return "object"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return "object"


class DataProcessor:
    """Stateless data-processing helpers."""

    @staticmethod
    def process_array(data: List[Any]) -> Dict[str, Any]:
        """
        Summary statistics for a list of numbers.

        Args:
            data: List of numbers

        Returns:
            Dictionary with sum, average, min, max, count, median and mode.
            For an empty list sum and count are 0 and the rest are None.

        Raises:
            NotAnArray: If data is not a list
            NotANumber: If an element is not a number
        """
        _require_list(data, "Input must be an array")
        if not all(_is_number(value) for value in data):
            raise NotANumber("All elements must be numbers")

        count = len(data)
        total = sum(data)
        return {
            "sum": total,
            "average": float_fallback(lambda x, y: x / y, total, count) if count else None,
            "min": min(data) if count else None,
            "max": max(data) if count else None,
            "count": count,
            "median": DataProcessor.calculate_median(data),
            "mode": DataProcessor.calculate_mode(data),
        }

    @staticmethod
    def calculate_median(data: List[Any]) -> Optional[float]:
        if not isinstance(data, list) or not data:
            return None

        ordered = sorted(data)
        middle = len(ordered) // 2
        if len(ordered) % 2 == 0:
            return float_fallback(lambda x, y: (x + y) / 2, ordered[middle - 1], ordered[middle])
        return ordered[middle]

    @staticmethod
    def calculate_mode(data: List[Any]) -> Optional[List[Any]]:
        """Most frequent values, or None when every value occurs once."""
        if not isinstance(data, list) or not data:
            return None

        frequency = Counter(data)
        highest = max(frequency.values())
        modes = [value for value, count in frequency.items() if count == highest]
        if len(modes) == len(data):
            return None
        return modes

    @staticmethod
    def filter_data(data: List[Any], predicate: Callable[[Any], bool]) -> List[Any]:
        _require_list(data)
        if not callable(predicate):
            raise NotAFunction("Predicate must be a function")
        return [item for item in data if predicate(item)]

    @staticmethod
    def transform_data(data: List[Any], transformer: Callable[[Any], Any]) -> List[Any]:
        _require_list(data)
        if not callable(transformer):
            raise NotAFunction("Transformer must be a function")
        return [transformer(item) for item in data]

    @staticmethod
    def group_by(data: List[Any], key: Any) -> Dict[str, List[Any]]:
        """
        Partition records by the string value of ``item[key]``.

        Booleans and null group as ``"true"``, ``"false"`` and ``"null"``;
        records without the key group under ``"undefined"``.

        A callable ``key`` is applied to each item instead. Buckets keep the
        original relative order of their items.
        """
        _require_list(data)
        groups: Dict[str, List[Any]] = {}
        for item in data:
            value = key(item) if callable(key) else _field(item, key, _MISSING)
            groups.setdefault(group_key(value), []).append(item)
        return groups

    @staticmethod
    def sort_data(data: List[Any], field: str, order: str = "asc") -> List[Any]:
        """
        Stable sort of records by ``item[field]``.

        Any order other than ``"desc"`` sorts ascending. Records without the
        field sort after the others in ascending order.
        """
        _require_list(data)

        def sort_key(item):
            value = _field(item, field)
            return (value is None, value)

        try:
            return sorted(data, key=sort_key, reverse=(order == "desc"))
        except TypeError as e:
            raise InvalidValue(f"Cannot compare values of field '{field}'") from e

    @staticmethod
    async def process_async_data(data: List[Any], processor: Callable[[Any], Any]) -> List[Any]:
        """
        Apply ``processor`` to every element concurrently.

        Results come back in input order. The first failure propagates and
        no partial results are returned.
        """
        _require_list(data)
        if not callable(processor):
            raise NotAFunction("Async processor must be a function")

        async def run(item):
            result = processor(item)
            if inspect.isawaitable(result):
                result = await result
            return result

        return list(await asyncio.gather(*(run(item) for item in data)))

    @staticmethod
    def validate_data(data: List[Any], schema: Mapping[str, Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Check records against a field schema.

        Args:
            data: List of records
            schema: Mapping of field name to ``{"type": ..., "required": ...}``

        Returns:
            ``{"is_valid": bool, "errors": [str, ...]}``
        """
        _require_list(data)

        errors = []
        for index, item in enumerate(data):
            record = item if isinstance(item, Mapping) else {}
            for name, rule in schema.items():
                expected = rule.get("type")
                if rule.get("required") and name not in record:
                    errors.append(f"Missing required field '{name}' at index {index}")
                if name in record:
                    actual = json_type(record[name])
                    if actual != expected:
                        errors.append(
                            f"Invalid type for field '{name}' at index {index}. "
                            f"Expected {expected}, got {actual}"
                        )

        if errors:
            logger.debug(f"Validation found {len(errors)} errors in {len(data)} records")

        return {"is_valid": not errors, "errors": errors}

    # ------------------------------------------------------------------
    # Named conditions and transforms used by the HTTP layer
    # ------------------------------------------------------------------

    @staticmethod
    def make_condition(condition_type: str, value: Any) -> Callable[[Any], bool]:
        """Build a predicate for ``greater``, ``less`` or ``equal``."""
        if condition_type == "greater":
            return lambda item: item > value
        if condition_type == "less":
            return lambda item: item < value
        if condition_type == "equal":
            return lambda item: _strict_equal(item, value)
        raise InvalidValue("Invalid condition type")

    @staticmethod
    def make_transformer(operation: str) -> Callable[[Any], Any]:
        """Build a transformer for ``double``, ``square`` or ``increment``."""
        if operation == "double":
            return lambda item: item * 2
        if operation == "square":
            return lambda item: item * item
        if operation == "increment":
            return lambda item: item + 1
        raise InvalidValue("Invalid operation")
