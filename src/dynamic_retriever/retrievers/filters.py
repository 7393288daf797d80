"""Translate self-query structured filters into in-memory document predicates."""

import operator
from typing import Any, Callable, Dict, Tuple

from langchain_core.documents import Document as LCDocument
from langchain_core.structured_query import (
    Comparator,
    Comparison,
    Operation,
    Operator,
    StructuredQuery,
    Visitor,
)

Predicate = Callable[[LCDocument], bool]


def _contains(field: Any, value: Any) -> bool:
    return value in field


def _like(field: Any, value: Any) -> bool:
    return str(value).lower() in str(field).lower()


def _in(field: Any, value: Any) -> bool:
    return field in value


def _not_in(field: Any, value: Any) -> bool:
    return field not in value


_COMPARATORS: Dict[Comparator, Callable[[Any, Any], bool]] = {
    Comparator.EQ: operator.eq,
    Comparator.NE: operator.ne,
    Comparator.GT: operator.gt,
    Comparator.GTE: operator.ge,
    Comparator.LT: operator.lt,
    Comparator.LTE: operator.le,
    Comparator.CONTAIN: _contains,
    Comparator.LIKE: _like,
    Comparator.IN: _in,
    Comparator.NIN: _not_in,
}


def _unwrap(value: Any) -> Any:
    # Dates arrive as {"date": "YYYY-MM-DD", "type": "date"}
    if isinstance(value, dict) and value.get("type") == "date":
        return value["date"]
    return value


class InMemoryFilterTranslator(Visitor):
    """
    Structured query translator for InMemoryVectorStore.

    Produces a ``filter`` callable evaluated against each document's
    metadata. A comparison on a missing attribute, or between values that
    cannot be compared, does not match.
    """

    allowed_operators = (Operator.AND, Operator.OR, Operator.NOT)
    allowed_comparators = tuple(_COMPARATORS)

    def visit_operation(self, operation: Operation) -> Predicate:
        predicates = [argument.accept(self) for argument in operation.arguments]

        if operation.operator == Operator.AND:
            return lambda doc: all(predicate(doc) for predicate in predicates)
        if operation.operator == Operator.OR:
            return lambda doc: any(predicate(doc) for predicate in predicates)
        return lambda doc: not any(predicate(doc) for predicate in predicates)

    def visit_comparison(self, comparison: Comparison) -> Predicate:
        compare = _COMPARATORS[comparison.comparator]
        attribute = comparison.attribute
        value = _unwrap(comparison.value)

        def predicate(doc: LCDocument) -> bool:
            if attribute not in doc.metadata:
                return False
            try:
                return bool(compare(_unwrap(doc.metadata[attribute]), value))
            except TypeError:
                return False

        return predicate

    def visit_structured_query(
        self, structured_query: StructuredQuery
    ) -> Tuple[str, Dict[str, Any]]:
        if structured_query.filter is None:
            kwargs: Dict[str, Any] = {}
        else:
            kwargs = {"filter": structured_query.filter.accept(self)}
        return structured_query.query, kwargs
