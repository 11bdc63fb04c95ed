"""Pydantic v2 validation engine."""

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import TypeAdapter, ValidationError

from extractor.config import get_settings
from extractor.core.flattener import flatten_issues
from extractor.core.models import Accepted, FlattenedIssues, Rejected, ValidationOutcome
from extractor.engines.base import ValidationEngine

# Core schema types that wrap a single inner schema without adding a loc part
WRAPPER_TYPES = {
    "default",
    "nullable",
    "function-before",
    "function-after",
    "function-wrap",
    "model",
    "dataclass",
}

# Item schemas addressed by an index loc part
ITEM_TYPES = {"list", "set", "frozenset", "generator"}


class PydanticEngine(ValidationEngine):
    """
    Validate with pydantic TypeAdapters.

    Any type pydantic can validate is a schema: BaseModel subclasses,
    TypedDicts, dataclasses, Annotated constraints, builtin generics.
    """

    name = "pydantic"

    def __init__(self, separator: str | None = None, root_key: str | None = None):
        settings = get_settings()
        self.separator = separator if separator is not None else settings.path_separator
        self.root_key = root_key if root_key is not None else settings.root_issue_key

    def prepare(self, schema: Any) -> TypeAdapter:
        if isinstance(schema, TypeAdapter):
            return schema
        return TypeAdapter(schema)

    def try_validate(self, schema: TypeAdapter, value: Any) -> ValidationOutcome:
        try:
            output = schema.validate_python(value)
        except ValidationError as e:
            return Rejected(issues=e.errors(include_url=False), error=e)
        return Accepted(output=output)

    def validate_or_throw(self, schema: TypeAdapter, value: Any) -> Any:
        return schema.validate_python(value)

    def flatten(self, schema: TypeAdapter, issues: list[Any]) -> FlattenedIssues:
        located = [
            {**issue, "loc": field_loc(schema.core_schema, issue["loc"])}
            for issue in issues
        ]
        return flatten_issues(located, separator=self.separator, root_key=self.root_key)


def field_loc(core_schema: Mapping[str, Any], loc: Sequence[Any]) -> tuple[Any, ...]:
    """
    Drop union member labels and discriminator tags from an error location.

    pydantic prefixes the errors of each union member with the member's
    label, so a failing ``tag: int | str`` reports ``("tag", "int")`` and
    ``("tag", "str")``. Walking the core schema alongside the location
    keeps only the parts that address fields and items. Once the walk
    reaches a schema it cannot follow, the rest of the location is kept.
    """
    definitions: dict[str, Any] = {}
    node: Mapping[str, Any] | None = core_schema
    path: list[Any] = []

    for position, part in enumerate(loc):
        node = _unwrap(node, definitions)
        if node is None:
            path.extend(loc[position:])
            break

        kind = node.get("type")
        # dict key errors end in "[key]", never a union label
        if kind == "union" and part != "[key]":
            node = _union_choice(node, part, definitions)
            continue
        if kind == "tagged-union":
            node = node["choices"].get(part)
            continue

        path.append(part)
        node = _child(node, part)

    return tuple(path)


def _unwrap(
    node: Mapping[str, Any] | None, definitions: dict[str, Any]
) -> Mapping[str, Any] | None:
    """Follow wrappers and references down to a schema that consumes loc parts."""
    while node is not None:
        if "ref" in node:
            definitions.setdefault(node["ref"], node)

        kind = node.get("type")
        if kind == "definitions":
            for definition in node["definitions"]:
                definitions[definition["ref"]] = definition
            node = node["schema"]
        elif kind == "definition-ref":
            node = definitions.get(node["schema_ref"])
        elif kind in WRAPPER_TYPES:
            node = node.get("schema")
        elif kind == "lax-or-strict":
            node = node["lax_schema"]
        elif kind == "json-or-python":
            node = node["python_schema"]
        else:
            return node
    return None


def _union_choice(
    node: Mapping[str, Any], label: Any, definitions: dict[str, Any]
) -> Mapping[str, Any] | None:
    """Find the union member a label names, if it can be told."""
    for choice in node["choices"]:
        if isinstance(choice, tuple):
            choice, choice_label = choice
            if choice_label == label:
                return choice
            continue

        target = choice
        if choice.get("type") == "definition-ref":
            target = definitions.get(choice["schema_ref"], choice)
        cls = target.get("cls")
        if cls is not None and cls.__name__ == label:
            return target
    return None


def _child(node: Mapping[str, Any], part: Any) -> Mapping[str, Any] | None:
    """Schema addressed by one field or item loc part."""
    kind = node.get("type")

    if kind in ("model-fields", "typed-dict"):
        fields = node["fields"]
        field = fields.get(part) if isinstance(part, str) else None
        if field is None:
            field = next(
                (f for f in fields.values() if f.get("validation_alias") == part),
                None,
            )
        return field["schema"] if field is not None else None

    if kind == "dataclass-args":
        field = next(
            (f for f in node["fields"] if part in (f["name"], f.get("validation_alias"))),
            None,
        )
        return field["schema"] if field is not None else None

    if kind in ITEM_TYPES:
        return node.get("items_schema")

    if kind == "tuple":
        items = node.get("items_schema") or []
        if isinstance(part, int) and items:
            return items[min(part, len(items) - 1)]
        return None

    if kind == "dict":
        return node.get("values_schema")

    return None
