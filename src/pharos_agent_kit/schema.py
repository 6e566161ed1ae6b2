"""
Schema translation for protocol adapters.

Converts a pydantic input model into a protocol-neutral ``SchemaShape``:
a mapping of field name to ``FieldShape`` covering a closed set of field
kinds. Anything outside that set fails loudly so that tool callers never
see a silently widened contract.

Example:
    >>> class TransferInput(BaseModel):
    ...     amount: str = Field(description="Amount to send")
    ...     recipient: str
    ...     token_address: str | None = None
    >>>
    >>> shape = translate_schema(TransferInput)
    >>> shape["amount"].kind
    <FieldKind.STRING: 'string'>
    >>> shape["token_address"].required
    False
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel

from .types import SchemaCycleError, UnsupportedSchemaTypeError


class FieldKind(str, Enum):
    """Supported field kinds."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"


_SCALAR_KINDS = {
    "string": FieldKind.STRING,
    "number": FieldKind.NUMBER,
    "integer": FieldKind.INTEGER,
    "boolean": FieldKind.BOOLEAN,
}


@dataclass(frozen=True)
class FieldShape:
    """Shape of a single input field."""

    kind: FieldKind
    required: bool = True
    description: str | None = None
    items: "FieldShape | None" = None
    properties: "dict[str, FieldShape] | None" = None
    enum: tuple[Any, ...] | None = None


SchemaShape = dict[str, FieldShape]


def translate_schema(schema: type[BaseModel]) -> SchemaShape:
    """
    Translate a pydantic model class into a SchemaShape.

    Args:
        schema: Pydantic model describing the action input

    Returns:
        Mapping of field name to FieldShape, in declaration order

    Raises:
        UnsupportedSchemaTypeError: A field uses an unsupported kind
        SchemaCycleError: The model references itself
    """
    document = schema.model_json_schema()
    translator = _Translator(document.get("$defs", {}))

    # Self-referencing models render the root as a reference into $defs
    seen: tuple[str, ...] = ()
    if "$ref" in document:
        name = document["$ref"].rsplit("/", 1)[-1]
        document = document["$defs"][name]
        seen = (name,)

    return translator.object_properties(document, path="", seen=seen)


def shape_to_json_schema(shape: SchemaShape) -> dict[str, Any]:
    """Render a SchemaShape as a JSON Schema object document."""
    return {
        "type": "object",
        "properties": {name: _field_to_json(field) for name, field in shape.items()},
        "required": [name for name, field in shape.items() if field.required],
    }


def _field_to_json(field: FieldShape) -> dict[str, Any]:
    node: dict[str, Any] = {"type": field.kind.value}
    if field.description:
        node["description"] = field.description
    if field.enum is not None:
        node["enum"] = list(field.enum)
    if field.kind is FieldKind.ARRAY and field.items is not None:
        node["items"] = _field_to_json(field.items)
    if field.kind is FieldKind.OBJECT and field.properties is not None:
        node.update(shape_to_json_schema(field.properties))
    return node


class _Translator:
    """Walks a pydantic JSON schema document."""

    def __init__(self, definitions: dict[str, Any]) -> None:
        self._definitions = definitions

    def object_properties(
        self, node: dict[str, Any], path: str, seen: tuple[str, ...]
    ) -> SchemaShape:
        required = set(node.get("required", []))
        shape: SchemaShape = {}
        for name, child in node.get("properties", {}).items():
            child_path = f"{path}.{name}" if path else name
            shape[name] = self.field(child, child_path, seen, required=name in required)
        return shape

    def field(
        self,
        node: dict[str, Any],
        path: str,
        seen: tuple[str, ...],
        required: bool = True,
    ) -> FieldShape:
        description = node.get("description")

        # Optional[T] renders as anyOf [T, null]
        if "anyOf" in node:
            variants = [v for v in node["anyOf"] if v.get("type") != "null"]
            if len(variants) != 1:
                raise UnsupportedSchemaTypeError(
                    f"Unsupported union type at '{path}'", path=path
                )
            inner = self.field(variants[0], path, seen, required=required)
            return _with_description(inner, description)

        if "$ref" in node:
            name = node["$ref"].rsplit("/", 1)[-1]
            if name in seen:
                raise SchemaCycleError(
                    f"Schema cycle through '{name}' at '{path}'", path=path
                )
            target = self._definitions.get(name)
            if target is None:
                raise UnsupportedSchemaTypeError(
                    f"Unresolved reference '{name}' at '{path}'", path=path
                )
            inner = self.field(target, path, seen + (name,), required=required)
            return _with_description(inner, description)

        if "allOf" in node and len(node["allOf"]) == 1:
            inner = self.field(node["allOf"][0], path, seen, required=required)
            return _with_description(inner, description)

        kind = node.get("type")
        enum = tuple(node["enum"]) if "enum" in node else None
        if enum is None and "const" in node:
            enum = (node["const"],)

        match kind:
            case "string" | "number" | "integer" | "boolean":
                return FieldShape(
                    kind=_SCALAR_KINDS[kind],
                    required=required,
                    description=description,
                    enum=enum,
                )
            case "array":
                items = node.get("items")
                if not items:
                    raise UnsupportedSchemaTypeError(
                        f"Array without item type at '{path}'", path=path
                    )
                return FieldShape(
                    kind=FieldKind.ARRAY,
                    required=required,
                    description=description,
                    items=self.field(items, f"{path}[]", seen),
                )
            case "object":
                if "properties" not in node:
                    raise UnsupportedSchemaTypeError(
                        f"Free-form object at '{path}'", path=path
                    )
                return FieldShape(
                    kind=FieldKind.OBJECT,
                    required=required,
                    description=description,
                    properties=self.object_properties(node, path, seen),
                )
            case _:
                raise UnsupportedSchemaTypeError(
                    f"Unsupported schema type {kind!r} at '{path}'", path=path
                )


def _with_description(field: FieldShape, description: str | None) -> FieldShape:
    if description is None or field.description == description:
        return field
    return FieldShape(
        kind=field.kind,
        required=field.required,
        description=description,
        items=field.items,
        properties=field.properties,
        enum=field.enum,
    )
