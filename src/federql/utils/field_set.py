"""Serialization of key field sets.

Turns Python-side field notation into the selection string carried by
``@key``, ``@requires`` and ``@provides``::

    serialize_field_set(["id", {"organization": "id"}])
    # 'id organization { id }'
"""

from typing import Any


def camelize(name: str) -> str:
    """Convert a snake_case name to lowerCamelCase.

    Leading underscores are kept as they are.

    Args:
        name: The name to convert.

    Returns:
        The camelCased name.
    """
    stripped = name.lstrip("_")
    prefix = name[: len(name) - len(stripped)]
    head, *rest = stripped.split("_")
    return prefix + head + "".join(part[:1].upper() + part[1:] for part in rest)


def serialize_field_set(fields: Any, camelize_names: bool = True) -> str:
    """Serialize a field set to its GraphQL selection string.

    Args:
        fields: A field name, a list of field sets, or a dict mapping a
            field name to the field set selected on it.
        camelize_names: Whether snake_case names are converted to camelCase.

    Returns:
        The serialized selection.

    Raises:
        TypeError: If ``fields`` is of an unsupported type.
    """
    if isinstance(fields, str):
        return camelize(fields) if camelize_names else fields

    if isinstance(fields, dict):
        return " ".join(
            f"{serialize_field_set(name, camelize_names)} "
            f"{{ {serialize_field_set(nested, camelize_names)} }}"
            for name, nested in fields.items()
        )

    if isinstance(fields, (list, tuple)):
        return " ".join(serialize_field_set(item, camelize_names) for item in fields)

    raise TypeError(f"Unexpected field set type: {type(fields).__name__}")
