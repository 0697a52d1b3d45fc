"""
Validation of declarative input against a Schema.
"""

from typing import List

from .dataclasses import OSPFInterfaceModel
from .schema import Schema, SchemaField, RESOURCE_SCHEMA, INT64_MIN, INT64_MAX


class SchemaValidationError(Exception):
    """Raised when input does not satisfy the schema."""

    def __init__(self, errors: List[str]):
        super().__init__("Validation failed:\n  " + "\n  ".join(errors))
        self.errors = errors


def _check_type(schema_field: SchemaField, value) -> List[str]:
    name = schema_field.name
    if schema_field.type == 'boolean':
        if not isinstance(value, bool):
            return [f"Attribute '{name}' must be a boolean"]
    elif schema_field.type == 'integer':
        # bool is an int subclass, reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int):
            return [f"Attribute '{name}' must be an integer"]
        if value < INT64_MIN or value > INT64_MAX:
            return [f"Attribute '{name}' must fit in a 64-bit integer"]
    elif schema_field.type == 'string':
        if not isinstance(value, str):
            return [f"Attribute '{name}' must be a string"]
    return []


def _check_constraints(schema_field: SchemaField, value) -> List[str]:
    name = schema_field.name
    errors = []

    if schema_field.type == 'integer' and value != schema_field.sentinel:
        low, high = schema_field.minimum, schema_field.maximum
        if low is not None and high is not None and not low <= value <= high:
            errors.append(f"Attribute '{name}' must be between {low} and {high}, got {value}")
        elif low is not None and high is None and value < low:
            errors.append(f"Attribute '{name}' must be at least {low}, got {value}")
        elif high is not None and low is None and value > high:
            errors.append(f"Attribute '{name}' must be at most {high}, got {value}")

    if schema_field.choices and value not in schema_field.choices:
        allowed = ", ".join(f'"{c}"' for c in schema_field.choices)
        errors.append(f"Attribute '{name}' must be one of {allowed}, got \"{value}\"")

    return errors


def validate_config(schema: Schema, data: dict) -> List[str]:
    """
    Validate user input against a schema.
    Returns list of error messages (empty if valid).
    """
    if not isinstance(data, dict):
        return [f"Configuration must be a mapping, got {type(data).__name__}"]

    errors = []

    for key in data:
        if schema.get(key) is None:
            errors.append(f"Unknown attribute: {key}")

    for schema_field in schema.fields:
        value = data.get(schema_field.name)

        if schema_field.computed:
            if value is not None:
                errors.append(f"Attribute '{schema_field.name}' is computed and cannot be set")
            continue

        if value is None:
            if schema_field.required:
                errors.append(f"Missing required attribute: {schema_field.name}")
            continue

        type_errors = _check_type(schema_field, value)
        if type_errors:
            errors.extend(type_errors)
            continue

        errors.extend(_check_constraints(schema_field, value))

    return errors


def apply_defaults(schema: Schema, data: dict) -> dict:
    """Return a copy of data with defaults filled in for unset attributes."""
    result = dict(data)
    for schema_field in schema.fields:
        if schema_field.computed or schema_field.default is None:
            continue
        if result.get(schema_field.name) is None:
            result[schema_field.name] = schema_field.default
    return result


def build_model(data: dict, schema: Schema = RESOURCE_SCHEMA) -> OSPFInterfaceModel:
    """
    Validate user input and build a model with defaults applied.

    Raises:
        SchemaValidationError: If the input does not satisfy the schema
    """
    errors = validate_config(schema, data)
    if errors:
        raise SchemaValidationError(errors)
    return OSPFInterfaceModel.from_dict(apply_defaults(schema, data))
