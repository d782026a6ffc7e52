"""
Request validation for the product routes.

Rules are declared as data: a table mapping each field to a list of
``(predicate, message)`` pairs. Every rule of every field runs, so one field
can report several messages and an invalid path id does not hide body
errors. Once the table passes, the body is parsed into the route's pydantic
payload.
"""
import json
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Callable

from fastapi import Path, Request
from pydantic import BaseModel, ValidationError

from product_api.errors import InputErrors
from product_api.schemas.product import FieldError

Rule = tuple[Callable[[Any], bool], str]
RuleTable = dict[str, list[Rule]]

INT_RE = re.compile(r"^[-+]?[0-9]+$")
NUMERIC_RE = re.compile(r"^[-+]?(?:[0-9]*\.)?[0-9]+$")
BOOLEAN_STRINGS = {"true", "false", "1", "0"}
CENT = Decimal("0.01")


def _as_text(value: Any) -> str:
    # Missing and null read as "", booleans as JSON spells them
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    return json.dumps(value)


def is_int(value: Any) -> bool:
    return bool(INT_RE.match(_as_text(value)))


def not_empty(value: Any) -> bool:
    return _as_text(value) != ""


def is_numeric(value: Any) -> bool:
    return bool(NUMERIC_RE.match(_as_text(value)))


def is_positive(value: Any) -> bool:
    try:
        return float(_as_text(value)) > 0
    except ValueError:
        return False


def has_cents_precision(value: Any) -> bool:
    # Prices are stored as Numeric(10, 2); non-numbers are reported by is_numeric
    text = _as_text(value)
    if not NUMERIC_RE.match(text):
        return True
    amount = Decimal(text)
    try:
        return amount == amount.quantize(CENT)
    except InvalidOperation:
        return False


def is_boolean(value: Any) -> bool:
    return _as_text(value) in BOOLEAN_STRINGS


def is_optional_boolean(value: Any) -> bool:
    return value is None or is_boolean(value)


ID_RULES: RuleTable = {
    "id": [(is_int, "Invalid ID")],
}

PRODUCT_RULES: RuleTable = {
    "name": [(not_empty, "Name cannot be empty")],
    "price": [
        (is_numeric, "Invalid value"),
        (not_empty, "Price cannot be empty"),
        (is_positive, "Invalid price"),
        (has_cents_precision, "Price can have at most 2 decimal places"),
    ],
    "availability": [(is_optional_boolean, "Invalid availability value")],
}

UPDATE_RULES: RuleTable = {
    **PRODUCT_RULES,
    "availability": [(is_boolean, "Invalid availability value")],
}


def check(values: dict, rules: RuleTable, location: str) -> list[FieldError]:
    errors = []
    for field, field_rules in rules.items():
        value = values.get(field)
        for predicate, message in field_rules:
            if not predicate(value):
                errors.append(FieldError(field=field, message=message, location=location))
    return errors


async def read_json_body(request: Request) -> tuple[dict, list[FieldError]]:
    raw = await request.body()
    if not raw.strip():
        return {}, []
    try:
        body = json.loads(raw)
    except ValueError:
        return {}, [FieldError(field="body", message="Invalid JSON body")]
    if not isinstance(body, dict):
        return {}, [FieldError(field="body", message="Request body must be a JSON object")]
    return body, []


def parse_payload(schema: type[BaseModel], data: dict) -> BaseModel:
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise InputErrors([
            FieldError(
                field=".".join(str(p) for p in err["loc"]) or "body",
                message=err["msg"],
            )
            for err in exc.errors()
        ]) from exc


@dataclass
class ValidatedInput:
    product_id: int | None = None
    payload: BaseModel | None = None


def validator(
    body: RuleTable | None = None,
    schema: type[BaseModel] | None = None,
    *,
    path_id: bool = True,
):
    """Build a FastAPI dependency that runs the rule tables for one route."""

    async def run(request: Request, raw_id: str | None) -> ValidatedInput:
        errors: list[FieldError] = []
        if path_id:
            errors += check({"id": raw_id}, ID_RULES, "params")

        data: dict = {}
        if body is not None:
            data, body_errors = await read_json_body(request)
            errors += body_errors or check(data, body, "body")

        if errors:
            raise InputErrors(errors)

        return ValidatedInput(
            product_id=int(raw_id) if path_id else None,
            payload=parse_payload(schema, data) if schema else None,
        )

    if path_id:
        async def dependency(
            request: Request,
            id: str = Path(description="The product ID", examples=["1"]),
        ) -> ValidatedInput:
            return await run(request, id)
    else:
        async def dependency(request: Request) -> ValidatedInput:
            return await run(request, None)

    return dependency
