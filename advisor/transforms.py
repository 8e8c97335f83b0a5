import math
from dataclasses import fields, replace
from typing import Any, Mapping

from advisor.domain import BudgetRecord, ProfileType, UserProfile
from advisor.functional import Either, Left, Maybe, Nothing, Right, Some, pipe

BUDGET_FIELDS = tuple(f.name for f in fields(BudgetRecord))

MIN_AGE = 16
MAX_AGE = 100


def parse_amount(raw: Any) -> Maybe[float]:
    """Parse a form value into a finite number, ``Nothing()`` if it isn't one."""
    if raw is None or isinstance(raw, bool):
        return Nothing()
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return Nothing()
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return Nothing()
    if not math.isfinite(value):
        return Nothing()
    return Some(value)


def coerce_amount(raw: Any) -> float:
    # negative amounts are clamped, the engines only ever see values >= 0
    return pipe(
        parse_amount(raw),
        lambda m: m.map(lambda v: max(v, 0.0)),
        lambda m: m.get_or_else(0.0),
    )


def budget_from_form(form: Mapping[str, Any]) -> BudgetRecord:
    return BudgetRecord(**{name: coerce_amount(form.get(name)) for name in BUDGET_FIELDS})


def update_budget_field(record: BudgetRecord, field: str, raw: Any) -> BudgetRecord:
    if field not in BUDGET_FIELDS:
        return record
    return replace(record, **{field: coerce_amount(raw)})


def _parse_age(raw: Any) -> Maybe[int]:
    return parse_amount(raw).bind(
        lambda v: Some(int(v)) if v.is_integer() and MIN_AGE <= v <= MAX_AGE else Nothing()
    )


def build_profile(form: Mapping[str, Any]) -> Either[UserProfile]:
    """Validate the onboarding form and build a ``UserProfile``.

    Returns ``Left`` with an ``error``/``message`` dict for the first invalid
    field, ``Right(profile)`` otherwise.
    """
    name = str(form.get("name") or "").strip()
    if not name:
        return Left({
            "error": "name_required",
            "message": "Please tell us your name",
            "field": "name",
        })

    raw_type = form.get("profile_type", ProfileType.STUDENT.value)
    try:
        profile_type = ProfileType(raw_type)
    except ValueError:
        return Left({
            "error": "unknown_profile_type",
            "message": f"Profile type must be one of: {', '.join(p.value for p in ProfileType)}",
            "field": "profile_type",
            "value": raw_type,
        })

    age = _parse_age(form.get("age"))
    if age.is_none():
        return Left({
            "error": "invalid_age",
            "message": f"Age must be a whole number between {MIN_AGE} and {MAX_AGE}",
            "field": "age",
            "value": form.get("age"),
        })

    income = parse_amount(form.get("income"))
    if income.is_none() or income.get_or_else(0.0) < 0:
        return Left({
            "error": "invalid_income",
            "message": "Income must be a non-negative number",
            "field": "income",
            "value": form.get("income"),
        })

    return Right(UserProfile(
        name=name,
        profile_type=profile_type,
        age=age.get_or_else(MIN_AGE),
        income=income.get_or_else(0.0),
        goals=str(form.get("goals") or "").strip(),
    ))
