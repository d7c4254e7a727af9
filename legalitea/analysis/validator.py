"""Validates a parsed model response against the Analysis shape.

A payload either converts completely into an ``Analysis`` or is rejected as a
whole; nothing is partially accepted.
"""

import re
from datetime import date
from typing import Any

from legalitea.analysis.exceptions import StructureInvalidError
from legalitea.analysis.models import (
    AMOUNT_TYPES,
    LEVELS,
    ActionItem,
    Analysis,
    KeyDate,
    KeyInformation,
    MonetaryAmount,
    RedFlag,
    RiskAssessment,
    StructureInvalid,
    Summary,
)

REQUIRED_TOP_LEVEL_KEYS = ("summary", "keyInformation", "riskAssessment", "actionPlan")

_MIN_KEY_POINTS = 3
_MAX_KEY_POINTS = 5
_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def validate_analysis(data: Any) -> Analysis | StructureInvalid:
    """Convert a parsed payload into an Analysis, or say why it can't be."""
    try:
        return build_analysis(data)
    except StructureInvalidError as exc:
        return StructureInvalid(reason=str(exc))


def build_analysis(data: Any) -> Analysis:
    """Build an Analysis from a parsed payload.

    Raises:
        StructureInvalidError: on the first shape violation found.
    """
    if not isinstance(data, dict):
        raise StructureInvalidError("Analysis must be a JSON object")
    for key in REQUIRED_TOP_LEVEL_KEYS:
        if key not in data:
            raise StructureInvalidError(f"Missing required top-level field: {key}")
    return Analysis(
        summary=_build_summary(data["summary"]),
        key_information=_build_key_information(data["keyInformation"]),
        risk_assessment=_build_risk_assessment(data["riskAssessment"]),
        action_plan=_build_action_plan(data["actionPlan"]),
    )


def _build_summary(raw: Any) -> Summary:
    obj = _require_object(raw, "summary")
    key_points = _require_str_list(obj.get("keyPoints"), "summary.keyPoints")
    if not _MIN_KEY_POINTS <= len(key_points) <= _MAX_KEY_POINTS:
        raise StructureInvalidError(
            f"'summary.keyPoints' must have {_MIN_KEY_POINTS}-{_MAX_KEY_POINTS} items, "
            f"got {len(key_points)}"
        )
    confidence = obj.get("confidence")
    if isinstance(confidence, bool) or not isinstance(confidence, (int, float)):
        raise StructureInvalidError("'summary.confidence' must be a number")
    if not 0.0 <= confidence <= 1.0:
        raise StructureInvalidError("'summary.confidence' must be between 0 and 1")
    return Summary(
        tldr=_require_str(obj.get("tldr"), "summary.tldr"),
        key_points=key_points,
        confidence=float(confidence),
    )


def _build_key_information(raw: Any) -> KeyInformation:
    obj = _require_object(raw, "keyInformation")
    dates = [
        _build_key_date(item, f"keyInformation.dates[{i}]")
        for i, item in enumerate(_require_list(obj.get("dates"), "keyInformation.dates"))
    ]
    amounts = [
        _build_amount(item, f"keyInformation.monetaryAmounts[{i}]")
        for i, item in enumerate(
            _require_list(obj.get("monetaryAmounts"), "keyInformation.monetaryAmounts")
        )
    ]
    return KeyInformation(
        parties=_require_str_list(obj.get("parties"), "keyInformation.parties"),
        dates=dates,
        monetary_amounts=amounts,
        obligations=_require_str_list(obj.get("obligations"), "keyInformation.obligations"),
    )


def _build_key_date(raw: Any, path: str) -> KeyDate:
    obj = _require_object(raw, path)
    value = _require_str(obj.get("date"), f"{path}.date")
    if not _ISO_DATE.match(value):
        raise StructureInvalidError(f"'{path}.date' must be an ISO date, got {value!r}")
    try:
        date.fromisoformat(value)
    except ValueError as exc:
        raise StructureInvalidError(f"'{path}.date' is not a valid date: {value!r}") from exc
    return KeyDate(
        date=value,
        description=_require_str(obj.get("description"), f"{path}.description"),
        importance=_require_choice(obj.get("importance"), LEVELS, f"{path}.importance"),
    )


def _build_amount(raw: Any, path: str) -> MonetaryAmount:
    obj = _require_object(raw, path)
    amount = obj.get("amount")
    if isinstance(amount, (int, float)) and not isinstance(amount, bool):
        amount = str(amount)
    return MonetaryAmount(
        amount=_require_str(amount, f"{path}.amount"),
        currency=_require_str(obj.get("currency"), f"{path}.currency"),
        description=_require_str(obj.get("description"), f"{path}.description"),
        type=_require_choice(obj.get("type"), AMOUNT_TYPES, f"{path}.type"),
    )


def _build_risk_assessment(raw: Any) -> RiskAssessment:
    obj = _require_object(raw, "riskAssessment")
    red_flags = [
        _build_red_flag(item, f"riskAssessment.redFlags[{i}]")
        for i, item in enumerate(_require_list(obj.get("redFlags"), "riskAssessment.redFlags"))
    ]
    return RiskAssessment(
        overall_risk=_require_choice(
            obj.get("overallRisk"), LEVELS, "riskAssessment.overallRisk"
        ),
        red_flags=red_flags,
        recommendations=_require_str_list(
            obj.get("recommendations"), "riskAssessment.recommendations"
        ),
    )


def _build_red_flag(raw: Any, path: str) -> RedFlag:
    obj = _require_object(raw, path)
    return RedFlag(
        clause=_require_str(obj.get("clause"), f"{path}.clause"),
        risk=_require_str(obj.get("risk"), f"{path}.risk"),
        severity=_require_choice(obj.get("severity"), LEVELS, f"{path}.severity"),
        explanation=_require_str(obj.get("explanation"), f"{path}.explanation"),
        original_text=_require_str(obj.get("originalText"), f"{path}.originalText"),
    )


def _build_action_plan(raw: Any) -> list[ActionItem]:
    items = _require_list(raw, "actionPlan")
    return [_build_action_item(item, f"actionPlan[{i}]") for i, item in enumerate(items)]


def _build_action_item(raw: Any, path: str) -> ActionItem:
    obj = _require_object(raw, path)
    item_id = obj.get("id")
    if isinstance(item_id, int) and not isinstance(item_id, bool):
        item_id = str(item_id)
    if "deadline" not in obj:
        raise StructureInvalidError(f"Missing required field: {path}.deadline")
    deadline = obj["deadline"]
    if deadline is not None and not isinstance(deadline, str):
        raise StructureInvalidError(f"'{path}.deadline' must be a string or null")
    completed = obj.get("completed")
    if not isinstance(completed, bool):
        raise StructureInvalidError(f"'{path}.completed' must be a boolean")
    return ActionItem(
        id=_require_str(item_id, f"{path}.id"),
        task=_require_str(obj.get("task"), f"{path}.task"),
        priority=_require_choice(obj.get("priority"), LEVELS, f"{path}.priority"),
        deadline=deadline,
        completed=completed,
    )


def _require_object(raw: Any, path: str) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise StructureInvalidError(f"'{path}' must be an object")
    return raw


def _require_list(raw: Any, path: str) -> list[Any]:
    if not isinstance(raw, list):
        raise StructureInvalidError(f"'{path}' must be a list")
    return raw


def _require_str(raw: Any, path: str) -> str:
    if not isinstance(raw, str):
        raise StructureInvalidError(f"'{path}' must be a string")
    return raw


def _require_str_list(raw: Any, path: str) -> list[str]:
    items = _require_list(raw, path)
    for i, item in enumerate(items):
        if not isinstance(item, str):
            raise StructureInvalidError(f"'{path}[{i}]' must be a string")
    return list(items)


def _require_choice(raw: Any, choices: frozenset[str], path: str) -> Any:
    if not isinstance(raw, str) or raw not in choices:
        raise StructureInvalidError(
            f"'{path}' must be one of {sorted(choices)}, got {raw!r}"
        )
    return raw
