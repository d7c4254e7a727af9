from typing import Any

from legalitea.analysis.models import (
    ActionItem,
    Analysis,
    KeyDate,
    MonetaryAmount,
    RedFlag,
)


def analysis_to_dict(analysis: Analysis) -> dict[str, Any]:
    """Render an Analysis in its camelCase wire form."""
    return {
        "summary": {
            "tldr": analysis.summary.tldr,
            "keyPoints": list(analysis.summary.key_points),
            "confidence": analysis.summary.confidence,
        },
        "keyInformation": {
            "parties": list(analysis.key_information.parties),
            "dates": [_date_to_dict(d) for d in analysis.key_information.dates],
            "monetaryAmounts": [
                _amount_to_dict(a) for a in analysis.key_information.monetary_amounts
            ],
            "obligations": list(analysis.key_information.obligations),
        },
        "riskAssessment": {
            "overallRisk": analysis.risk_assessment.overall_risk,
            "redFlags": [_red_flag_to_dict(f) for f in analysis.risk_assessment.red_flags],
            "recommendations": list(analysis.risk_assessment.recommendations),
        },
        "actionPlan": [_action_to_dict(a) for a in analysis.action_plan],
    }


def _date_to_dict(item: KeyDate) -> dict[str, str]:
    return {
        "date": item.date,
        "description": item.description,
        "importance": item.importance,
    }


def _amount_to_dict(item: MonetaryAmount) -> dict[str, str]:
    return {
        "amount": item.amount,
        "currency": item.currency,
        "description": item.description,
        "type": item.type,
    }


def _red_flag_to_dict(item: RedFlag) -> dict[str, str]:
    return {
        "clause": item.clause,
        "risk": item.risk,
        "severity": item.severity,
        "explanation": item.explanation,
        "originalText": item.original_text,
    }


def _action_to_dict(item: ActionItem) -> dict[str, Any]:
    return {
        "id": item.id,
        "task": item.task,
        "priority": item.priority,
        "deadline": item.deadline,
        "completed": item.completed,
    }
