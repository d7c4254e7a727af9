from dataclasses import dataclass, field
from typing import Literal

Level = Literal["high", "medium", "low"]
RiskLevel = Literal["low", "medium", "high"]
AmountType = Literal["payment", "penalty", "deposit", "fee"]

LEVELS: frozenset[str] = frozenset({"high", "medium", "low"})
AMOUNT_TYPES: frozenset[str] = frozenset({"payment", "penalty", "deposit", "fee"})


@dataclass(frozen=True)
class AnalysisRequest:
    """Text to analyze plus optional hints."""

    text: str
    document_type: str | None = None
    language: str = "en"


@dataclass(frozen=True)
class Summary:
    tldr: str
    key_points: list[str]
    confidence: float


@dataclass(frozen=True)
class KeyDate:
    date: str  # ISO date, YYYY-MM-DD
    description: str
    importance: Level


@dataclass(frozen=True)
class MonetaryAmount:
    amount: str
    currency: str
    description: str
    type: AmountType


@dataclass(frozen=True)
class KeyInformation:
    parties: list[str] = field(default_factory=list)
    dates: list[KeyDate] = field(default_factory=list)
    monetary_amounts: list[MonetaryAmount] = field(default_factory=list)
    obligations: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class RedFlag:
    clause: str
    risk: str
    severity: Level
    explanation: str
    original_text: str


@dataclass(frozen=True)
class RiskAssessment:
    overall_risk: RiskLevel
    red_flags: list[RedFlag] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ActionItem:
    id: str
    task: str
    priority: Level
    deadline: str | None = None
    completed: bool = False


@dataclass(frozen=True)
class Analysis:
    """Structured analysis of a legal document."""

    summary: Summary
    key_information: KeyInformation
    risk_assessment: RiskAssessment
    action_plan: list[ActionItem] = field(default_factory=list)


@dataclass(frozen=True)
class StructureInvalid:
    """Result of validating a payload that does not have the Analysis shape."""

    reason: str
