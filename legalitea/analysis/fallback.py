"""Deterministic analysis used when the model path fails.

The output always has the Analysis shape, but its content is generic. It is
marked by ``summary.confidence == FALLBACK_CONFIDENCE``.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import date

from legalitea.analysis.models import (
    ActionItem,
    Analysis,
    KeyDate,
    KeyInformation,
    MonetaryAmount,
    RedFlag,
    RiskAssessment,
    Summary,
)

FALLBACK_CONFIDENCE = 0.75
DEFAULT_DOCUMENT_TYPE = "document"


class DocumentClassifier(ABC):
    """Strategy that guesses a document's category from its text."""

    @abstractmethod
    def classify(self, text: str) -> str | None:
        """Return a category name, or None if the text gives no clue."""


class KeywordDocumentClassifier(DocumentClassifier):
    """Picks the first category whose keywords appear in the text.

    Matching is case-insensitive substring search; rules are tried in order.
    """

    DEFAULT_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
        ("lease", ("lease", "rent")),
        ("nda", ("non-disclosure", "confidential")),
        ("contract", ("agreement", "contract")),
    )

    def __init__(self, rules: tuple[tuple[str, tuple[str, ...]], ...] | None = None) -> None:
        self._rules = rules if rules is not None else self.DEFAULT_RULES

    def classify(self, text: str) -> str | None:
        lowered = text.lower()
        for category, keywords in self._rules:
            if any(keyword in lowered for keyword in keywords):
                return category
        return None


class FallbackAnalyzer:
    """Builds a fixed-template Analysis from simple text statistics."""

    def __init__(
        self,
        classifier: DocumentClassifier | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._classifier = classifier or KeywordDocumentClassifier()
        self._today = today

    def detect_type(self, text: str, document_type: str | None = None) -> str:
        return self._classifier.classify(text) or document_type or DEFAULT_DOCUMENT_TYPE

    def analyze(self, text: str, document_type: str | None = None) -> Analysis:
        word_count = len(text.split())
        detected = self.detect_type(text, document_type)

        return Analysis(
            summary=Summary(
                tldr=(
                    f"This {detected} contains {word_count} words and appears to be a "
                    "standard legal document with key terms and obligations."
                ),
                key_points=[
                    f"Document type: {detected.upper()}",
                    "Contains standard legal language and clauses",
                    "Establishes rights and obligations between parties",
                    "Includes termination and dispute resolution terms",
                    "May require legal review for complex provisions",
                ],
                confidence=FALLBACK_CONFIDENCE,
            ),
            key_information=KeyInformation(
                parties=["Party A", "Party B"],
                dates=[
                    KeyDate(
                        date=self._today().isoformat(),
                        description="Document effective date",
                        importance="high",
                    )
                ],
                monetary_amounts=[
                    MonetaryAmount(
                        amount="$1,000",
                        currency="USD",
                        description="Sample monetary amount",
                        type="payment",
                    )
                ],
                obligations=[
                    "Comply with all terms and conditions",
                    "Provide required notices",
                    "Maintain confidentiality where applicable",
                    "Pay amounts when due",
                ],
            ),
            risk_assessment=RiskAssessment(
                overall_risk="medium",
                red_flags=[
                    RedFlag(
                        clause="Broad liability clause",
                        risk="May expose you to unexpected liability",
                        severity="medium",
                        explanation=(
                            "This clause could make you responsible for damages "
                            "beyond your control"
                        ),
                        original_text="[Sample clause text would appear here]",
                    )
                ],
                recommendations=[
                    "Review all financial obligations carefully",
                    "Understand termination procedures",
                    "Consider legal counsel for complex terms",
                    "Clarify any ambiguous language before signing",
                ],
            ),
            action_plan=[
                ActionItem(
                    id="1",
                    task="Review all key terms and obligations",
                    priority="high",
                    deadline="Before signing",
                ),
                ActionItem(
                    id="2",
                    task="Clarify any unclear provisions",
                    priority="medium",
                ),
                ActionItem(
                    id="3",
                    task="Consider legal consultation if needed",
                    priority="low",
                ),
            ],
        )
