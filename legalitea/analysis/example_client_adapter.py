"""Offline analysis client.

Returns a fixed, valid analysis without any network call. Used for local
development and tests, and as a template for new provider adapters:
implement BaseAnalysisClient and register the provider in AnalyzerFactory.
"""

import json
from typing import ClassVar

from legalitea.analysis.client_base import BaseAnalysisClient


class ExampleClientAdapter(BaseAnalysisClient):
    """Adapter that always answers with the same well-formed analysis."""

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "summary": {
            "tldr": "A sample agreement between two parties with standard terms.",
            "keyPoints": [
                "The parties agree to the listed terms",
                "Payments are due monthly",
                "Either party may terminate with written notice",
            ],
            "confidence": 0.9,
        },
        "keyInformation": {
            "parties": ["Example Provider", "Example Client"],
            "dates": [
                {
                    "date": "2024-01-01",
                    "description": "Agreement start date",
                    "importance": "high",
                }
            ],
            "monetaryAmounts": [
                {
                    "amount": "$1,000",
                    "currency": "USD",
                    "description": "Monthly fee",
                    "type": "payment",
                }
            ],
            "obligations": ["Pay the monthly fee on time"],
        },
        "riskAssessment": {
            "overallRisk": "low",
            "redFlags": [],
            "recommendations": ["Keep a signed copy of the agreement"],
        },
        "actionPlan": [
            {
                "id": "1",
                "task": "Read the agreement in full",
                "priority": "high",
                "deadline": None,
                "completed": False,
            }
        ],
    }

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object] | None,
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt, json_schema
        return json.dumps(self.DEFAULT_RESPONSE)
