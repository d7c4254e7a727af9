import json

from legalitea.analysis.analyzer import parse_response
from legalitea.analysis.example_client_adapter import ExampleClientAdapter
from legalitea.analysis.models import Analysis
from legalitea.analysis.validator import validate_analysis


class TestExampleClientAdapter:
    def _call(self) -> str:
        return ExampleClientAdapter().create_chat_completion(
            model="example",
            temperature=0.0,
            system_prompt="",
            user_prompt="Analyze this.",
            json_schema=None,
        )

    def test_returns_json(self) -> None:
        assert json.loads(self._call()) == ExampleClientAdapter.DEFAULT_RESPONSE

    def test_response_is_a_valid_analysis(self) -> None:
        result = validate_analysis(parse_response(self._call()))
        assert isinstance(result, Analysis)
        assert result.risk_assessment.overall_risk == "low"
