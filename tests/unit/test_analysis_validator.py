import pytest

from legalitea.analysis.exceptions import StructureInvalidError
from legalitea.analysis.models import Analysis, StructureInvalid
from legalitea.analysis.validator import build_analysis, validate_analysis


class TestValidateAnalysis:
    def test_valid_payload_builds_analysis(self, analysis_payload: dict) -> None:
        result = validate_analysis(analysis_payload)
        assert isinstance(result, Analysis)
        assert result.summary.confidence == 0.92
        assert result.key_information.parties == ["ABC Property Management", "John Smith"]
        assert result.key_information.monetary_amounts[1].type == "deposit"
        assert result.risk_assessment.red_flags[0].original_text.startswith("A late fee")
        assert result.action_plan[0].deadline == "Before signing"

    @pytest.mark.parametrize(
        "key", ["summary", "keyInformation", "riskAssessment", "actionPlan"]
    )
    def test_missing_top_level_key_is_invalid(self, analysis_payload: dict, key: str) -> None:
        del analysis_payload[key]
        result = validate_analysis(analysis_payload)
        assert isinstance(result, StructureInvalid)
        assert key in result.reason

    def test_non_object_is_invalid(self) -> None:
        assert isinstance(validate_analysis(["summary"]), StructureInvalid)

    def test_empty_lists_are_valid(self, analysis_payload: dict) -> None:
        analysis_payload["keyInformation"]["dates"] = []
        analysis_payload["riskAssessment"]["redFlags"] = []
        analysis_payload["actionPlan"] = []
        result = validate_analysis(analysis_payload)
        assert isinstance(result, Analysis)
        assert result.action_plan == []


class TestSummaryRules:
    @pytest.mark.parametrize("count", [2, 6])
    def test_key_points_count_out_of_range(self, analysis_payload: dict, count: int) -> None:
        analysis_payload["summary"]["keyPoints"] = [f"point {i}" for i in range(count)]
        result = validate_analysis(analysis_payload)
        assert isinstance(result, StructureInvalid)
        assert "keyPoints" in result.reason

    @pytest.mark.parametrize("confidence", [1.5, -0.1, "0.9", True, None])
    def test_bad_confidence(self, analysis_payload: dict, confidence: object) -> None:
        analysis_payload["summary"]["confidence"] = confidence
        assert isinstance(validate_analysis(analysis_payload), StructureInvalid)

    def test_integer_confidence_bounds_accepted(self, analysis_payload: dict) -> None:
        analysis_payload["summary"]["confidence"] = 1
        result = validate_analysis(analysis_payload)
        assert isinstance(result, Analysis)
        assert result.summary.confidence == 1.0


class TestFieldRules:
    @pytest.mark.parametrize("value", ["January 1, 2024", "2024-13-01", "2024-02-30"])
    def test_rejects_non_iso_dates(self, analysis_payload: dict, value: str) -> None:
        analysis_payload["keyInformation"]["dates"][0]["date"] = value
        assert isinstance(validate_analysis(analysis_payload), StructureInvalid)

    def test_rejects_unknown_severity(self, analysis_payload: dict) -> None:
        analysis_payload["riskAssessment"]["redFlags"][0]["severity"] = "critical"
        result = validate_analysis(analysis_payload)
        assert isinstance(result, StructureInvalid)
        assert "severity" in result.reason

    def test_rejects_unhashable_enum_value(self, analysis_payload: dict) -> None:
        analysis_payload["riskAssessment"]["overallRisk"] = ["high"]
        assert isinstance(validate_analysis(analysis_payload), StructureInvalid)

    def test_rejects_unknown_amount_type(self, analysis_payload: dict) -> None:
        analysis_payload["keyInformation"]["monetaryAmounts"][0]["type"] = "refund"
        assert isinstance(validate_analysis(analysis_payload), StructureInvalid)

    def test_numeric_amount_becomes_string(self, analysis_payload: dict) -> None:
        analysis_payload["keyInformation"]["monetaryAmounts"][0]["amount"] = 2500
        result = validate_analysis(analysis_payload)
        assert isinstance(result, Analysis)
        assert result.key_information.monetary_amounts[0].amount == "2500"

    def test_integer_action_id_becomes_string(self, analysis_payload: dict) -> None:
        analysis_payload["actionPlan"][0]["id"] = 7
        result = validate_analysis(analysis_payload)
        assert isinstance(result, Analysis)
        assert result.action_plan[0].id == "7"

    @pytest.mark.parametrize("field", ["deadline", "completed"])
    def test_rejects_action_item_missing_field(self, analysis_payload: dict, field: str) -> None:
        del analysis_payload["actionPlan"][0][field]
        result = validate_analysis(analysis_payload)
        assert isinstance(result, StructureInvalid)
        assert f"actionPlan[0].{field}" in result.reason

    def test_null_deadline_is_accepted(self, analysis_payload: dict) -> None:
        analysis_payload["actionPlan"][0]["deadline"] = None
        result = validate_analysis(analysis_payload)
        assert isinstance(result, Analysis)
        assert result.action_plan[0].deadline is None

    def test_rejects_non_boolean_completed(self, analysis_payload: dict) -> None:
        analysis_payload["actionPlan"][0]["completed"] = "no"
        assert isinstance(validate_analysis(analysis_payload), StructureInvalid)

    def test_rejects_non_string_party(self, analysis_payload: dict) -> None:
        analysis_payload["keyInformation"]["parties"].append(42)
        result = validate_analysis(analysis_payload)
        assert isinstance(result, StructureInvalid)
        assert "parties[2]" in result.reason


class TestBuildAnalysis:
    def test_raises_on_invalid_payload(self) -> None:
        with pytest.raises(StructureInvalidError, match="actionPlan"):
            build_analysis({"summary": {}, "keyInformation": {}, "riskAssessment": {}})
