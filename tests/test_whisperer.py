"""
Tests del servicio SplWhisperer (generación + guardrails)
"""
import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from packages.spl_core import (  # noqa: E402
    SplBlockedError,
    SplGenerator,
    SplGuardrailValidator,
    SplPolicy,
    SplWhisperer,
)
from packages.spl_core.providers import DemoProvider  # noqa: E402

from tests.fakes import FakeProvider  # noqa: E402


def make_whisperer(spl: str, **kwargs) -> SplWhisperer:
    payload = json.dumps({"spl": spl, "guardrails": ["Model note."]})
    return SplWhisperer(generator=SplGenerator(provider=FakeProvider(payload)), **kwargs)


class TestSplWhisperer:
    def test_valid_spl_keeps_model_guardrails(self):
        whisperer = make_whisperer("index=security error | stats count by host")

        result = whisperer.ask("errors by host")

        assert result.is_valid is True
        assert result.guardrails == ("Model note.",)
        assert result.validation.messages == ()

    def test_violations_are_appended_as_advice(self):
        whisperer = make_whisperer("index=prod error | delete", block_on_invalid=False)

        result = whisperer.ask("delete prod errors")

        assert result.is_valid is False
        assert result.spl == "index=prod error | delete"
        assert result.guardrails[0] == "Model note."
        assert result.guardrails[1:] == result.validation.messages
        assert len(result.validation.messages) >= 2

    def test_block_on_invalid_raises(self):
        whisperer = make_whisperer("index=prod error | delete", block_on_invalid=True)

        with pytest.raises(SplBlockedError) as exc_info:
            whisperer.ask("delete prod errors")

        assert exc_info.value.spl == "index=prod error | delete"
        assert not exc_info.value.validation.is_valid

    def test_block_on_invalid_lets_valid_spl_through(self):
        whisperer = make_whisperer("index=app | stats count", block_on_invalid=True)

        assert whisperer.ask("count app events").is_valid

    def test_block_flag_defaults_to_settings(self):
        whisperer = make_whisperer("index=app | stats count")

        assert whisperer.block_on_invalid is False

    @pytest.mark.parametrize("question", ["", "  "])
    def test_empty_question(self, question):
        with pytest.raises(ValueError):
            make_whisperer("index=app | stats count").ask(question)

    def test_custom_validator_policy(self):
        validator = SplGuardrailValidator(SplPolicy(allowed_indexes=("main",)))
        whisperer = SplWhisperer(
            generator=SplGenerator(provider=DemoProvider()), validator=validator
        )

        result = whisperer.validate("index=main | stats count")

        assert result.is_valid is True
        assert whisperer.policy.allowed_indexes == ("main",)

    def test_demo_flow_reports_missing_index(self):
        whisperer = SplWhisperer(generator=SplGenerator(provider=DemoProvider()))

        result = whisperer.ask("how many errors per host?")

        assert result.is_valid is False
        assert result.validation.messages == (
            "SPL must specify an explicit index (security, app, or infra).",
        )
        assert result.guardrails[-1] == result.validation.messages[0]

    def test_get_stats(self):
        whisperer = SplWhisperer(generator=SplGenerator(provider=DemoProvider()))

        stats = whisperer.get_stats()

        assert stats["llm_provider"] == "demo"
        assert stats["llm_model"] == "demo"
        assert stats["policy"]["allowed_indexes"] == ["security", "app", "infra"]
