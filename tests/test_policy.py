"""
Tests de la política de guardrails y su configuración
"""
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from packages.spl_core.config import Settings, get_settings  # noqa: E402
from packages.spl_core.guardrails import DEFAULT_POLICY, SplPolicy  # noqa: E402


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSplPolicy:
    def test_default_tables(self):
        assert DEFAULT_POLICY.allowed_indexes == ("security", "app", "infra")
        assert DEFAULT_POLICY.blocked_keywords[0] == "delete"
        assert "streamstats" in DEFAULT_POLICY.allowed_commands

    def test_values_are_normalized(self):
        policy = SplPolicy(
            allowed_indexes=["Main", " WEB ", "main", ""],
            blocked_keywords=["Delete"],
            allowed_commands=["STATS"],
        )

        assert policy.allowed_indexes == ("main", "web")
        assert policy.blocked_keywords == ("delete",)
        assert policy.is_index_allowed("MAIN")
        assert policy.is_command_allowed("Stats")
        assert not policy.is_command_allowed("eval")

    def test_policy_is_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_POLICY.allowed_indexes = ("prod",)

    @pytest.mark.parametrize(
        "indexes,expected",
        [
            (("a",), "a"),
            (("a", "b"), "a or b"),
            (("a", "b", "c"), "a, b, or c"),
            ((), "none"),
        ],
    )
    def test_describe_indexes_with_conjunction(self, indexes, expected):
        assert SplPolicy(allowed_indexes=indexes).describe_indexes("or") == expected

    def test_describe_indexes_plain(self):
        assert DEFAULT_POLICY.describe_indexes() == "security, app, infra"

    def test_equal_policies(self):
        assert SplPolicy() == DEFAULT_POLICY

    def test_to_dict(self):
        data = SplPolicy(allowed_indexes=("main",)).to_dict()

        assert data["allowed_indexes"] == ["main"]
        assert set(data) == {"allowed_indexes", "blocked_keywords", "allowed_commands"}


class TestPolicyFromSettings:
    def test_defaults_match_default_policy(self):
        assert SplPolicy.from_settings(Settings()) == DEFAULT_POLICY

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("ALLOWED_INDEXES", '["main", "web"]')
        monkeypatch.setenv("BLOCK_ON_INVALID", "true")

        settings = get_settings()
        policy = SplPolicy.from_settings(settings)

        assert policy.allowed_indexes == ("main", "web")
        assert settings.block_on_invalid is True

    def test_comma_separated_environment_values(self, monkeypatch):
        monkeypatch.setenv("ALLOWED_INDEXES", "main, web")
        monkeypatch.setenv("BLOCKED_KEYWORDS", "delete,drop")

        policy = SplPolicy.from_settings(get_settings())

        assert policy.allowed_indexes == ("main", "web")
        assert policy.blocked_keywords == ("delete", "drop")


class TestSingleStringTables:
    def test_string_is_a_single_entry(self):
        policy = SplPolicy(allowed_indexes="main", blocked_keywords="delete")

        assert policy.allowed_indexes == ("main",)
        assert policy.blocked_keywords == ("delete",)

    def test_string_table_still_validates(self):
        from packages.spl_core.guardrails import SplGuardrailValidator

        validator = SplGuardrailValidator(SplPolicy(allowed_indexes="main"))

        assert validator.validate("index=main | stats count").is_valid is True
