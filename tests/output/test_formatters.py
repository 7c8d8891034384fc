"""Tests for outcome and policy formatting."""

import json

from credcheck.config.models import PolicyConfig
from credcheck.domain.outcome import Invalid, Valid
from credcheck.domain.types import ErrorKind
from credcheck.output.formatters import (
    OutputSettings,
    format_layouts,
    format_outcome,
    format_policy,
    outcome_payload,
)


def _short() -> Invalid:
    return Invalid.of(ErrorKind.PASSWORD_TOO_SHORT)


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestOutcomePayload:
    def test_valid(self) -> None:
        payload = outcome_payload(Valid())
        assert payload == {
            "ok": True,
            "op": "evaluate",
            "kind": None,
            "category": None,
            "fields": [],
            "message": "Credentials accepted",
        }

    def test_invalid(self) -> None:
        payload = outcome_payload(Invalid.of(ErrorKind.USERNAME_CONTAINS_EMAIL))
        assert payload["ok"] is False
        assert payload["kind"] == "username_contains_email"
        assert payload["category"] == "general"
        assert payload["fields"] == ["username", "email"]


class TestFormatOutcomeJSON:
    def test_valid_json(self) -> None:
        output = format_outcome(Valid(), settings=OutputSettings(json_output=True))
        assert json.loads(output)["ok"] is True

    def test_invalid_json(self) -> None:
        output = format_outcome(_short(), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["kind"] == "password_too_short"
        assert data["fields"] == ["password"]
        assert "policy" not in data

    def test_verbose_json_includes_policy(self) -> None:
        policy = PolicyConfig(min_length=10)
        output = format_outcome(
            _short(),
            policy=policy,
            settings=OutputSettings(json_output=True, verbose=True),
        )
        assert json.loads(output)["policy"]["min_length"] == 10


class TestFormatOutcomeQuiet:
    def test_quiet_valid(self) -> None:
        assert format_outcome(Valid(), settings=OutputSettings(quiet=True)) == "OK: evaluate"

    def test_quiet_invalid(self) -> None:
        output = format_outcome(_short(), settings=OutputSettings(quiet=True))
        assert output.startswith("ERROR: evaluate")
        assert "password_too_short" in output


class TestFormatOutcomeHuman:
    def test_valid(self) -> None:
        output = format_outcome(Valid())
        assert "OK" in output
        assert "Credentials accepted" in output

    def test_invalid_lists_fields(self) -> None:
        output = format_outcome(Invalid.of(ErrorKind.PASSWORD_MISMATCH))
        assert "ERROR" in output
        assert "password_mismatch" in output
        assert "password, confirm_password" in output

    def test_message_uses_policy(self) -> None:
        output = format_outcome(_short(), policy=PolicyConfig(min_length=14, max_length=30))
        assert "14" in output

    def test_verbose_shows_policy(self) -> None:
        output = format_outcome(
            Valid(),
            policy=PolicyConfig(max_length=64),
            settings=OutputSettings(verbose=True),
        )
        assert "max_length: 64" in output


class TestFormatPolicy:
    def test_human(self) -> None:
        output = format_policy(PolicyConfig(min_length=12), name="strict")
        assert "layout: strict" in output
        assert "min_length: 12" in output

    def test_default_label(self) -> None:
        assert "layout: default" in format_policy(PolicyConfig())

    def test_json(self) -> None:
        output = format_policy(PolicyConfig(), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["layout"] == "default"
        assert data["policy"] == {
            "require_digit": True,
            "require_letter": True,
            "min_length": 8,
            "max_length": 100,
        }


class TestFormatLayouts:
    def test_json_includes_default_first(self) -> None:
        output = format_layouts(
            PolicyConfig(),
            {"strict": PolicyConfig(min_length=16)},
            settings=OutputSettings(json_output=True),
        )
        data = json.loads(output)
        assert list(data) == ["default", "strict"]
        assert data["strict"]["min_length"] == 16

    def test_quiet_names_only(self) -> None:
        output = format_layouts(
            PolicyConfig(),
            {"b": PolicyConfig(), "a": PolicyConfig()},
            settings=OutputSettings(quiet=True),
        )
        assert output.splitlines() == ["default", "a", "b"]

    def test_table(self) -> None:
        output = format_layouts(PolicyConfig(), {"pin": PolicyConfig(require_letter=False)})
        assert "default" in output
        assert "pin" in output
        assert "no" in output
