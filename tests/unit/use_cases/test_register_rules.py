"""Unit tests for RegisterRulesUseCase."""

from unittest.mock import MagicMock

import pytest

from severity_registry.domain.entities import Analyzer, Rule, Severity
from severity_registry.domain.errors import StoreUnavailableError
from severity_registry.domain.naming import RuleLabels
from severity_registry.infrastructure.gateways.settings_store import InMemorySettingsStore
from severity_registry.use_cases.register_rules import RegisterRulesUseCase
from tests.fakes import StaticRuleSource, spacing_source


@pytest.fixture
def use_case(labels: RuleLabels, telemetry: MagicMock) -> RegisterRulesUseCase:
    return RegisterRulesUseCase(labels=labels, telemetry=telemetry)


class TestEnsureDefaultRegistered:
    """Test the default severity entry."""

    def test_registers_suggestion_default_on_empty_store(
        self, use_case: RegisterRulesUseCase, store: InMemorySettingsStore
    ) -> None:
        assert use_case.ensure_default_registered(store) is True
        assert store.get_severity("StyleCop.DefaultSeverity") is Severity.SUGGESTION
        entry = store.list_entries()[0]
        assert entry.title == "Default Violation Severity"
        assert entry.group == "StyleCop - Defaults (Requires Restart)"

    def test_is_idempotent(
        self, use_case: RegisterRulesUseCase, store: InMemorySettingsStore
    ) -> None:
        use_case.ensure_default_registered(store)
        assert use_case.ensure_default_registered(store) is False
        assert len(store) == 1
        assert store.get_severity("StyleCop.DefaultSeverity") is Severity.SUGGESTION

    def test_keeps_user_default(
        self, use_case: RegisterRulesUseCase, store: InMemorySettingsStore
    ) -> None:
        use_case.ensure_default_registered(store)
        store.set_severity("StyleCop.DefaultSeverity", Severity.WARNING)
        use_case.ensure_default_registered(store)
        assert store.get_severity("StyleCop.DefaultSeverity") is Severity.WARNING


class TestRegisterAllRules:
    """Test registration of analyzer rules."""

    def test_end_to_end_single_rule(
        self, use_case: RegisterRulesUseCase, store: InMemorySettingsStore
    ) -> None:
        report = use_case.register_all_rules(store, spacing_source())

        entries = {e.key: e for e in store.list_entries()}
        assert set(entries) == {"StyleCop.DefaultSeverity", "StyleCop.SA1001"}
        assert entries["StyleCop.DefaultSeverity"].severity is Severity.SUGGESTION
        rule_entry = entries["StyleCop.SA1001"]
        assert rule_entry.group == "StyleCop - Spacing Rules"
        assert rule_entry.title == "SA1001: Comma Must Be Followed By Space"
        assert rule_entry.description == "A comma is not followed by a space."
        assert rule_entry.severity is Severity.SUGGESTION
        assert report.registered == ["StyleCop.DefaultSeverity", "StyleCop.SA1001"]
        assert report.default_severity is Severity.SUGGESTION

    def test_never_overwrites_existing_entry(
        self, use_case: RegisterRulesUseCase, store: InMemorySettingsStore
    ) -> None:
        store.register_configurable_severity(
            "StyleCop.SA1001", "old group", "old title", "old", Severity.ERROR)

        report = use_case.register_all_rules(store, spacing_source())

        assert store.get_severity("StyleCop.SA1001") is Severity.ERROR
        assert "StyleCop.SA1001" in report.skipped
        assert "StyleCop.SA1001" not in report.registered

    def test_new_rules_inherit_current_default(
        self, use_case: RegisterRulesUseCase, store: InMemorySettingsStore
    ) -> None:
        use_case.ensure_default_registered(store)
        store.set_severity("StyleCop.DefaultSeverity", Severity.HINT)

        use_case.register_all_rules(store, spacing_source())

        assert store.get_severity("StyleCop.SA1001") is Severity.HINT

    def test_empty_source_registers_only_default(
        self, use_case: RegisterRulesUseCase, store: InMemorySettingsStore
    ) -> None:
        report = use_case.register_all_rules(store, StaticRuleSource())
        assert [e.key for e in store.list_entries()] == ["StyleCop.DefaultSeverity"]
        assert report.registered == ["StyleCop.DefaultSeverity"]

    def test_queries_rule_source_once(
        self, use_case: RegisterRulesUseCase, store: InMemorySettingsStore
    ) -> None:
        source = spacing_source()
        use_case.register_all_rules(store, source)
        assert source.calls == 1

    def test_second_run_is_a_no_op(
        self, use_case: RegisterRulesUseCase, store: InMemorySettingsStore
    ) -> None:
        use_case.register_all_rules(store, spacing_source())
        report = use_case.register_all_rules(store, spacing_source())
        assert report.registered == []
        assert len(store) == 2

    def test_new_rule_surfaces_on_later_run(
        self, use_case: RegisterRulesUseCase, store: InMemorySettingsStore
    ) -> None:
        use_case.register_all_rules(store, spacing_source())
        grown = StaticRuleSource(
            {
                Analyzer("SpacingRules"): [
                    Rule("SA1001", "CommaMustBeFollowedBySpace", ""),
                    Rule("SA1002", "SemicolonsMustBeSpacedCorrectly", ""),
                ]
            }
        )
        report = use_case.register_all_rules(store, grown)
        assert report.registered == ["StyleCop.SA1002"]

    def test_duplicate_rule_ids_across_analyzers_register_once(
        self, use_case: RegisterRulesUseCase, store: InMemorySettingsStore
    ) -> None:
        source = StaticRuleSource(
            {
                Analyzer("NamingRules"): [Rule("SA1300", "ElementMustBeginWithUpperCaseLetter")],
                Analyzer("ExtraNamingRules"): [Rule("SA1300", "Duplicate")],
            }
        )
        use_case.register_all_rules(store, source)
        entries = [e for e in store.list_entries() if e.key == "StyleCop.SA1300"]
        assert len(entries) == 1
        assert entries[0].group == "StyleCop - Naming Rules"

    def test_rule_id_colliding_with_default_key_is_rejected(
        self,
        use_case: RegisterRulesUseCase,
        store: InMemorySettingsStore,
        telemetry: MagicMock,
    ) -> None:
        source = StaticRuleSource(
            {
                Analyzer("SpacingRules"): [
                    Rule("DefaultSeverity", "Impostor", "Shadows the default."),
                    Rule("SA1001", "CommaMustBeFollowedBySpace"),
                ]
            }
        )
        report = use_case.register_all_rules(store, source)

        telemetry.warning.assert_called_once()
        assert "DefaultSeverity" in telemetry.warning.call_args[0][0]
        assert report.registered == ["StyleCop.DefaultSeverity", "StyleCop.SA1001"]
        assert report.skipped == []
        default = [e for e in store.list_entries() if e.key == "StyleCop.DefaultSeverity"]
        assert len(default) == 1
        assert default[0].title == "Default Violation Severity"
        assert default[0].group == "StyleCop - Defaults (Requires Restart)"

    def test_rules_grouped_by_analyzer(
        self, use_case: RegisterRulesUseCase, store: InMemorySettingsStore
    ) -> None:
        source = StaticRuleSource(
            {
                Analyzer("NamingRules"): [Rule("SA1300", "ElementMustBeginWithUpperCaseLetter")],
                Analyzer("LayoutRules"): [Rule("SA1500", "CurlyBracketsForMultiLineStatementsMustNotShareLine")],
            }
        )
        use_case.register_all_rules(store, source)
        groups = {e.key: e.group for e in store.list_entries()}
        assert groups["StyleCop.SA1300"] == "StyleCop - Naming Rules"
        assert groups["StyleCop.SA1500"] == "StyleCop - Layout Rules"

    def test_store_failure_propagates_and_keeps_committed_entries(
        self, use_case: RegisterRulesUseCase
    ) -> None:
        store = InMemorySettingsStore()
        real_register = store.register_configurable_severity

        def failing(key: str, *args: object) -> None:
            if key == "StyleCop.SA1002":
                raise StoreUnavailableError("disk full", key=key)
            real_register(key, *args)

        store.register_configurable_severity = failing  # type: ignore[method-assign]
        source = StaticRuleSource(
            {
                Analyzer("SpacingRules"): [
                    Rule("SA1001", "CommaMustBeFollowedBySpace"),
                    Rule("SA1002", "SemicolonsMustBeSpacedCorrectly"),
                ]
            }
        )
        with pytest.raises(StoreUnavailableError):
            use_case.register_all_rules(store, source)
        assert store.get_severity("StyleCop.SA1001") is Severity.SUGGESTION
        assert store.get_severity("StyleCop.SA1002") is None

    def test_unreadable_default_raises(self, use_case: RegisterRulesUseCase) -> None:
        store = MagicMock()
        store.get_severity.return_value = None
        with pytest.raises(StoreUnavailableError, match="read back"):
            use_case.register_all_rules(store, spacing_source())

    def test_reports_summary_through_telemetry(
        self,
        use_case: RegisterRulesUseCase,
        store: InMemorySettingsStore,
        telemetry: MagicMock,
    ) -> None:
        use_case.register_all_rules(store, spacing_source())
        telemetry.step.assert_called_once()
        assert "2 registered" in telemetry.step.call_args[0][0]


class TestExecute:
    """Test the availability-gated entry point."""

    def test_unavailable_source_skips_registration(
        self,
        use_case: RegisterRulesUseCase,
        store: InMemorySettingsStore,
        telemetry: MagicMock,
    ) -> None:
        source = StaticRuleSource(available=False)
        report = use_case.execute(store, source)
        assert report.source_available is False
        assert len(store) == 0
        assert source.calls == 0
        telemetry.warning.assert_called_once()

    def test_available_source_registers(
        self, use_case: RegisterRulesUseCase, store: InMemorySettingsStore
    ) -> None:
        report = use_case.execute(store, spacing_source())
        assert report.source_available is True
        assert len(store) == 2
