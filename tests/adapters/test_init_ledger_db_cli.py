"""Tests for the init_ledger_db_cli adapter."""

from types import SimpleNamespace
from unittest.mock import MagicMock

from src.adapters import init_ledger_db_cli
from src.domain.errors import NotFoundError
from src.domain.models import Currency, Owner
from src.infrastructure.settings import LedgerSettings


def _patch_cli(monkeypatch, services, db_url="sqlite:///tmp/ledger.db"):
    settings = LedgerSettings(db_url=db_url)
    adapter = MagicMock()
    schema_calls = []
    monkeypatch.setattr(init_ledger_db_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(
        init_ledger_db_cli.LedgerSettings,
        "from_env",
        classmethod(lambda cls: settings),
    )
    monkeypatch.setattr(
        init_ledger_db_cli,
        "build_database_adapter",
        lambda: adapter,
    )
    monkeypatch.setattr(
        init_ledger_db_cli,
        "ensure_schema",
        lambda engine: schema_calls.append(engine),
    )
    monkeypatch.setattr(
        init_ledger_db_cli,
        "build_ledger_services",
        lambda db_port, settings: services,
    )
    return adapter, schema_calls


def _services(currencies):
    return SimpleNamespace(
        list_currencies=MagicMock(execute=MagicMock(return_value=currencies)),
        add_currency=MagicMock(),
        identity=MagicMock(),
        register_owner=MagicMock(),
    )


def test_main_creates_schema_and_default_currency(monkeypatch, capsys):
    services = _services([])
    monkeypatch.delenv("LEDGER_OWNER_EMAIL", raising=False)
    adapter, schema_calls = _patch_cli(monkeypatch, services)

    init_ledger_db_cli.main()

    assert schema_calls == [adapter.get_ledger_engine.return_value]
    services.add_currency.execute.assert_called_once_with(
        "ARS", "Argentine Peso", "$"
    )
    services.register_owner.execute.assert_not_called()
    assert "ARS" in capsys.readouterr().out


def test_main_registers_missing_owner(monkeypatch, capsys):
    services = _services([Currency(code="ARS", name="Peso", symbol="$")])
    services.identity.resolve_owner.side_effect = NotFoundError("missing")
    services.register_owner.execute.return_value = Owner(
        id=4, name="ana", email="ana@example.com"
    )
    monkeypatch.setenv("LEDGER_OWNER_EMAIL", "ana@example.com")
    monkeypatch.delenv("LEDGER_OWNER_NAME", raising=False)
    _patch_cli(monkeypatch, services)

    init_ledger_db_cli.main()

    services.add_currency.execute.assert_not_called()
    services.register_owner.execute.assert_called_once_with(
        "ana",
        "ana@example.com",
        default_currency_code="ARS",
    )
    assert "id=4" in capsys.readouterr().out


def test_main_keeps_existing_owner(monkeypatch):
    services = _services([Currency(code="ARS", name="Peso", symbol="$")])
    services.identity.resolve_owner.return_value = Owner(
        id=1, name="Ana", email="ana@example.com"
    )
    monkeypatch.setenv("LEDGER_OWNER_EMAIL", "ana@example.com")
    _patch_cli(monkeypatch, services)

    init_ledger_db_cli.main()

    services.register_owner.execute.assert_not_called()
