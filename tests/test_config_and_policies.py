# tests/test_config_and_policies.py
import asyncio
import json
import logging

import pydantic
import pytest

import clientdesk.main as main_module
from clientdesk.core import audit
from clientdesk.core.config import Settings
from clientdesk.core.constants import MAX_EXPIRING_WINDOW_DAYS, IdStrategy
from clientdesk.db.seed import SEED_NAMES, load_seed
from clientdesk.services import latency as latency_module
from clientdesk.services.client_service import ClientService
from clientdesk.services.identity import MaxPlusOneIdPolicy, MonotonicIdPolicy
from clientdesk.services.latency import NoLatency, SimulatedLatency
from clientdesk.services.registry import build_latency, build_registry


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("SIMULATED_LATENCY", "true")
    monkeypatch.setenv("LATENCY_SCALE", "0.5")
    monkeypatch.setenv("ID_STRATEGY", "max_plus_one")
    monkeypatch.setenv("EXPIRING_WINDOW_DAYS", "15")
    settings = Settings(_env_file=None)

    assert settings.simulated_latency is True
    assert settings.id_strategy == IdStrategy.MAX_PLUS_ONE
    assert settings.expiring_window_days == 15

    policy = build_latency(settings)
    assert isinstance(policy, SimulatedLatency)
    assert policy.scale == 0.5

    registry = build_registry(settings, latency=NoLatency())
    assert isinstance(registry.clients.id_policy, MaxPlusOneIdPolicy)


def test_defaults_use_no_latency_and_monotonic_ids(settings):
    assert isinstance(build_latency(settings), NoLatency)
    registry = build_registry(settings)
    assert isinstance(registry.tickets.id_policy, MonotonicIdPolicy)
    assert registry.clients.id_policy is not registry.tickets.id_policy


def test_origins_are_split(settings):
    settings = Settings(_env_file=None, allowed_origins="http://a.test, http://b.test,")
    assert settings.origins == ["http://a.test", "http://b.test"]


async def test_simulated_latency_uses_service_delays(monkeypatch):
    calls = []

    async def fake_sleep(seconds):
        calls.append(seconds)

    monkeypatch.setattr(latency_module.asyncio, "sleep", fake_sleep)
    service = ClientService(latency=SimulatedLatency(scale=0.5))

    await service.get_all()
    await service.create({"company_name": "Acme", "email": "a@a.com"})

    assert calls == [pytest.approx(0.15), pytest.approx(0.2)]


def test_negative_latency_scale_is_rejected():
    with pytest.raises(ValueError):
        SimulatedLatency(scale=-1)


async def test_concurrent_creates_get_distinct_ids():
    service = ClientService(latency=SimulatedLatency(scale=0.001))
    created = await asyncio.gather(
        *(service.create({"company_name": f"Co {i}", "email": f"co{i}@example.com"}) for i in range(5))
    )
    assert sorted(c.id for c in created) == [1, 2, 3, 4, 5]
    assert len(service) == 5


def test_seeds_are_fresh_copies():
    for name in SEED_NAMES:
        first = load_seed(name)
        assert first
        first.clear()
        assert load_seed(name)


def test_seed_dir_overrides_embedded_data(tmp_path):
    clients = [{"id": 7, "company_name": "From file", "email": "file@example.com"}]
    (tmp_path / "clients.json").write_text(json.dumps(clients), encoding="utf-8")

    settings = Settings(_env_file=None, seed_dir=str(tmp_path))
    registry = build_registry(settings, latency=NoLatency())

    assert len(registry.clients) == 1
    assert len(registry.tickets) == 5


def test_unknown_seed_name():
    with pytest.raises(KeyError):
        load_seed("invoices")


def test_audit_log_writes_json_lines(tmp_path):
    log_file = tmp_path / "logs" / "audit.log"
    audit.configure_audit_log(str(log_file))
    try:
        entry = audit.log_action("delete", "client", 4, details={"reason": "test"})
    finally:
        audit.configure_audit_log(None)

    assert entry["action"] == "DELETE"
    assert entry["resource_type"] == "client"
    written = json.loads(log_file.read_text(encoding="utf-8").strip())
    assert written["resource_id"] == "4"
    assert written["details"] == {"reason": "test"}


def test_audit_logger_does_not_propagate():
    assert logging.getLogger("audit").propagate is False


def test_expiring_window_setting_is_bounded():
    with pytest.raises(pydantic.ValidationError):
        Settings(_env_file=None, expiring_window_days=MAX_EXPIRING_WINDOW_DAYS + 1)


def test_importing_the_app_module_builds_nothing(settings, registry):
    assert not hasattr(main_module, "app")

    app = main_module.create_app(settings=settings, registry=registry)
    assert app.state.registry is registry
