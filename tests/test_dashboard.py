# tests/test_dashboard.py
from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from clientdesk.core.exceptions import NotFoundError
from clientdesk.services.dashboard_service import DashboardService
from clientdesk.services.portal_service import PortalService
from clientdesk.utils.clock import today


@pytest.fixture
def dashboard(registry):
    return DashboardService(registry)


@pytest.fixture
def portal(registry):
    return PortalService(registry)


async def test_summary_counts(dashboard):
    summary = await dashboard.get_summary()

    assert summary.active_clients == 3
    assert summary.open_tickets == 3
    assert summary.expiring_services == 3
    # Monthly offerings behind active assignments: 299 + 899 + 599
    assert summary.monthly_revenue == Decimal("1797")


async def test_recent_activity_newest_first_with_client_names(dashboard):
    summary = await dashboard.get_summary()
    assert [t.id for t in summary.recent_activity] == [5, 3, 1, 2, 4]
    assert summary.recent_activity[0].client_name == "Clínica Dental Sonrisas"


async def test_recent_activity_with_missing_client(registry, dashboard):
    await registry.clients.delete(2)
    summary = await dashboard.get_summary()
    assert summary.recent_activity[0].client_name == "Unknown client"


async def test_recent_activity_limit(registry):
    summary = await DashboardService(registry, recent_limit=2).get_summary()
    assert [t.id for t in summary.recent_activity] == [5, 3]


async def test_client_detail_enriches_services(registry, dashboard):
    await registry.assignments.create(
        {"client_id": 1, "service_id": 404, "start_date": today(), "end_date": today() + timedelta(days=90)}
    )
    detail = await dashboard.get_client_detail(1)

    assert detail.client.id == 1
    assert [t.id for t in detail.tickets] == [1, 2]
    names = [s.service_name for s in detail.services]
    assert names == ["Hosting Web Básico", "Mantenimiento WordPress Premium", "Service not found"]
    assert detail.services[-1].service_price == 0
    assert detail.services[-1].service_category == "unknown"


async def test_client_detail_missing_client(dashboard):
    with pytest.raises(NotFoundError, match="Client not found"):
        await dashboard.get_client_detail(99)


async def test_ticket_detail(registry, dashboard):
    detail = await dashboard.get_ticket_detail(1)
    assert detail.client.company_name == "Restaurante El Sazón Mexicano"
    assert [m.id for m in detail.messages] == [1, 3, 2]

    await registry.clients.delete(1)
    detail = await dashboard.get_ticket_detail(1)
    assert detail.client is None


async def test_list_tickets_filters(dashboard):
    assert [t.id for t in await dashboard.list_tickets()] == [5, 3, 1, 2, 4]
    assert [t.id for t in await dashboard.list_tickets(status="open")] == [5, 1]
    assert [t.id for t in await dashboard.list_tickets(priority="urgent")] == [3]
    assert [t.id for t in await dashboard.list_tickets(query="SONRISAS")] == [5, 3]
    assert [t.id for t in await dashboard.list_tickets(query="backup")] == [2]


async def test_portal_overview(portal):
    overview = await portal.get_overview(1)

    assert overview.client.email == "maria@elsazonmexicano.com"
    assert [s.days_until_expiry for s in overview.services] == [15, 45]
    assert overview.services[0].service_name == "Hosting Web Básico"
    assert overview.active_services == 2
    assert overview.open_tickets == 1
    assert overview.expiring_services == 1
    assert [t.id for t in overview.tickets] == [1, 2]


async def test_portal_expiring_ignores_inactive_services(portal):
    overview = await portal.get_overview(4)
    # service 7 ends in 5 days but is inactive
    assert overview.active_services == 1
    assert overview.expiring_services == 1


async def test_portal_thread_hides_internal_notes(portal):
    thread = await portal.get_ticket_thread(1, 1)
    assert [m.id for m in thread.messages] == [1, 2]
    assert all(not m.is_internal for m in thread.messages)


async def test_portal_thread_of_another_client_is_not_found(portal):
    with pytest.raises(NotFoundError, match="Ticket not found"):
        await portal.get_ticket_thread(1, 3)


async def test_naive_ticket_timestamp_does_not_break_listings(registry, dashboard):
    await registry.tickets.update(1, {"created_at": datetime(2020, 5, 1, 9)})

    assert [t.id for t in await dashboard.list_tickets()] == [5, 3, 2, 4, 1]
    summary = await dashboard.get_summary()
    assert [t.id for t in summary.recent_activity] == [5, 3, 2, 4, 1]


async def test_portal_overview_as_of_a_given_date(portal):
    now = await portal.get_overview(1)
    later = await portal.get_overview(1, as_of=today() + timedelta(days=10))

    assert [s.days_until_expiry - 10 for s in now.services] == [s.days_until_expiry for s in later.services]
