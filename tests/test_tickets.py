# tests/test_tickets.py
import json
from datetime import datetime, timezone

from clientdesk.core.config import Settings
from clientdesk.services.latency import NoLatency
from clientdesk.services.registry import build_registry
from clientdesk.services.ticket_message_service import TicketMessageService


async def test_new_ticket_is_always_open(registry):
    created = await registry.tickets.create(
        {"client_id": 2, "subject": "SSL expired", "description": "Browser warning", "status": "closed"}
    )
    assert created.status == "open"
    assert created.priority == "medium"
    assert created.created_at == created.updated_at


async def test_filters_by_status_and_client(registry):
    assert [t.id for t in await registry.tickets.get_by_status("open")] == [1, 5]
    assert [t.id for t in await registry.tickets.get_by_client_id(2)] == [3, 5]


async def test_open_tickets_include_in_progress(registry):
    assert [t.id for t in await registry.tickets.get_open_tickets()] == [1, 3, 5]


async def test_messages_are_sorted_by_creation_whatever_the_insertion_order():
    def at(hour):
        return datetime(2025, 1, 1, hour, tzinfo=timezone.utc)

    service = TicketMessageService(
        [
            {"id": 1, "ticket_id": 5, "message": "third", "created_at": at(12)},
            {"id": 2, "ticket_id": 5, "message": "first", "created_at": at(8)},
            {"id": 3, "ticket_id": 6, "message": "other ticket", "created_at": at(9)},
            {"id": 4, "ticket_id": 5, "message": "second", "created_at": at(10)},
        ]
    )
    messages = await service.get_by_ticket_id(5)
    assert [m.message for m in messages] == ["first", "second", "third"]


async def test_seeded_thread_order(registry):
    messages = await registry.messages.get_by_ticket_id(1)
    assert [m.id for m in messages] == [1, 3, 2]


async def test_new_message_goes_last_in_thread(registry):
    created = await registry.messages.create({"ticket_id": 1, "message": "Fixed, please check."})
    assert created.is_internal is False
    assert created.author_type == "support"

    messages = await registry.messages.get_by_ticket_id(1)
    assert messages[-1].id == created.id


async def test_naive_timestamp_in_update_is_taken_as_utc(registry):
    updated = await registry.messages.update(1, {"created_at": datetime(2024, 1, 1, 12)})
    assert updated.created_at == datetime(2024, 1, 1, 12, tzinfo=timezone.utc)

    thread = await registry.messages.get_by_ticket_id(1)
    assert [m.id for m in thread] == [1, 3, 2]


async def test_naive_seed_timestamps_sort_with_new_messages(tmp_path):
    messages = [{"id": 1, "ticket_id": 5, "message": "Hola", "created_at": "2024-01-01T10:00:00"}]
    (tmp_path / "ticket_messages.json").write_text(json.dumps(messages), encoding="utf-8")
    registry = build_registry(Settings(_env_file=None, seed_dir=str(tmp_path)), latency=NoLatency())

    await registry.messages.create({"ticket_id": 5, "message": "Respuesta"})
    thread = await registry.messages.get_by_ticket_id(5)

    assert [m.id for m in thread] == [1, 2]
    assert thread[0].created_at.tzinfo == timezone.utc
