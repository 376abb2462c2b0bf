"""Unit tests for clients repository layer.

These tests verify database operations in isolation.
"""

import pytest
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from errors import EntityValidationError, NotFoundError
from models.client import Client, ClientQueryParams
from models.common import Status
from models.query import Pagination, Sort
from repos import clients_repo


async def _seed(session: AsyncSession, *names: str) -> list[Client]:
    created = []
    for name in names:
        slug = name.lower()
        created.append(await clients_repo.create(session, Client(name=name, email=f"{slug}@example.com")))
    await session.commit()
    return created


@pytest.mark.asyncio
async def test_repo_create_and_get_one_round_trip(db_session: AsyncSession):
    """Test: A created client reads back with the same field values."""
    created = await clients_repo.create(
        db_session,
        Client(name="  Acme  ", email="contact@acme.com", phone="555-0100", notes="Key account"),
    )
    await db_session.commit()

    fetched = await clients_repo.get_one(db_session, created.id)

    assert fetched.id == created.id
    assert fetched.name == "Acme"
    assert fetched.email == "contact@acme.com"
    assert fetched.phone == "555-0100"
    assert fetched.notes == "Key account"
    assert fetched.status == Status.ACTIVE
    assert fetched.created_at is not None
    assert fetched.updated_at is not None


@pytest.mark.asyncio
async def test_repo_create_rejects_invalid_email(db_session: AsyncSession):
    with pytest.raises(EntityValidationError):
        await clients_repo.create(db_session, Client(name="Acme", email="acme.com"))


@pytest.mark.asyncio
async def test_repo_create_corrects_invalid_status(db_session: AsyncSession):
    """Test: An out-of-domain status is replaced with ACTIVE on create."""
    created = await clients_repo.create(db_session, Client(name="Acme", email="a@acme.com", status=42))

    assert created.status == Status.ACTIVE


@pytest.mark.asyncio
async def test_repo_get_one_not_found(db_session: AsyncSession):
    with pytest.raises(NotFoundError):
        await clients_repo.get_one(db_session, 999)


@pytest.mark.asyncio
async def test_repo_get_many_paginates_after_counting(db_session: AsyncSession):
    """Test: Page 2 of size 2 over 4 rows returns rows 3-4 and total 4."""
    clients = await _seed(db_session, "Acme", "Beta", "Gamma", "Delta")

    page, total = await clients_repo.get_many(
        db_session,
        ClientQueryParams(pagination=Pagination(page=2, page_size=2)),
    )

    assert total == 4
    assert [c.id for c in page] == [clients[2].id, clients[3].id]


@pytest.mark.asyncio
async def test_repo_get_many_sorts_by_name_desc(db_session: AsyncSession):
    await _seed(db_session, "Acme", "Beta", "Gamma", "Delta")

    page, total = await clients_repo.get_many(
        db_session,
        ClientQueryParams(sorts=[Sort(field="name", order="desc")]),
    )

    assert total == 4
    assert [c.name for c in page] == ["Gamma", "Delta", "Beta", "Acme"]


@pytest.mark.asyncio
async def test_repo_get_many_ignores_unknown_sort_field(db_session: AsyncSession):
    """Test: Sorting on a field outside the allow-list is a no-op, not an error."""
    await _seed(db_session, "Gamma", "Acme", "Beta")

    page, _ = await clients_repo.get_many(
        db_session,
        ClientQueryParams(sorts=[Sort(field="drop table", order="desc")]),
    )

    assert [c.name for c in page] == ["Gamma", "Acme", "Beta"]


@pytest.mark.asyncio
async def test_repo_get_many_none_params_uses_defaults(db_session: AsyncSession):
    await _seed(db_session, *[f"Client{i:02d}" for i in range(25)])

    page, total = await clients_repo.get_many(db_session, None)

    assert total == 25
    assert len(page) == 20


@pytest.mark.asyncio
async def test_repo_get_many_search_box_matches_any_field(db_session: AsyncSession):
    """Test: name_like and email_like are OR-ed, so either column may match."""
    await clients_repo.create(db_session, Client(name="Acme", email="hello@acme.com"))
    await clients_repo.create(db_session, Client(name="Zeta", email="zeta@example.com", contact_person="Acme Person"))
    await clients_repo.create(db_session, Client(name="Other", email="other@example.com"))
    await db_session.commit()

    page, total = await clients_repo.get_many(
        db_session,
        ClientQueryParams(name_like="Acme", email_like="Acme", contact_person_like="Acme"),
    )

    assert total == 2
    assert {c.name for c in page} == {"Acme", "Zeta"}


@pytest.mark.asyncio
async def test_repo_get_many_like_is_case_sensitive(db_session: AsyncSession):
    await _seed(db_session, "Acme")

    _, total_lower = await clients_repo.get_many(db_session, ClientQueryParams(name_like="acme"))
    _, total_exact = await clients_repo.get_many(db_session, ClientQueryParams(name_like="Acm"))

    assert total_lower == 0
    assert total_exact == 1


@pytest.mark.asyncio
async def test_repo_get_many_filters_combine_with_and(db_session: AsyncSession):
    await clients_repo.create(db_session, Client(name="Acme", email="a@acme.com", status=Status.ACTIVE))
    await clients_repo.create(db_session, Client(name="Acme Labs", email="l@acme.com", status=Status.INACTIVE))
    await db_session.commit()

    page, total = await clients_repo.get_many(
        db_session,
        ClientQueryParams(name_like="Acme", status=Status.INACTIVE),
    )

    assert total == 1
    assert page[0].name == "Acme Labs"


@pytest.mark.asyncio
async def test_repo_get_many_id_in(db_session: AsyncSession):
    clients = await _seed(db_session, "Acme", "Beta", "Gamma")

    page, total = await clients_repo.get_many(
        db_session,
        ClientQueryParams(id_in=[clients[0].id, clients[2].id]),
    )

    assert total == 2
    assert [c.name for c in page] == ["Acme", "Gamma"]


@pytest.mark.asyncio
async def test_repo_update_overwrites_row(db_session: AsyncSession):
    """Test: update replaces the row, keeps created_at and refreshes updated_at."""
    (created,) = await _seed(db_session, "Acme")
    created_at = created.created_at
    updated_at = created.updated_at

    rows = await clients_repo.update(
        db_session,
        Client(
            id=created.id,
            name="Acme Corp",
            email="billing@acme.com",
            phone="",
            address="1 Main St",
            contact_person="",
            notes="",
            status=Status.INACTIVE,
        ),
    )
    await db_session.commit()
    fetched = await clients_repo.get_one(db_session, created.id)

    assert rows == 1
    assert fetched.name == "Acme Corp"
    assert fetched.address == "1 Main St"
    assert fetched.status == Status.INACTIVE
    assert fetched.created_at == created_at
    assert fetched.updated_at >= updated_at


@pytest.mark.asyncio
async def test_repo_update_missing_row_raises_not_found(db_session: AsyncSession):
    with pytest.raises(NotFoundError):
        await clients_repo.update(
            db_session,
            Client(id=404, name="Ghost", email="ghost@example.com", status=Status.ACTIVE),
        )


@pytest.mark.asyncio
async def test_repo_update_validates_first(db_session: AsyncSession):
    (created,) = await _seed(db_session, "Acme")

    with pytest.raises(EntityValidationError):
        await clients_repo.update(
            db_session,
            Client(id=created.id, name="Acme", email="broken", status=Status.ACTIVE),
        )


@pytest.mark.asyncio
async def test_repo_delete_missing_id_leaves_rows_intact(db_session: AsyncSession):
    """Test: Deleting a missing id raises NotFoundError and removes nothing."""
    await _seed(db_session, "Acme", "Beta")

    with pytest.raises(NotFoundError):
        await clients_repo.delete(db_session, 999)

    _, total = await clients_repo.get_many(db_session)
    assert total == 2


@pytest.mark.asyncio
async def test_repo_delete(db_session: AsyncSession):
    acme, beta = await _seed(db_session, "Acme", "Beta")

    await clients_repo.delete(db_session, acme.id)
    await db_session.commit()

    page, total = await clients_repo.get_many(db_session)
    assert total == 1
    assert page[0].id == beta.id


@pytest.mark.asyncio
async def test_repo_get_many_counts_and_fetches_from_one_snapshot(
    db_engine: AsyncEngine,
    db_session: AsyncSession,
    monkeypatch,
):
    """Test: A row committed elsewhere between the count and the page fetch is in neither."""
    await _seed(db_session, "Acme", "Beta", "Gamma")
    session_execute = db_session.execute
    calls = 0

    async def execute_with_concurrent_insert(statement, *args, **kwargs):
        nonlocal calls
        result = await session_execute(statement, *args, **kwargs)
        calls += 1
        if calls == 1:
            async with db_engine.begin() as conn:
                await conn.execute(insert(Client).values(name="Delta", email="delta@example.com"))
        return result

    monkeypatch.setattr(db_session, "execute", execute_with_concurrent_insert)
    params = ClientQueryParams(pagination=Pagination(page_size=100))

    clients, total = await clients_repo.get_many(db_session, params)

    assert calls == 2
    assert total == 3
    assert len(clients) == total

    await db_session.rollback()
    clients, total = await clients_repo.get_many(db_session, params)

    assert total == 4
    assert len(clients) == 4
