"""Unit tests for the Record Store backings.

Covers first-touch seeding, whole-collection replacement, atomic
read-modify-write, persistence across instances and simulated latency.
"""

import asyncio
import threading

import pytest

from docflow.config.settings import Settings
from docflow.core.interfaces.record_store import Collections
from docflow.infrastructure.db.record_store import SqlRecordStore
from docflow.infrastructure.store.factory import build_seed, create_record_store
from docflow.infrastructure.store.json_store import JsonFileRecordStore
from docflow.infrastructure.store.memory_store import InMemoryRecordStore


@pytest.fixture
def seed(settings):
    return build_seed(settings)


@pytest.fixture(params=["memory", "json", "sql"])
def any_store(request, seed, tmp_path):
    """The same contract checked against every backing."""
    if request.param == "memory":
        yield InMemoryRecordStore(seed=seed)
    elif request.param == "json":
        yield JsonFileRecordStore(tmp_path / "data", seed=seed)
    else:
        store = SqlRecordStore(f"sqlite:///{tmp_path / 'docflow.db'}", seed=seed)
        yield store
        store.dispose()


class TestRecordStoreContract:
    """Behaviour every backing must share."""

    @pytest.mark.asyncio
    async def test_first_read_seeds_single_admin(self, any_store):
        users = await any_store.read(Collections.USERS)

        assert len(users) == 1
        assert users[0]["email"] == "admin@docflow.com"
        assert users[0]["role"] == "ADMIN"
        assert users[0]["id"] == "admin-uuid"
        assert await any_store.read(Collections.COMPANIES) == []
        assert await any_store.read(Collections.DOCUMENTS) == []

    @pytest.mark.asyncio
    async def test_unknown_collection_reads_empty(self, any_store):
        assert await any_store.read("nothing_here") == []

    @pytest.mark.asyncio
    async def test_write_replaces_whole_collection(self, any_store):
        await any_store.write(Collections.COMPANIES, [{"id": "c1"}, {"id": "c2"}])
        await any_store.write(Collections.COMPANIES, [{"id": "c3"}])

        assert await any_store.read(Collections.COMPANIES) == [{"id": "c3"}]

    @pytest.mark.asyncio
    async def test_write_preserves_order(self, any_store):
        records = [{"id": f"d{i}", "n": i} for i in range(5)]
        await any_store.write(Collections.DOCUMENTS, records)

        assert await any_store.read(Collections.DOCUMENTS) == records

    @pytest.mark.asyncio
    async def test_failed_update_writes_nothing(self, any_store):
        await any_store.write(Collections.COMPANIES, [{"id": "c1"}])

        def boom(records):
            records.append({"id": "c2"})
            raise RuntimeError("abort")

        with pytest.raises(RuntimeError):
            await any_store.update(Collections.COMPANIES, boom)

        assert await any_store.read(Collections.COMPANIES) == [{"id": "c1"}]

    @pytest.mark.asyncio
    async def test_read_returns_isolated_copies(self, any_store):
        await any_store.write(Collections.COMPANIES, [{"id": "c1", "status": "PENDING"}])

        records = await any_store.read(Collections.COMPANIES)
        records[0]["status"] = "APPROVED"

        assert (await any_store.read(Collections.COMPANIES))[0]["status"] == "PENDING"

    @pytest.mark.asyncio
    async def test_concurrent_updates_do_not_lose_writes(self, any_store):
        def append(i):
            def mutate(records):
                records.append({"id": f"d{i}"})
                return records, i
            return mutate

        await asyncio.gather(*(any_store.update(Collections.DOCUMENTS, append(i)) for i in range(20)))

        ids = {r["id"] for r in await any_store.read(Collections.DOCUMENTS)}
        assert ids == {f"d{i}" for i in range(20)}

    @pytest.mark.asyncio
    async def test_seed_is_not_reapplied_when_users_exist(self, any_store):
        await any_store.read(Collections.USERS)
        await any_store.write(Collections.COMPANIES, [{"id": "c1"}])

        any_store._seeded = False
        await any_store.read(Collections.USERS)

        assert await any_store.read(Collections.COMPANIES) == [{"id": "c1"}]


class TestPersistence:
    """File-backed stores survive a new instance over the same location."""

    @pytest.mark.asyncio
    async def test_json_store_reloads(self, tmp_path, seed):
        first = JsonFileRecordStore(tmp_path, seed=seed)
        await first.write(Collections.COMPANIES, [{"id": "c1", "cnpj": "11.111.111/0001-11"}])

        second = JsonFileRecordStore(tmp_path, seed=seed)
        assert await second.read(Collections.COMPANIES) == [{"id": "c1", "cnpj": "11.111.111/0001-11"}]
        assert (tmp_path / "companies.json").exists()
        assert not (tmp_path / "companies.tmp").exists()

    @pytest.mark.asyncio
    async def test_sql_store_reloads(self, tmp_path, seed):
        url = f"sqlite:///{tmp_path / 'docflow.db'}"
        first = SqlRecordStore(url, seed=seed)
        await first.write(Collections.DOCUMENTS, [{"id": "d1", "name": "Contrato Social"}])
        first.dispose()

        second = SqlRecordStore(url, seed=seed)
        assert await second.read(Collections.DOCUMENTS) == [{"id": "d1", "name": "Contrato Social"}]
        assert len(await second.read(Collections.USERS)) == 1
        second.dispose()

    @pytest.mark.asyncio
    async def test_sql_in_memory_url(self, seed):
        store = SqlRecordStore("sqlite://", seed=seed)
        await store.write(Collections.COMPANIES, [{"id": "c1"}])
        assert await store.read(Collections.COMPANIES) == [{"id": "c1"}]
        store.dispose()


class TestSqlThreading:
    """Blocking SQL calls leave the event loop thread."""

    @pytest.mark.asyncio
    async def test_load_and_save_run_in_worker_thread(self, tmp_path, seed):
        threads = []

        class TracingStore(SqlRecordStore):
            def _load(self, collection):
                threads.append(threading.get_ident())
                return super()._load(collection)

            def _save(self, collection, records):
                threads.append(threading.get_ident())
                super()._save(collection, records)

        store = TracingStore(f"sqlite:///{tmp_path / 'docflow.db'}", seed=seed)
        await store.update(Collections.COMPANIES, lambda records: (records + [{"id": "c1"}], None))
        store.dispose()

        assert threads
        assert threading.get_ident() not in threads

    @pytest.mark.asyncio
    async def test_memory_store_stays_on_loop(self, seed):
        threads = []

        class TracingStore(InMemoryRecordStore):
            def _load(self, collection):
                threads.append(threading.get_ident())
                return super()._load(collection)

        await TracingStore(seed=seed).read(Collections.USERS)

        assert set(threads) == {threading.get_ident()}


class TestSimulatedLatency:
    """Reads take half the write delay; zero disables sleeping."""

    @pytest.fixture
    def sleeps(self, monkeypatch):
        calls = []

        async def fake_sleep(seconds):
            calls.append(seconds)

        monkeypatch.setattr(asyncio, "sleep", fake_sleep)
        return calls

    @pytest.mark.asyncio
    async def test_read_is_half_of_write(self, sleeps, seed):
        store = InMemoryRecordStore(latency_ms=600, seed=seed)

        await store.write(Collections.COMPANIES, [])
        await store.read(Collections.COMPANIES)

        assert sleeps == [pytest.approx(0.6), pytest.approx(0.3)]

    @pytest.mark.asyncio
    async def test_zero_latency_never_sleeps(self, sleeps, seed):
        store = InMemoryRecordStore(latency_ms=0, seed=seed)

        await store.write(Collections.COMPANIES, [])
        await store.read(Collections.COMPANIES)

        assert sleeps == []


class TestFactory:
    def test_memory_backend(self):
        store = create_record_store(Settings(_env_file=None, store_backend="memory"))
        assert isinstance(store, InMemoryRecordStore)

    def test_json_backend(self, tmp_path):
        settings = Settings(_env_file=None, store_backend="json", data_dir=str(tmp_path))
        assert isinstance(create_record_store(settings), JsonFileRecordStore)

    def test_sql_backend(self, tmp_path):
        settings = Settings(
            _env_file=None, store_backend="sql", database_url=f"sqlite:///{tmp_path / 'x.db'}"
        )
        store = create_record_store(settings)
        assert isinstance(store, SqlRecordStore)
        store.dispose()

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            create_record_store(Settings(_env_file=None, store_backend="redis"))
