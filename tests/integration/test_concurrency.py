"""
Concurrency tests for the in-memory engine.

Many threads, each driving the async API through its own event loop, hit one
repository. The collection lock must keep locate-then-write operations and the
check-then-insert of `insert_unique` atomic.
"""

from __future__ import annotations

import asyncio
import threading
from concurrent.futures import ThreadPoolExecutor

from record_store.domain.errors import ConflictError, NotFoundError

WORKERS = 16
ROUNDS = 25


def _run(coro_factory, count: int):
    barrier = threading.Barrier(count)

    def worker(i: int):
        barrier.wait()
        return asyncio.run(coro_factory(i))

    with ThreadPoolExecutor(max_workers=count) as pool:
        return [future.exception() or future.result() for future in [pool.submit(worker, i) for i in range(count)]]


class TestInsertUnique:
    def test_only_one_of_many_same_name_inserts_wins(self, living_being_repository, make_being):
        outcomes = _run(
            lambda i: living_being_repository.insert_unique(make_being("Lambari", minutes=i)),
            WORKERS,
        )

        conflicts = [o for o in outcomes if isinstance(o, ConflictError)]
        assert len(conflicts) == WORKERS - 1
        assert len(living_being_repository) == 1

    def test_distinct_names_are_all_inserted(self, living_being_repository, make_being):
        outcomes = _run(
            lambda i: living_being_repository.insert_unique(make_being(f"Neon {i}")),
            WORKERS,
        )

        assert not [o for o in outcomes if isinstance(o, Exception)]
        assert len(living_being_repository) == WORKERS


class TestUpdateDelete:
    def test_concurrent_updates_keep_position_and_size(self, stub_repository, make_being):
        beings = [make_being(str(i)) for i in range(WORKERS)]
        asyncio.run(_insert_all(stub_repository, beings))

        async def edit(i: int):
            for round_ in range(ROUNDS):
                await stub_repository.update(beings[i].model_copy(update={"temperature": round_}))

        outcomes = _run(edit, WORKERS)

        assert not [o for o in outcomes if isinstance(o, Exception)]
        stored = stub_repository.snapshot()
        assert [b.id for b in stored] == [b.id for b in beings]
        assert all(b.temperature == ROUNDS - 1 for b in stored)

    def test_concurrent_delete_of_same_record_succeeds_once(self, stub_repository, make_being):
        target = make_being("Lambari")
        asyncio.run(_insert_all(stub_repository, [make_being("Betta"), target]))

        outcomes = _run(lambda i: stub_repository.delete(target.id), WORKERS)

        assert sum(1 for o in outcomes if o == target) == 1
        assert sum(1 for o in outcomes if isinstance(o, NotFoundError)) == WORKERS - 1
        assert len(stub_repository) == 1


def test_searches_during_inserts_see_consistent_pages(living_being_repository, make_being):
    async def insert_or_search(i: int):
        seen = []
        for round_ in range(ROUNDS):
            if i % 2:
                await living_being_repository.insert(make_being(f"Guppy {i}-{round_}", minutes=round_))
            else:
                result = await living_being_repository.get({"per_page": WORKERS * ROUNDS})
                assert result.total == len(result.data)
                seen.append(result.total)
        return seen

    outcomes = _run(insert_or_search, WORKERS)

    assert not [o for o in outcomes if isinstance(o, Exception)]
    for seen in outcomes[::2]:
        assert seen == sorted(seen)
    assert len(living_being_repository) == (WORKERS // 2) * ROUNDS


def test_atomic_blocks_other_threads(living_being_repository, make_being):
    started = threading.Event()

    def insert_from_thread():
        started.set()
        asyncio.run(living_being_repository.insert(make_being("Betta")))

    with living_being_repository.atomic():
        thread = threading.Thread(target=insert_from_thread)
        thread.start()
        started.wait()
        thread.join(timeout=0.2)
        assert thread.is_alive()
        assert len(living_being_repository) == 0

    thread.join()
    assert len(living_being_repository) == 1


async def _insert_all(repository, beings):
    for being in beings:
        await repository.insert(being)
