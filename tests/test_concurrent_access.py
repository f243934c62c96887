"""Concurrent translate() calls against a store being written.

Readers must only ever observe complete translations: either the value
from before a store() or after it, never a partially merged tree.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from i18nengine import I18n


class TestConcurrentAccess:
    """Thread safety of the facade over MemoryStore."""

    def test_parallel_translate(self) -> None:
        """Many threads translating the same keys agree on the result."""
        i18n = I18n(["es", "en"])
        i18n.store_translations("en", {"inbox": {"one": "1 message", "other": "{{count}} messages"}})

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda n: i18n.translate("inbox", count=n), range(200)))

        assert results[1] == "1 message"
        assert results[150] == "150 messages"

    def test_reads_during_writes(self) -> None:
        """Readers see either the old or the new pair, never a mix."""
        i18n = I18n("en")
        i18n.store_translations("en", {"pair": {"a": "old", "b": "old"}})
        stop = threading.Event()
        seen: set[tuple[object, object]] = set()

        def reader() -> None:
            while not stop.is_set():
                pair = i18n.translate("pair")
                assert isinstance(pair, dict)
                seen.add((pair["a"], pair["b"]))

        def writer() -> None:
            for i in range(200):
                value = "old" if i % 2 else "new"
                i18n.store_translations("en", {"pair": {"a": value, "b": value}})
            stop.set()

        threads = [threading.Thread(target=reader) for _ in range(4)]
        threads.append(threading.Thread(target=writer))
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert seen <= {("old", "old"), ("new", "new")}
