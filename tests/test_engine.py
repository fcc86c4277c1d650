"""Tests for the Engine facade and LockedEngine."""

from concurrent.futures import ThreadPoolExecutor

from tlsearch import Engine, LockedEngine

from conftest import word_segmenter


class TestEngine:
    def test_new_engine_is_empty(self, word_engine):
        assert len(word_engine) == 0
        assert word_engine.stats() == {"documents": 0, "terms": 0, "titles": 0}
        assert word_engine.search("anything") == []
        assert word_engine.suggest("") == []

    def test_stats(self, sample_engine):
        stats = sample_engine.stats()

        assert stats["documents"] == 3
        assert stats["titles"] == 3
        assert stats["terms"] == len(sample_engine.index.postings)

    def test_contains(self, sample_engine):
        assert "d1" in sample_engine
        assert "missing" not in sample_engine

    def test_document_count_tracks_live_documents(self, word_engine):
        word_engine.add("d1", "A1", "alpha")
        word_engine.add("d2", "B1", "beta")
        word_engine.add("d1", "A2", "alpha again")
        word_engine.remove("d2")
        word_engine.remove("d3")

        assert len(word_engine) == len(word_engine.index.documents) == 1

    def test_snippet_for_hit(self, word_engine):
        word_engine.add("d1", "T", "The quick brown fox")

        hit = word_engine.search("Quick")[0]
        snippet = word_engine.snippet(hit, "Quick")

        assert snippet.text == "The <mark>quick</mark> brown fox"

    def test_snippet_window_size_argument(self, word_engine):
        body = "filler " * 50 + "needle" + " filler" * 50
        word_engine.add("d1", "T", body)
        hit = word_engine.search("needle")[0]

        narrow = word_engine.snippet(hit, "needle", window_size=20)
        default = word_engine.snippet(hit, "needle")

        assert "<mark>needle</mark>" in narrow.text
        assert len(narrow.plain_text) < 60
        assert len(default.plain_text) > len(narrow.plain_text)

    def test_snippet_for_removed_document(self, word_engine):
        word_engine.add("d1", "T", "The quick brown fox")
        hit = word_engine.search("quick")[0]
        word_engine.remove("d1")

        assert word_engine.snippet(hit, "quick").text == ""

    def test_default_segmenter(self, engine):
        engine.add("d1", "Rust Guide", "Rust is great for systems programming")

        assert [h.id for h in engine.search("systems")] == ["d1"]


class TestLockedEngine:
    def test_concurrent_adds(self):
        engine = LockedEngine(segmenter=word_segmenter)

        def add_batch(worker: int) -> None:
            for i in range(50):
                engine.add(f"w{worker}-{i}", f"Worker {worker}", f"shared item{i}")
                engine.search("shared")

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(add_batch, range(8)))

        assert len(engine) == 400
        assert engine.stats()["documents"] == 400
        assert len(engine.index.get_postings("shared")) == 400
        assert len(engine.search("shared", 1000)) == 400

    def test_same_interface(self):
        engine = LockedEngine(segmenter=word_segmenter)
        engine.add("d1", "Rust Guide", "Rust is great")

        assert "d1" in engine
        assert engine.suggest("rust") == ["rust guide"]
        hit = engine.search("great")[0]
        assert engine.snippet(hit, "great").text == "Rust is <mark>great</mark>"

        engine.remove("d1")
        assert len(engine) == 0
