"""HTTP tests for the JSON API and the playground page."""

import pytest

from chunklab.domain.samples import SAMPLES

pytestmark = pytest.mark.api


class TestPages:
    def test_index_renders(self, client):
        """The page lists strategies and pre-fills the default sample."""
        res = client.get("/")

        assert res.status_code == 200
        assert "Chunk Lab" in res.text
        assert 'value="paragraphs"' in res.text
        assert "SECTION 09 91 00 - PAINTING" in res.text


class TestDiscovery:
    def test_strategies(self, client):
        res = client.get("/api/strategies")

        assert res.status_code == 200
        body = res.json()
        assert [s["name"] for s in body] == ["characters", "sentences", "paragraphs", "semantic"]
        assert body[2]["default_size"] == 400

    def test_samples(self, client):
        res = client.get("/api/samples")

        assert res.status_code == 200
        assert {s["name"] for s in res.json()} == set(SAMPLES)

    def test_sample_detail(self, client):
        res = client.get("/api/samples/drawing_note")

        assert res.status_code == 200
        assert res.json()["text"] == SAMPLES["drawing_note"]

    def test_sample_not_found(self, client):
        res = client.get("/api/samples/nope")
        assert res.status_code == 404


class TestChunkingPreview:
    def test_character_example(self, client):
        res = client.post(
            "/api/chunking/preview",
            json={"text": "abcdefghij", "strategy": "characters", "size": 4, "overlap": 1},
        )

        assert res.status_code == 200
        body = res.json()
        assert body["chunks"] == [
            {"text": "abcd", "start": 0, "end": 4},
            {"text": "defg", "start": 3, "end": 7},
            {"text": "ghij", "start": 6, "end": 10},
            {"text": "j", "start": 9, "end": 10},
        ]
        assert body["metrics"] == {"count": 4, "avg_size": 3, "min_size": 1, "max_size": 4, "total_chars": 13}
        assert body["iou"] == 77
        assert body["text_length"] == 10

    def test_default_size_is_reported(self, client):
        res = client.post("/api/chunking/preview", json={"text": "Para one.\n\nPara two.", "strategy": "paragraphs"})

        assert res.status_code == 200
        assert res.json()["size"] == 400
        assert [c["text"] for c in res.json()["chunks"]] == ["Para one.", "Para two."]

    def test_empty_text(self, client):
        res = client.post("/api/chunking/preview", json={"text": "", "strategy": "sentences"})

        assert res.status_code == 200
        body = res.json()
        assert body["chunks"] == []
        assert body["metrics"]["count"] == 0
        assert body["iou"] == 100

    def test_overlap_not_smaller_than_size(self, client):
        res = client.post(
            "/api/chunking/preview",
            json={"text": "abcdef", "strategy": "characters", "size": 3, "overlap": 3},
        )

        assert res.status_code == 400
        assert "overlap" in res.json()["detail"]

    def test_overlap_on_sentence_strategy(self, client):
        res = client.post(
            "/api/chunking/preview",
            json={"text": "One. Two.", "strategy": "sentences", "size": 10, "overlap": 2},
        )
        assert res.status_code == 400

    @pytest.mark.parametrize(
        "payload",
        [
            {"text": "abc", "strategy": "tokens"},
            {"text": "abc", "strategy": "characters", "size": 0},
            {"text": "abc", "strategy": "characters", "overlap": -1},
            {"text": "abc", "unexpected": True},
        ],
    )
    def test_request_validation(self, client, payload):
        res = client.post("/api/chunking/preview", json=payload)
        assert res.status_code == 422


class TestChunkingCompare:
    def test_runs_every_strategy(self, client):
        text = SAMPLES["construction_spec"]
        res = client.post("/api/chunking/compare", json={"text": text, "sizes": {"paragraphs": 300}})

        assert res.status_code == 200
        results = {r["strategy"]: r for r in res.json()["results"]}
        assert list(results) == ["characters", "sentences", "paragraphs", "semantic"]
        assert results["characters"]["size"] == 200
        assert results["paragraphs"]["size"] == 300
        assert results["semantic"]["chunks"] == results["paragraphs"]["chunks"]

    def test_overlap_applies_to_characters_only(self, client):
        res = client.post("/api/chunking/compare", json={"text": "abcdefghij " * 40, "overlap": 50})

        assert res.status_code == 200
        results = {r["strategy"]: r for r in res.json()["results"]}
        assert results["characters"]["overlap"] == 50
        assert results["characters"]["iou"] < 100
        assert results["sentences"]["overlap"] == 0

    def test_invalid_size_override(self, client):
        res = client.post("/api/chunking/compare", json={"text": "abc", "sizes": {"sentences": 0}})
        assert res.status_code == 422


class TestChunkingUpload:
    def test_upload_text_files(self, client):
        res = client.post(
            "/api/chunking/upload",
            files=[
                ("files", ("notes.txt", b"One. Two. Three.", "text/plain")),
                ("files", ("empty.txt", b"   ", "text/plain")),
            ],
            data={"strategy": "sentences", "size": "9"},
        )

        assert res.status_code == 200
        files = res.json()["files"]
        assert files[0]["file"]["filename"] == "notes.txt"
        assert [c["text"] for c in files[0]["result"]["chunks"]] == ["One. Two.", "Three."]
        assert files[1]["error"] == "File is empty or unreadable"

    def test_unknown_strategy(self, client):
        res = client.post(
            "/api/chunking/upload",
            files=[("files", ("notes.txt", b"text", "text/plain"))],
            data={"strategy": "tokens"},
        )
        assert res.status_code == 400

    def test_non_numeric_size(self, client):
        res = client.post(
            "/api/chunking/upload",
            files=[("files", ("notes.txt", b"text", "text/plain"))],
            data={"strategy": "characters", "size": "big"},
        )
        assert res.status_code == 400

    @pytest.mark.parametrize("params", [{"size": "-5"}, {"size": "4", "overlap": "4"}])
    def test_invalid_parameters_rejected_before_reading_files(self, client, params):
        """Bad parameters are a 400 even when every file would be skipped as empty."""
        res = client.post(
            "/api/chunking/upload",
            files=[("files", ("blank.txt", b"  ", "text/plain"))],
            data={"strategy": "characters", **params},
        )
        assert res.status_code == 400


class TestMetricsEndpoint:
    def test_metrics_for_supplied_chunks(self, client):
        chunks = [
            {"text": "abcd", "start": 0, "end": 4},
            {"text": "bcde", "start": 1, "end": 5},
        ]
        res = client.post("/api/metrics", json={"chunks": chunks})

        assert res.status_code == 200
        body = res.json()
        assert body["metrics"]["count"] == 2
        assert body["metrics"]["total_chars"] == 8
        assert body["iou"] == 63

    def test_invalid_chunk_offsets(self, client):
        res = client.post("/api/metrics", json={"chunks": [{"text": "x", "start": 4, "end": 1}]})
        assert res.status_code == 422
