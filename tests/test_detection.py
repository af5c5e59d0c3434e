"""Tests for field detection over document samples."""

import pytest

from vectordash_core.config import DetectionSettings
from vectordash_core.models import DetectionStatus, JsonKind, StorageType
from vectordash_core.schema import (
    NO_DOCUMENTS_MESSAGE,
    detect,
    documents_from_hits,
    match_all_sample_query,
)


def by_name(fields):
    return {f.name: f for f in fields}


class TestDetect:
    """Test per-kind and global aggregation."""

    def test_per_kind_frequency(self, item_documents):
        """Test that per-kind frequency uses the kind's document count."""
        result = detect(item_documents)

        items = result.group("item")
        assert items.doc_count == 4
        price = by_name(items.fields)["price"]
        assert price.frequency == 0.75
        assert price.sample_count == 4
        assert price.inferred_type == JsonKind.NUMBER
        assert price.suggested_types == [StorageType.NUMERIC]

    def test_global_frequency(self, item_documents):
        """Test that the flat list divides by the whole sample."""
        result = detect(item_documents)

        assert result.sample_count == 6
        price = by_name(result.fields)["price"]
        assert price.frequency == 0.5
        assert price.sample_count == 6
        assert by_name(result.fields)["email"].frequency == pytest.approx(2 / 6)

    def test_groups_in_encounter_order(self, item_documents):
        result = detect(list(reversed(item_documents)))
        assert [g.type_name for g in result.groups] == ["user", "item"]

    def test_kinds_keep_their_own_fields(self, item_documents):
        result = detect(item_documents)
        assert set(by_name(result.group("user").fields)) == {"email", "active"}
        assert set(by_name(result.group("item").fields)) == {"title", "price"}

    def test_default_kind(self):
        result = detect([{"a": 1}, {"_type": "", "a": 2}, {"_type": 5, "b": 3}])
        assert [g.type_name for g in result.groups] == ["default"]
        assert result.groups[0].doc_count == 3

    def test_sorted_by_seen_count_stable(self):
        """Test descending order with ties kept in encounter order."""
        docs = [
            {"b": 1, "a": 1},
            {"c": 1, "a": 1},
            {"d": 1},
        ]
        result = detect(docs)
        assert [f.name for f in result.fields] == ["a", "b", "c", "d"]

    def test_first_non_null_example_wins(self):
        """Test that null examples are replaced but the first type sticks."""
        docs = [
            {"_type": "item", "code": None},
            {"_type": "item", "code": "abc"},
            {"_type": "item", "code": "later"},
        ]
        field = by_name(detect(docs).group("item").fields)["code"]

        assert field.example_value == "abc"
        assert field.inferred_type == JsonKind.STRING
        assert field.frequency == 1.0

    def test_first_seen_type_not_revised(self):
        """Test that a null first value keeps the placeholder kind."""
        docs = [{"count": None}, {"count": 5}, {"count": 7}]
        field = by_name(detect(docs).fields)["count"]

        assert field.inferred_type == JsonKind.STRING
        assert field.example_value == 5
        assert field.suggested_types == [StorageType.TEXT]

    def test_first_non_null_example_kept(self):
        docs = [{"title": "first"}, {"title": None}, {"title": "second"}]
        assert by_name(detect(docs).fields)["title"].example_value == "first"

    def test_reserved_and_internal_fields_excluded(self):
        docs = [
            {
                "_type": "item",
                "_id": "1",
                "_embeddings": {"v": [0.1]},
                "_summaries": {},
                "_private": 1,
                "name": "x",
            }
        ]
        result = detect(docs)
        names = {f.name for f in result.fields}
        assert names == {"name"}
        for group in result.groups:
            assert {f.name for f in group.fields} == {"name"}

    def test_custom_reserved_fields(self):
        settings = DetectionSettings(reserved_fields=["secret"], internal_prefix="$")
        result = detect([{"secret": 1, "_visible": 2, "$meta": 3}], settings=settings)
        assert [f.name for f in result.fields] == ["_visible"]

    def test_custom_kind_field(self):
        settings = DetectionSettings(kind_field="kind")
        result = detect([{"kind": "a", "x": 1}, {"kind": "b", "x": 2}], settings=settings)
        assert [g.type_name for g in result.groups] == ["a", "b"]

    def test_non_object_documents_count_toward_sample(self):
        result = detect([{"a": 1}, "junk", None])
        assert result.sample_count == 3
        assert by_name(result.fields)["a"].frequency == pytest.approx(1 / 3)
        assert result.groups[0].doc_count == 1

    def test_document_with_only_reserved_fields(self):
        result = detect([{"_id": "1", "_type": "item"}])
        assert result.status == DetectionStatus.OK
        assert result.fields == []
        assert result.group("item").fields == []


class TestEmptySample:
    """Test the no-documents condition."""

    def test_empty_sample_status(self):
        result = detect([])

        assert result.status == DetectionStatus.NO_DOCUMENTS
        assert not result.found_documents
        assert result.error == NO_DOCUMENTS_MESSAGE
        assert result.groups == []
        assert result.sample_count == 0

    def test_distinguishable_from_nothing_found(self):
        """Test that a sample with no usable fields is still a success."""
        result = detect([{"_id": "1"}])
        assert result.found_documents
        assert result.error is None


class TestWireFormat:
    """Test camelCase serialization for the schema editor."""

    def test_detected_field_wire_keys(self, item_documents):
        wire = detect(item_documents).to_wire()

        price = next(f for f in wire["groups"][0]["fields"] if f["name"] == "price")
        assert price == {
            "name": "price",
            "inferredType": "number",
            "exampleValue": 12.5,
            "frequency": 0.75,
            "sampleCount": 4,
            "suggestedTypes": ["numeric"],
        }
        assert wire["groups"][0]["typeName"] == "item"
        assert wire["groups"][0]["docCount"] == 4
        assert wire["status"] == "ok"
        assert wire["sampleCount"] == 6

    def test_no_documents_wire(self):
        wire = detect([]).to_wire()
        assert wire["status"] == "no_documents"
        assert wire["error"] == NO_DOCUMENTS_MESSAGE


class TestSampling:
    """Test helpers around the sampling request."""

    def test_match_all_sample_query(self):
        assert match_all_sample_query() == {
            "full_text_search": {"match_all": {}},
            "limit": 50,
        }
        assert match_all_sample_query(10)["limit"] == 10

    def test_sample_size_from_env(self, monkeypatch):
        monkeypatch.setenv("VECTORDASH_SAMPLE_SIZE", "25")
        assert match_all_sample_query()["limit"] == 25

    def test_documents_from_hits(self):
        hits = [
            {"_id": "1", "_source": {"a": 1}},
            {"_id": "2"},
            {"_id": "3", "_source": {}},
            "bogus",
            {"_id": "4", "_source": {"b": 2}},
        ]
        assert documents_from_hits(hits) == [{"a": 1}, None, {}, None, {"b": 2}]

    def test_hits_without_source_count_toward_sample(self):
        hits = [
            {"_id": "1", "_source": {"a": 1}},
            {"_id": "2", "_source": {}},
            {"_id": "3"},
            {"_id": "4", "_source": {"a": 2}},
        ]
        result = detect(documents_from_hits(hits))

        assert result.status == DetectionStatus.OK
        assert result.sample_count == 4
        assert result.fields[0].name == "a"
        assert result.fields[0].frequency == 0.5
        assert result.fields[0].sample_count == 4

    def test_page_of_hits_without_source(self):
        result = detect(documents_from_hits([{"_id": "1"}, {"_id": "2"}]))

        assert result.status == DetectionStatus.OK
        assert result.sample_count == 2
        assert result.fields == []
        assert result.groups == []
