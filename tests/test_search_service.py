"""
Tests for the incident query engine: text match, filters, sort, paging and scores.
"""

from datetime import date, datetime

import pytest

from crime360.core.fields import IncidentField
from crime360.core.query import DateRange, GeoRadius, IncidentFilters, QuerySpec, SortOrder, SortSpec
from crime360.core.schema import GeoPoint, IncidentStatus, Priority
from crime360.core.search_service import rank_scores, search_incidents, sort_records
from crime360.core.store import RecordStore
from factories import make_incident


def case_numbers(response):
    return [hit.source.case_number for hit in response.hits]


class TestFullText:

    def test_empty_query_returns_everything_paginated(self, seed_store):
        """No term and no filters: total is the whole store, one default page."""
        response = search_incidents(seed_store.incidents, QuerySpec())

        assert response.total == 8
        assert len(response.hits) == 8
        assert [hit.source for hit in response.hits] == list(seed_store.incidents)

    def test_empty_query_with_small_page(self, seed_store):
        response = search_incidents(seed_store.incidents, QuerySpec(size=3))

        assert response.total == 8
        assert len(response.hits) == 3

    def test_theft_scenario(self, seed_store):
        """'theft' finds FIR001234 through its keywords and skips the fraud case."""
        response = search_incidents(seed_store.incidents, QuerySpec(text="theft"))
        found = case_numbers(response)

        assert "FIR001234" in found
        assert "FIR001236" not in found
        for hit in response.hits:
            record = hit.source
            assert ("theft" in record.description.lower()
                    or any("theft" in k.lower() for k in record.keywords))

    def test_match_is_case_insensitive(self, seed_store):
        lower = search_incidents(seed_store.incidents, QuerySpec(text="koramangala"))
        upper = search_incidents(seed_store.incidents, QuerySpec(text="KORAMANGALA"))

        assert case_numbers(lower) == case_numbers(upper)
        assert set(case_numbers(lower)) == {"FIR001235", "FIRB001235"}

    @pytest.mark.parametrize("term,expected", [
        ("FIRB001237", {"FIRB001237"}),          # case number
        ("sahana", {"FIRB001237"}),              # complainant name
        ("rahul", {"FIR001235", "FIRB001235"}),  # accused name
        ("spray paint", {"FIRB001238"}),         # description
        ("whitefield", {"FIRB001238"}),          # location area
        ("cyber", {"FIR001236"}),                # keyword
    ])
    def test_searched_fields(self, seed_store, term, expected):
        response = search_incidents(seed_store.incidents, QuerySpec(text=term))
        assert set(case_numbers(response)) == expected

    def test_officer_is_not_searched(self, seed_store):
        """Only the listed text fields participate in matching."""
        response = search_incidents(seed_store.incidents, QuerySpec(text="Inspector Mehta"))
        assert response.total == 0

    def test_whitespace_term_is_no_constraint(self, seed_store):
        response = search_incidents(seed_store.incidents, QuerySpec(text="   "))
        assert response.total == 8

    def test_no_match_is_empty_not_error(self, seed_store):
        response = search_incidents(seed_store.incidents, QuerySpec(text="no such thing"))
        assert response.total == 0
        assert response.hits == []


class TestFilters:

    def test_priority_and_status_are_anded(self, seed_store):
        """High priority AND Pending status gives exactly the two vehicle thefts."""
        filters = IncidentFilters(priorities=("High",), statuses=("Pending",))
        response = search_incidents(seed_store.incidents, QuerySpec(filters=filters))

        assert set(case_numbers(response)) == {"FIR001235", "FIRB001235"}
        for hit in response.hits:
            assert hit.source.priority is Priority.HIGH
            assert hit.source.status is IncidentStatus.PENDING

    def test_enum_members_work_as_filter_values(self, seed_store):
        filters = IncidentFilters(statuses=(IncidentStatus.RESOLVED,))
        response = search_incidents(seed_store.incidents, QuerySpec(filters=filters))
        assert set(case_numbers(response)) == {"FIR001236", "FIRB001236"}

    def test_status_set_is_or_within_dimension(self, seed_store):
        filters = IncidentFilters(statuses=("Resolved", "Pending"))
        response = search_incidents(seed_store.incidents, QuerySpec(filters=filters))
        assert response.total == 5

    def test_type_filter(self, seed_store):
        filters = IncidentFilters(types=("Assault", "Vandalism"))
        response = search_incidents(seed_store.incidents, QuerySpec(filters=filters))
        assert set(case_numbers(response)) == {"FIRB001237", "FIRB001238"}

    def test_unknown_filter_value_matches_nothing(self, seed_store):
        filters = IncidentFilters(statuses=("Archived",))
        response = search_incidents(seed_store.incidents, QuerySpec(filters=filters))
        assert response.total == 0

    def test_date_range_is_inclusive(self, seed_store):
        filters = IncidentFilters(date_range=DateRange(start=date(2025, 1, 7), end=date(2025, 1, 8)))
        response = search_incidents(seed_store.incidents, QuerySpec(filters=filters))

        assert response.total == 4
        assert all(date(2025, 1, 7) <= hit.source.date <= date(2025, 1, 8) for hit in response.hits)

    def test_date_range_with_open_end(self, seed_store):
        filters = IncidentFilters(date_range=DateRange(start=date(2025, 1, 9)))
        response = search_incidents(seed_store.incidents, QuerySpec(filters=filters))
        assert set(case_numbers(response)) == {"FIRB001237", "FIRB001238"}

    def test_date_range_truncates_timestamps(self, seed_store):
        """A timestamp bound covers its whole day."""
        date_range = DateRange(start=datetime(2025, 1, 10, 23, 0), end=datetime(2025, 1, 10, 1, 0))
        filters = IncidentFilters(date_range=date_range)
        response = search_incidents(seed_store.incidents, QuerySpec(filters=filters))
        assert case_numbers(response) == ["FIRB001238"]

    def test_geo_radius(self, seed_store):
        """6 km around MG Road, Bangalore reaches every central case but not Whitefield."""
        geo = GeoRadius(center=GeoPoint(lat=12.9718, lon=77.5948), radius_km=6.0)
        response = search_incidents(seed_store.incidents, QuerySpec(filters=IncidentFilters(geo=geo)))
        assert set(case_numbers(response)) == {"FIRB001234", "FIRB001235", "FIRB001236", "FIRB001237"}

    def test_small_geo_radius(self, seed_store):
        geo = GeoRadius(center=GeoPoint(lat=12.9718, lon=77.5948), radius_km=2.0)
        response = search_incidents(seed_store.incidents, QuerySpec(filters=IncidentFilters(geo=geo)))
        assert case_numbers(response) == ["FIRB001236"]

    def test_geo_radius_splits_cities(self, seed_store):
        """A 100 km circle around Mumbai excludes every Bangalore case."""
        geo = GeoRadius(center=GeoPoint(lat=19.0760, lon=72.8777), radius_km=100.0)
        response = search_incidents(seed_store.incidents, QuerySpec(filters=IncidentFilters(geo=geo)))
        assert set(case_numbers(response)) == {"FIR001234", "FIR001235", "FIR001236"}

    def test_nan_radius_matches_nothing(self, seed_store):
        """A NaN radius narrows to nothing instead of disabling the filter."""
        geo = GeoRadius(center=GeoPoint(lat=0.0, lon=0.0), radius_km=float("nan"))
        response = search_incidents(seed_store.incidents, QuerySpec(filters=IncidentFilters(geo=geo)))
        assert response.total == 0

    def test_text_and_filters_combine(self, seed_store):
        query = QuerySpec(text="theft", filters=IncidentFilters(types=("Theft",)))
        response = search_incidents(seed_store.incidents, query)
        assert set(case_numbers(response)) == {"FIR001234", "FIRB001234"}


class TestSorting:

    def test_sort_by_timestamp_desc(self, seed_store):
        query = QuerySpec(sort=(SortSpec(IncidentField.TIMESTAMP, SortOrder.DESC),))
        response = search_incidents(seed_store.incidents, query)

        timestamps = [hit.source.timestamp for hit in response.hits]
        assert timestamps == sorted(timestamps, reverse=True)

    def test_ties_keep_store_order(self):
        """Equal keys keep original relative order, ascending and descending."""
        records = [make_incident(str(i), type="Theft" if i % 2 else "Fraud") for i in range(1, 7)]

        ascending = sort_records(records, [SortSpec(IncidentField.TYPE, SortOrder.ASC)])
        descending = sort_records(records, [SortSpec(IncidentField.TYPE, SortOrder.DESC)])

        assert [r.id for r in ascending] == ["2", "4", "6", "1", "3", "5"]
        assert [r.id for r in descending] == ["1", "3", "5", "2", "4", "6"]

    def test_multi_key_sort(self):
        """Second key breaks ties of the first."""
        records = [
            make_incident("1", type="Theft", date="2025-01-03"),
            make_incident("2", type="Fraud", date="2025-01-01"),
            make_incident("3", type="Theft", date="2025-01-01"),
            make_incident("4", type="Fraud", date="2025-01-05"),
        ]
        ordered = sort_records(records, [
            SortSpec(IncidentField.TYPE, SortOrder.ASC),
            SortSpec(IncidentField.DATE, SortOrder.DESC),
        ])
        assert [r.id for r in ordered] == ["4", "2", "1", "3"]

    def test_priority_sorts_by_severity(self):
        records = [
            make_incident("1", priority="Medium"),
            make_incident("2", priority="Critical"),
            make_incident("3", priority="Low"),
            make_incident("4", priority="High"),
        ]
        ordered = sort_records(records, [SortSpec(IncidentField.PRIORITY, SortOrder.DESC)])
        assert [r.priority.value for r in ordered] == ["Critical", "High", "Medium", "Low"]

    def test_missing_values_sort_last(self):
        records = [
            make_incident("1", accused={"name": "A", "description": "x"}),
            make_incident("2", accused={"name": "B", "description": "x", "age": 40}),
            make_incident("3", accused={"name": "C", "description": "x", "age": 25}),
        ]
        ascending = sort_records(records, [SortSpec(IncidentField.ACCUSED_AGE, SortOrder.ASC)])
        descending = sort_records(records, [SortSpec(IncidentField.ACCUSED_AGE, SortOrder.DESC)])

        assert [r.id for r in ascending] == ["3", "2", "1"]
        assert [r.id for r in descending] == ["2", "3", "1"]

    def test_nested_field_sort(self, seed_store):
        query = QuerySpec(sort=(SortSpec(IncidentField.COMPLAINANT_AGE, SortOrder.ASC),), size=100)
        response = search_incidents(seed_store.incidents, query)
        ages = [hit.source.complainant.age for hit in response.hits]
        assert ages == sorted(ages)


class TestPagination:

    def test_offset_beyond_end(self, five_record_store):
        """from=1000 on a five-record store: no hits, total still 5."""
        response = search_incidents(five_record_store.incidents, QuerySpec(offset=1000))

        assert response.total == 5
        assert response.hits == []

    def test_pages_do_not_overlap(self, five_record_store):
        first = search_incidents(five_record_store.incidents, QuerySpec(offset=0, size=2))
        second = search_incidents(five_record_store.incidents, QuerySpec(offset=2, size=2))
        third = search_incidents(five_record_store.incidents, QuerySpec(offset=4, size=2))

        ids = [h.source.id for page in (first, second, third) for h in page.hits]
        assert ids == ["1", "2", "3", "4", "5"]

    def test_zero_size_uses_default_page(self, monkeypatch, five_record_store):
        monkeypatch.setattr("crime360.core.search_service.get_default_page_size", lambda: 3)
        response = search_incidents(five_record_store.incidents, QuerySpec(size=0))
        assert response.total == 5
        assert [h.source.id for h in response.hits] == ["1", "2", "3"]

    def test_negative_size_gives_empty_page(self, five_record_store):
        response = search_incidents(five_record_store.incidents, QuerySpec(size=-2))
        assert response.total == 5
        assert response.hits == []

    def test_negative_offset_is_clamped(self, five_record_store):
        response = search_incidents(five_record_store.incidents, QuerySpec(offset=-3, size=1))
        assert [h.source.id for h in response.hits] == ["1"]

    def test_default_page_size_from_config(self, monkeypatch):
        monkeypatch.setattr("crime360.core.search_service.get_default_page_size", lambda: 2)
        store = RecordStore([make_incident(str(i)) for i in range(1, 6)])

        response = search_incidents(store.incidents, QuerySpec())

        assert len(response.hits) == 2


class TestScoresAndTiming:

    def test_rank_decay(self):
        assert rank_scores(3) == [1.0, 0.9, 0.8]

    def test_rank_decay_floors_at_zero(self):
        scores = rank_scores(12)
        assert scores[10] == 0.0
        assert scores[11] == 0.0

    def test_hits_carry_qualified_ids_and_scores(self, seed_store):
        response = search_incidents(seed_store.incidents, QuerySpec(size=2))

        assert [hit.id for hit in response.hits] == ["mumbai:1", "mumbai:2"]
        assert [hit.score for hit in response.hits] == [1.0, 0.9]

    def test_took_ms_is_reported(self, seed_store):
        response = search_incidents(seed_store.incidents, QuerySpec())
        assert response.took_ms >= 0.0

    def test_store_is_not_mutated(self, seed_store):
        before = list(seed_store.incidents)
        search_incidents(seed_store.incidents, QuerySpec(sort=(SortSpec(IncidentField.CASE_NUMBER, SortOrder.DESC),)))
        assert list(seed_store.incidents) == before
