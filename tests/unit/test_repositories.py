"""Tests for repositories and the lookup service against an in-memory database."""

import duckdb
import pytest

from app.models.common import EmptyResult
from app.repositories import init_tables
from app.repositories.core import MpRepository, PostcodeRepository
from app.services.lookup import LookupService
from etl import Dataset, load_dataset


class TestPostcodeRepository:
    def test_rows_per_district(self, conn):
        rows = PostcodeRepository(conn=conn).get_lookup_rows(3002)
        assert [(r.postcode, r.district_id, r.district_name, r.mp_name) for r in rows] == [
            (3002, 1, "Melbourne", "A. Smith"),
            (3002, 2, "Richmond", "B. Jones"),
        ]

    def test_unassigned_postcode_has_null_district(self, conn):
        rows = PostcodeRepository(conn=conn).get_lookup_rows(3999)
        assert len(rows) == 1
        assert rows[0].district_id is None
        assert rows[0].mp_name is None

    def test_vacant_district(self, conn):
        rows = PostcodeRepository(conn=conn).get_lookup_rows(3056)
        assert rows[0].district_name == "Brunswick"
        assert rows[0].mp_name is None

    def test_unknown_postcode(self, conn):
        repo = PostcodeRepository(conn=conn)
        assert repo.get_lookup_rows(1234) == []


class TestMpRepository:
    def test_directory_rows_ordered_by_name(self, conn):
        rows = MpRepository(conn=conn).get_directory_rows()
        names = [r.mp_name for r in rows]
        assert names == sorted(names)
        assert names.count("A. Smith") == 4
        assert names.count("C. Brown") == 1

    def test_directory_rows_are_cached(self, conn):
        repo = MpRepository(conn=conn)
        first = repo.get_directory_rows()
        conn.execute("DELETE FROM postcode_district")
        assert repo.get_directory_rows() is first

        repo.refresh()
        assert all(r.postcode is None for r in repo.get_directory_rows())


class TestLookupService:
    def test_lookup(self, lookup_service):
        result = lookup_service.lookup(3002)
        assert result.postcode == 3002
        assert [(d.id, d.name, d.mp.name) for d in result.districts] == [
            (1, "Melbourne", "A. Smith"),
            (2, "Richmond", "B. Jones"),
        ]
        assert result.districts[0].mp.phone_number == "0312345678"

    def test_lookup_unassigned(self, lookup_service):
        assert lookup_service.lookup(3999).districts == []

    def test_lookup_unknown(self, lookup_service):
        with pytest.raises(EmptyResult):
            lookup_service.lookup(1234)

    def test_directory(self, lookup_service):
        result = lookup_service.directory()
        assert [mp.name for mp in result] == ["A. Smith", "B. Jones", "C. Brown"]

        smith, jones, brown = result
        assert smith.district.to_dict() == {
            "id": 1,
            "name": "Melbourne",
            "number": 1,
            "postcodes": [3000, 3002, 3003, 3051],
        }
        assert jones.district.postcodes == [3002, 3121]
        assert brown.district is None
        assert brown.phone_number is None

    def test_summary(self, lookup_service):
        summary = lookup_service.summary()
        assert summary.total_mps == 3
        assert summary.total_districts == 2
        assert summary.total_postcodes == 5

    def test_mp_holding_two_districts(self):
        mp = {"name": "A. Smith", "party": "ALP"}
        dataset = Dataset.model_validate(
            {
                "districts": [
                    {"districtId": 1, "name": "Melbourne", "mp": mp, "postcodes": [3000]},
                    {"districtId": 2, "name": "Carlton", "mp": mp, "postcodes": [3053]},
                ]
            }
        )
        conn = duckdb.connect(":memory:")
        init_tables(conn)
        load_dataset(conn, dataset)
        service = LookupService(postcode_repo=PostcodeRepository(conn=conn), mp_repo=MpRepository(conn=conn))

        assert [d.name for d in service.lookup(3053).districts] == ["Carlton"]
        (smith,) = service.directory()
        assert smith.district.name == "Melbourne"
        assert smith.district.postcodes == [3000, 3053]
        assert service.summary().total_postcodes == 2
        conn.close()
