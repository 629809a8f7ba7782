"""Tests for the search module."""

from pyonsdata.search import dataset_matches, filter_datasets, search_page


class TestDatasetMatches:
    """Tests for single-dataset matching."""

    DATASET = {"id": "cpih01", "title": "CPI Index", "description": "Consumer prices"}

    def test_matches_title(self):
        """Test a match on the title."""
        assert dataset_matches(self.DATASET, "index")

    def test_matches_description(self):
        """Test a match on the description."""
        assert dataset_matches(self.DATASET, "CONSUMER")

    def test_matches_id(self):
        """Test a match on the id."""
        assert dataset_matches(self.DATASET, "cpih")

    def test_no_match(self):
        """Test a term present in no field."""
        assert not dataset_matches(self.DATASET, "trade")

    def test_missing_fields_do_not_match(self):
        """Test that absent or null fields are skipped."""
        assert not dataset_matches({"id": "x", "description": None}, "y")
        assert dataset_matches({"id": "abc"}, "B")


class TestFilterDatasets:
    """Tests for filter_datasets."""

    def test_preserves_order(self, sample_datasets):
        """Test that matches are returned in their original order."""
        items = filter_datasets(sample_datasets["items"], "e", 10)
        assert [d["id"] for d in items] == ["cpih01", "trade", "wellbeing-quarterly"]

    def test_truncates_to_limit(self, sample_datasets):
        """Test that at most ``limit`` matches are returned."""
        assert len(filter_datasets(sample_datasets["items"], "e", 1)) == 1

    def test_zero_limit(self, sample_datasets):
        """Test that a zero limit returns nothing."""
        assert filter_datasets(sample_datasets["items"], "e", 0) == []


class TestSearchPage:
    """Tests for search_page."""

    def test_trade_query(self, sample_datasets):
        """Test that 'trade' finds only the Trade Balance dataset."""
        page = search_page(sample_datasets, "TrAdE", 10)
        assert [d["title"] for d in page["items"]] == ["Trade Balance"]
        assert page["count"] == 1
        assert page["total_count"] == 1

    def test_page_invariants(self, sample_datasets):
        """Test that count bounds hold for the result page."""
        page = search_page(sample_datasets, "", 2)
        assert len(page["items"]) <= page["limit"]
        assert len(page["items"]) <= page["count"] <= page["total_count"]
        assert page["offset"] == 0

    def test_empty_page(self):
        """Test searching a page with no items."""
        page = search_page({"items": []}, "trade", 5)
        assert page["items"] == []
        assert page["count"] == 0
