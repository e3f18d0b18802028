import pytest

from shared.pagination import DEFAULT_PAGE_SIZE, Page, split_terms, truncate


class TestPage:
    @pytest.mark.parametrize("page", [None, 0, -5, 1])
    def test_pages_below_one_behave_as_first_page(self, page):
        normalised = Page.from_query(page, None)
        assert normalised.page == 1
        assert normalised.offset == 0

    def test_limit_defaults_to_twenty(self):
        assert Page.from_query(2, None).limit == DEFAULT_PAGE_SIZE == 20
        assert Page.from_query(2, 0).limit == 20

    def test_offset_is_zero_based(self):
        assert Page.from_query(3, 10).offset == 20

    def test_meta_rounds_total_pages_up(self):
        meta = Page.from_query(2, 10).meta(21)
        assert meta == {
            "currentPage": 2,
            "currentPageSize": 10,
            "totalPages": 3,
            "totalRecords": 21,
        }

    def test_meta_for_empty_result(self):
        assert Page.from_query(1, 20).meta(0)["totalPages"] == 0


class TestTruncate:
    def test_default_length_is_200(self):
        assert len(truncate("x" * 500)) == 200

    def test_custom_length(self):
        assert truncate("abcdef", 3) == "abc"

    def test_none_stays_none(self):
        assert truncate(None, 10) is None


class TestSplitTerms:
    def test_splits_on_spaces_and_commas(self):
        assert split_terms("red, blue  shirt,,hat") == ["red", "blue", "shirt", "hat"]

    def test_blank_query_has_no_terms(self):
        assert split_terms("  , ") == []
        assert split_terms(None) == []
