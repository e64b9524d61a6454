import pytest

from pagewalk import (
    CursorPage,
    ItemsPage,
    SequenceOptions,
    expected_pages,
    next_cursor,
    next_offset,
    next_page_number,
    paginate,
)


class TestNextPageNumber:
    def test_continues_until_total_is_covered(self):
        resolve = next_page_number(per_page=5)
        assert resolve({"count": 20}, 1) == 2
        assert resolve({"count": 20}, 3) == 4
        assert resolve({"count": 20}, 4) is None

    def test_partial_last_page_is_reached(self):
        resolve = next_page_number(per_page=5)
        assert resolve({"count": 21}, 4) == 5
        assert resolve({"count": 21}, 5) is None

    def test_empty_source_stops_after_first_page(self):
        resolve = next_page_number(per_page=5)
        assert resolve({"count": 0}, 1) is None

    def test_reads_count_attribute_from_models(self):
        resolve = next_page_number(per_page=2)
        assert resolve(ItemsPage[int](items=[1, 2], count=3), 1) == 2

    def test_custom_count_accessor(self):
        resolve = next_page_number(per_page=10, count=lambda result: result["meta"]["total"])
        assert resolve({"meta": {"total": 25}}, 2) == 3

    def test_missing_count_raises(self):
        resolve = next_page_number(per_page=5)
        with pytest.raises(KeyError):
            resolve({"items": []}, 1)

    def test_invalid_per_page(self):
        with pytest.raises(ValueError, match="per_page must be >= 1"):
            next_page_number(per_page=0)


class TestNextOffset:
    def test_advances_by_limit(self):
        resolve = next_offset(limit=10)
        assert resolve({"count": 25}, 0) == 10
        assert resolve({"count": 25}, 10) == 20
        assert resolve({"count": 25}, 20) is None

    def test_custom_total_accessor(self):
        resolve = next_offset(limit=3, total=lambda result: result["total"])
        assert resolve({"total": 4}, 0) == 3

    def test_invalid_limit(self):
        with pytest.raises(ValueError, match="limit must be >= 1"):
            next_offset(limit=0)


class TestNextCursor:
    def test_returns_cursor_from_payload(self):
        resolve = next_cursor()
        assert resolve({"next_cursor": "abc"}, None) == "abc"

    def test_empty_cursor_is_the_end(self):
        resolve = next_cursor()
        assert resolve({"next_cursor": ""}, "abc") is None
        assert resolve(CursorPage[int](items=[1]), "abc") is None

    def test_custom_cursor_accessor(self):
        resolve = next_cursor(cursor=lambda result: result["links"].get("next"))
        assert resolve({"links": {"next": "/items?after=9"}}, None) == "/items?after=9"
        assert resolve({"links": {}}, "/items?after=9") is None


class TestExpectedPages:
    @pytest.mark.parametrize(
        "total, per_page, pages",
        [(20, 5, 4), (21, 5, 5), (0, 5, 1), (1, 1, 1)],
    )
    def test_expected_pages(self, total, per_page, pages):
        assert expected_pages(total, per_page) == pages

    def test_invalid_per_page(self):
        with pytest.raises(ValueError):
            expected_pages(10, 0)


class TestCursorWalk:
    async def test_last_page_without_cursor_key_ends_the_walk(self):
        payloads = {None: {"items": [1], "next_cursor": "b"}, "b": {"items": [2]}}

        async def fetch(cursor):
            return payloads[cursor]

        pages = await paginate(fetch, SequenceOptions(initial_page=None, get_next_page=next_cursor())).all()
        assert [page["items"] for page in pages] == [[1], [2]]

    def test_object_without_cursor_attribute_ends_the_walk(self):
        assert next_cursor()(ItemsPage[int](items=[1], count=1), "a") is None
