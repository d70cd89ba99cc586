import unittest
from datetime import date, datetime, timezone
from types import SimpleNamespace

from app.services.table_data import (
    PaginationConfig,
    SortConfig,
    calculate_total_pages,
    compare_values,
    filter_data,
    generate_pagination_range,
    paginate_data,
    process_table,
    sort_data,
)

ROWS = [
    {"name": "Ali", "status": "pending", "amount": 50, "recurring": True, "areas": ["teaching", "events"]},
    {"name": "Sara", "status": "completed", "amount": 120, "recurring": False, "areas": ["events"]},
    {"name": "Émile", "status": "failed", "amount": 5, "recurring": False, "areas": []},
    {"name": "bilal", "status": "pending", "amount": None, "recurring": True, "areas": ["fundraising"]},
]


class FilterDataTests(unittest.TestCase):
    def test_search_matches_searchable_fields_case_insensitively(self):
        data = [{"name": "Ali", "status": "pending"}, {"name": "Sara", "status": "completed"}]
        self.assertEqual(filter_data(data, "ali", {}, ["name"]), [{"name": "Ali", "status": "pending"}])

    def test_no_search_and_no_filters_keeps_everything(self):
        result = filter_data(ROWS, "", {}, ["name"])
        self.assertEqual(result, ROWS)
        self.assertIsNot(result, ROWS)

    def test_none_or_empty_input_yields_empty_list(self):
        self.assertEqual(filter_data(None, "x", {}, ["name"]), [])
        self.assertEqual(filter_data([], "", {"status": "pending"}, ["name"]), [])

    def test_search_ignores_fields_outside_searchable_list(self):
        self.assertEqual(filter_data(ROWS, "pending", {}, ["name"]), [])

    def test_string_filter_is_exact_or_substring(self):
        names = [r["name"] for r in filter_data(ROWS, "", {"status": "PEND"}, ["name"])]
        self.assertEqual(names, ["Ali", "bilal"])

    def test_boolean_filter_parses_true_and_false(self):
        on = [r["name"] for r in filter_data(ROWS, "", {"recurring": "true"}, [])]
        off = [r["name"] for r in filter_data(ROWS, "", {"recurring": "false"}, [])]
        self.assertEqual(on, ["Ali", "bilal"])
        self.assertEqual(off, ["Sara", "Émile"])

    def test_list_filter_checks_containment(self):
        names = [r["name"] for r in filter_data(ROWS, "", {"areas": "events"}, [])]
        self.assertEqual(names, ["Ali", "Sara"])

    def test_missing_value_never_matches_non_empty_filter(self):
        self.assertEqual(filter_data(ROWS, "", {"amount": "120"}, []), [ROWS[1]])
        self.assertEqual(filter_data([{"name": "x"}], "", {"status": "x"}, []), [])

    def test_empty_filter_values_and_search_key_are_skipped(self):
        result = filter_data(ROWS, "", {"status": "", "search": "zzz"}, ["name"])
        self.assertEqual(len(result), len(ROWS))

    def test_does_not_mutate_input(self):
        data = list(ROWS)
        filter_data(data, "a", {"status": "pending"}, ["name"])
        self.assertEqual(data, ROWS)

    def test_objects_are_read_through_attributes(self):
        data = [SimpleNamespace(title="Quran Learning"), SimpleNamespace(title="Food Bank")]
        result = filter_data(data, "quran", None, ["title"])
        self.assertEqual([r.title for r in result], ["Quran Learning"])


    def test_search_reads_lists_as_comma_joined_text(self):
        data = [{"instructors": ["Ali", "Omar"]}, {"instructors": ["Sara"]}]
        self.assertEqual(filter_data(data, "ali,omar", {}, ["instructors"]), [data[0]])
        self.assertEqual(filter_data(data, "[", {}, ["instructors"]), [])
        self.assertEqual(filter_data(data, "'", {}, ["instructors"]), [])

    def test_whole_floats_read_without_fraction(self):
        data = [{"score": 5.0}, {"score": 2.5}]
        self.assertEqual(filter_data(data, "5", {}, ["score"]), [data[0], data[1]])
        self.assertEqual(filter_data(data, "5.0", {}, ["score"]), [])
        self.assertEqual(filter_data(data, "", {"score": "5"}, ["score"]), [data[0], data[1]])

class SortDataTests(unittest.TestCase):
    def test_none_config_returns_input_unchanged(self):
        self.assertIs(sort_data(ROWS, None), ROWS)
        self.assertIsNone(sort_data(None, SortConfig("name")))

    def test_strings_sort_accent_and_case_insensitively(self):
        names = [r["name"] for r in sort_data(ROWS, SortConfig("name", "asc"))]
        self.assertEqual(names, ["Ali", "bilal", "Émile", "Sara"])

    def test_numbers_sort_numerically_with_none_first(self):
        amounts = [r["amount"] for r in sort_data(ROWS, SortConfig("amount", "asc"))]
        self.assertEqual(amounts, [None, 5, 50, 120])

    def test_descending_puts_none_last(self):
        amounts = [r["amount"] for r in sort_data(ROWS, SortConfig("amount", "desc"))]
        self.assertEqual(amounts, [120, 50, 5, None])

    def test_desc_reverses_asc_for_distinct_keys(self):
        asc = sort_data(ROWS, SortConfig("name", "asc"))
        desc = sort_data(asc, SortConfig("name", "desc"))
        self.assertEqual(desc, list(reversed(asc)))

    def test_numeric_looking_strings_sort_as_text(self):
        data = [{"v": "10"}, {"v": "9"}, {"v": "100"}]
        self.assertEqual([r["v"] for r in sort_data(data, SortConfig("v"))], ["10", "100", "9"])

    def test_dates_sort_by_instant(self):
        data = [
            {"d": date(2023, 6, 15)},
            {"d": datetime(2023, 1, 1, tzinfo=timezone.utc)},
            {"d": date(2022, 12, 31)},
        ]
        result = [r["d"] for r in sort_data(data, SortConfig("d"))]
        self.assertEqual(result, [date(2022, 12, 31), datetime(2023, 1, 1, tzinfo=timezone.utc), date(2023, 6, 15)])

    def test_date_against_date_string_compares_by_instant(self):
        self.assertEqual(compare_values(date(2023, 5, 1), "2023-04-30"), 1)
        self.assertEqual(compare_values("2023-05-01T00:00:00Z", datetime(2023, 5, 1, tzinfo=timezone.utc)), 0)

    def test_booleans_sort_false_first(self):
        flags = [r["recurring"] for r in sort_data(ROWS, SortConfig("recurring"))]
        self.assertEqual(flags, [False, False, True, True])

    def test_number_against_numeric_string_compares_numerically(self):
        self.assertEqual(compare_values(9, "10"), -1)
        self.assertEqual(compare_values("2.5", 2.5), 0)

    def test_incomparable_values_are_equal(self):
        self.assertEqual(compare_values({"a": 1}, [1]), 0)

    def test_sort_returns_new_list(self):
        data = list(ROWS)
        result = sort_data(data, SortConfig("name", "desc"))
        self.assertIsNot(result, data)
        self.assertEqual(data, ROWS)


class PaginationTests(unittest.TestCase):
    def test_second_page_of_two(self):
        self.assertEqual(paginate_data([1, 2, 3, 4, 5], PaginationConfig(current_page=2, page_size=2)), [3, 4])

    def test_out_of_range_and_invalid_pages_are_empty(self):
        self.assertEqual(paginate_data([1, 2, 3], PaginationConfig(current_page=5, page_size=2)), [])
        self.assertEqual(paginate_data([1, 2, 3], PaginationConfig(current_page=0, page_size=2)), [])
        self.assertEqual(paginate_data([1, 2, 3], PaginationConfig(current_page=1, page_size=0)), [])
        self.assertEqual(paginate_data(None, PaginationConfig()), [])

    def test_pages_reconstruct_sequence(self):
        data = list(range(23))
        for size in (1, 4, 7, 23, 50):
            pages = calculate_total_pages(len(data), size)
            rebuilt = []
            for page in range(1, pages + 1):
                rebuilt.extend(paginate_data(data, PaginationConfig(current_page=page, page_size=size)))
            self.assertEqual(rebuilt, data)

    def test_total_pages_is_at_least_one(self):
        self.assertEqual(calculate_total_pages(0, 10), 1)
        self.assertEqual(calculate_total_pages(10, 10), 1)
        self.assertEqual(calculate_total_pages(11, 10), 2)
        self.assertEqual(calculate_total_pages(5, 0), 1)

    def test_pagination_range_windows(self):
        self.assertEqual(generate_pagination_range(1, 3), [1, 2, 3])
        self.assertEqual(generate_pagination_range(4, 5), [1, 2, 3, 4, 5])
        self.assertEqual(generate_pagination_range(1, 10), [1, 2, 3, 4, 10])
        self.assertEqual(generate_pagination_range(3, 10), [1, 2, 3, 4, 10])
        self.assertEqual(generate_pagination_range(10, 10), [1, 7, 8, 9, 10])
        self.assertEqual(generate_pagination_range(8, 10), [1, 7, 8, 9, 10])
        self.assertEqual(generate_pagination_range(5, 10), [1, 4, 5, 6, 10])


class ProcessTableTests(unittest.TestCase):
    def test_filter_sort_and_page_together(self):
        result = process_table(
            ROWS,
            filters={"status": "pending"},
            searchable_fields=["name"],
            sort_config=SortConfig("name", "desc"),
            pagination=PaginationConfig(current_page=1, page_size=1),
        )
        self.assertEqual([r["name"] for r in result["rows"]], ["bilal"])
        self.assertEqual(result["total"], 2)
        self.assertEqual(result["total_pages"], 2)
        self.assertEqual(result["page_range"], [1, 2])

    def test_empty_input_reports_single_page(self):
        result = process_table(None)
        self.assertEqual(result["rows"], [])
        self.assertEqual(result["total"], 0)
        self.assertEqual(result["total_pages"], 1)
        self.assertEqual(result["page_range"], [1])

    def test_custom_accessor(self):
        data = [("b", 2), ("a", 1)]
        result = process_table(
            data,
            sort_config=SortConfig("key"),
            accessor=lambda record, field: record[0] if field == "key" else None,
        )
        self.assertEqual(result["rows"], [("a", 1), ("b", 2)])


if __name__ == "__main__":
    unittest.main()
