#!/usr/bin/env python3

import itertools
import unittest

from solver.engine import (Candidate, SortMode, find_candidates,
                           format_results, solve, solve_to_text,
                           sort_candidates)
from solver.filters import WordFilters


class TestFindCandidates(unittest.TestCase):
    def test_keeps_dictionary_order(self) -> None:
        candidates = find_candidates(["CAT", "ACT", "DOG"], "TAC")
        self.assertEqual([Candidate("CAT", 5), Candidate("ACT", 5)], candidates)

    def test_duplicates_are_reported_each_time(self) -> None:
        candidates = find_candidates(["CAT", "CAT"], "TAC")
        self.assertEqual(2, len(candidates))

    def test_keeps_word_text_as_stored(self) -> None:
        self.assertEqual([Candidate("cat", 5)], find_candidates(["cat"], "TAC"))

    def test_filters_applied_before_rack(self) -> None:
        filters = WordFilters(ends_with="INGS")
        self.assertEqual([], find_candidates(["GO"], "GO", filters))

    def test_empty_rack_and_dictionary(self) -> None:
        self.assertEqual([], find_candidates(["CAT"], ""))
        self.assertEqual([], find_candidates([], "CAT?"))

    def test_dictionary_is_not_modified(self) -> None:
        dictionary = ("DOG", "CAT")
        find_candidates(dictionary, "CATDOG")
        self.assertEqual(("DOG", "CAT"), dictionary)


class TestSortCandidates(unittest.TestCase):
    CANDIDATES = [Candidate("ZA", 11), Candidate("TEAS", 4), Candidate("EAT", 3),
                  Candidate("DE", 3), Candidate("AT", 2), Candidate("TA", 2)]

    def test_points_ascending_then_length_then_alphabetical(self) -> None:
        ordered = sort_candidates(self.CANDIDATES, SortMode.POINTS)
        self.assertEqual(["AT", "TA", "DE", "EAT", "TEAS", "ZA"],
                         [c.word for c in ordered])

    def test_length_ascending_then_alphabetical(self) -> None:
        ordered = sort_candidates(self.CANDIDATES, SortMode.LENGTH)
        self.assertEqual(["AT", "DE", "TA", "ZA", "EAT", "TEAS"],
                         [c.word for c in ordered])

    def test_unset_and_missing_mode_sort_by_points(self) -> None:
        by_points = sort_candidates(self.CANDIDATES, SortMode.POINTS)
        self.assertEqual(by_points, sort_candidates(self.CANDIDATES, SortMode.UNSET))
        self.assertEqual(by_points, sort_candidates(self.CANDIDATES))

    def test_order_does_not_depend_on_input_order(self) -> None:
        for mode in (SortMode.POINTS, SortMode.LENGTH):
            expected = sort_candidates(self.CANDIDATES, mode)
            for shuffled in itertools.islice(itertools.permutations(self.CANDIDATES), 50):
                self.assertEqual(expected, sort_candidates(shuffled, mode))

    def test_first_differing_letter_decides(self) -> None:
        ordered = sort_candidates([Candidate("ATE", 3), Candidate("AET", 3)])
        self.assertEqual(["AET", "ATE"], [c.word for c in ordered])


class TestFormatResults(unittest.TestCase):
    def test_no_results(self) -> None:
        self.assertEqual("No results", format_results([]))

    def test_lines_without_trailing_separator(self) -> None:
        text = format_results([Candidate("ACT", 5), Candidate("QUIZ", 22)])
        self.assertEqual("ACT (5)\r\nQUIZ (22)", text)


class TestSolve(unittest.TestCase):
    def test_same_letters_tie_broken_alphabetically(self) -> None:
        text = solve_to_text(["CAT", "ACT", "DOG"], "TAC", mode=SortMode.POINTS)
        self.assertEqual("ACT (5)\r\nCAT (5)", text)

    def test_blank_scores_nothing(self) -> None:
        self.assertEqual([Candidate("CAT", 4)], solve(["CAT"], "CA?"))

    def test_filters_and_sorting(self) -> None:
        dictionary = ["TEA", "EAT", "ATE", "TEAS", "SEAT", "EATS"]
        filters = WordFilters(starts_with="e", contains="AT")
        self.assertEqual("EAT (3)\r\nEATS (4)",
                         solve_to_text(dictionary, "SEAT", filters))

    def test_nothing_matches(self) -> None:
        self.assertEqual("No results", solve_to_text(["QUIZ"], "ABC"))
