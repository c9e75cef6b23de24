"""Tests for engine/distance.py — calculate_distance."""

from __future__ import annotations

from filehunt.engine.distance import AlphabeticalDistance, DepthDistance, calculate_distance


class TestSameFolder:
    def test_identical_paths_are_zero(self) -> None:
        d = calculate_distance("/home/docs/report.pdf", "/home/docs/report.pdf")
        assert isinstance(d, AlphabeticalDistance)
        assert d.method == "alphabetical"
        assert d.magnitude == 0

    def test_first_letter_gap(self) -> None:
        d = calculate_distance("/home/docs/a.txt", "/home/docs/m.txt")
        assert d.method == "alphabetical"
        assert d.magnitude == 12

    def test_is_symmetric(self) -> None:
        a = calculate_distance("/home/docs/k.txt", "/home/docs/m.txt")
        b = calculate_distance("/home/docs/m.txt", "/home/docs/k.txt")
        assert a.magnitude == b.magnitude == 2

    def test_file_names_compared_case_insensitively(self) -> None:
        d = calculate_distance("/home/docs/Apple.txt", "/home/docs/apricot.txt")
        assert d.magnitude == 0

    def test_folder_compared_case_insensitively(self) -> None:
        d = calculate_distance("/Home/DOCS/b.txt", "/home/docs/d.txt")
        assert d.method == "alphabetical"
        assert d.magnitude == 2

    def test_carries_parents(self) -> None:
        d = calculate_distance("/home/docs/a.txt", "/home/docs/b.txt")
        assert d.guess_parent == "/home/docs"
        assert d.target_parent == "/home/docs"

    def test_only_first_character_counts(self) -> None:
        d = calculate_distance("/x/azzzz.txt", "/x/aaaaa.txt")
        assert d.magnitude == 0


class TestDifferentFolder:
    def test_depth_difference(self) -> None:
        d = calculate_distance("/x/file.txt", "/a/b/c/file.txt")
        assert isinstance(d, DepthDistance)
        assert d.method == "depth"
        assert d.magnitude == 2
        assert d.guess_depth == 1
        assert d.target_depth == 3

    def test_equal_depth_is_zero(self) -> None:
        d = calculate_distance("/a/b/x.txt", "/c/d/y.txt")
        assert d.method == "depth"
        assert d.magnitude == 0

    def test_deeper_guess_is_non_negative(self) -> None:
        d = calculate_distance("/a/b/c/d/e/x.txt", "/a/y.txt")
        assert d.magnitude == 4
