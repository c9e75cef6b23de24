"""Tests for engine/compare.py — compare_guesses."""

from __future__ import annotations

import pytest

from filehunt.engine.compare import compare_guesses


class TestFirstGuess:
    @pytest.mark.parametrize("previous", [None, ""])
    def test_no_previous_guess_is_first(self, previous) -> None:
        assert compare_guesses("/home/docs/b.txt", previous, "/home/docs/z.txt") == "first"

    def test_first_even_when_guess_is_target(self) -> None:
        assert compare_guesses("/a/t.txt", None, "/a/t.txt") == "first"


class TestSameMethod:
    def test_alphabetical_closer(self) -> None:
        target = "/home/docs/m.txt"
        assert compare_guesses("/home/docs/k.txt", "/home/docs/a.txt", target) == "closer"

    def test_alphabetical_farther(self) -> None:
        target = "/home/docs/m.txt"
        assert compare_guesses("/home/docs/a.txt", "/home/docs/k.txt", target) == "farther"

    def test_alphabetical_same(self) -> None:
        target = "/home/docs/m.txt"
        assert compare_guesses("/home/docs/o.txt", "/home/docs/k.txt", target) == "same"

    def test_depth_closer(self) -> None:
        target = "/a/b/c/file.txt"
        assert compare_guesses("/x/y/file.txt", "/x/file.txt", target) == "closer"

    def test_depth_farther(self) -> None:
        target = "/a/b/c/file.txt"
        assert compare_guesses("/x/file.txt", "/x/y/file.txt", target) == "farther"

    def test_depth_same(self) -> None:
        target = "/a/b/c/file.txt"
        assert compare_guesses("/p/q/x.txt", "/r/s/y.txt", target) == "same"


class TestMixedMethods:
    def test_same_folder_beats_different_folder(self) -> None:
        target = "/a/b/c/file.txt"
        assert compare_guesses("/a/b/c/other.txt", "/x/file.txt", target) == "closer"

    def test_leaving_target_folder_is_farther(self) -> None:
        target = "/a/b/c/file.txt"
        assert compare_guesses("/x/file.txt", "/a/b/c/other.txt", target) == "farther"

    def test_alphabetical_wins_over_zero_depth_difference(self) -> None:
        # depth magnitude 0 vs alphabetical magnitude 25: alphabetical still wins
        target = "/a/b/c/a.txt"
        previous = "/x/y/z/a.txt"
        new = "/a/b/c/z.txt"
        assert compare_guesses(new, previous, target) == "closer"
        assert compare_guesses(previous, new, target) == "farther"
