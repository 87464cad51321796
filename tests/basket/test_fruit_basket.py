"""Tests for the fruit basket and color searchers."""

import io

import pytest

from solid_app.basket import (
    BasketSearcher,
    ColorSearcher,
    CoupledColorSearcher,
    FruitBasket,
    FruitItem,
)


class TestFruitBasket:
    """Test the low-level basket"""

    def test_search_returns_matches_in_insertion_order(self, fruit_basket):
        """Test that all and only matching fruit are returned, in order"""
        assert fruit_basket.search_by_color("red") == ["apple", "cherry"]
        assert fruit_basket.search_by_color("green") == ["grape"]

    def test_search_missing_color_is_empty(self, fruit_basket):
        """Test that an absent color yields an empty list, not an error"""
        assert fruit_basket.search_by_color("blue") == []

    def test_search_is_case_sensitive(self, fruit_basket):
        """Test exact color matching"""
        assert fruit_basket.search_by_color("Red") == []

    def test_empty_basket(self):
        """Test searching a basket with nothing in it"""
        basket = FruitBasket()
        assert len(basket) == 0
        assert basket.search_by_color("red") == []

    def test_items_preserve_order(self, fruit_basket):
        """Test that stored items keep insertion order"""
        assert fruit_basket.items == (
            FruitItem("apple", "red"),
            FruitItem("grape", "green"),
            FruitItem("cherry", "red"),
        )
        assert len(fruit_basket) == 3

    def test_items_view_is_read_only(self, fruit_basket):
        """Test that callers cannot mutate the basket through items"""
        items = fruit_basket.items
        with pytest.raises(AttributeError):
            items.append(FruitItem("lime", "green"))

    def test_duplicate_entries_kept(self):
        """Test that the same fruit can be added twice"""
        basket = FruitBasket()
        basket.add_to_basket("apple", "red")
        basket.add_to_basket("apple", "red")
        assert basket.search_by_color("red") == ["apple", "apple"]

    def test_basket_is_a_searcher(self):
        """Test that the basket implements the abstract search capability"""
        assert isinstance(FruitBasket(), BasketSearcher)

    def test_searcher_cannot_be_instantiated(self):
        """Test that the abstraction has no concrete behavior"""
        with pytest.raises(TypeError):
            BasketSearcher()


class TestColorSearcher:
    """Test the high-level searcher"""

    def test_prints_found_lines(self, fruit_basket, capsys):
        """Test that one line per match is printed to stdout"""
        found = ColorSearcher().list_color(fruit_basket, "red")

        assert found == ["apple", "cherry"]
        assert capsys.readouterr().out == "Found apple\nFound cherry\n"

    def test_no_match_prints_nothing(self, fruit_basket, capsys):
        """Test that a missing color produces no output"""
        assert ColorSearcher().list_color(fruit_basket, "purple") == []
        assert capsys.readouterr().out == ""

    def test_custom_stream(self, fruit_basket):
        """Test printing to an explicit stream"""
        stream = io.StringIO()
        ColorSearcher().list_color(fruit_basket, "green", stream=stream)
        assert stream.getvalue() == "Found grape\n"

    def test_works_with_any_searcher(self, capsys):
        """Test that the searcher only depends on the abstraction"""

        class FixedSearcher(BasketSearcher):
            def search_by_color(self, color):
                return [f"{color} thing"]

        found = ColorSearcher().list_color(FixedSearcher(), "blue")

        assert found == ["blue thing"]
        assert capsys.readouterr().out == "Found blue thing\n"


class TestCoupledColorSearcher:
    """Test the counterexample searcher"""

    def test_same_output_as_color_searcher(self, fruit_basket):
        """Test that coupling changes structure, not output"""
        coupled, decoupled = io.StringIO(), io.StringIO()

        CoupledColorSearcher().list_color(fruit_basket, "red", stream=coupled)
        ColorSearcher().list_color(fruit_basket, "red", stream=decoupled)

        assert coupled.getvalue() == decoupled.getvalue()
