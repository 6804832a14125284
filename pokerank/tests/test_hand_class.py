"""
Unit tests for hand categories, score ordering and descriptions.
"""

import pytest

from pokerank.card import Rank
from pokerank.evaluator import evaluate
from pokerank.hand_class import Category, HandClass, Ordering, classify, classify_hand, compare, describe


class TestClassify:
    """Test score to category mapping."""

    @pytest.mark.parametrize("score,category", [
        (1, Category.STRAIGHT_FLUSH),
        (10, Category.STRAIGHT_FLUSH),
        (11, Category.FOUR_OF_A_KIND),
        (166, Category.FOUR_OF_A_KIND),
        (167, Category.FULL_HOUSE),
        (322, Category.FULL_HOUSE),
        (323, Category.FLUSH),
        (1599, Category.FLUSH),
        (1600, Category.STRAIGHT),
        (1609, Category.STRAIGHT),
        (1610, Category.THREE_OF_A_KIND),
        (2467, Category.THREE_OF_A_KIND),
        (2468, Category.TWO_PAIR),
        (3325, Category.TWO_PAIR),
        (3326, Category.PAIR),
        (6185, Category.PAIR),
        (6186, Category.HIGH_CARD),
        (7462, Category.HIGH_CARD),
    ])
    def test_boundaries(self, score, category):
        """Test the first and last score of every category."""
        assert classify(score) is category

    @pytest.mark.parametrize("score", [0, -1, 7463, 100000])
    def test_out_of_range(self, score):
        """Test that scores outside [1, 7462] are rejected."""
        with pytest.raises(ValueError):
            classify(score)

    def test_non_integer(self):
        """Test that non-integer scores are rejected."""
        with pytest.raises(ValueError):
            classify(True)
        with pytest.raises(ValueError):
            classify(5.0)

    def test_monotonic(self):
        """Test that categories never get better as scores grow."""
        previous = classify(1)
        for score in range(2, 7463):
            category = classify(score)
            assert category >= previous
            previous = category


class TestCategory:
    """Test category metadata."""

    def test_sizes(self):
        """Test the number of hand classes in each category."""
        sizes = [len(category.score_range) for category in Category]
        assert sizes == [10, 156, 156, 1277, 10, 858, 858, 2860, 1277]
        assert sum(sizes) == 7462

    def test_ranges_are_contiguous(self):
        """Test that category ranges tile [1, 7462]."""
        scores = [score for category in Category for score in category.score_range]
        assert scores == list(range(1, 7463))

    def test_display_names(self):
        """Test human readable category names."""
        assert Category.STRAIGHT_FLUSH.display_name == "Straight Flush"
        assert str(Category.FOUR_OF_A_KIND) == "Four of a Kind"
        assert str(Category.HIGH_CARD) == "High Card"

    def test_order(self):
        """Test that better categories have smaller values."""
        assert Category.STRAIGHT_FLUSH < Category.FOUR_OF_A_KIND < Category.HIGH_CARD


class TestCompare:
    """Test score comparison."""

    def test_compare(self):
        """Test that the lower score is the winner."""
        assert compare(1, 7462) is Ordering.LESS
        assert compare(7462, 1) is Ordering.GREATER
        assert compare(322, 322) is Ordering.EQUAL

    def test_compare_results(self):
        """Test comparing evaluated hands directly."""
        quads = evaluate("As Ah Ad Ac Kh")
        flush = evaluate("As Ks 9s 7s 2s")
        assert compare(quads, flush) is Ordering.LESS
        assert compare(flush, quads) is Ordering.GREATER
        assert compare(flush, evaluate("Ad Kd 9d 7d 2d")) is Ordering.EQUAL
        assert compare(quads, flush.score) is Ordering.LESS

    def test_ordering_values(self):
        """Test ordering values."""
        assert Ordering.LESS == -1
        assert Ordering.EQUAL == 0
        assert Ordering.GREATER == 1


class TestDescribe:
    """Test hand descriptions."""

    @pytest.mark.parametrize("score,cards,expected", [
        (1, "As Ks Qs Js Ts", "Royal flush"),
        (10, "5s 4s 3s 2s As", "Straight flush, five-high"),
        (2, "Kh Qh Jh Th 9h", "Straight flush, king-high"),
        (11, "As Ah Ad Ac Kh", "Four of a kind, aces"),
        (200, "Jc Jd Jh 4s 4c", "Full house, jacks over fours"),
        (400, "Qh Jh 8h 6h 4h", "Flush, queen-high"),
        (1609, "5h 4d 3s 2c Ah", "Straight, five-high"),
        (1600, "As Kh Qd Jc Ts", "Straight, ace-high"),
        (2000, "7s 7h 7d Ac Kh", "Three of a kind, sevens"),
        (2468, "As Ah Kd Kc Qh", "Two pair, aces and kings"),
        (4000, "8s 8h Ad Kc Qh", "Pair, eights"),
        (7462, "7h 5d 4c 3h 2s", "High card, seven"),
    ])
    def test_describe(self, score, cards, expected):
        """Test the wording of each category."""
        assert describe(score, cards.split()) == expected

    def test_describe_rejects_bad_score(self):
        """Test that descriptions need a valid score."""
        with pytest.raises(ValueError):
            describe(0, "As Ks Qs Js Ts".split())


class TestClassifyHand:
    """Test the structured breakdown of hands."""

    def test_wheel(self):
        """Test that the wheel plays five-high."""
        for score, cards in ((10, "5s 4s 3s 2s As"), (1609, "5h 4d 3s 2c Ah")):
            hand_class = classify_hand(score, cards.split())
            assert hand_class.high_rank is Rank.FIVE
            assert hand_class.pair is None

    def test_royal_flush(self):
        """Test that a royal flush is an ace-high straight flush."""
        hand_class = classify_hand(1, "As Ks Qs Js Ts".split())
        assert hand_class == HandClass(Category.STRAIGHT_FLUSH, high_rank=Rank.ACE)
        assert hand_class.is_royal_flush()
        assert not classify_hand(2, "Kh Qh Jh Th 9h".split()).is_royal_flush()

    @pytest.mark.parametrize("score,cards,expected", [
        (11, "As Ah Ad Ac Kh", HandClass(Category.FOUR_OF_A_KIND, quads=Rank.ACE)),
        (200, "Jc Jd Jh 4s 4c", HandClass(Category.FULL_HOUSE, trips=Rank.JACK, pair=Rank.FOUR)),
        (400, "Qh Jh 8h 6h 4h", HandClass(Category.FLUSH, high_rank=Rank.QUEEN)),
        (2000, "7s 7h 7d Ac Kh", HandClass(Category.THREE_OF_A_KIND, trips=Rank.SEVEN)),
        (2468, "Kd Kc As Ah Qh", HandClass(Category.TWO_PAIR, first_pair=Rank.ACE, second_pair=Rank.KING)),
        (4000, "8s 8h Ad Kc Qh", HandClass(Category.PAIR, pair=Rank.EIGHT)),
        (7462, "7h 5d 4c 3h 2s", HandClass(Category.HIGH_CARD, high_rank=Rank.SEVEN)),
    ])
    def test_fields(self, score, cards, expected):
        """Test the ranks set for each category."""
        assert classify_hand(score, cards.split()) == expected

    def test_str(self):
        """Test that a breakdown prints as its description."""
        hand_class = classify_hand(200, "Jc Jd Jh 4s 4c".split())
        assert str(hand_class) == "Full house, jacks over fours"

    def test_from_result(self):
        """Test the breakdown of an evaluated seven card hand."""
        hand_class = evaluate("As Ah Kd Kc 7h 7s 2d").hand_class()
        assert hand_class.category is Category.TWO_PAIR
        assert (hand_class.first_pair, hand_class.second_pair) == (Rank.ACE, Rank.KING)
