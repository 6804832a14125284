"""
Constants shared by the table builder, the evaluators and the classifier.

Scores run from 1 (royal flush) to 7462 (7-5-4-3-2 offsuit); each hand
category owns a contiguous range ending at its WORST_* value.
"""

# Prime assigned to each rank ordinal (2=0, 3=1, ..., A=12)
PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)

# Rank ordinals, highest first
RANKS_DESCENDING = tuple(range(12, -1, -1))

NUM_RANKS = 13
NUM_SUITS = 4
HAND_SIZE = 5
MIN_HAND_SIZE = 5
MAX_HAND_SIZE = 7

# Worst score of each category
WORST_STRAIGHT_FLUSH = 10
WORST_FOUR_OF_A_KIND = 166
WORST_FULL_HOUSE = 322
WORST_FLUSH = 1599
WORST_STRAIGHT = 1609
WORST_THREE_OF_A_KIND = 2467
WORST_TWO_PAIR = 3325
WORST_PAIR = 6185
WORST_HIGH_CARD = 7462

BEST_SCORE = 1
WORST_SCORE = WORST_HIGH_CARD
NUM_HAND_CLASSES = WORST_HIGH_CARD

# Rank masks of the ten straights, best first; the wheel (A2345) is last
STRAIGHTS = (
    0b1_1111_0000_0000,  # TJQKA
    0b0_1111_1000_0000,  # 9TJQK
    0b0_0111_1100_0000,  # 89TJQ
    0b0_0011_1110_0000,  # 789TJ
    0b0_0001_1111_0000,  # 6789T
    0b0_0000_1111_1000,  # 56789
    0b0_0000_0111_1100,  # 45678
    0b0_0000_0011_1110,  # 34567
    0b0_0000_0001_1111,  # 23456
    0b1_0000_0000_1111,  # A2345
)

# Table sizes
NUM_RANK_MASKS = 1287  # C(13, 5)
NUM_MULTIPLES = 4888  # quads + full houses + trips + two pair + pairs

# Card bit layout
RANK_BIT_SHIFT = 16
SUIT_BIT_SHIFT = 12
RANK_ORDINAL_SHIFT = 8
RANK_MASK_BITS = 0x1FFF
SUIT_MASK_BITS = 0xF
PRIME_BITS = 0xFF
