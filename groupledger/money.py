# groupledger/money.py
import math

# One cent. Anything within this of zero counts as settled.
EPSILON = 0.01


def is_settled(value):
    return -EPSILON <= value <= EPSILON


def round_cents(value):
    """Round to two decimals, halves away from zero (same as JS Math.round on cents)."""
    cents = math.floor(abs(value) * 100 + 0.5)
    return math.copysign(cents, value) / 100


def to_cents(value):
    return int(round_cents(value) * 100 + math.copysign(0.5, value))
