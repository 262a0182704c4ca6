#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------------------------------------------------------------------------------------------------
# includes

# standards
from collections import namedtuple
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

# dofrate
from .exceptions import ConfigurationError

#----------------------------------------------------------------------------------------------------------------------------------

PRICE_QUANTUM = Decimal('0.0001')

FloorDecision = namedtuple('FloorDecision', (
    'price',       # what gets persisted
    'value',       # what the feed said
    'floor',
    'below_floor', # True when `price` is the floor rather than `value`
))

#----------------------------------------------------------------------------------------------------------------------------------

def to_price(value):
    """
    Converts a string or number to a Decimal with exactly 4 fractional digits, rounding half up. Raises ValueError unless the input
    is a finite, non-negative number.

    >>> to_price(' 17.06451 ')
    Decimal('17.0645')
    >>> to_price(17)
    Decimal('17.0000')
    """
    if isinstance(value, str):
        value = value.strip()
    try:
        price = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ValueError("Not a number: %r" % (value,))
    if not price.is_finite() or price < 0:
        raise ValueError("Not a valid price: %r" % (value,))
    try:
        return price.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP).copy_abs()
    except InvalidOperation:
        raise ValueError("Price out of range: %r" % (value,))


def parse_floor(value):
    try:
        return to_price(value)
    except ValueError as error:
        raise ConfigurationError("Invalid floor price %r" % (value,), reason=error)


def apply_floor(value, floor):
    value = to_price(value)
    floor = parse_floor(floor)
    if value < floor:
        return FloorDecision(floor, value, floor, True)
    else:
        return FloorDecision(value, value, floor, False)

#----------------------------------------------------------------------------------------------------------------------------------
