#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------------------------------------------------------------------------------------------------
# includes

# standards
from collections import namedtuple
from datetime import datetime
from decimal import Decimal

#----------------------------------------------------------------------------------------------------------------------------------

class RateReading(namedtuple('RateReading', ('value', 'observed_at'))):
    """
    One price, as it gets cached and served. `value` is a Decimal with 4 fractional digits, `observed_at` is the timezone-aware
    publication datetime taken from the feed.
    """

    __slots__ = ()

    @property
    def price(self):
        return format(self.value, 'f')

    def to_json(self):
        return {
            'precio': self.price,
            'ultimaAct': self.observed_at.isoformat(),
        }

    @classmethod
    def from_json(cls, data):
        return cls(
            value=Decimal(data['precio']),
            observed_at=datetime.fromisoformat(data['ultimaAct']),
        )

#----------------------------------------------------------------------------------------------------------------------------------

class UpdateResult(namedtuple('UpdateResult', ('status', 'price', 'reason'))):

    __slots__ = ()

    OK = 'ok'
    NOT_OK = 'no ok'

    @classmethod
    def ok(cls, price):
        return cls(cls.OK, price, None)

    @classmethod
    def failed(cls, reason, price=None):
        # `price` is set when something was written regardless, i.e. when the floor price was substituted
        return cls(cls.NOT_OK, price, reason)

    @property
    def is_ok(self):
        return self.status == self.OK

    def to_dict(self):
        if self.is_ok:
            return {'status': self.status, 'price': self.price}
        else:
            return {'status': self.status, 'reason': self.reason}

#----------------------------------------------------------------------------------------------------------------------------------
