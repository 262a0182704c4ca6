#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------------------------------------------------------------------------------------------------
# includes

# standards
import logging

# dofrate
from .config import DEFAULT_CONFIG
from .dates import parse_pub_date
from .datastructures import RateReading, UpdateResult
from .exceptions import DofRateException
from .extractor import extract_rate
from .floor import apply_floor, parse_floor
from .http import HttpClient
from .store import FLOOR_PRICE_KEY, save_reading

#----------------------------------------------------------------------------------------------------------------------------------

class RateUpdater(object):
    """
    Runs one update cycle: fetch the feed, pull out the rate and its date, apply the floor price, save. Everything the cycle
    needs is handed in here rather than looked up globally, so tests can pass a fake `client` and a `MemoryStore`.

    `client` only needs a `fetch_text(url)` method.
    """

    def __init__(self, store, config=DEFAULT_CONFIG, client=None):
        self.store = store
        self.config = config
        self.client = client if client is not None else HttpClient(config)

    def update(self):
        """
        Never raises a DofRateException: failures are logged and reported in the returned UpdateResult.
        """
        try:
            return self._update()
        except DofRateException as error:
            logging.warning("Rate not updated: %s", error)
            return UpdateResult.failed(str(error))

    def _update(self):
        floor = self.floor_price()
        logging.info("Floor price: %s", floor)
        xml_text = self.client.fetch_text(self.config.feed_url)
        raw = extract_rate(xml_text, self.config.item_marker)
        observed_at = parse_pub_date(raw.pub_date)
        decision = apply_floor(raw.value, floor)
        save_reading(self.store, RateReading(decision.price, observed_at))
        if decision.below_floor:
            reason = "Rate %s is below the floor price %s, saved the floor price instead" % (decision.value, decision.floor)
            logging.warning("%s", reason)
            return UpdateResult.failed(reason, price=format(decision.price, 'f'))
        return UpdateResult.ok(format(decision.price, 'f'))

    def floor_price(self):
        stored = self.store.get(FLOOR_PRICE_KEY)
        return parse_floor(stored if stored is not None else self.config.floor_price)

    def set_floor_price(self, price):
        floor = parse_floor(price)
        self.store.put(FLOOR_PRICE_KEY, format(floor, 'f'))
        return floor

    def release_resources(self):
        close = getattr(self.client, 'close', None)
        if close is not None:
            close()

#----------------------------------------------------------------------------------------------------------------------------------
