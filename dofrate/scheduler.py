#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------------------------------------------------------------------------------------------------
# includes

# standards
import logging
from threading import Event, Thread

#----------------------------------------------------------------------------------------------------------------------------------

class UpdateScheduler(Thread):
    """
    Stoppable thread that runs an update cycle as soon as it starts, then every `interval_seconds`. Outcomes are only logged.
    """

    def __init__(self, updater, interval_seconds):
        super(UpdateScheduler, self).__init__(name='UpdateScheduler')
        self.daemon = True
        self.updater = updater
        self.interval_seconds = interval_seconds
        self.stop_event = Event()
        self.num_ticks = 0

    def run(self):
        while not self.stop_event.is_set():
            self.tick()
            self.stop_event.wait(self.interval_seconds)

    def tick(self):
        self.num_ticks += 1
        try:
            result = self.updater.update()
        except Exception: # pylint: disable=broad-except
            # the updater already turns pipeline errors into results; this is for anything else, e.g. a broken store
            logging.exception("Scheduled update crashed")
            return None
        if result.is_ok:
            logging.info("Rate updated: %s", result.price)
        else:
            logging.error("Update failed: %s", result.reason)
        return result

    def stop(self):
        self.stop_event.set()
        if self.is_alive():
            self.join()

#----------------------------------------------------------------------------------------------------------------------------------
