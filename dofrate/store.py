#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------------------------------------------------------------------------------------------------
# includes

# standards
import json
import logging
from os import makedirs, path
import pickle
import shelve
from threading import Lock

# dofrate
from .datastructures import RateReading

#----------------------------------------------------------------------------------------------------------------------------------
# keys

DATA_KEY = 'data'
FAVICON_KEY = 'favicon'
FLOOR_PRICE_KEY = 'precioMinimoPermitido'

#----------------------------------------------------------------------------------------------------------------------------------

class Store(object):
    """ Abstract base class for the key-value stores that hold the cached reading and its companions """

    def get(self, key):
        """
        Returns the value saved under `key`, or None if there isn't one.
        """
        raise NotImplementedError

    def put(self, key, value):
        """
        Saves `value` under `key`, replacing whatever was there.
        """
        raise NotImplementedError

    def close(self):
        """
        Closes any open resources such as file handles. The store will not be used after it has been closed.
        """

    def __enter__(self):
        return self

    def __exit__(self, *exception_info):
        self.close()

#----------------------------------------------------------------------------------------------------------------------------------

class ShelfStore(Store):
    """
    The default store, a `shelf` file on local disk. The HTTP server and the scheduler thread share one instance. Some dbm backends
    (sqlite3 on recent Pythons) only accept calls from the thread that opened them, so the shelf is opened for each get and put,
    under a lock. There is no transaction spanning several calls.
    """

    def __init__(self, file_path):
        self.file_path = file_path
        self.lock = Lock()
        with self._open():
            pass # creates the file, and fails early if it can't be

    def _open(self):
        return shelve.open(self.file_path, 'c', protocol=pickle.HIGHEST_PROTOCOL)

    @classmethod
    def build(cls, file_path):
        dir_path = path.dirname(file_path)
        if dir_path and not path.isdir(dir_path):
            makedirs(dir_path)
        return cls(file_path)

    def get(self, key):
        with self.lock, self._open() as db:
            return db.get(key)

    def put(self, key, value):
        with self.lock, self._open() as db:
            db[key] = value


class MemoryStore(Store):
    """
    Keeps everything in a dict. Useful for tests, and for runs where nothing needs to survive a restart.
    """

    def __init__(self, initial=None):
        self.lock = Lock()
        self.data = dict(initial or {})

    def get(self, key):
        with self.lock:
            return self.data.get(key)

    def put(self, key, value):
        with self.lock:
            self.data[key] = value

#----------------------------------------------------------------------------------------------------------------------------------
# the cached reading

def save_reading(store, reading):
    store.put(DATA_KEY, json.dumps(reading.to_json()))
    logging.info("Saved rate %s observed %s", reading.price, reading.observed_at.isoformat())


def load_reading(store):
    serialized = store.get(DATA_KEY)
    if serialized is None:
        return None
    return RateReading.from_json(json.loads(serialized))

#----------------------------------------------------------------------------------------------------------------------------------
