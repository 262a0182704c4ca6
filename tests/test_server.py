#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------------------------------------------------------------------------------------------------
# includes

# standards
from datetime import datetime, timezone
from decimal import Decimal
import json
import unittest

# dofrate
from dofrate import MemoryStore, RateConfig, RateReading, RateUpdater, create_app, load_reading, save_reading
from dofrate.store import FAVICON_KEY

# tests
from .plumbing import FakeClient, build_feed

#----------------------------------------------------------------------------------------------------------------------------------

CANONICAL_PATH = '/MX/tc_barmesa/_tipo-de-cambio.html'
JSON_PATH = '/MX/tc_barmesa/_tipo-de-cambio.json'

READING = RateReading(Decimal('17.5000'), datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc))

CONFIG = RateConfig.from_kwargs({'floor_price': '17.0000'})

#----------------------------------------------------------------------------------------------------------------------------------

class ServerTests(unittest.TestCase):

    feed_text = None
    reading = READING

    def setUp(self):
        self.store = MemoryStore()
        if self.reading is not None:
            save_reading(self.store, self.reading)
        updater = RateUpdater(self.store, CONFIG, client=FakeClient(self.feed_text))
        self.app = create_app(self.store, updater, CONFIG)
        self.client = self.app.test_client()

    def get(self, path, **kwargs):
        return self.client.get(path, **kwargs)


class ReadingTests(ServerTests):

    def test_canonical_path_serves_html(self):
        response = self.get(CANONICAL_PATH)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.mimetype, 'text/html')
        self.assertIn(b'17.5000', response.data)
        self.assertIn(b'01/01/2024', response.data)
        self.assertEqual(response.headers['Last-Modified'], 'Mon, 01 Jan 2024 12:00:00 GMT')

    def test_json_path_serves_cached_reading(self):
        response = self.get(JSON_PATH)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.mimetype, 'application/json')
        self.assertEqual(
            response.get_json(),
            {'precio': '17.5000', 'ultimaAct': '2024-01-01T12:00:00+00:00'},
        )

    def test_json_round_trip(self):
        response = self.get(JSON_PATH)
        self.assertEqual(RateReading.from_json(json.loads(response.data.decode('UTF-8'))), READING)

    def test_query_string_is_ignored(self):
        self.assertEqual(self.get(JSON_PATH + '?v=2').status_code, 200)

    def test_not_modified_when_cache_is_not_newer(self):
        for since in ('Mon, 01 Jan 2024 12:00:00 GMT', 'Tue, 02 Jan 2024 00:00:00 GMT'):
            for path in (CANONICAL_PATH, JSON_PATH):
                response = self.get(path, headers={'If-Modified-Since': since})
                self.assertEqual(response.status_code, 304)
                self.assertEqual(response.data, b'')
                self.assertEqual(response.headers['Cache-Control'], 'no-store')
                self.assertEqual(response.headers['Vary'], 'Accept-Encoding')

    def test_conditional_get_with_own_last_modified(self):
        last_modified = self.get(CANONICAL_PATH).headers['Last-Modified']
        response = self.get(CANONICAL_PATH, headers={'If-Modified-Since': last_modified})
        self.assertEqual(response.status_code, 304)

    def test_modified_when_cache_is_newer(self):
        response = self.get(CANONICAL_PATH, headers={'if-modified-since': 'Sun, 31 Dec 2023 12:00:00 GMT'})
        self.assertEqual(response.status_code, 200)

    def test_malformed_if_modified_since_is_ignored(self):
        response = self.get(JSON_PATH, headers={'If-Modified-Since': 'last tuesday'})
        self.assertEqual(response.status_code, 200)


class EmptyCacheTests(ServerTests):

    reading = None

    def test_reading_paths_are_503(self):
        self.assertEqual(self.get(CANONICAL_PATH).status_code, 503)
        self.assertEqual(self.get(JSON_PATH).status_code, 503)


class RoutingTests(ServerTests):

    def test_non_get_is_405(self):
        for method in ('POST', 'PUT', 'DELETE', 'HEAD', 'OPTIONS'):
            for path in (CANONICAL_PATH, '/actualizar', '/unknown'):
                response = self.client.open(path, method=method)
                self.assertEqual(response.status_code, 405)
                self.assertEqual(response.headers['Allow'], 'GET')

    def test_non_get_does_not_trigger_an_update(self):
        self.client.post('/actualizar')
        self.assertEqual(load_reading(self.store), READING)

    def test_unknown_path_is_403(self):
        for path in ('/MX', '/MX/tc_barmesa/', '/robots.txt', CANONICAL_PATH + 'x', '/static/app.js'):
            self.assertEqual(self.get(path).status_code, 403)

    def test_redirects_to_canonical_path(self):
        for path in ('/', '/MX/tc_barmesa/_tipo-de-cambio'):
            response = self.get(path, base_url='http://example.com:8080')
            self.assertEqual(response.status_code, 302)
            self.assertEqual(response.headers['Location'], 'http://example.com:8080' + CANONICAL_PATH)

    def test_favicon(self):
        self.assertEqual(self.get('/favicon.ico').status_code, 404)
        self.store.put(FAVICON_KEY, b'\x89PNG')
        response = self.get('/favicon.ico')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.mimetype, 'image/png')
        self.assertEqual(response.data, b'\x89PNG')

    def test_crash_is_500(self):
        def crash(key):
            raise RuntimeError('boom')
        self.store.get = crash
        self.assertEqual(self.get(CANONICAL_PATH).status_code, 500)


class ManualUpdateTests(ServerTests):

    feed_text = build_feed('18.2500', 'Tue, 02 Jan 2024 12:00:00 GMT')

    def test_success(self):
        response = self.get('/actualizar')
        self.assertEqual(response.status_code, 200)
        self.assertIn(b'18.2500', response.data)
        self.assertEqual(load_reading(self.store).price, '18.2500')


class ManualUpdateBelowFloorTests(ServerTests):

    feed_text = build_feed('16.0000')

    def test_below_floor_is_500(self):
        response = self.get('/actualizar')
        self.assertEqual(response.status_code, 500)
        self.assertIn(b'16.0000', response.data)
        self.assertEqual(load_reading(self.store).price, '17.0000')


class ManualUpdateFailureTests(ServerTests):

    feed_text = build_feed().replace('<title>DOLAR', '<title>EURO')

    def test_failure_is_500(self):
        response = self.get('/actualizar')
        self.assertEqual(response.status_code, 500)
        self.assertIn(b'not found', response.data)
        self.assertEqual(load_reading(self.store), READING)

#----------------------------------------------------------------------------------------------------------------------------------
