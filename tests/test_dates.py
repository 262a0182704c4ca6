#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------------------------------------------------------------------------------------------------
# includes

# standards
from datetime import datetime, timedelta, timezone
import unittest

# dofrate
from dofrate import DateParseError, parse_pub_date

#----------------------------------------------------------------------------------------------------------------------------------

class PubDateTests(unittest.TestCase):

    def test_gmt(self):
        self.assertEqual(
            parse_pub_date('Mon, 01 Jan 2024 12:00:00 GMT'),
            datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc),
        )

    def test_offset_is_kept(self):
        parsed = parse_pub_date('Mon, 01 Jan 2024 06:00:00 -0600')
        self.assertEqual(parsed.utcoffset(), timedelta(hours=-6))
        self.assertEqual(parsed, datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc))

    def test_unknown_zone_is_utc(self):
        parsed = parse_pub_date('Mon, 01 Jan 2024 12:00:00 -0000')
        self.assertEqual(parsed.utcoffset(), timedelta(0))

    def test_surrounding_whitespace_is_ignored(self):
        self.assertEqual(
            parse_pub_date('\n  Mon, 01 Jan 2024 12:00:00 GMT  '),
            datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc),
        )

    def test_garbage_raises(self):
        for text in ('', 'yesterday', '2024-13-45'):
            with self.assertRaises(DateParseError):
                parse_pub_date(text)


#----------------------------------------------------------------------------------------------------------------------------------
