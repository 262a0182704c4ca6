#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Pulls the rate out of the feed by plain substring search. The feed is an RSS-ish document where each indicator is an <item>;
we want the first one whose title starts with DOLAR:

    <item>
        <title>DOLAR</title>
        <description>17.0645</description>
        <pubDate>Mon, 01 Jan 2024 12:00:00 GMT</pubDate>
    </item>

Any marker that can't be found is an ExtractionError. We never return a value read from a guessed offset.
"""

#----------------------------------------------------------------------------------------------------------------------------------
# includes

# standards
from collections import namedtuple

# dofrate
from .exceptions import ExtractionError
from .floor import to_price

#----------------------------------------------------------------------------------------------------------------------------------

ITEM_MARKER = '<title>DOLAR'
ITEM_END_TAG = '</item>'

RawRate = namedtuple('RawRate', (
    'value',
    'pub_date',
))

#----------------------------------------------------------------------------------------------------------------------------------

def find_item(xml_text, marker=ITEM_MARKER):
    """
    Returns the text running from the first occurrence of `marker` up to and including the next `</item>`.
    """
    start = xml_text.find(marker)
    if start == -1:
        raise ExtractionError("%r not found in feed" % marker)
    end = xml_text.find(ITEM_END_TAG, start)
    if end == -1:
        raise ExtractionError("%s not found after %r in feed" % (ITEM_END_TAG, marker))
    return xml_text[start:end + len(ITEM_END_TAG)]


def find_field(item_text, tag):
    start_tag = '<%s>' % tag
    end_tag = '</%s>' % tag
    start = item_text.find(start_tag)
    if start == -1:
        raise ExtractionError("%s not found in item" % start_tag)
    start += len(start_tag)
    end = item_text.find(end_tag, start)
    if end == -1:
        raise ExtractionError("%s not found in item" % end_tag)
    return item_text[start:end].strip()


def extract_rate(xml_text, marker=ITEM_MARKER):
    item_text = find_item(xml_text, marker)
    description = find_field(item_text, 'description')
    try:
        value = to_price(description)
    except ValueError as error:
        raise ExtractionError("Unusable rate value %r" % description, reason=error)
    return RawRate(
        value=value,
        pub_date=find_field(item_text, 'pubDate'),
    )

#----------------------------------------------------------------------------------------------------------------------------------
