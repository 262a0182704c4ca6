#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------------------------------------------------------------------------------------------------
# includes

# standards
from datetime import timezone
from email.utils import parsedate_to_datetime

# dofrate
from .exceptions import DateParseError

#----------------------------------------------------------------------------------------------------------------------------------

def _parse_rfc822(text):
    # parsedate_to_datetime raises TypeError on older Pythons and ValueError on newer ones
    parsed = parsedate_to_datetime(text.strip())
    if parsed.tzinfo is None:
        # "-0000" means "zone unknown"; we go with UTC
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_pub_date(text):
    """
    Parses the feed's RFC 822 `pubDate` into a timezone-aware datetime, keeping whatever offset the feed gave.
    """
    try:
        return _parse_rfc822(text)
    except (TypeError, ValueError, IndexError) as error:
        raise DateParseError("Unparseable date %r" % (text,), reason=error)


#----------------------------------------------------------------------------------------------------------------------------------
