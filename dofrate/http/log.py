#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------------------------------------------------------------------------------------------------
# includes

# standards
import logging
from time import time

#----------------------------------------------------------------------------------------------------------------------------------

class LogEntry(object):

    all_sections = (
        (
            'prepared_request',
            lambda prepared_request: '{} {}'.format(prepared_request.method, prepared_request.url),
        ), (
            'status_code',
            ' -> HTTP {}'.format,
        ), (
            'error',
            lambda error: ' -> {}'.format(type(error).__name__),
        ), (
            'elapsed',
            ' [{0:.2f}s]'.format,
        ),
    )

    all_section_keys = frozenset(key for key, _ in all_sections)

    def __init__(self, **parts):
        self.parts = parts

    def __setitem__(self, key, value):
        if key not in self.all_section_keys:
            raise KeyError(repr(key))
        self.parts[key] = value

    def pop(self, key, default):
        if key not in self.all_section_keys:
            raise KeyError(repr(key))
        return self.parts.pop(key, default)

    def clear(self):
        self.parts.clear()

#----------------------------------------------------------------------------------------------------------------------------------

class Logger(object):

    def flush(self, entry):
        raise NotImplementedError


class NullLogger(Logger):

    def flush(self, entry):
        entry.clear()


class DefaultLogger(Logger):

    def __init__(self, name='dofrate.http'):
        self.logger = logging.getLogger(name)

    def flush(self, entry):
        line = []
        for key, format in LogEntry.all_sections:
            value = entry.pop(key, None)
            if value is not None:
                line.append(format(value))
        self.logger.info("".join(line))

#----------------------------------------------------------------------------------------------------------------------------------

class LoggingAdapterMixin(object):
    """
    Mixin for the `requests` transport adapter that writes one line per request: method, URL, outcome and time taken.
    """

    def __init__(self, **kwargs):
        self.logger = kwargs.pop('logger', DefaultLogger()) or NullLogger()
        super(LoggingAdapterMixin, self).__init__(**kwargs)

    def send(self, prepared_request, **kwargs):
        log = LogEntry(prepared_request=prepared_request)
        time_before = time()
        try:
            response = super(LoggingAdapterMixin, self).send(prepared_request, **kwargs)
            log['status_code'] = response.status_code
            return response
        except Exception as error:
            log['error'] = error
            raise
        finally:
            log['elapsed'] = time() - time_before
            self.logger.flush(log)

#----------------------------------------------------------------------------------------------------------------------------------
