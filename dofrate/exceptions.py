#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------------------------------------------------------------------------------------------------
# exception classes

class DofRateException(Exception):

    def __init__(self, message=None, reason=None):
        super(DofRateException, self).__init__(message)
        self.reason = reason # a chain link to a further exception, where applicable


class FetchError(DofRateException):
    pass


for _status_code in range(400, 600):
    setattr(
        FetchError,
        'Http%d' % _status_code,
        type(
            'Http%d' % _status_code,
            (FetchError,),
            {'status_code': _status_code},
        ),
    )


class ExtractionError(DofRateException):
    pass


class DateParseError(DofRateException):
    pass


class ConfigurationError(DofRateException):
    pass

#----------------------------------------------------------------------------------------------------------------------------------
