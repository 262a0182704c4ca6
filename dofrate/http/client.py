#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------------------------------------------------------------------------------------------------
# includes

# 3rd parties
import requests

# dofrate
from ..config import DEFAULT_CONFIG
from ..exceptions import FetchError
from .log import LoggingAdapterMixin

#----------------------------------------------------------------------------------------------------------------------------------

class DofRateHttpAdapter(LoggingAdapterMixin, requests.adapters.HTTPAdapter):
    pass


class DofRateSession(requests.Session):

    default_headers = {
        # The feed is served as XML, but some government servers are picky about non-browser Accept values
        'Accept': 'application/rss+xml,application/xml;q=0.9,text/xml;q=0.9,*/*;q=0.8',
    }

    def __init__(self, headers={}, **kwargs):
        super(DofRateSession, self).__init__()
        self.headers.update(self.default_headers)
        self.headers.update(headers)
        adapter = DofRateHttpAdapter(**kwargs)
        self.mount('http://', adapter)
        self.mount('https://', adapter)

#----------------------------------------------------------------------------------------------------------------------------------

class HttpClient(object):
    """
    Fetches the feed. All failures to get a 2xx response, whether at the network level or from the server, surface as `FetchError`
    (or one of its `FetchError.HttpNNN` subclasses). Nothing is retried here; the caller decides what a failure means.
    """

    def __init__(self, config=DEFAULT_CONFIG, **kwargs):
        kwargs.setdefault('headers', {}) \
            .setdefault('User-Agent', config.user_agent)
        self.config = config
        self.session = DofRateSession(**kwargs)

    def get(self, url):
        try:
            response = self.session.get(
                url,
                timeout=self.config.timeout,
                verify=self.config.ssl_verification,
            )
            response.raise_for_status()
            return response
        except requests.HTTPError as error:
            error_class = getattr(FetchError, 'Http%d' % error.response.status_code, FetchError)
            raise error_class(str(error), reason=error)
        except requests.RequestException as exception:
            raise FetchError(str(exception), reason=exception)

    def fetch_text(self, url):
        response = self.get(url)
        return response.content.decode(
            encoding=self._pick_encoding(response),
            errors='replace',
        )

    @staticmethod
    def _pick_encoding(response):
        return (
            response.encoding # declared
            or response.apparent_encoding # autodetected
            or 'UTF-8'
        )

    def __enter__(self):
        return self

    def __exit__(self, *exception_info):
        self.close()

    def close(self):
        self.session.close()

    @property
    def default_headers(self):
        # NB this returns the original, modifyable header dict
        return self.session.headers

#----------------------------------------------------------------------------------------------------------------------------------
