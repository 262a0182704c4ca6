#!/usr/bin/env python
# -*- coding: utf-8 -*-

#----------------------------------------------------------------------------------------------------------------------------------
# includes

# standards
from collections import namedtuple

# dofrate
from .version import dofrate_version

#----------------------------------------------------------------------------------------------------------------------------------

_DEFAULT_VALUES = {
    'canonical_path': '/MX/tc_barmesa/_tipo-de-cambio.html',
    'feed_url': 'https://www.dof.gob.mx/indicadores.xml',
    'floor_price': '0',
    'host': '0.0.0.0',
    'item_marker': '<title>DOLAR',
    'port': 8080,
    'schedule_seconds': 3600,
    'ssl_verification': True,
    'store_path': 'dofrate.shelf',
    'timeout': 30,
    'user_agent': 'DofRate/%s' % dofrate_version,
}

ENVIRON_PREFIX = 'DOFRATE_'

#----------------------------------------------------------------------------------------------------------------------------------

RateConfig = namedtuple( # it's a class, pylint: disable=invalid-name
    'RateConfig',
    sorted(_DEFAULT_VALUES.keys()),
)

DEFAULT_CONFIG = RateConfig(**_DEFAULT_VALUES)

def _from_kwargs(cls, kwargs, defaults=DEFAULT_CONFIG, consume_all_kwargs_for=None):
    config = {
        key: kwargs.pop(key, getattr(defaults, key, fallback))
        for key, fallback in _DEFAULT_VALUES.items()
    }
    if consume_all_kwargs_for and kwargs:
        raise TypeError("Unknown kwargs for %r: %s" % (
            consume_all_kwargs_for,
            ', '.join(sorted(kwargs)),
        ))
    return cls(**config)

def _from_environ(cls, environ, defaults=DEFAULT_CONFIG):
    """
    Reads `DOFRATE_<FIELD>` variables from the given mapping (typically `os.environ`). Each value is coerced to the type of the
    corresponding default, so that e.g. `DOFRATE_PORT=9000` yields an int.
    """
    kwargs = {}
    for key, fallback in _DEFAULT_VALUES.items():
        text = environ.get(ENVIRON_PREFIX + key.upper())
        if text is not None:
            kwargs[key] = _coerce(key, text, fallback)
    return cls.from_kwargs(kwargs, defaults, consume_all_kwargs_for='environ')

def _coerce(key, text, fallback):
    if isinstance(fallback, bool):
        return text.strip().lower() in ('1', 'true', 'yes', 'on')
    elif isinstance(fallback, int):
        try:
            return int(text)
        except ValueError:
            raise ValueError("%s%s should be an integer, got %r" % (ENVIRON_PREFIX, key.upper(), text))
    else:
        return text

RateConfig.from_kwargs = classmethod(_from_kwargs)
RateConfig.from_environ = classmethod(_from_environ)

#----------------------------------------------------------------------------------------------------------------------------------
