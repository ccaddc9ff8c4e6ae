# Copyright (c) 2013-2025 NASK. All rights reserved.

"""
.. note::

   Exposing :func:`shapespec.validate_schema` over HTTP, as a tiny
   Pyramid application.
"""


from shapespec.pyramid_commons._pyramid_commons import (
    DEFAULT_ROUTE_PATH,
    exc_to_http_exc,

    ValidateView,
    ConfigHelper,

    make_wsgi_app,
    main,
)


__all__ = [
    'DEFAULT_ROUTE_PATH',
    'exc_to_http_exc',

    'ValidateView',
    'ConfigHelper',

    'make_wsgi_app',
    'main',
]
