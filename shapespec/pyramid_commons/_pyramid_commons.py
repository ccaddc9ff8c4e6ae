# Copyright (c) 2013-2025 NASK. All rights reserved.

import logging

from pyramid.config import Configurator
from pyramid.httpexceptions import (
    HTTPException,
    HTTPBadRequest,
    HTTPServerError,
)
from pyramid.settings import asbool

from shapespec.class_helpers import is_mapping
from shapespec.encoding_helpers import ascii_str
from shapespec.exceptions import (
    RequestError,
    SchemaError,
    ShapeSpecError,
)
from shapespec.shape import validate_schema


LOGGER = logging.getLogger(__name__)



#
# Auxiliary constants

ROUTE_NAME = 'validate'

DEFAULT_ROUTE_PATH = '/validate'

SETTING_PREFIX = 'shapespec.'



#
# Helper functions

def exc_to_http_exc(exc):
    """
    Takes any :exc:`~exceptions.Exception` instance, returns a
    :exc:`pyramid.httpexceptions.HTTPException` instance.
    """
    if isinstance(exc, HTTPException):
        code = getattr(exc, 'code', None)
        if isinstance(code, int) and 200 <= code < 500:
            LOGGER.debug(
                'HTTPException: %r ("%s", code: %s)',
                exc, ascii_str(exc), code)
        else:
            LOGGER.error(
                'HTTPException: %r ("%s", code: %r)',
                exc, ascii_str(exc), code,
                exc_info=True)
        http_exc = exc
    elif isinstance(exc, (RequestError, SchemaError)):
        LOGGER.debug(
            'Request not valid: %r (public message: "%s")',
            exc, ascii_str(exc.public_message))
        http_exc = HTTPBadRequest(exc.public_message)
    else:
        if isinstance(exc, ShapeSpecError):
            LOGGER.error(
                '%r (public message: "%s")',
                exc, ascii_str(exc.public_message),
                exc_info=True)
        else:
            LOGGER.error(
                'Non-HTTPException/ShapeSpecError exception: %r',
                exc,
                exc_info=True)
        http_exc = HTTPServerError()
    return http_exc



#
# Views

class ValidateView(object):

    """
    The view that validates/normalizes data against a sample shape.

    The request body should be a JSON object containing the keys:
    ``"schema"``, ``"data"`` and, optionally, ``"safeParse"`` (a
    boolean; if not specified, the ``shapespec.safe_parse_default``
    setting is used).

    The response body is the :func:`~shapespec.shape.validate_schema`'s
    result (rendered with the ``json`` renderer) -- in particular, for a
    failed strict validation, it is the error envelope.
    """

    body_keys = ('schema', 'data')

    def __init__(self, context, request):
        self.context = context
        self.request = request

    def __call__(self):
        schema, data, safe_parse = self.prepare_args()
        return validate_schema(schema, data, safe_parse=safe_parse)

    def prepare_args(self):
        body = self.get_body()
        missing_keys = [key for key in self.body_keys if key not in body]
        if missing_keys:
            raise RequestError(public_message=(
                'Missing request body keys: {}.'.format(
                    ', '.join('"{}"'.format(key) for key in missing_keys))))
        safe_parse = body.get('safeParse', self.get_safe_parse_default())
        if not isinstance(safe_parse, bool):
            raise RequestError(public_message=(
                'The "safeParse" value should be a boolean.'))
        return body['schema'], body['data'], safe_parse

    def get_body(self):
        try:
            body = self.request.json_body
        except ValueError:
            raise RequestError(public_message=(
                'Request body is not valid JSON.')) from None
        if not is_mapping(body):
            raise RequestError(public_message=(
                'Request body is not a JSON object.'))
        return body

    def get_safe_parse_default(self):
        settings = self.request.registry.settings or {}
        return asbool(settings.get(SETTING_PREFIX + 'safe_parse_default', False))



#
# Application startup/configuration

class ConfigHelper(object):

    """
    Class of an object that automatizes necessary WSGI app setup steps.

    Typical usage in a paste-deploy application factory:

    .. code-block:: python

        def main(global_config, **settings):
            helper = ConfigHelper(settings=settings)
            ...  # <- here you can call any methods of the helper.config object
            ...  #    which is a pyramid.config.Configurator instance
            return helper.make_wsgi_app()

    Note: all constructor arguments should be specified as keyword arguments.
    """

    #: (overridable attribute)
    default_view_class = ValidateView

    def __init__(self,
                 settings,
                 view_class=None,
                 **rest_configurator_kwargs):
        self.settings = self.prepare_settings(settings)
        if view_class is None:
            view_class = self.default_view_class
        self.view_class = view_class
        self.rest_configurator_kwargs = rest_configurator_kwargs
        self.config = self.prepare_config(self.make_config())
        self._completed = False

    def make_wsgi_app(self):
        if not self._completed:
            self.complete()
        return self.config.make_wsgi_app()

    # overridable/extendable methods (hooks):

    def prepare_settings(self, settings):
        settings = dict(settings or {})
        settings.setdefault(SETTING_PREFIX + 'route_path', DEFAULT_ROUTE_PATH)
        settings[SETTING_PREFIX + 'safe_parse_default'] = asbool(
            settings.get(SETTING_PREFIX + 'safe_parse_default', False))
        return settings

    def make_config(self):
        return Configurator(
              settings=self.settings,
              **self.rest_configurator_kwargs)

    def prepare_config(self, config):
        return config

    def complete(self):
        self.config.add_view(view=self.exception_view, context=Exception)
        self.config.add_view(view=self.exception_view, context=HTTPException)
        self.config.add_route(ROUTE_NAME, self.settings[SETTING_PREFIX + 'route_path'])
        self.config.add_view(
            view=self.view_class,
            route_name=ROUTE_NAME,
            request_method='POST',
            renderer='json')
        self._completed = True

    @classmethod
    def exception_view(cls, exc, request):
        http_exc = exc_to_http_exc(exc)
        assert isinstance(http_exc, HTTPException)
        # force a plain-text (non-HTML) response
        # if http_exc.body has not been set yet
        environ_copy = request.environ.copy()
        environ_copy.pop('HTTP_ACCEPT', None)
        http_exc.prepare(environ_copy)
        return http_exc


def make_wsgi_app(settings=None):
    return ConfigHelper(settings=settings).make_wsgi_app()


def main(global_config, **settings):
    """The paste-deploy application factory."""
    return make_wsgi_app(settings)
