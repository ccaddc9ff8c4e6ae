# Copyright (c) 2013-2025 NASK. All rights reserved.

from shapespec.encoding_helpers import ascii_str, format_path


#
# Generic mix-ins
#

class _ErrorWithPublicMessageMixin(object):

    r"""
    A mix-in class that provides the :attr:`public_message` property.

    The value of this property is a :class:`str`.  It is taken either
    from the `public_message` constructor keyword argument or -- if the
    argument was not specified -- from the value of the
    :attr:`default_public_message` attribute (which, in subclasses, can
    also be a property).

    .. warning::

       Generally, the message is intended to be presented to clients.
       **Ensure that you do not disclose any sensitive details in the
       message.**

    The :class:`str` conversion provided by the class uses the value of
    :attr:`public_message`:

    >>> class SomeError(_ErrorWithPublicMessageMixin, Exception):
    ...     pass
    ...
    >>> str(SomeError('a', 'b'))  # using attribute default_public_message
    'Internal error.'
    >>> str(SomeError('a', 'b', public_message='Spąm.'))
    'Spąm.'

    The :func:`repr` conversion results in a programmer-readable
    representation (containing the class name, :func:`repr`-formatted
    constructor arguments and the :attr:`public_message` property):

    >>> SomeError('a', 'b')   # using class's default_public_message
    <SomeError: args=('a', 'b'); public_message='Internal error.'>
    >>> SomeError('a', 'b', public_message='Spam.')
    <SomeError: args=('a', 'b'); public_message='Spam.'>
    """

    #: (overridable in subclasses)
    default_public_message = 'Internal error.'

    def __init__(self, *args, **kwargs):
        try:
            public_message = kwargs.pop('public_message')
        except KeyError:
            pass
        else:
            self._public_message = str(public_message)
        try:
            super(_ErrorWithPublicMessageMixin, self).__init__(*args, **kwargs)
        except TypeError:
            if kwargs:
                raise TypeError(
                    'illegal keyword arguments for {} constructor: {}'.format(
                        self.__class__.__name__,
                        ', '.join(sorted(map(repr, kwargs)))))
            else:
                raise

    @property
    def public_message(self):
        """The aforementioned property."""
        try:
            return self._public_message
        except AttributeError:
            # (in subclasses `default_public_message` can also be a @property)
            self._public_message = str(self.default_public_message)
            return self._public_message

    def __str__(self):
        return self.public_message

    def __repr__(self):
        return ('<{0.__class__.__name__}: args={0.args!r}; '
                'public_message={0.public_message!r}>'.format(self))


#
# Actual exception classes
#

class ShapeSpecError(_ErrorWithPublicMessageMixin, Exception):

    """
    The base class for all *shapespec*-specific exceptions.
    """


class SchemaError(ShapeSpecError, TypeError):

    """
    Raised when a *sample shape* (schema) contains an object that is
    not JSON-representable (so it cannot be classified).

    >>> exc = SchemaError(public_message='Spam.')
    >>> isinstance(exc, TypeError)
    True
    >>> str(exc)
    'Spam.'
    """

    default_public_message = 'Schema is not a JSON-representable value.'


class ShapeMismatchError(ShapeSpecError, ValueError):

    """
    The base class for errors signalling that some data do not conform
    to a *sample shape*.

    Instances *must* be initialized with the keyword-only argument
    `path` (a sequence of key/index segments); it becomes the
    :attr:`path` attribute (always a :class:`tuple`).

    The :attr:`public_message` is generated from the path (unless
    specified explicitly), and :meth:`as_envelope` wraps it in the
    error envelope returned to strict-mode callers:

    >>> exc = ShapeMismatchError(path=['a', 0, 'b'])
    >>> exc.path
    ('a', 0, 'b')
    >>> exc.public_message
    "Field 'a[0].b' is not valid"
    >>> exc.as_envelope() == {
    ...     'error': {'code': 959, 'text': "Field 'a[0].b' is not valid"}}
    True

    >>> ShapeMismatchError()   # doctest: +ELLIPSIS
    Traceback (most recent call last):
      ...
    TypeError: __init__() needs keyword-only argument path
    """

    #: The code put into the error envelope.
    error_code = 959

    msg_template = "Field '{path}' is not valid"

    def __init__(self, *args, **kwargs):
        try:
            self.path = tuple(kwargs.pop('path'))
        except KeyError as exc:
            [kw] = exc.args
            raise TypeError('__init__() needs keyword-only argument ' + kw)
        super(ShapeMismatchError, self).__init__(*args, **kwargs)

    @property
    def default_public_message(self):
        return self.msg_template.format(path=format_path(self.path))

    def as_envelope(self):
        return {
            'error': {
                'code': self.error_code,
                'text': self.public_message,
            },
        }


class RequiredFieldMissingError(ShapeMismatchError):

    """
    Raised when a non-optional schema key has no corresponding data key.

    >>> str(RequiredFieldMissingError(path=['age']))
    "Field 'age' expected required field"
    """

    msg_template = "Field '{path}' expected required field"


class TypeMismatchError(ShapeMismatchError):

    """
    Raised when data are present but cannot be coerced to the type
    declared by the *sample shape*.

    Instances *must* be initialized with the following keyword-only
    arguments (in addition to `path`):

    * `expected`: the label of the expected type (e.g. ``'number'``);
    * `checked_value`: the offending value.

    They become attributes of the exception instance.

    >>> exc = TypeMismatchError(path=['age'], expected='number',
    ...                         checked_value='thirty')
    >>> exc.expected
    'number'
    >>> exc.checked_value
    'thirty'
    >>> str(exc)
    "Field 'age' expected number"

    >>> TypeMismatchError(path=['age'], expected='number')  # doctest: +ELLIPSIS
    Traceback (most recent call last):
      ...
    TypeError: __init__() needs keyword-only argument checked_value
    """

    msg_template = "Field '{path}' expected {expected}"

    def __init__(self, *args, **kwargs):
        try:
            self.expected = kwargs.pop('expected')
            self.checked_value = kwargs.pop('checked_value')
        except KeyError as exc:
            [kw] = exc.args
            raise TypeError('__init__() needs keyword-only argument ' + kw)
        super(TypeMismatchError, self).__init__(*args, **kwargs)

    @property
    def default_public_message(self):
        return self.msg_template.format(path=format_path(self.path),
                                        expected=ascii_str(self.expected))


class RequestError(ShapeSpecError):

    """
    Raised by the HTTP layer when a request body is malformed (so it
    is not even possible to start the validation).
    """

    default_public_message = 'Invalid request.'
