"""
.. py:module:: textrepr.nlp.representation
   :synopsis: Tuple structures for the classified token representations.

.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)

Each representation is a tuple of its fields; the variant itself is the
class, and it is serialized as the ``type`` field of :meth:`asDict`.
"""
from operator import itemgetter


class Representation(tuple):

    """
    Base class of all token representations.

    Subclasses define the ``type`` name used when serializing and the names of
    their ``_fields``. Two representations only compare equal if they are of
    the same variant.
    """

    __slots__ = ()

    type = None
    _fields = ()

    def __new__(cls, *values):
        if len(values) != len(cls._fields):
            raise TypeError('%s expects %i values, got %i' % (
                cls.__name__, len(cls._fields), len(values)
            ))

        return tuple.__new__(cls, values)

    def __getnewargs__(self):
        return tuple(self)

    def __eq__(self, other):
        return type(self) is type(other) and tuple.__eq__(self, other)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.type,) + tuple(self))

    def __repr__(self) -> str:
        return '%s(%s)' % (self.__class__.__name__, ', '.join(
            '%s=%r' % (key, value) for key, value in zip(self._fields, self)
            if value is not None
        ))

    def asDict(self) -> dict:
        """
        Return a `dict` with the ``type`` name and all (non-``None``) fields.
        """
        data = {'type': self.type}

        for key, value in zip(self._fields, self):
            if value is not None:
                data[key] = value

        return data

    @staticmethod
    def fromDict(data: dict):
        """
        Create a representation from its `dict` form (see :meth:`asDict`).

        :raises: ValueError if the type is unknown or a field is missing
        """
        try:
            cls = VARIANTS[data['type']]
        except KeyError:
            raise ValueError('unknown representation %r' % data.get('type')) from None

        return cls._fromDict(data)

    @classmethod
    def _fromDict(cls, data: dict):
        try:
            return cls(*[data[key] for key in cls._fields])
        except KeyError as e:
            raise ValueError('%s lacks field %s' % (cls.type, e)) from None


class Word(Representation):

    """
    A word; the ``stem`` is only set if it differs from the ``word``.
    """

    __slots__ = ()

    type = 'word'
    _fields = ('word', 'stem')

    def __new__(cls, word: str, stem: str=None):
        return tuple.__new__(cls, (word, stem))

    word = property(itemgetter(0), doc="the surface form")
    stem = property(itemgetter(1), doc="the normal form or None")

    @classmethod
    def _fromDict(cls, data: dict):
        try:
            return cls(data['word'], data.get('stem'))
        except KeyError as e:
            raise ValueError('%s lacks field %s' % (cls.type, e)) from None


class Numerical(Representation):

    """
    Mixed numeric strings; the ``subtype`` is ``dotseparated``, ``measures``,
    or ``alphanumeric``.
    """

    __slots__ = ()

    type = 'numerical'
    _fields = ('word', 'subtype')

    word = property(itemgetter(0), doc="the numerical string")
    subtype = property(itemgetter(1), doc="the kind of numerical")


class _Single(Representation):

    __slots__ = ()

    _fields = ('word',)

    word = property(itemgetter(0), doc="the token string")


class Number(_Single):
    __slots__ = ()
    type = 'number'


class StrangeWord(_Single):
    __slots__ = ()
    type = 'strangeword'


class Emoji(_Single):
    __slots__ = ()
    type = 'emoji'


class Unicode(_Single):
    __slots__ = ()
    type = 'unicode'


class Hashtag(_Single):
    __slots__ = ()
    type = 'hashtag'


class Mention(_Single):
    __slots__ = ()
    type = 'mention'


class Url(_Single):
    __slots__ = ()
    type = 'url'


class BBCode(Representation):

    """
    A markup block with the representations of its ``text`` and ``data``.
    """

    __slots__ = ()

    type = 'bbcode'
    _fields = ('text', 'data')

    def __new__(cls, text=(), data=()):
        return tuple.__new__(cls, (tuple(text), tuple(data)))

    text = property(itemgetter(0), doc="the representations of the content")
    data = property(itemgetter(1), doc="the representations of the attributes")

    def asDict(self) -> dict:
        return {
            'type': self.type,
            'text': [r.asDict() for r in self.text],
            'data': [r.asDict() for r in self.data],
        }

    @classmethod
    def _fromDict(cls, data: dict):
        try:
            return cls([Representation.fromDict(r) for r in data['text']],
                       [Representation.fromDict(r) for r in data['data']])
        except KeyError as e:
            raise ValueError('%s lacks field %s' % (cls.type, e)) from None


VARIANTS = {cls.type: cls for cls in (
    Word, Numerical, Number, StrangeWord, Emoji, Unicode, Hashtag, Mention,
    Url, BBCode,
)}
"""
The representation classes by their serialized ``type`` name.
"""
