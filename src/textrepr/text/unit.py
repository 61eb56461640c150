"""
.. py:module:: textrepr.text.unit
   :synopsis: Tuple structures for the lexical units produced by the scanner.

.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
from operator import itemgetter


class Kind:
    """
    The closed set of lexical unit kinds and the subkinds of numerical and
    number units.
    """

    SEPARATOR = 'separator'
    PUNCTUATION = 'punctuation'
    WORD = 'word'
    STRANGE_WORD = 'strangeword'
    NUMERICAL = 'numerical'
    NUMBER = 'number'
    EMOJI = 'emoji'
    HASHTAG = 'hashtag'
    MENTION = 'mention'
    UNICODE = 'unicode'
    URL = 'url'
    MARKUP = 'markup'

    ALL = frozenset({
        SEPARATOR, PUNCTUATION, WORD, STRANGE_WORD, NUMERICAL, NUMBER,
        EMOJI, HASHTAG, MENTION, UNICODE, URL, MARKUP,
    })

    # numerical subkinds
    DOT_SEPARATED = 'dotseparated'
    MEASURES = 'measures'
    ALPHANUMERIC = 'alphanumeric'

    # number subkinds
    INTEGER = 'integer'
    FLOAT = 'float'

    SUBKINDS = {
        NUMERICAL: frozenset({DOT_SEPARATED, MEASURES, ALPHANUMERIC}),
        NUMBER: frozenset({INTEGER, FLOAT}),
    }


class unit(tuple):

    """
    A lexical unit: a ``(kind, value, subkind)`` tuple.

    1. ``kind`` - one of the :class:`Kind` constants
    1. ``value`` - the unit's string, or the ``int``/``float`` of a number
       (the digit string of integers too long to convert)
    1. ``subkind`` - the subkind of numerical and number units, else ``None``
    """

    __slots__ = ()

    def __new__(cls, kind: str, value, subkind: str=None):
        if kind not in Kind.ALL:
            raise ValueError('unknown unit kind %r' % kind)

        if kind in Kind.SUBKINDS:
            if subkind not in Kind.SUBKINDS[kind]:
                raise ValueError('illegal %s subkind %r' % (kind, subkind))
        elif subkind is not None:
            raise ValueError('%s units have no subkind' % kind)

        return tuple.__new__(cls, (kind, value, subkind))

    kind = property(itemgetter(0), doc="the kind of this unit")
    value = property(itemgetter(1), doc="the string or numeric value")
    subkind = property(itemgetter(2), doc="the numerical/number subkind")

    def __getnewargs__(self):
        return tuple(self)

    def __repr__(self) -> str:
        if self.subkind is None:
            return 'unit(%s, %r)' % (self.kind, self.value)
        else:
            return 'unit(%s, %r, %s)' % (self.kind, self.value, self.subkind)


class markup(unit):

    """
    A markup unit (e.g., a ``[quote=...]...[/quote]`` block); its value is a
    pair of unit tuples:

    1. ``text`` - the units of the block's visible content
    1. ``data`` - the units of the block's attribute content
    """

    __slots__ = ()

    def __new__(cls, text=(), data=()):
        return tuple.__new__(cls, (Kind.MARKUP, (tuple(text), tuple(data)), None))

    def __getnewargs__(self):
        return self.value

    @property
    def text(self) -> tuple:
        """Return the units of the visible content."""
        return self.value[0]

    @property
    def data(self) -> tuple:
        """Return the units of the attribute content."""
        return self.value[1]

    def __repr__(self) -> str:
        return 'markup(text=%r, data=%r)' % self.value


def Separator(value: str) -> unit:
    return unit(Kind.SEPARATOR, value)


def Punctuation(value: str) -> unit:
    return unit(Kind.PUNCTUATION, value)


def Word(value: str) -> unit:
    return unit(Kind.WORD, value)


def StrangeWord(value: str) -> unit:
    return unit(Kind.STRANGE_WORD, value)


def Numerical(subkind: str, value: str) -> unit:
    return unit(Kind.NUMERICAL, value, subkind)


def Integer(value: int) -> unit:
    return unit(Kind.NUMBER, value, Kind.INTEGER)


def Float(value: float) -> unit:
    return unit(Kind.NUMBER, value, Kind.FLOAT)


def Emoji(value: str) -> unit:
    return unit(Kind.EMOJI, value)


def Hashtag(value: str) -> unit:
    return unit(Kind.HASHTAG, value)


def Mention(value: str) -> unit:
    return unit(Kind.MENTION, value)


def Unicode(value: str) -> unit:
    return unit(Kind.UNICODE, value)


def Url(value: str) -> unit:
    return unit(Kind.URL, value)
