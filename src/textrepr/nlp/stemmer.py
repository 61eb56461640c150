"""
.. py:module:: textrepr.nlp.stemmer
   :synopsis: Normalize words with a Snowball stemmer and an exception dictionary.

.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)

A :class:`Language` binds a Snowball algorithm to the exceptions that
algorithm must not touch (brand names, proper nouns, and words the algorithm
stems wrongly). The :class:`Normalizer` consults the exceptions first and
only falls back to the stemmer for all other words.
"""
import logging
from types import MappingProxyType

from nltk.stem.snowball import SnowballStemmer

logger = logging.getLogger(__name__)


class Language:
    """
    A language configuration: a name, the Snowball algorithm to use, and an
    immutable mapping of exceptional words to their fixed normal form.
    """

    __slots__ = ('name', 'algorithm', 'exceptions')

    def __init__(self, name: str, algorithm: str, exceptions: dict=None):
        """
        :param name: the name of this configuration
        :param algorithm: a Snowball stemmer name (see
                          ``SnowballStemmer.languages``)
        :param exceptions: a mapping of lowercased words to normal forms
        :raises: ValueError if the algorithm is unknown
        """
        if algorithm not in SnowballStemmer.languages:
            raise ValueError('unknown Snowball algorithm %r' % algorithm)

        self.name = name
        self.algorithm = algorithm
        self.exceptions = MappingProxyType(dict(exceptions or {}))

    def __repr__(self) -> str:
        return 'Language(%s, algorithm=%s, exceptions=%i)' % (
            self.name, self.algorithm, len(self.exceptions)
        )

    def extend(self, exceptions: dict):
        """
        Return a new language with additional *exceptions*; existing entries
        are replaced by the new ones.
        """
        merged = dict(self.exceptions)
        merged.update(exceptions)
        return Language(self.name, self.algorithm, merged)


RUSSIAN = Language('russian', 'russian', {
    'газпром': 'газпром',
    'ростелеком': 'ростелеком',
    'кредит': 'кредит',
})

ENGLISH = Language('english', 'english')

LANGUAGES = {lang.name: lang for lang in (RUSSIAN, ENGLISH)}
"""
The built-in language configurations by name.
"""


def GetLanguage(name: str) -> Language:
    """
    Return the built-in language configuration called *name*.

    :raises: KeyError if there is no such language
    """
    try:
        return LANGUAGES[name.lower()]
    except KeyError:
        raise KeyError('unknown language %r (known: %s)' % (
            name, ', '.join(sorted(LANGUAGES))
        )) from None


def ReadExceptions(stream: iter) -> dict:
    """
    Read exception entries from a tab-separated *stream*.

    Each line holds a word and its normal form; a line with only a word maps
    the word to itself. Blank lines and lines starting with ``#`` are skipped.

    :raises: ValueError if a line has more than two columns
    """
    exceptions = {}

    for lno, line in enumerate(stream, 1):
        line = line.strip()

        if not line or line.startswith('#'):
            continue

        items = line.split('\t')

        if len(items) == 1:
            word = normal = items[0].lower()
        elif len(items) == 2:
            word, normal = items[0].lower(), items[1]
        else:
            raise ValueError('line %i: expected one or two columns, got %i' %
                             (lno, len(items)))

        exceptions[word] = normal

    return exceptions


class Normalizer:
    """
    Map lowercased words to their normal form.
    """

    def __init__(self, language=RUSSIAN):
        """
        :param language: a :class:`Language` or the name of a built-in one
        """
        if isinstance(language, str):
            language = GetLanguage(language)

        self.language = language
        self._exceptions = language.exceptions
        self._stemmer = SnowballStemmer(language.algorithm)
        logger.debug('normalizing %s words with %i exceptions',
                     language.algorithm, len(self._exceptions))

    def normalize(self, word: str) -> str:
        """
        Return the exception dictionary's entry for *word* if there is one,
        or the stem of the *word* otherwise.

        The *word* is expected to be in lower-case already.
        """
        if word in self._exceptions:
            return self._exceptions[word]

        return self._stemmer.stem(word)
