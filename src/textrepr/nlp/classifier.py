"""
.. py:module:: textrepr.nlp.classifier
   :synopsis: Classify lexical units into token representations.

.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
import logging
from decimal import Decimal
from math import isinf

from textrepr.nlp import representation as R
from textrepr.nlp.stemmer import Normalizer
from textrepr.text.scanner import Scanner, ScanError
from textrepr.text.unit import Kind

logger = logging.getLogger(__name__)


class Classifier:
    """
    Turn sequences of lexical units into token representations.

    Separator and punctuation units are dropped, word units are normalized,
    and markup units are classified recursively; all other units map to the
    representation of the same kind.
    """

    def __init__(self, normalizer: Normalizer=None, scanner: Scanner=None):
        """
        :param normalizer: the word normalizer [Russian]
        :param scanner: the scanner used by :meth:`classify_text`
        """
        self.normalizer = normalizer if normalizer is not None else Normalizer()
        self.scanner = scanner if scanner is not None else Scanner()

    def classify(self, units: iter) -> list:
        """
        Return the representations of the *units*, in order.
        """
        result = []

        for token in units:
            rep = RULES[token.kind](self, token)

            if rep is not None:
                result.append(rep)

        return result

    def classify_text(self, text: str) -> list:
        """
        Lowercase and scan the *text*, and classify the resulting units.

        Texts that cannot be scanned have no representations.
        """
        try:
            units = self.scanner.scan(text.lower())
        except ScanError as e:
            logger.warning('could not scan text: %s', e)
            return []

        return self.classify(units)

    def _drop(self, token):
        return None

    def _word(self, token):
        word = token.value
        stem = self.normalizer.normalize(word.lower())
        return R.Word(word, stem if stem != word else None)

    def _numerical(self, token):
        return R.Numerical(token.value, token.subkind)

    def _number(self, token):
        if token.subkind == Kind.INTEGER:
            return R.Number(str(token.value))
        else:
            return R.Number(FormatFloat(token.value))

    def _markup(self, token):
        return R.BBCode(self.classify(token.text), self.classify(token.data))


def FormatFloat(value: float) -> str:
    """
    Render a float in positional notation with the shortest digits that
    round-trip, and without a fractional part for integral values
    (``2.0`` is ``"2"``, ``1e-07`` is ``"0.0000001"``).
    """
    if isinf(value):
        return '-inf' if value < 0 else 'inf'

    text = format(Decimal(repr(value)), 'f')
    return text[:-2] if text.endswith('.0') else text


def _Copy(cls):
    return lambda classifier, token: cls(token.value)


RULES = {
    Kind.SEPARATOR: Classifier._drop,
    Kind.PUNCTUATION: Classifier._drop,
    Kind.WORD: Classifier._word,
    Kind.STRANGE_WORD: _Copy(R.StrangeWord),
    Kind.NUMERICAL: Classifier._numerical,
    Kind.NUMBER: Classifier._number,
    Kind.EMOJI: _Copy(R.Emoji),
    Kind.HASHTAG: _Copy(R.Hashtag),
    Kind.MENTION: _Copy(R.Mention),
    Kind.UNICODE: _Copy(R.Unicode),
    Kind.URL: _Copy(R.Url),
    Kind.MARKUP: Classifier._markup,
}
"""
The classification rule for each unit kind.
"""

if frozenset(RULES) != Kind.ALL:
    raise RuntimeError('classification rules and unit kinds differ: %s' % ', '.join(
        sorted(Kind.ALL ^ frozenset(RULES))
    ))

_DEFAULT = None


def text_to_representations(text: str, classifier: Classifier=None) -> list:
    """
    Classify a *text* with the given or a default (Russian) *classifier*.
    """
    global _DEFAULT

    if classifier is None:
        if _DEFAULT is None:
            _DEFAULT = Classifier()

        classifier = _DEFAULT

    return classifier.classify_text(text)
