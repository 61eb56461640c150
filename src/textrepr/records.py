"""
.. py:module:: textrepr.records
   :synopsis: Read text records and write their token representations.

.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)

Records are JSON objects, one per line. Input records have an ``id`` (an
unsigned integer or a string) and a ``text``; output records have the same
``id`` and the ``words`` found in the text, in the order of the input.
"""
import logging
from operator import itemgetter

from textrepr import serializer
from textrepr.nlp.classifier import text_to_representations

logger = logging.getLogger(__name__)

MAX_ID = 2 ** 64 - 1


class RecordError(ValueError):
    """Raised for input lines that are no valid records."""

    def __init__(self, lno: int, message: str):
        super(RecordError, self).__init__('line %i: %s' % (lno, message))
        self.lno = lno


def IsValidId(value) -> bool:
    """``True`` if *value* is a string or an unsigned 64-bit integer."""
    if isinstance(value, str):
        return True

    return isinstance(value, int) and not isinstance(value, bool) and \
        0 <= value <= MAX_ID


class Input(tuple):
    """
    An input record: ``(id, text)``.
    """

    __slots__ = ()

    def __new__(cls, id, text: str):
        return tuple.__new__(cls, (id, text))

    id = property(itemgetter(0), doc="the record identifier")
    text = property(itemgetter(1), doc="the text to classify")

    @classmethod
    def fromDict(cls, data):
        """
        Create an input record from a decoded JSON object; other fields than
        ``id`` and ``text`` are ignored.

        :raises: ValueError if the object is no valid input record
        """
        if not isinstance(data, dict):
            raise ValueError('expected an object, got %s' % type(data).__name__)

        for key in ('id', 'text'):
            if key not in data:
                raise ValueError('missing field %r' % key)

        if not IsValidId(data['id']):
            raise ValueError('id must be an unsigned integer or a string, got %r' %
                             (data['id'],))

        if not isinstance(data['text'], str):
            raise ValueError('text must be a string, got %s' %
                             type(data['text']).__name__)

        return cls(data['id'], data['text'])


class Output(tuple):
    """
    An output record: ``(id, words)``.
    """

    __slots__ = ()

    def __new__(cls, id, words):
        return tuple.__new__(cls, (id, tuple(words)))

    id = property(itemgetter(0), doc="the record identifier")
    words = property(itemgetter(1), doc="the token representations")

    def asDict(self) -> dict:
        return {'id': self.id, 'words': [w.asDict() for w in self.words]}


def ReadRecords(stream: iter) -> iter:
    """
    Yield :class:`Input` records from a *stream* of JSON lines.

    :raises: RecordError at the first line that is no valid record
    """
    for lno, line in enumerate(stream, 1):
        try:
            data = serializer.Decode(line)
        except ValueError as e:
            raise RecordError(lno, 'invalid JSON: %s' % e) from e

        try:
            record = Input.fromDict(data)
        except ValueError as e:
            raise RecordError(lno, str(e)) from None

        yield record


def Process(instream: iter, outstream, classify=text_to_representations) -> int:
    """
    Classify the text of each record read from the *instream* and write the
    output record to the *outstream* before reading the next record.

    :param instream: JSON lines of input records
    :param outstream: a text stream to write JSON lines to
    :param classify: a function mapping a text to its representations
    :return: the number of processed records
    :raises: RecordError if an input line is no valid record
    """
    count = 0

    for record in ReadRecords(instream):
        output = Output(record.id, classify(record.text))
        outstream.write(serializer.Encode(output.asDict()))
        outstream.write('\n')
        count += 1

    logger.info('processed %i records', count)
    return count
