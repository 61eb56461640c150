"""
.. py:module:: textrepr.serializer
   :synopsis: JSON line serializer.

.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)

Thin configuration layer over the json package in the standard library
with settings for compact, one-line, UTF-8 output.
"""

from json.encoder import JSONEncoder
from json.decoder import JSONDecoder

__all__ = ['Decode', 'Encode']

# Pre-load encoder/decoder instances. For the encoder, the extra whitespaces
# have been eliminated, the circular reference check deactivated, and
# non-ASCII characters are written as they are rather than escaped.
DECODER = JSONDecoder()

ENCODER = JSONEncoder(check_circular=False, separators=(',', ':'),
                      ensure_ascii=False, allow_nan=False)


def Decode(string: str) -> object:
    """
    Decode a JSON *string* to a Python object.

    :raises: ValueError (a `json.JSONDecodeError`) if the string is no JSON
    """
    return DECODER.decode(string)


def Encode(obj: object) -> str:
    """
    Encode a Python *obj* to a single line of JSON.
    """
    return ENCODER.encode(obj)
