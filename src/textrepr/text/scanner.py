"""
.. py:module:: textrepr.text.scanner
   :synopsis: Split (lowercased) text into a sequence of lexical units.

.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)

The scanner walks the text once, left to right, and at each position emits
the longest unit that starts there, trying (in this order) separators,
markup blocks, URLs, Unicode escapes, hashtags and mentions, numbers, words,
and emoji; any other character becomes a single punctuation unit.

Markup blocks (``[tag]...[/tag]`` or ``[tag=data]...[/tag]``) are scanned
recursively into :class:`textrepr.text.unit.markup` units, up to a maximum
nesting depth.
"""
import re
from unicodedata import digit, name as charname

from textrepr.text.strtok import Category, CategoryIter
from textrepr.text.unit import Kind, unit, markup

#################
# CONFIGURATION #
#################

MAX_DEPTH = 100
"""
The default maximum nesting depth of markup blocks.
"""

OPEN_TAG = re.compile(r'\[([a-z0-9*]+)(?:=([^\]]*))?\]', re.IGNORECASE)
TAG = re.compile(r'\[/([a-z0-9*]+)\]|\[([a-z0-9*]+)(?:=[^\]]*)?\]', re.IGNORECASE)
URL = re.compile(r'(?:(?:https?|ftp)://|www\.)[^\s<>\[\]"\']+', re.IGNORECASE)
URL_TAIL = frozenset('.,;:!?)')
UNICODE_ESCAPE = re.compile(
    r'\\u\{[0-9a-f]{1,6}\}|\\u[0-9a-f]{4}|&#x[0-9a-f]+;|&#[0-9]+;',
    re.IGNORECASE
)
HASHTAG = re.compile(r'#\w+')
MENTION = re.compile(r'@\w+')
NUMBER = re.compile(r'\d+((?:\.\d+)*)')

PICTOGRAPHS = ((0x2600, 0x27BF), (0x2B00, 0x2BFF), (0x1F000, 0x1FAFF))
"""
Code point ranges of pictographic (emoji) characters.
"""

REGIONAL_INDICATORS = (0x1F1E6, 0x1F1FF)
SKIN_TONES = (0x1F3FB, 0x1F3FF)
EMOJI_MODIFIERS = frozenset({0xFE0E, 0xFE0F, 0x20E3})
ZERO_WIDTH_JOINER = 0x200D

SCRIPT_ALIASES = {
    'HIRAGANA': 'CJK',
    'KATAKANA': 'CJK',
    'HANGUL': 'CJK',
}
"""
Scripts that are regularly mixed inside a single word.
"""


class ScanError(ValueError):
    """Raised if a text cannot be split into lexical units."""


##################
# IMPLEMENTATION #
##################

class Scanner:
    """
    A scanner producing :class:`textrepr.text.unit.unit` lists from text.

    Scanners hold no state besides their configuration and can be shared.
    """

    def __init__(self, max_depth: int=MAX_DEPTH):
        """
        :param max_depth: the maximum nesting depth of markup blocks; deeper
                          nesting is a :class:`ScanError`
        """
        if max_depth < 0:
            raise ValueError('max_depth must not be negative')

        self.max_depth = max_depth

    def scan(self, text: str) -> list:
        """
        Split the *text* into lexical units.

        :param text: the (lowercased) text to scan
        :return: a list of units
        :raises: ScanError if the text cannot be scanned
        """
        try:
            cats = list(CategoryIter(text))
        except UnicodeError as e:
            raise ScanError(str(e)) from e

        return self._scan(text, cats, 0)

    def _scan(self, text: str, cats: list, depth: int) -> list:
        if depth > self.max_depth:
            raise ScanError('markup nested deeper than %i levels' % self.max_depth)

        units = []
        pairs = TagPairs(text)
        start = 0

        while start < len(text):
            token, start = self._next(text, cats, start, depth, pairs)
            units.append(token)

        return units

    def _next(self, text: str, cats: list, start: int, depth: int,
              pairs: dict) -> tuple:
        """Return the unit starting at *start* and the offset after it."""
        cat = cats[start]
        char = text[start]

        if Category.separator(cat):
            end = Run(cats, start, Category.separator)
            return unit(Kind.SEPARATOR, text[start:end]), end

        if char == '[':
            block = self._markup(text, cats, start, depth, pairs)

            if block is not None:
                return block

        if char in 'hfwHFW' and Boundary(cats, start):
            match = URL.match(text, start)

            if match is not None:
                end = UrlEnd(text, start, match.end())
                return unit(Kind.URL, text[start:end]), end

        if char in '\\&':
            match = UNICODE_ESCAPE.match(text, start)

            if match is not None:
                return unit(Kind.UNICODE, match.group()), match.end()

        if char in '#@':
            match = (HASHTAG if char == '#' else MENTION).match(text, start)

            if match is not None:
                kind = Kind.HASHTAG if char == '#' else Kind.MENTION
                return unit(kind, match.group()), match.end()

        if Category.digit(cat):
            return Number(text, cats, start)

        if Category.letter(cat):
            return Word(text, cats, start)

        if IsPictograph(char):
            end = EmojiEnd(text, start)
            return unit(Kind.EMOJI, text[start:end]), end

        return unit(Kind.PUNCTUATION, char), start + 1

    def _markup(self, text: str, cats: list, start: int, depth: int, pairs: dict):
        """
        Return the markup unit and its end offset if a block opens at
        *start*, or ``None`` if the opening tag has no matching closing tag.
        """
        if start not in pairs:
            return None

        opening = OPEN_TAG.match(text, start)
        close, end = pairs[start]
        begin = opening.end()
        content = self._scan(text[begin:close], cats[begin:close], depth + 1)

        if opening.group(2):
            begin, close = opening.span(2)
            data = self._scan(text[begin:close], cats[begin:close], depth + 1)
        else:
            data = ()

        return markup(content, data), end


def TagPairs(text: str) -> dict:
    """
    Match opening and closing tags of the same name in a single pass.

    Nested blocks of the same name are paired innermost first; tags of
    different names do not affect each other.

    :return: a mapping of opening tag offsets to the ``(start, end)`` span of
             their closing tag; unclosed opening tags are absent
    """
    pairs = {}
    stacks = {}
    ends = {}
    offset = text.find('[')

    while offset != -1:
        match = TAG.match(text, offset)

        if match is not None:
            name = (match.group(1) or match.group(2)).lower()

            if offset >= ends.get(name, 0):
                ends[name] = match.end()
                stack = stacks.setdefault(name, [])

                if match.group(1) is None:
                    stack.append(offset)
                elif stack:
                    pairs[stack.pop()] = match.span()

        offset = text.find('[', offset + 1)

    return pairs


def Run(cats: list, start: int, State) -> int:
    """
    Return the end offset of the run of categories starting at *start* for
    which *State* evaluates to ``True``.
    """
    end = start + 1

    while end < len(cats) and State(cats[end]):
        end += 1

    return end


def Boundary(cats: list, start: int) -> bool:
    """``True`` if *start* is not preceded by a letter, digit, or mark."""
    return start == 0 or not Category.wordchar(cats[start - 1])


def UrlEnd(text: str, start: int, end: int) -> int:
    """Strip trailing sentence punctuation and unbalanced brackets."""
    while end > start and text[end - 1] in URL_TAIL:
        if text[end - 1] == ')' and \
           text.count('(', start, end) >= text.count(')', start, end):
            break

        end -= 1

    return end


def Number(text: str, cats: list, start: int) -> tuple:
    """
    Scan a number or numerical unit at *start*.

    Integers too long to convert keep their decimal digit string as value.
    """
    match = NUMBER.match(text, start)
    end = match.end()
    groups = match.group(1).count('.')

    if end < len(text) and Category.wordchar(cats[end]):
        tail = Run(cats, end, Category.wordchar)

        if any(Category.digit(cat) for cat in cats[end:tail]):
            subkind = Kind.ALPHANUMERIC
        else:
            subkind = Kind.MEASURES

        return unit(Kind.NUMERICAL, text[start:tail], subkind), tail

    value = text[start:end]

    if groups > 1:
        return unit(Kind.NUMERICAL, value, Kind.DOT_SEPARATED), end

    if groups:
        return unit(Kind.NUMBER, float(value), Kind.FLOAT), end

    try:
        return unit(Kind.NUMBER, int(value), Kind.INTEGER), end
    except ValueError:
        # exceeds the interpreter's integer string conversion limit
        return unit(Kind.NUMBER, DecimalString(value), Kind.INTEGER), end


def DecimalString(digits: str) -> str:
    """
    Return the ASCII decimal form of a string of (any script's) *digits*,
    without leading zeros.
    """
    return ''.join(str(digit(c)) for c in digits).lstrip('0') or '0'


def Word(text: str, cats: list, start: int) -> tuple:
    """
    Scan a word, strange word, or alphanumeric unit at *start*.
    """
    end = Run(cats, start, Category.wordchar)
    value = text[start:end]

    if any(Category.digit(cat) for cat in cats[start:end]):
        return unit(Kind.NUMERICAL, value, Kind.ALPHANUMERIC), end
    elif len(Scripts(value)) > 1:
        return unit(Kind.STRANGE_WORD, value), end
    else:
        return unit(Kind.WORD, value), end


def Scripts(word: str) -> set:
    """
    Return the names of the scripts (e.g., ``LATIN``, ``CYRILLIC``) of the
    cased and other letters in *word*.
    """
    scripts = set()

    for char in word:
        if char.isalpha():
            script = charname(char, '').split(' ', 1)[0]

            if script and script != 'MODIFIER':
                scripts.add(SCRIPT_ALIASES.get(script, script))

    return scripts


def IsPictograph(char: str) -> bool:
    """``True`` if *char* is an emoji code point."""
    point = ord(char)
    return any(low <= point <= high for low, high in PICTOGRAPHS)


def EmojiEnd(text: str, start: int) -> int:
    """
    Return the end offset of the emoji sequence at *start*, joining
    modifiers, zero-width-joined pictographs, and regional indicator pairs.
    """
    end = start + 1

    if IsRegionalIndicator(text[start]) and end < len(text) and \
       IsRegionalIndicator(text[end]):
        return end + 1

    while end < len(text):
        point = ord(text[end])

        if point in EMOJI_MODIFIERS or SKIN_TONES[0] <= point <= SKIN_TONES[1]:
            end += 1
        elif point == ZERO_WIDTH_JOINER and end + 1 < len(text) and \
                IsPictograph(text[end + 1]):
            end += 2
        else:
            break

    return end


def IsRegionalIndicator(char: str) -> bool:
    return REGIONAL_INDICATORS[0] <= ord(char) <= REGIONAL_INDICATORS[1]
