"""
.. py:module:: textrepr.text.strtok
   :synopsis: Remapped Unicode character categories for the lexical scanner.

.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
from unicodedata import category

#################
# CONFIGURATION #
#################


class Category:
    """
    Integer values for the Unicode categories, one ASCII character per
    category.

    The groupings are ordered so that the most frequent tests
    (:meth:`letter`, :meth:`wordchar`) are simple range checks.
    """

    # 65 - 90 (A-Z)
    Lu = ord('A')
    "``A`` - upper-case letter"
    Lt = ord('C')
    "``C`` - title-case letter"
    Ll = ord('D')
    "``D`` - lower-case letter"
    LC = ord('F')
    "``F`` - case character (no characters in this category)"
    Lm = ord('G')
    "``G`` - letter modifier"
    Lo = ord('H')
    "``H`` - letter, other (scripts without case)"
    Nd = ord('I')
    "``I`` - digit"
    Nl = ord('J')
    "``J`` - letter number (Roman numerals, etc.)"
    Mc = ord('K')
    "``K`` - spacing combining mark"
    Me = ord('L')
    "``L`` - enclosing mark (keycaps, Cyrillic number signs)"
    Mn = ord('M')
    "``M`` - non-spacing mark (accents, variation selectors)"
    No = ord('N')
    "``N`` - other number (superscripts, fractions)"
    Zl = ord('O')
    "``O`` - line separator, including newlines"
    Zp = ord('P')
    "``P`` - paragraph separator"
    Zs = ord('Q')
    "``Q`` - space separator, including tabs"

    # 97 - 122 (a-z)
    Pc = ord('d')
    "``d`` - connector punctuation (``_``)"
    Pd = ord('e')
    "``e`` - dash punctuation"
    Pe = ord('f')
    "``f`` - closing punctuation"
    Pf = ord('g')
    "``g`` - final quotation mark"
    Pi = ord('h')
    "``h`` - initial quotation mark"
    Po = ord('i')
    "``i`` - other punctuation, sans ``#``, ``&``, ``@``, and ``%``"
    Ps = ord('j')
    "``j`` - opening punctuation"
    Sc = ord('k')
    "``k`` - currency symbol"
    Sk = ord('l')
    "``l`` - modifier symbol (including emoji skin tones)"
    Sm = ord('m')
    "``m`` - math symbol"
    So = ord('n')
    "``n`` - other symbol (pictographs, ``#``, ``&``, ``@``)"

    # 91 - 96
    Cs = ord('_')
    "``_`` - surrogate character (encoding error)"
    Cc = ord('^')
    "``^`` - control character (sans whitespace controls)"
    Cf = ord('`')
    "````` - formatting character (zero-width joiner, etc.)"
    Cn = ord(']')
    "``]`` - not assigned"
    Co = ord('[')
    "``[`` - other, private use"

    SEPARATORS = frozenset({Zl, Zp, Zs})

    @classmethod
    def letter(cls, cat: int) -> bool:
        """``True`` if *cat* is any letter category (L?)."""
        return cat < 73

    @classmethod
    def digit(cls, cat: int) -> bool:
        """``True`` if *cat* is a decimal digit (Nd)."""
        return cat == Category.Nd

    @classmethod
    def wordchar(cls, cat: int) -> bool:
        """``True`` if *cat* may appear inside a word: L?, Nd, Nl, or M?."""
        return cat < 78

    @classmethod
    def separator(cls, cat: int) -> bool:
        """``True`` if *cat* is any separator category (Z?)."""
        return cat in cls.SEPARATORS


CATEGORY_MAP = {
    "Lu": Category.Lu,
    "Lt": Category.Lt,
    "Ll": Category.Ll,
    "LC": Category.LC,
    "Lm": Category.Lm,
    "Lo": Category.Lo,
    "Nd": Category.Nd,
    "Nl": Category.Nl,
    "No": Category.No,
    "Mc": Category.Mc,
    "Me": Category.Me,
    "Mn": Category.Mn,
    "Zl": Category.Zl,
    "Zp": Category.Zp,
    "Zs": Category.Zs,
    "Pc": Category.Pc,
    "Pd": Category.Pd,
    "Pe": Category.Pe,
    "Pf": Category.Pf,
    "Pi": Category.Pi,
    "Po": Category.Po,
    "Ps": Category.Ps,
    "Sc": Category.Sc,
    "Sk": Category.Sk,
    "Sm": Category.Sm,
    "So": Category.So,
    "Cs": Category.Cs,
    "Cc": Category.Cc,
    "Cf": Category.Cf,
    "Cn": Category.Cn,
    "Co": Category.Co,
}
"""
Mapping of Unicode category names to :class:`Category` attributes.
"""

REMAPPED_CHARACTERS = {
    Category.Cc: {
        "\n": Category.Zl,
        "\f": Category.Zl,
        "\r": Category.Zl,
        "\u0085": Category.Zl,  # NEXT LINE
        "\t": Category.Zs,
        "\v": Category.Zs,
        "\x1c": Category.Zl,  # FILE SEPARATOR
        "\x1d": Category.Zl,  # GROUP SEPARATOR
        "\x1e": Category.Zl,  # RECORD SEPARATOR
        "\x1f": Category.Zs,  # UNIT SEPARATOR
    },
    Category.Cf: {
        "\u200B": Category.Zs,  # ZERO WIDTH SPACE
        "\uFEFF": Category.Zs,  # ZERO WIDTH NO-BREAK SPACE (BOM)
    },
    Category.Po: {
        "#": Category.So,
        "&": Category.So,
        "@": Category.So,
        # Variants of #, &, @
        "\uFE5F": Category.So,
        "\uFE60": Category.So,
        "\uFE6B": Category.So,
        "\uFF03": Category.So,
        "\uFF06": Category.So,
        "\uFF20": Category.So,
        "%": Category.Sm,
        # Variants of %
        "\u0609": Category.Sm,
        "\u060A": Category.Sm,
        "\u066A": Category.Sm,
        "\u2030": Category.Sm,
        "\u2031": Category.Sm,
        "\uFE6A": Category.Sm,
        "\uFF05": Category.Sm,
    },
}
"""
Remapped Unicode character categories: ``{ from_cat: { char: to_cat } }``.

Whitespace controls are separators for the scanner, and the hash, at, and
ampersand signs are symbols that introduce hashtags, mentions, and escapes.
"""


##################
# IMPLEMENTATION #
##################

def CategoryIter(string: str) -> iter:
    """
    Yield category integers for a *string*, one per character.

    :raises: UnicodeError if the string contains a lone surrogate code point
    """
    for offset, c in enumerate(string):
        if '\ud800' <= c < '\ue000':
            raise UnicodeError(
                "lone surrogate U+%04X at offset %i" % (ord(c), offset)
            )

        yield GetCharCategoryValue(c)


def GetCharCategoryValue(character: str) -> int:
    """
    Return the (remapped) Unicode category value of a *character*.
    """
    cat = CATEGORY_MAP[category(character)]

    if cat in REMAPPED_CHARACTERS and character in REMAPPED_CHARACTERS[cat]:
        cat = REMAPPED_CHARACTERS[cat][character]

    return cat
