import textrepr.text.strtok as S

from unicodedata import category
from unittest import main, TestCase


class CategoryTests(TestCase):

    def testLetters(self):
        for char in 'aZжЖ':
            self.assertTrue(S.Category.letter(S.GetCharCategoryValue(char)), char)

    def testWordCharacters(self):
        for char in ('a', '7', chr(0x0301), chr(0x2163)):
            self.assertTrue(S.Category.wordchar(S.GetCharCategoryValue(char)), char)

        for char in '-_.#' + chr(0x00B2):
            self.assertFalse(S.Category.wordchar(S.GetCharCategoryValue(char)), char)

    def testSeparators(self):
        for char in (' ', '\t', '\n', '\r', chr(0x2029), chr(0x200B)):
            self.assertTrue(S.Category.separator(S.GetCharCategoryValue(char)),
                            'U+%04X' % ord(char))

    def testRemappedSymbols(self):
        for char in '#@&':
            self.assertEqual(S.GetCharCategoryValue(char), S.Category.So)

        self.assertEqual(S.GetCharCategoryValue('%'), S.Category.Sm)

    def testControlsAreNoWordsOrSeparators(self):
        for char in (chr(0), chr(0x7F), chr(0x200D), chr(0xE000)):
            cat = S.GetCharCategoryValue(char)
            self.assertFalse(S.Category.wordchar(cat), 'U+%04X' % ord(char))
            self.assertFalse(S.Category.separator(cat), 'U+%04X' % ord(char))


class CharIterTests(TestCase):

    def testCategoryIter(self):
        result = list(S.CategoryIter('a1 .'))
        expected = [S.Category.Ll, S.Category.Nd, S.Category.Zs, S.Category.Po]
        self.assertListEqual(expected, result)

    def testLoneSurrogate(self):
        with self.assertRaises(UnicodeError):
            list(S.CategoryIter('ab' + chr(0xD800) + 'cd'))


class GetCharCategoryTests(TestCase):

    def testNonRemappedCharacters(self):
        remapped_chars = set()

        for chars in S.REMAPPED_CHARACTERS.values():
            remapped_chars.update(chars)

        for i in range(0, 0xFFFF):
            char = chr(i)

            if char not in remapped_chars:
                cat = category(char)
                result = S.GetCharCategoryValue(char)
                self.assertEqual(result, getattr(S.Category, cat),
                                 "U+%04X has cat=%s; but received=%s" %
                                 (i, cat, chr(result)))


if __name__ == '__main__':
    main()
