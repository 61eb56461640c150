import sys

from unittest import main, skipUnless, TestCase

from textrepr.text.scanner import DecimalString, MAX_DEPTH, Scanner, ScanError, \
    Scripts, TagPairs
from textrepr.text.unit import Kind, markup
from textrepr.text import unit as U

BACKSLASH = chr(0x5C)
GRIN = chr(0x1F600)
THUMBS_UP = chr(0x1F44D)
SKIN_TONE = chr(0x1F3FD)
ZWJ = chr(0x200D)


class ScannerTests(TestCase):

    def setUp(self):
        self.scanner = Scanner()

    def assertScan(self, text, expected):
        self.assertListEqual(expected, self.scanner.scan(text))

    def testEmpty(self):
        self.assertScan('', [])

    def testWordsAndPunctuation(self):
        self.assertScan('газпром работает.', [
            U.Word('газпром'), U.Separator(' '), U.Word('работает'), U.Punctuation('.'),
        ])

    def testSeparatorRun(self):
        self.assertScan('a \t\n b', [U.Word('a'), U.Separator(' \t\n '), U.Word('b')])

    def testHashtagMentionFloat(self):
        self.assertScan('#test @user 3.14', [
            U.Hashtag('#test'), U.Separator(' '), U.Mention('@user'), U.Separator(' '),
            U.Float(3.14),
        ])

    def testLoneHashAndAt(self):
        self.assertScan('# @', [U.Punctuation('#'), U.Separator(' '), U.Punctuation('@')])

    def testInteger(self):
        units = self.scanner.scan('42')
        self.assertListEqual([U.Integer(42)], units)
        self.assertIsInstance(units[0].value, int)

    def testFloat(self):
        units = self.scanner.scan('0.50')
        self.assertListEqual([U.Float(0.5)], units)
        self.assertIsInstance(units[0].value, float)

    def testTrailingDot(self):
        self.assertScan('3.', [U.Integer(3), U.Punctuation('.')])

    def testDotSeparated(self):
        self.assertScan('12.05.2018', [U.Numerical(Kind.DOT_SEPARATED, '12.05.2018')])
        self.assertScan('127.0.0.1', [U.Numerical(Kind.DOT_SEPARATED, '127.0.0.1')])

    def testMeasures(self):
        self.assertScan('10кг', [U.Numerical(Kind.MEASURES, '10кг')])
        self.assertScan('2.5kg', [U.Numerical(Kind.MEASURES, '2.5kg')])

    def testAlphanumeric(self):
        self.assertScan('mp3', [U.Numerical(Kind.ALPHANUMERIC, 'mp3')])
        self.assertScan('10x20', [U.Numerical(Kind.ALPHANUMERIC, '10x20')])

    def testStrangeWord(self):
        mixed = 'p' + 'ривет'  # Latin p, Cyrillic rest
        self.assertScan(mixed, [U.StrangeWord(mixed)])

    def testCombiningMarkStaysInWord(self):
        word = 'e' + chr(0x0301) + 'te'
        self.assertScan(word, [U.Word(word)])

    def testHyphenatedWord(self):
        self.assertScan('кто-то', [U.Word('кто'), U.Punctuation('-'), U.Word('то')])

    def testUrl(self):
        self.assertScan('see https://example.com/a?b=1.', [
            U.Word('see'), U.Separator(' '), U.Url('https://example.com/a?b=1'),
            U.Punctuation('.'),
        ])

    def testWwwUrl(self):
        self.assertScan('www.example.org', [U.Url('www.example.org')])

    def testUrlKeepsBalancedParenthesis(self):
        url = 'http://en.wikipedia.org/wiki/a_(b)'
        self.assertScan(url, [U.Url(url)])
        self.assertScan('(' + url + ')', [U.Punctuation('('), U.Url(url), U.Punctuation(')')])

    def testUrlMustStartAtBoundary(self):
        kinds = [u.kind for u in self.scanner.scan('xhttp://a.b')]
        self.assertNotIn(Kind.URL, kinds)
        self.assertEqual(Kind.WORD, kinds[0])

    def testUnicodeEscapes(self):
        escape = BACKSLASH + 'u00e9'
        self.assertScan(escape + ' &#233; &#xe9;', [
            U.Unicode(escape), U.Separator(' '), U.Unicode('&#233;'), U.Separator(' '),
            U.Unicode('&#xe9;'),
        ])

    def testBracedUnicodeEscape(self):
        escape = BACKSLASH + 'u{1f600}'
        self.assertScan(escape, [U.Unicode(escape)])

    def testAmpersandIsPunctuation(self):
        self.assertScan('&amp;', [U.Punctuation('&'), U.Word('amp'), U.Punctuation(';')])

    def testEmoji(self):
        self.assertScan(GRIN, [U.Emoji(GRIN)])
        self.assertScan(GRIN + GRIN, [U.Emoji(GRIN), U.Emoji(GRIN)])

    def testEmojiSequences(self):
        toned = THUMBS_UP + SKIN_TONE
        self.assertScan(toned, [U.Emoji(toned)])
        family = chr(0x1F468) + ZWJ + chr(0x1F469) + ZWJ + chr(0x1F467)
        self.assertScan(family, [U.Emoji(family)])
        flag = chr(0x1F1F7) + chr(0x1F1FA)
        self.assertScan(flag, [U.Emoji(flag)])
        heart = chr(0x2764) + chr(0xFE0F)
        self.assertScan('x' + heart, [U.Word('x'), U.Emoji(heart)])

    def testOtherSymbolsArePunctuation(self):
        self.assertScan('№5', [U.Punctuation('№'), U.Integer(5)])

    def testMarkup(self):
        self.assertScan('[quote=иван]привет[/quote]', [
            markup([U.Word('привет')], [U.Word('иван')]),
        ])

    def testMarkupWithoutData(self):
        self.assertScan('[b]x[/b]', [markup([U.Word('x')], [])])

    def testMarkupInText(self):
        self.assertScan('a [i]b[/i] c', [
            U.Word('a'), U.Separator(' '), markup([U.Word('b')]), U.Separator(' '),
            U.Word('c'),
        ])

    def testNestedMarkup(self):
        self.assertScan('[quote][quote]a[/quote] b[/quote]', [
            markup([markup([U.Word('a')]), U.Separator(' '), U.Word('b')]),
        ])

    def testUnclosedMarkup(self):
        self.assertScan('[b]x', [
            U.Punctuation('['), U.Word('b'), U.Punctuation(']'), U.Word('x'),
        ])

    def testUrlInMarkupData(self):
        self.assertScan('[url=http://x.ru]сайт[/url]', [
            markup([U.Word('сайт')], [U.Url('http://x.ru')]),
        ])

    def testMaxDepth(self):
        with self.assertRaises(ScanError):
            Scanner(max_depth=1).scan('[b][b]x[/b][/b]')

        self.assertEqual(1, len(Scanner(max_depth=2).scan('[b][b]x[/b][/b]')))

    def testDefaultMaxDepth(self):
        def Nest(n):
            return '[b]' * n + 'x' + '[/b]' * n

        self.assertEqual(1, len(self.scanner.scan(Nest(MAX_DEPTH))))

        with self.assertRaises(ScanError):
            self.scanner.scan(Nest(MAX_DEPTH + 1))

    def testNegativeMaxDepth(self):
        with self.assertRaises(ValueError):
            Scanner(max_depth=-1)

    def testLoneSurrogate(self):
        with self.assertRaises(ScanError):
            self.scanner.scan('a' + chr(0xD800))

    @skipUnless(getattr(sys, 'get_int_max_str_digits', lambda: 0)(),
                'no integer string conversion limit')
    def testLongIntegerKeepsDigits(self):
        digits = '1' * (sys.get_int_max_str_digits() + 1)
        self.assertScan('00' + digits + ' #a', [
            U.Integer(digits), U.Separator(' '), U.Hashtag('#a'),
        ])

    def testManyUnclosedTags(self):
        units = self.scanner.scan('[b]' * 5000 + '[i]x[/i]')
        self.assertEqual(15001, len(units))
        self.assertEqual(markup([U.Word('x')]), units[-1])
        self.assertListEqual(
            [U.Punctuation('['), U.Word('b'), U.Punctuation(']')], units[:3]
        )


class DecimalStringTests(TestCase):

    def testStripsLeadingZeros(self):
        self.assertEqual('120', DecimalString('00120'))
        self.assertEqual('0', DecimalString('000'))

    def testOtherScripts(self):
        self.assertEqual('35', DecimalString(chr(0x0663) + chr(0x0665)))


class TagPairsTests(TestCase):

    def testPairs(self):
        self.assertDictEqual({0: (4, 8)}, TagPairs('[b]x[/b]'))

    def testNestedPairs(self):
        self.assertDictEqual({0: (11, 15), 3: (7, 11)}, TagPairs('[b][b]x[/b][/b]'))

    def testNamesAreIndependent(self):
        self.assertDictEqual({0: (11, 15), 3: (7, 11)}, TagPairs('[b][i]x[/i][/b]'))

    def testUnclosed(self):
        self.assertDictEqual({3: (7, 11)}, TagPairs('[b][b]x[/b]'))
        self.assertDictEqual({}, TagPairs('[/b][b]'))

    def testData(self):
        self.assertDictEqual({0: (15, 21)}, TagPairs('[url=www.x.ru]a[/url]'))


class ScriptsTests(TestCase):

    def testSingleScript(self):
        self.assertSetEqual({'LATIN'}, Scripts('word'))
        self.assertSetEqual({'CYRILLIC'}, Scripts('слово'))

    def testMixedScripts(self):
        self.assertSetEqual({'LATIN', 'CYRILLIC'}, Scripts('p' + 'ривет'))

    def testAliasedScripts(self):
        self.assertSetEqual({'CJK'}, Scripts('漢字かな'))

    def testIgnoresNonLetters(self):
        self.assertSetEqual({'LATIN'}, Scripts('e' + chr(0x0301) + '1'))


if __name__ == '__main__':
    main()
