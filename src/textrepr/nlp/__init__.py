"""
.. py:module:: textrepr.nlp
   :synopsis: Word normalization and token classification.

The classifier expects units as produced by :mod:`textrepr.text.scanner`
and normalizes word units with a :class:`textrepr.nlp.stemmer.Normalizer`::

	classifier = Classifier(Normalizer('russian'))
	words = classifier.classify_text(text)

.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
