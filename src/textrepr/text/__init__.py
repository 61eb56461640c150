"""
.. py:module:: textrepr.text
   :synopsis: Lexical units and the scanner that produces them from text.

.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""
