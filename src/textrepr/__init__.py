"""
.. py:module:: textrepr
   :synopsis: Classify text into typed, stemmed token representations.

.. License: GNU Affero GPL v3 (http://www.gnu.org/licenses/agpl.html)
"""

__version__ = '0.1.0'
