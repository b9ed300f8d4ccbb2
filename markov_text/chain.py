#!/usr/bin/python

# Copyright 2009, Mitch Patenaude

"""Bigram chain table.

Maps each pair of consecutive words in a text to every word seen following
that pair, plus a single END entry under the pair the text finished on.
"""

__author__ = 'Mitch Patenaude (patenaude@gmail.com)'

import collections
import logging
import string

log = logging.getLogger(__name__)


class _EndMarker(object):
  """Sentinel follower recorded where the source text ends."""

  __slots__ = []

  def __repr__(self):
    return 'END'

END = _EndMarker()

_UPPERCASE = frozenset(string.ascii_uppercase)


class Bigram(collections.namedtuple('Bigram', ['first', 'second'])):
  """Two consecutive words, used as a key into the chain table.

  Equality and hashing are those of a plain tuple, so two bigrams built from
  equal words always land on the same table entry.
  """

  __slots__ = ()

  def IsStart(self):
    """True if the first word begins with an uppercase ASCII letter."""
    return self.first[:1] in _UPPERCASE


class InsufficientInput(ValueError):
  """Raised when there aren't enough words to form a single bigram."""

  def __init__(self, found):
    ValueError.__init__(self, 'need at least 2 words of input, got %d' % found)
    self.found = found


def tokenize(text):
  """Split text on spaces and newlines.

  Runs of delimiters (double spaces, blank lines) would leave empty
  fragments; those are dropped.  Tabs and carriage returns are kept as part
  of the word.
  """
  return [word for word in text.replace('\n', ' ').split(' ') if word]


class ChainTable(dict):
  """A hash-map of bigram -> list of followers.

  Followers are kept with duplicates, so picking one uniformly by index
  weights it by how often it was seen.
  """

  __slots__ = ['count']

  def __init__(self):
    dict.__init__(self)
    self.count = 0

  def Update(self, words):
    """Record every follower in a list of words.

    A table is filled once; the END it adds marks where its one source
    text finished.

    Arguments:
      words: a list of non-empty words, in source order

    Raises:
      InsufficientInput: if there are fewer than two words
      ValueError: if the table was already populated
    """
    if self:
      raise ValueError('chain table already populated')
    if len(words) < 2:
      raise InsufficientInput(len(words))

    first, second = words[0], words[1]
    for follows in words[2:]:
      self._AddFollower(first, second, follows)
      # slide down: the next key is (second, follows)
      first, second = second, follows

    # The last two words get END as a follower; generation stops on it.
    self._AddFollower(first, second, END)

  def _AddFollower(self, first, second, follows):
    key = Bigram(first, second)
    if key in self:
      self[key].append(follows)
    else:
      self[key] = [follows]
    self.count += 1

  def Followers(self, bigram):
    """Return the follower list for bigram.

    Raises:
      KeyError: if the bigram never occurred in the source
    """
    return self[bigram]

  def StartCandidates(self):
    """All bigrams usable as the start of generated text."""
    return [key for key in self if key.IsStart()]


def build(text):
  """Build a ChainTable from text.

  Raises:
    InsufficientInput: if text holds fewer than two words
  """
  words = tokenize(text)
  table = ChainTable()
  table.Update(words)
  log.debug('built %d bigrams with %d followers from %d words',
            len(table), table.count, len(words))
  return table
