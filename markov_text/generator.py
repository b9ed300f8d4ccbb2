#!/usr/bin/python

# Copyright 2009, Mitch Patenaude

__author__ = 'Mitch Patenaude (patenaude@gmail.com)'

import logging
import random

from markov_text.chain import Bigram
from markov_text.chain import END

log = logging.getLogger(__name__)

MAX_LINE_LENGTH = 60


class NoStartError(LookupError):
  """Raised when no bigram in the table can start a sentence."""


def PickStart(table, rng=None, max_attempts=None):
  """Choose a bigram whose first word is capitalized.

  Every qualifying bigram is equally likely.

  Arguments:
    table: a ChainTable
    rng: (optional) source of randomness with a randrange(n) method,
      defaults to the random module
    max_attempts: (optional) if given, draw keys from the whole table with
      replacement until one qualifies, giving up after this many draws.
      Otherwise the qualifying keys are collected up front.

  Returns:
    a Bigram

  Raises:
    NoStartError: if no qualifying bigram was found
  """
  if rng is None:
    rng = random

  if max_attempts is None:
    candidates = table.StartCandidates()
    if not candidates:
      raise NoStartError('no bigram starts with an uppercase word')
    log.debug('choosing start from %d of %d bigrams',
              len(candidates), len(table))
    return candidates[rng.randrange(len(candidates))]

  keys = list(table)
  if not keys:
    raise NoStartError('empty chain table')
  for attempt in range(max_attempts):
    key = keys[rng.randrange(len(keys))]
    if key.IsStart():
      log.debug('found start %r after %d draws', key, attempt + 1)
      return key
  raise NoStartError('no uppercase start found in %d draws' % max_attempts)


def generate(table, rng=None, max_attempts=None):
  """Generate a random sequence of words.

  Returns a generator that yields the two words of a capitalized start
  bigram, then one sampled follower at a time, and ends when END is drawn.
  This might be never if the table contains a cycle with no way out to the
  end of the source text.

  Arguments:
    table: a ChainTable
    rng: (optional) object with a randrange(n) method
    max_attempts: (optional) see PickStart()

  Returns:
    An iterable sequence of words.
  """
  if rng is None:
    rng = random

  first, second = PickStart(table, rng=rng, max_attempts=max_attempts)
  yield first
  yield second

  while True:
    followers = table.Followers(Bigram(first, second))
    follows = followers[rng.randrange(len(followers))]
    if follows is END:
      # reached the end of the source text
      return
    yield follows
    first, second = second, follows


def wrap(words, width=MAX_LINE_LENGTH):
  """Join words into lines of at most width characters.

  The first two words always share a line.  A word longer than width gets
  a line of its own.
  """
  line = None
  for index, word in enumerate(words):
    if line is None:
      line = word
    elif index < 2 or len(line) + 1 + len(word) <= width:
      line += ' ' + word
    else:
      yield line
      line = word
  if line is not None:
    yield line


def render(table, width=MAX_LINE_LENGTH, rng=None, max_attempts=None):
  """Generate text from table as newline terminated, wrapped lines."""
  words = generate(table, rng=rng, max_attempts=max_attempts)
  return ''.join(line + '\n' for line in wrap(words, width=width))
