#!/usr/bin/python

# Copyright 2009, Mitch Patenaude

"""Generate Markov chain text from a file.

usage: markov-text [file]
"""

__author__ = 'Mitch Patenaude (patenaude@gmail.com)'

import logging
import os
import sys

from markov_text import chain
from markov_text import generator

log = logging.getLogger(__name__)


class UsageError(Exception):
  """Wrong number of command line arguments."""

  def __init__(self, prog):
    Exception.__init__(self, '%s: Generate Markov chain\n\n'
                             '  usage: %s [file]' % (prog, prog))
    self.prog = prog


class FileReadError(IOError):
  """The input file couldn't be opened or read."""


def read_text(path):
  """Read the whole of path as text.

  Bytes that aren't valid UTF-8 are kept as surrogate escapes, so any
  readable file yields words and writes back out byte for byte.

  Raises:
    FileReadError: if it can't be opened or read
  """
  try:
    with open(path, 'r', encoding='utf-8', errors='surrogateescape',
              newline='') as infile:
      return infile.read()
  except (IOError, OSError) as e:
    raise FileReadError('cannot read %s: %s' % (path, e))


def babble(path, outfile, width=generator.MAX_LINE_LENGTH, rng=None):
  """Write text generated from the contents of path to outfile."""
  table = chain.build(read_text(path))
  outfile.write(generator.render(table, width=width, rng=rng))


def main(argv=None, out=None):
  """Run the command line; returns the process exit status."""
  if argv is None:
    argv = sys.argv
  if out is None:
    # words may carry escaped bytes from a non-UTF-8 input file
    if hasattr(sys.stdout, 'reconfigure'):
      sys.stdout.reconfigure(errors='surrogateescape')
    out = sys.stdout

  try:
    if len(argv) != 2:
      raise UsageError(os.path.basename(argv[0]) if argv else 'markov-text')
    babble(argv[1], out)
  except UsageError as e:
    out.write('%s\n' % e)
    return 1
  except FileReadError as e:
    # nothing goes to stdout, the reason is only logged
    log.error('%s', e)
    return 1
  except chain.InsufficientInput as e:
    log.debug('%s', e)
    out.write('ERROR: too short!\n')
    return 1
  except generator.NoStartError as e:
    out.write('ERROR: %s\n' % e)
    return 1
  return 0


def run():
  logging.basicConfig(level=logging.WARNING, stream=sys.stderr,
                      format='%(name)s: %(levelname)s: %(message)s')
  sys.exit(main())


if __name__ == '__main__':
  run()
