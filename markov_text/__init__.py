# Copyright 2009, Mitch Patenaude

"""Babble new text out of a bigram Markov chain built from old text."""

__author__ = 'Mitch Patenaude (patenaude@gmail.com)'
