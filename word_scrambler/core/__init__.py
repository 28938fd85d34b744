"""Core scrambling logic: letter classification, word matching, shuffling."""
