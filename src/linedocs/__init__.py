"""Randomized, resumable line-file document reader."""
