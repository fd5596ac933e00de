"""Concrete salted_bloom components."""
