"""Bundled data files for rmdirctl."""
