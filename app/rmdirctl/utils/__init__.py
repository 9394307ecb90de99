"""Utility functions for rmdirctl."""
