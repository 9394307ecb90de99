"""CLI module for rmdirctl."""
