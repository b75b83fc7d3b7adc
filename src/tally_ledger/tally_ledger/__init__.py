"""Tally Ledger package.

This package is organized by feature modules (entries, shifts, reports, ...)
with a thin Flask controller layer over service/repository layers. The
reporting engine in ``reports`` is a set of pure functions over typed records.
"""
