"""Lateness Tracker package.

This package is organized by feature modules (students, lateness, ...)
with a thin Flask controller layer over service/repository layers.
"""
