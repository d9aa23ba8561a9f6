"""Trainee attendance package.

This package is organized by feature modules (attendance, common, core) with a
thin container/entry-point layer. The attendance engine is pure: it turns raw
check-in events into a gap-filled daily map and derives dashboard statistics.
"""
