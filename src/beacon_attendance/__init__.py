"""Beacon Attendance package.

Organized by feature modules (sessions, checkins, users) with a thin Flask
controller layer over in-memory services wired together in ``container``.
"""
