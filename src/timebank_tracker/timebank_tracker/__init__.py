"""Timebank Tracker package.

This package is organized by feature modules (schedules, time entries, reports, ...)
around a pure timebank engine, with a thin Flask controller layer and
service/repository layers.
"""
