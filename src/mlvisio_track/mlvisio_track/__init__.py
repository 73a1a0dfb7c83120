"""MlvisioTrack attendance backend.

This package is organized by feature modules (users, attendance, schedules, ...)
with a thin Flask controller layer on top of service and repository layers
backed by Firestore.
"""
