"""Digital Logbook package.

Organized by feature modules (users, dashboards, attendance, ...) with a thin
Flask controller layer over service/repository layers. Every repository has a
MySQL implementation and an in-memory one backed by the mock fixture roster.
"""
