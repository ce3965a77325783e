"""Check-in Reports package.

Feature modules (users, reports) each carry a thin Flask controller on top of
service and repository layers.
"""
