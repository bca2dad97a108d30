"""Confession Attendance package.

Feature modules (settings, calendar, roster, attendance, notifications) each
carry a model, a repository interface with a MySQL implementation, a service
holding the business rules and a thin Flask controller.
"""
