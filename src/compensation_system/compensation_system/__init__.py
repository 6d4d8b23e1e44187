"""Compensation System package.

Turns raw time-clock punches, the employee's resolved work schedule, the
holiday calendar and the configurable pay rules into one compensation
record per employee and day.

Feature modules (settings, schedules, attendance, holidays, compensation, ...)
keep the same seams: frozen dataclass models, Protocol repositories, MySQL
adapters and a service layer on top.
"""
