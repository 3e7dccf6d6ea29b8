"""Timekeeping package.

Feature modules (punches, employees, overtime, timesheets) keep the payroll
rules in plain service/strategy classes; Flask controllers and MySQL
repositories are thin adapters around them.
"""
