"""Work log & payroll package.

Organized by feature modules (worklogs, deductions, payroll, ...) with a thin
Flask JSON controller layer on top of service/repository layers.
"""
