"""Payroll System package.

Feature modules (employees, attendance, payroll, indemnity, reports, ...)
with a thin Flask controller layer over service/repository layers.
The payroll and indemnity rules follow Kuwait labor-law conventions.
"""
