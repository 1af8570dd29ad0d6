"""Payroll System package.

This package is organized by feature modules (attendance, leave, compensation,
payroll, ...) with a thin Flask controller layer on top of plain in-memory
domain objects and a snapshot repository layer.
"""
