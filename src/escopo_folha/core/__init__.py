"""Payroll calculation core."""
