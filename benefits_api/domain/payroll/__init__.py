"""
Payroll bounded context: domain layer.

Entities, eligibility rule, paycheck calculator, ports, and errors.
"""
