"""
Payroll bounded context: infrastructure adapters.
"""
