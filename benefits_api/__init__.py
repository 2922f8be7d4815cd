"""
Benefits Calculator: employee benefit cost and paycheck API.

Application package root. This is a small service using
hexagonal architecture (ports & adapters) with domain-driven design.

Bounded contexts:
    - payroll: Employees, dependents, eligibility, paycheck deductions.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (JSON file store) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""

__version__ = "1.0.0"
