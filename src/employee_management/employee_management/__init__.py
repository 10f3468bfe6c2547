"""Employee Management package.

This package is organized by feature modules (employees, attendance, tasks,
leave, ...) with a thin Flask controller layer over service/repository layers
backed by a single JSON document store.
"""
