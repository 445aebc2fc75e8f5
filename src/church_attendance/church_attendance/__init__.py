"""Church attendance dashboard package.

Organized by feature modules (attendance, export) with a thin Flask controller
layer over service/repository layers, wired together in ``container.py``.
"""
