"""HR Portal package.

Organized by feature modules (accounts, employees, requests, ...) with a thin
Flask controller layer over plain service classes and a key-value store.
"""
