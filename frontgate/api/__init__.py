"""
frontgate.api

Purpose:
    HTTP front controller: API routers, frontend bundle and one error contract.
"""
