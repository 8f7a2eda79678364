"""
Company catalog: search filters, SQL, business logic and routes.
"""
