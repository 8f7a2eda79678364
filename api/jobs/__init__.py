"""
Job postings: search filters, SQL, business logic and routes.
"""
