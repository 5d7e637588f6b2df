"""
userdesk

In-memory user management web service.
"""
