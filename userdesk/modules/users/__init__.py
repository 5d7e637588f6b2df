"""
User Management Module

User management split along clear seams:
- domain: User entity and repository outcome values
- repositories: storage contract and in-memory backing
- presentation: HTML rendering
- api: form parsing and HTTP handlers
"""
