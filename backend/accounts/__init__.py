# accounts/__init__.py
"""
Accounts app - Authentication and multi-tenancy for Stockroom.

This app provides:
- User: login identity with a USER/ADMIN role
- Company: the tenant, owned one-to-one by a USER
- tokens: signed access tokens carrying {subject, role}
- authz: ActorContext and the tenant access decision point
- commands: registration, login and company operations

Tenant scoping is enforced by passing an ActorContext into every command.
"""
