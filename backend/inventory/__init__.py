# inventory/__init__.py
"""
Inventory app - stock items owned by a company.

Derived stock figures (closing stock, stock value, reorder point,
reorder flag) are never written directly; they are recomputed by
inventory.valuation on every change.
"""
