"""Services Layer — orchestrates store IO around the pure rules in core/.

Invariants:
    - One service class per resource, constructed with an EntityStore
    - Services return public dicts (already passed through core/serialize.py)
"""
