"""Infrastructure Layer — database gateway, repositories, migrations, logging.

Invariants:
    - Every SQLAlchemy error is translated to a core/errors.py type before leaving this layer
"""
