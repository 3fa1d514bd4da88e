"""
Admin Model

Admin allowlist. ``permissions`` is stored and returned as the raw
delimiter-joined string, e.g. ``manageUsers&manageEvents``.
"""

from opencall.extensions import db


admins = db.Table(
    'admins',
    db.Column('email', db.Text),
    db.Column('permissions', db.Text),
)


def find_admin_permissions(email):
    """Permissions string for ``email``, or None when not an admin."""
    return db.session.execute(
        db.select(admins.c.permissions).where(admins.c.email == email)
    ).scalars().first()


def ensure_admin(email, permissions):
    """Insert an admin row unless one exists for ``email``.

    Returns True when a row was inserted.
    """
    if find_admin_permissions(email) is not None:
        return False

    try:
        db.session.execute(admins.insert().values(email=email, permissions=permissions))
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return True
