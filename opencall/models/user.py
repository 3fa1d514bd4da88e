"""
User Model

The ``users`` table has no primary key and no unique constraint on email,
so it is declared as a plain table rather than a mapped class.
"""

from flask_login import UserMixin
from opencall.extensions import db


users = db.Table(
    'users',
    db.Column('email', db.Text),
    db.Column('password_hash', db.Text),
    db.Column('first_name', db.Text),
    db.Column('last_name', db.Text),
)


class User(UserMixin):
    """A registered volunteer, identified by email"""

    def __init__(self, email, password_hash, first_name, last_name):
        self.email = email
        self.password_hash = password_hash
        self.first_name = first_name
        self.last_name = last_name

    def get_id(self):
        return self.email

    @classmethod
    def from_row(cls, row):
        return cls(row['email'], row['password_hash'], row['first_name'], row['last_name'])

    def to_dict(self):
        """Full row, password hash included, as stored in the session."""
        return {
            'email': self.email,
            'password_hash': self.password_hash,
            'first_name': self.first_name,
            'last_name': self.last_name,
        }

    def __repr__(self):
        return f'<User {self.email}>'


def find_user(email):
    """Return the first user with this exact email, or None."""
    row = db.session.execute(
        db.select(users).where(users.c.email == email)
    ).mappings().first()
    return User.from_row(row) if row else None


def insert_user(email, password_hash, first_name, last_name):
    """Insert a user row. Does not check for an existing email."""
    try:
        db.session.execute(users.insert().values(
            email=email,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
        ))
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return User(email, password_hash, first_name, last_name)


def count_users(email=None):
    """Number of user rows, optionally only those with this exact email."""
    query = db.select(db.func.count()).select_from(users)
    if email is not None:
        query = query.where(users.c.email == email)
    return db.session.execute(query).scalar_one()
