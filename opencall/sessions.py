"""
Server-Side Sessions

Session data lives in process memory; the browser only holds a signed,
opaque session id. Everything is lost when the process restarts.
"""

import logging
import secrets

from flask.sessions import SessionInterface, SessionMixin
from itsdangerous import BadSignature, Signer
from werkzeug.datastructures import CallbackDict

logger = logging.getLogger(__name__)


class ServerSideSession(CallbackDict, SessionMixin):
    """Dict-like session record identified by ``sid``."""

    def __init__(self, initial=None, sid=None, new=False):
        def on_update(self):
            self.modified = True

        CallbackDict.__init__(self, initial, on_update)
        self.sid = sid
        self.new = new
        self.modified = False

    def destroy(self):
        """Drop every key; the record is removed from the store on save."""
        self.clear()
        self.modified = True


class ServerSideSessionInterface(SessionInterface):
    """Keeps session records in a dict keyed by session id."""

    salt = 'opencall-session'

    def __init__(self):
        self.store = {}

    def _get_signer(self, app):
        if not app.secret_key:
            return None
        return Signer(app.secret_key, salt=self.salt)

    def _new_session(self):
        return ServerSideSession(sid=secrets.token_urlsafe(32), new=True)

    def open_session(self, app, request):
        signer = self._get_signer(app)
        if signer is None:
            return None

        cookie = request.cookies.get(self.get_cookie_name(app))
        if not cookie:
            return self._new_session()

        try:
            sid = signer.unsign(cookie).decode('utf-8')
        except BadSignature:
            logger.debug("Rejected session cookie with bad signature")
            return self._new_session()

        data = self.store.get(sid)
        if data is None:
            return self._new_session()
        return ServerSideSession(dict(data), sid=sid)

    def save_session(self, app, session, response):
        name = self.get_cookie_name(app)
        domain = self.get_cookie_domain(app)
        path = self.get_cookie_path(app)

        if not session:
            if session.modified:
                self.store.pop(session.sid, None)
                response.delete_cookie(name, domain=domain, path=path)
            return

        self.store[session.sid] = dict(session)

        if not self.should_set_cookie(app, session):
            return

        response.vary.add('Cookie')
        response.set_cookie(
            name,
            self._get_signer(app).sign(session.sid).decode('utf-8'),
            expires=self.get_expiration_time(app, session),
            httponly=self.get_cookie_httponly(app),
            domain=domain,
            path=path,
            secure=self.get_cookie_secure(app),
            samesite=self.get_cookie_samesite(app),
        )
