from .store import SessionAttributeStore


def build_session_store(request) -> SessionAttributeStore:
    # request.session is opened by SessionMiddleware from the session cookie
    return SessionAttributeStore(request.session)
