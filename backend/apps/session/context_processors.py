def session_attributes(request):
    """Expose the session id and its attribute names to every template."""
    session = getattr(request, 'session', None)
    if session is None or not session.session_key:
        return {}
    # loading drops a cookie key that has no stored session
    names = list(session.keys())
    if not session.session_key:
        return {}
    return {
        'session_id': session.session_key,
        'session_attribute_names': names,
    }
