from domains.session.api.routes import bp

session_bp = bp

__all__ = ['bp', 'session_bp']
