"""Blueprint registration for Flask app"""


def register_blueprints(app):
    """Register all blueprints with the Flask app"""
    from domains.session import session_bp

    app.register_blueprint(session_bp, url_prefix='/api/session')
