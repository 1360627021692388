# Session Domain
# Onboarding session bookkeeping: businesses, sessions and their messages
#
# Components:
# - api/: Blueprint routes for /api/session
# - services/: Session creation and fetch logic

from domains.session.api import session_bp

__all__ = ['session_bp']
