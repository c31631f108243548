"""
In-memory page router for the single-page front end.

An explicit finite-state machine over the site's views. Transitions are
guarded: admin and user dashboards require the matching role, and the
event detail view requires an event id.
"""
import enum
import logging
from typing import Optional, Callable, List, Dict, Any

logger = logging.getLogger(__name__)


class View(enum.Enum):
    HOME = 'Home'
    EVENTS = 'Events'
    EVENT_DETAIL = 'EventDetail'
    REGISTER = 'Register'
    LOGIN = 'Login'
    ADMIN = 'Admin'
    USER_DASHBOARD = 'UserDashboard'

    @classmethod
    def parse(cls, token: Any) -> Optional['View']:
        """Resolve a view token such as a slide's action; None if unknown."""
        if isinstance(token, cls):
            return token
        for view in cls:
            if view.value == token:
                return view
        return None


# View -> (role required, view to fall back to)
ROLE_GUARDS = {
    View.ADMIN: ('admin', View.HOME),
    View.USER_DASHBOARD: ('user', View.LOGIN),
}


class PageRouter:
    """
    Holds the active view, the logged-in user and the selected event.
    Listeners are called with the new view after every transition.
    """

    def __init__(self, user: Optional[Dict[str, Any]] = None):
        self.view = View.HOME
        self.user = user
        self.event_id: Optional[int] = None
        self._listeners: List[Callable[[View], None]] = []

    @property
    def role(self) -> Optional[str]:
        return self.user.get('role') if self.user else None

    def subscribe(self, listener: Callable[[View], None]) -> None:
        self._listeners.append(listener)

    def resolve(self, target: Any, event_id: Optional[int] = None) -> View:
        """The view a request for `target` actually lands on."""
        view = View.parse(target)
        if view is None:
            logger.warning("Unknown view %r, showing Home", target)
            return View.HOME

        guard = ROLE_GUARDS.get(view)
        if guard and self.role != guard[0]:
            return guard[1]

        if view is View.EVENT_DETAIL and event_id is None and self.event_id is None:
            return View.EVENTS
        return view

    def navigate(self, target: Any, event_id: Optional[int] = None) -> View:
        """Move to a view, applying the guards. Returns the view entered."""
        view = self.resolve(target, event_id)
        if view is View.EVENT_DETAIL and event_id is not None:
            self.event_id = event_id
        self.view = view
        for listener in self._listeners:
            listener(view)
        return view

    def log_in(self, user: Dict[str, Any]) -> View:
        """Store the user and open their dashboard."""
        self.user = user
        if self.role == 'admin':
            return self.navigate(View.ADMIN)
        return self.navigate(View.USER_DASHBOARD)

    def log_out(self) -> View:
        self.user = None
        return self.navigate(View.HOME)
