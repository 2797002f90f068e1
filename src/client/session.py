"""Client-side credential holder"""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class ClientSession:
    """
    Bearer token of the logged-in admin

    Passed explicitly to every protected API call. clear() is called when
    the server rejects the token or the user logs out.
    """

    token: Optional[str] = None
    username: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def authorization_header(self) -> Dict[str, str]:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    def clear(self) -> None:
        self.token = None
        self.username = None
