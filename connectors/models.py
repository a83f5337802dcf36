"""
Pydantic models shared by all social connectors.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class ConnectorType(str, Enum):
    EMAIL = "Email"
    SMS = "SMS"
    SOCIAL = "Social"


class ConnectorMetadata(BaseModel):
    """Static descriptor the host uses to list and render a connector."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: ConnectorType
    name: Dict[str, str]
    logo: str
    description: Dict[str, str]
    readme: str = ""
    config_template: str = ""


class GithubConfig(BaseModel):
    """
    Stored GitHub OAuth App credentials.

    Keys arrive in the host's camelCase form (``clientId``); strings are
    strict so ``{"clientId": 123}`` is rejected rather than coerced.
    """

    model_config = ConfigDict(extra="forbid")

    client_id: StrictStr = Field(alias="clientId", min_length=1)
    client_secret: StrictStr = Field(alias="clientSecret")


class AccessTokenResult(BaseModel):
    access_token: str


class UserInfo(BaseModel):
    """
    Normalized profile.  ``id`` is always a string.

    Optional fields the provider did not return stay unset; use
    :meth:`to_dict` for the normalized form without them.
    """

    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    avatar: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Dump only the fields the provider actually returned."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class GithubUserResponse(BaseModel):
    """Subset of ``GET /user`` that feeds :class:`UserInfo`."""

    model_config = ConfigDict(extra="ignore")

    id: Union[int, str]
    name: Optional[str] = None
    email: Optional[str] = None
    avatar_url: Optional[str] = None

    def to_user_info(self) -> UserInfo:
        optional = {
            "name": self.name,
            "email": self.email,
            "avatar": self.avatar_url,
        }
        return UserInfo(
            id=str(self.id),
            **{key: value for key, value in optional.items() if value is not None},
        )
