from uuid import uuid4

from pydantic import BaseModel, Field
from typing import Dict, Optional

from blctl.constants import DEFAULT_API_URL

DEFAULT_CONTEXT = 'default'


class Context(BaseModel):
    """ Credentials for one BinaryLane account """
    access_token: Optional[str] = Field(default=None, repr=False)
    api_url: str = DEFAULT_API_URL


class Configuration(BaseModel):
    """ Configuration """
    version: float = 1

    # For debugging
    guid: Optional[str] = Field(default_factory=lambda: str(uuid4()))

    current_context: Optional[str] = DEFAULT_CONTEXT
    contexts: Dict[str, Context] = Field(default_factory=dict)
