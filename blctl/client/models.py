from typing import Optional

from pydantic import BaseModel, Field

from blctl.constants import DEFAULT_API_URL


class ApiEndpoint(BaseModel):
    """ API endpoint """
    url: str = DEFAULT_API_URL
    """ Base URL """

    access_token: Optional[str] = Field(default=None, repr=False)
    """ Personal access token """


class Pages(BaseModel):
    """ Navigation links of a paginated response """
    first: Optional[str] = None
    prev: Optional[str] = None
    next: Optional[str] = None
    last: Optional[str] = None


class Links(BaseModel):
    pages: Optional[Pages] = None

    def has_next_page(self) -> bool:
        """ The only signal for another page is the presence of the "next" link. """
        return bool(self.pages and self.pages.next)


class Meta(BaseModel):
    total: Optional[int] = None
