from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from blctl.client.base_client import BaseServiceClient, require_text


class Tag(BaseModel):
    name: str
    resources: Optional[Dict[str, Any]] = None


class TagsClient(BaseServiceClient):
    base_path = 'v2/tags'

    def list(self) -> List[Tag]:
        """ List all tags """
        return self._list(self.base_path, 'tags', Tag).items

    def get(self, name: str) -> Tag:
        return self._get_object(f'{self.base_path}/{require_text("name", name)}', 'tag', Tag)

    def delete(self, name: str):
        self._delete(f'{self.base_path}/{require_text("name", name)}')
