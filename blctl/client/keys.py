from typing import List, Optional, Union

from pydantic import BaseModel

from blctl.client.base_client import BaseServiceClient, require_id, require_text


class SSHKey(BaseModel):
    id: int
    name: Optional[str] = None
    fingerprint: Optional[str] = None
    public_key: Optional[str] = None
    default: Optional[bool] = None


class KeysClient(BaseServiceClient):
    base_path = 'v2/account/keys'

    def list(self) -> List[SSHKey]:
        """ List the SSH keys of the account """
        return self._list(self.base_path, 'ssh_keys', SSHKey).items

    def get(self, id_or_fingerprint: Union[int, str]) -> SSHKey:
        return self._get_object(f'{self.base_path}/{self.__reference(id_or_fingerprint)}', 'ssh_key', SSHKey)

    def delete(self, id_or_fingerprint: Union[int, str]):
        self._delete(f'{self.base_path}/{self.__reference(id_or_fingerprint)}')

    @staticmethod
    def __reference(id_or_fingerprint: Union[int, str]) -> str:
        if isinstance(id_or_fingerprint, int) or str(id_or_fingerprint).isdigit():
            return str(require_id('key_id', int(id_or_fingerprint)))
        return require_text('fingerprint', id_or_fingerprint)
