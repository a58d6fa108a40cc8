from typing import List, Optional, Union

from pydantic import BaseModel

from blctl.client.base_client import BaseServiceClient, require_id, require_text


class Image(BaseModel):
    id: int
    name: Optional[str] = None
    type: Optional[str] = None
    distribution: Optional[str] = None
    slug: Optional[str] = None
    public: Optional[bool] = None
    regions: Optional[List[str]] = None
    min_disk_size: Optional[int] = None
    size_gigabytes: Optional[float] = None
    created_at: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    error_message: Optional[str] = None


class ImageType:
    DISTRIBUTION = 'distribution'
    APPLICATION = 'application'


class ImagesClient(BaseServiceClient):
    base_path = 'v2/images'

    def list(self, image_type: Optional[str] = None, private: bool = False) -> List[Image]:
        """
        List images

        :param image_type: only list the public images of this type (see ImageType)
        :param private: only list the images owned by the account
        """
        params = dict()

        if image_type:
            params['type'] = image_type

        if private:
            params['private'] = 'true'

        return self._list(self.base_path, 'images', Image, params=params).items

    def list_distribution(self) -> List[Image]:
        return self.list(image_type=ImageType.DISTRIBUTION)

    def list_application(self) -> List[Image]:
        return self.list(image_type=ImageType.APPLICATION)

    def list_user(self) -> List[Image]:
        """ List the snapshots, backups and custom images of the account """
        return self.list(private=True)

    def get(self, id_or_slug: Union[int, str]) -> Image:
        """ Get an image by its numeric ID or by its slug """
        if isinstance(id_or_slug, int) or str(id_or_slug).isdigit():
            reference = str(require_id('image_id', int(id_or_slug)))
        else:
            reference = require_text('image_slug', id_or_slug)

        return self._get_object(f'{self.base_path}/{reference}', 'image', Image)

    def delete(self, image_id: int):
        self._delete(f'{self.base_path}/{require_id("image_id", image_id)}')
