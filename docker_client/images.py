"""
Docker Images API
"""

from typing import Any, Dict, List, Optional

from .exceptions import ImageNotFound
from .models import PruneReport


class Image:
    """Docker Image object"""

    def __init__(self, attrs: Dict[str, Any], client):
        self.attrs = attrs
        self.client = client
        self.id = attrs.get('Id', '')
        self.short_id = self.id.split(':', 1)[-1][:12] if self.id else ''
        self.tags = attrs.get('RepoTags') or []
        self.size = attrs.get('Size', 0)

    def __repr__(self):
        return f"<Image: {self.tags[0] if self.tags else self.short_id}>"

    def remove(self, force: bool = False, noprune: bool = False):
        """Remove this image"""
        return self.client.remove(self.id, force=force, noprune=noprune)


class ImageCollection:
    """Docker Images collection"""

    def __init__(self, client):
        self.client = client

    @property
    def http(self):
        return self.client.http

    def list(self, name: Optional[str] = None, all: bool = False,
             filters: Optional[Dict[str, Any]] = None) -> List[Image]:
        """
        List images

        Args:
            name: Only keep images with a tag containing this name
            all: Show all images (including intermediates)
            filters: Filters to apply

        Returns:
            List of Image objects
        """
        params = {'all': all, 'filters': filters or None}
        data = self.http.json('GET', '/images/json', params=params)
        images = [Image(img_data, self) for img_data in data or []]

        if name:
            images = [img for img in images if any(name in tag for tag in img.tags)]

        return images

    def get(self, name: str) -> Image:
        """
        Inspect image by name or ID

        Raises:
            ImageNotFound: If image not found
        """
        data = self.http.json('GET', f'/images/{name}/json', errors={404: ImageNotFound})
        return Image(data, self)

    def remove(self, image: str, force: bool = False, noprune: bool = False) -> List[Dict[str, str]]:
        """
        Remove image

        Args:
            image: Image name or ID
            force: Force removal
            noprune: Don't delete untagged parents

        Returns:
            List of {'Untagged': ...} / {'Deleted': ...} entries
        """
        return self.http.json(
            'DELETE', f'/images/{image}',
            params={'force': force, 'noprune': noprune},
            errors={404: ImageNotFound},
        ) or []

    def prune(self, filters: Optional[Dict[str, Any]] = None) -> PruneReport:
        """Remove unused images"""
        data = self.http.json('POST', '/images/prune', params={'filters': filters or None})
        return PruneReport.from_dict(data, 'ImagesDeleted')
