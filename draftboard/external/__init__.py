from .image_client import ImageClient, PassthroughImageClient

__all__ = [
    "ImageClient",
    "PassthroughImageClient"
]
