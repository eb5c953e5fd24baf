import logging
from typing import Optional, Tuple

import httpx

from photobooth.config.settings import settings

logger = logging.getLogger(__name__)


class BlobStorageError(Exception):
    """Raised when the publisher rejects a blob or cannot be reached."""


def blob_url(blob_id: str) -> str:
    return f"{settings.WALRUS_AGGREGATOR_URL.rstrip('/')}/v1/{blob_id}"


def explorer_url(object_id: str) -> str:
    return f"{settings.EXPLORER_URL.rstrip('/')}/{settings.SUI_NETWORK}/object/{object_id}"


def parse_store_response(payload: dict) -> Tuple[str, str]:
    """
    Extract (blob_id, object_id) from a publisher response.

    A fresh upload answers with `newlyCreated.blobObject`; a blob the network
    already certified answers with `alreadyCertified`, which carries the blob id
    and, when the blob object is known, its `object` id. Without an object id
    there is nothing to link in the explorer, so the response is rejected.
    """
    if "newlyCreated" in payload:
        blob_object = payload["newlyCreated"]["blobObject"]
        return blob_object["blobId"], blob_object["id"]
    if "alreadyCertified" in payload:
        certified = payload["alreadyCertified"]
        object_id = certified.get("object")
        if not object_id:
            raise BlobStorageError("Certified blob response carries no object reference")
        return certified["blobId"], object_id
    raise BlobStorageError(f"Unexpected publisher response: {list(payload)}")


def store_blob(content: bytes, content_type: str = "image/jpeg",
               client: Optional[httpx.Client] = None) -> Tuple[str, str]:
    url = f"{settings.WALRUS_PUBLISHER_URL.rstrip('/')}/v1/blobs"
    params = {"epochs": settings.WALRUS_EPOCHS}
    owns_client = client is None
    if owns_client:
        client = httpx.Client(timeout=60.0)
    try:
        response = client.put(url, params=params, content=content, headers={"Content-Type": content_type})
        response.raise_for_status()
        blob_id, object_id = parse_store_response(response.json())
    except httpx.TimeoutException:
        logger.error("Blob publisher timed out")
        raise BlobStorageError("Blob publisher timed out")
    except httpx.HTTPError as e:
        logger.error(f"Error storing blob: {e}")
        raise BlobStorageError(f"Error storing blob: {e}")
    except (KeyError, ValueError) as e:
        logger.error(f"Malformed publisher response: {e}")
        raise BlobStorageError(f"Malformed publisher response: {e}")
    finally:
        if owns_client:
            client.close()

    logger.info(f"Stored blob {blob_id} (object {object_id})")
    return blob_id, object_id
