# hltv_scraper/core/storage.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, List, Optional, Union

from supabase import create_client

from .config import config
from hltv_scraper.utils.logger import get_logger

logger = get_logger(__name__)


class Publisher:
    """Uploads the output document to a Supabase Storage bucket, overwriting the old object."""

    def __init__(
        self,
        url: Optional[str] = None,
        key: Optional[str] = None,
        bucket: Optional[str] = None,
        blob_name: Optional[str] = None,
        client_factory: Callable[[str, str], Any] = create_client,
    ):
        self.url = config.SUPABASE_URL if url is None else url
        self.key = config.SUPABASE_SERVICE_KEY if key is None else key
        self.bucket = bucket or config.STORAGE_BUCKET
        self.blob_name = blob_name or config.STORAGE_BLOB_NAME
        self._client_factory = client_factory

    def missing_credentials(self) -> List[str]:
        return config.validate_config(url=self.url or "", key=self.key or "")

    def publish(self, path: Union[str, Path]) -> bool:
        """Upload ``path``. Never raises; returns whether the upload went through."""
        missing = self.missing_credentials()
        if missing:
            logger.error(
                f"[publish] {', '.join(missing)}; skipping upload. "
                "Keep credentials in .env and out of version control."
            )
            return False

        try:
            data = Path(path).read_bytes()
            client = self._client_factory(self.url, self.key)
            client.storage.from_(self.bucket).upload(
                self.blob_name,
                data,
                {"content-type": "application/json", "upsert": "true"},
            )
        except Exception as e:
            logger.error(f"[publish] upload of {self.blob_name} to bucket {self.bucket} failed: {e}")
            return False

        logger.info(f"[publish] uploaded {self.blob_name} ({len(data)} bytes) to bucket {self.bucket}")
        return True
